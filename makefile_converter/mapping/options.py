"""Compiler option and compiler name tables, one per ordered dialect pair.

WHY: GCC, SAS/C, DICE and Lattice C spell the same intent differently
(``-O2`` vs ``OPTIMIZE``, ``-Iinc`` vs ``INCLUDEDIR=inc``), and the
mapping is not symmetric: Lattice ``-g`` becomes two DICE flags, SAS/C
``IGN=A`` has no DICE equivalent at all. Deriving one direction from the
other would silently invent wrong translations, so every ordered pair is
authored on its own.

HOW: OPTION_TABLES maps (source, target) to an OptionTable holding
  exact   : lowercase token → Action (matched case-insensitively)
  prefixes: ordered PrefixRules for compound forms: include paths
             (-I, INCLUDEDIR=), defines (-D, DEF=) and debug levels
             (-d<n>, DEBUG=)
COMPILER_TABLES maps (source, target) to lowercase compiler name →
replacement, used for the CC variable.

RULES:
- Exact entries are consulted before prefix rules; prefix rules in order
- Unrecognized tokens pass through unchanged
- Same-dialect pairs have empty tables, so X → X leaves values untouched
- A Replace value may expand to several tokens ("-s -d1")
- Tables are built once at import and never mutated
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from makefile_converter.core.model import SUPPORTED_DIALECTS, Dialect
from makefile_converter.mapping.actions import (
    Action,
    Drop,
    PassThrough,
    PrefixRule,
    Replace,
    apply_action,
)

logger = logging.getLogger(__name__)

GNU = Dialect.GNU_MAKE
SAS = Dialect.SAS_C
DICE = Dialect.DICE
LATTICE = Dialect.LATTICE

COMPILER_VARIABLES = frozenset({"cc"})
"""Variable names (lowercase) whose value is a compiler name."""

FLAGS_VARIABLES = frozenset({"cflags"})
"""Variable names (lowercase) whose value is a compiler flag list."""


@dataclass(frozen=True)
class OptionTable:
    """Translation entries for one ordered (source, target) pair."""

    exact: dict[str, Action] = field(default_factory=dict)
    prefixes: tuple[PrefixRule, ...] = ()

    def translate(self, token: str) -> str:
        """Translate one flag token. Returns "" when the entry drops it."""
        action = self.exact.get(token.lower())
        if action is not None:
            return apply_action(action, token)
        for rule in self.prefixes:
            if rule.matches(token):
                return apply_action(rule.action, token, rule.remainder(token))
        return token


# ---------------------------------------------------------------------------
# Lattice C → others
# ---------------------------------------------------------------------------

_LATTICE_TO_SAS = OptionTable(
    exact={
        "-o": Replace("OPTIMIZE"),
        "-dnonames": Replace("NOSTANDARDIO"),
        "-v": Replace("VERBOSE"),
        "-d2": Replace("DEBUG=L"),
        "-y": Replace("DEBUG=L"),
        "-ms": Replace("DATA=NEAR"),
        "-w": Replace("IGN=A"),
        "-g": Replace("DEBUG=FF"),
        "-c": Replace("OBJNAME"),
        "-e": Replace("PPONLY"),
        "-a": Replace("DISASM"),
    },
    prefixes=(
        PrefixRule("-DDEFBLOCKING=", Drop(note="not applicable to SAS/C")),
        PrefixRule("-I", Replace("INCLUDEDIR={rest}")),
        PrefixRule("-D", Replace("DEF={rest}")),
        PrefixRule("-d", Replace("DEBUG=L", review=True)),
    ),
)

_LATTICE_TO_DICE = OptionTable(
    exact={
        "-o": PassThrough(),
        "-dnonames": Drop(note="not applicable to DICE"),
        "-v": PassThrough(),
        "-d2": Replace("-d1"),
        "-y": Replace("-d1"),
        "-ms": PassThrough(),
        "-w": Drop(note="DICE has no warning suppression flag"),
        "-g": Replace("-s -d1", note="symbols plus line debug"),
        "-c": PassThrough(),
        "-e": PassThrough(note="DICE preprocesses through dcpp"),
        "-a": PassThrough(),
    },
    prefixes=(
        PrefixRule("-DDEFBLOCKING=", Drop(note="not applicable to DICE")),
        PrefixRule("-I", PassThrough()),
        PrefixRule("-D", PassThrough()),
        PrefixRule("-d", Replace("-d1", review=True)),
    ),
)

_LATTICE_TO_GNU = OptionTable(
    exact={
        "-o": Replace("-O2"),
        "-dnonames": Drop(note="not applicable to GCC"),
        "-v": PassThrough(),
        "-d2": Replace("-g"),
        "-y": Replace("-g"),
        "-ms": Replace("-m68000"),
        "-w": PassThrough(),
        "-g": PassThrough(),
        "-c": PassThrough(),
        "-e": PassThrough(),
        "-a": Replace("-S", note="GCC assembly output"),
    },
    prefixes=(
        PrefixRule("-DDEFBLOCKING=", Drop(note="not applicable to GCC")),
        PrefixRule("-I", PassThrough()),
        PrefixRule("-D", PassThrough()),
        PrefixRule("-d", Replace("-g", review=True)),
    ),
)

# ---------------------------------------------------------------------------
# SAS/C → others
# ---------------------------------------------------------------------------

_SAS_TO_GNU = OptionTable(
    exact={
        "optimize": Replace("-O2"),
        "nostandardio": Drop(note="SAS/C specific"),
        "debug=l": Replace("-g"),
        "data=near": Replace("-m68000"),
        "verbose": Replace("-v"),
        "ign=a": Replace("-w"),
        "objname": Replace("-c"),
        "pponly": Replace("-E"),
        "disasm": Replace("-S"),
    },
    prefixes=(
        PrefixRule("INCLUDEDIR=", Replace("-I{rest}"), ignore_case=True, trim_suffix=":"),
        PrefixRule("DEF=", Replace("-D{rest}"), ignore_case=True),
        PrefixRule("DEBUG=", Replace("-g", review=True), ignore_case=True),
    ),
)

_SAS_TO_DICE = OptionTable(
    exact={
        "optimize": Replace("-O"),
        "nostandardio": Drop(note="SAS/C specific"),
        "debug=l": Replace("-d1"),
        "data=near": Replace("-ms"),
        "verbose": Replace("-v"),
        "ign=a": Drop(note="DICE has no warning suppression flag"),
        "objname": Replace("-c"),
        "pponly": Replace("-E"),
        "disasm": Replace("-a"),
    },
    prefixes=(
        PrefixRule("INCLUDEDIR=", Replace("-I{rest}"), ignore_case=True, trim_suffix=":"),
        PrefixRule("DEF=", Replace("-D{rest}"), ignore_case=True),
        PrefixRule("DEBUG=", Replace("-d1", review=True), ignore_case=True),
    ),
)

_SAS_TO_LATTICE = OptionTable(
    exact={
        "optimize": Replace("-O"),
        "nostandardio": Drop(note="SAS/C specific"),
        "debug=l": Replace("-d2"),
        "data=near": Replace("-ms"),
        "verbose": Replace("-v"),
        "ign=a": Replace("-w"),
        "objname": Replace("-c"),
        "pponly": Replace("-E"),
        "disasm": Replace("-a"),
    },
    prefixes=(
        PrefixRule("INCLUDEDIR=", Replace("-I{rest}"), ignore_case=True, trim_suffix=":"),
        PrefixRule("DEF=", Replace("-D{rest}"), ignore_case=True),
        PrefixRule("DEBUG=", Replace("-d2", review=True), ignore_case=True),
    ),
)

# ---------------------------------------------------------------------------
# DICE → others
# ---------------------------------------------------------------------------

_DICE_TO_GNU = OptionTable(
    exact={
        "-o": Replace("-O2"),
        "-d1": Replace("-g"),
        "-ms": Replace("-m68000"),
        "-v": PassThrough(),
        "-c": PassThrough(),
        "-e": PassThrough(),
        "-a": Replace("-S"),
        "-s": Replace("-g", note="DICE -s emits debug symbols"),
    },
    prefixes=(
        PrefixRule("-D", PassThrough()),
        PrefixRule("-I", PassThrough()),
        PrefixRule("-d", Replace("-g", review=True)),
    ),
)

_DICE_TO_SAS = OptionTable(
    exact={
        "-o": Replace("OPTIMIZE"),
        "-d1": Replace("DEBUG=L"),
        "-ms": Replace("DATA=NEAR"),
        "-v": Replace("VERBOSE"),
        "-c": Replace("OBJNAME"),
        "-e": Replace("PPONLY"),
        "-a": Replace("DISASM"),
        "-s": Replace("DEBUG=FF", note="DICE -s emits debug symbols"),
    },
    prefixes=(
        PrefixRule("-D", PassThrough(note="SAS/C sc accepts -D as written")),
        PrefixRule("-I", Replace("INCLUDEDIR={rest}", review=True)),
        PrefixRule("-d", Replace("DEBUG=L", review=True)),
    ),
)

_DICE_TO_LATTICE = OptionTable(
    exact={
        "-o": PassThrough(),
        "-d1": Replace("-d2"),
        "-ms": PassThrough(),
        "-v": PassThrough(),
        "-c": PassThrough(),
        "-e": PassThrough(),
        "-a": PassThrough(),
        "-s": Replace("-g", note="DICE -s emits debug symbols"),
    },
    prefixes=(
        PrefixRule("-D", PassThrough()),
        PrefixRule("-I", PassThrough()),
        PrefixRule("-d", Replace("-d2", review=True)),
    ),
)

# ---------------------------------------------------------------------------
# GNU (GCC) → others
# ---------------------------------------------------------------------------

_GNU_TO_SAS = OptionTable(
    exact={
        "-o2": Replace("OPTIMIZE"),
        "-o": Replace("OPTIMIZE", review=True),
        "-o1": Replace("OPTIMIZE", review=True),
        "-o3": Replace("OPTIMIZE", review=True),
        "-os": Replace("OPTIMIZE", review=True),
        "-o0": Drop(note="SAS/C does not optimize by default", review=True),
        "-g": Replace("DEBUG=L"),
        "-m68000": Replace("DATA=NEAR"),
        "-v": Replace("VERBOSE"),
        "-w": Replace("IGN=A"),
        "-c": Replace("OBJNAME"),
        "-e": Replace("PPONLY"),
        "-s": Replace("DISASM"),
    },
    prefixes=(
        PrefixRule("-I", Replace("INCLUDEDIR={rest}")),
        PrefixRule("-D", PassThrough(note="SAS/C sc accepts -D as written")),
    ),
)

_GNU_TO_DICE = OptionTable(
    exact={
        "-o2": Replace("-O"),
        "-o": PassThrough(review=True),
        "-o1": Replace("-O", review=True),
        "-o3": Replace("-O", review=True),
        "-os": Replace("-O", review=True),
        "-o0": Drop(review=True),
        "-g": Replace("-d1"),
        "-m68000": Replace("-ms"),
        "-v": PassThrough(),
        "-w": Drop(note="DICE has no warning suppression flag"),
        "-c": PassThrough(),
        "-e": PassThrough(),
        "-s": Replace("-a"),
    },
    prefixes=(
        PrefixRule("-I", PassThrough()),
        PrefixRule("-D", PassThrough()),
    ),
)

_GNU_TO_LATTICE = OptionTable(
    exact={
        "-o2": Replace("-O"),
        "-o": PassThrough(review=True),
        "-o1": Replace("-O", review=True),
        "-o3": Replace("-O", review=True),
        "-os": Replace("-O", review=True),
        "-o0": Drop(review=True),
        "-g": Replace("-d2"),
        "-m68000": Replace("-ms"),
        "-v": PassThrough(),
        "-w": PassThrough(),
        "-c": PassThrough(),
        "-e": PassThrough(),
        "-s": Replace("-a"),
    },
    prefixes=(
        PrefixRule("-I", PassThrough()),
        PrefixRule("-D", PassThrough()),
    ),
)

_IDENTITY = OptionTable()


def _build_option_tables() -> dict[tuple[Dialect, Dialect], OptionTable]:
    tables = {
        (LATTICE, SAS): _LATTICE_TO_SAS,
        (LATTICE, DICE): _LATTICE_TO_DICE,
        (LATTICE, GNU): _LATTICE_TO_GNU,
        (SAS, GNU): _SAS_TO_GNU,
        (SAS, DICE): _SAS_TO_DICE,
        (SAS, LATTICE): _SAS_TO_LATTICE,
        (DICE, GNU): _DICE_TO_GNU,
        (DICE, SAS): _DICE_TO_SAS,
        (DICE, LATTICE): _DICE_TO_LATTICE,
        (GNU, SAS): _GNU_TO_SAS,
        (GNU, DICE): _GNU_TO_DICE,
        (GNU, LATTICE): _GNU_TO_LATTICE,
    }
    for dialect in SUPPORTED_DIALECTS:
        tables[(dialect, dialect)] = _IDENTITY
    return tables


OPTION_TABLES: dict[tuple[Dialect, Dialect], OptionTable] = _build_option_tables()

# ---------------------------------------------------------------------------
# Compiler names (CC variable)
# ---------------------------------------------------------------------------

COMPILER_TABLES: dict[tuple[Dialect, Dialect], dict[str, str]] = {
    (GNU, SAS): {"gcc": "sc", "cc": "sc", "dcc": "sc", "lc": "sc"},
    (DICE, SAS): {"gcc": "sc", "cc": "sc", "dcc": "sc", "lc": "sc"},
    (LATTICE, SAS): {"gcc": "sc", "cc": "sc", "dcc": "sc", "lc": "sc"},
    (SAS, GNU): {"sc": "cc", "lc": "cc", "dcc": "cc"},
    (DICE, GNU): {"sc": "cc", "lc": "cc", "dcc": "cc"},
    (LATTICE, GNU): {"sc": "cc", "lc": "cc", "dcc": "cc"},
    (GNU, DICE): {"gcc": "dcc", "cc": "dcc", "sc": "dcc", "lc": "dcc"},
    (SAS, DICE): {"gcc": "dcc", "cc": "dcc", "sc": "dcc", "lc": "dcc"},
    (LATTICE, DICE): {"gcc": "dcc", "cc": "dcc", "sc": "dcc", "lc": "dcc"},
    (GNU, LATTICE): {"gcc": "lc", "cc": "lc", "sc": "lc", "dcc": "lc"},
    (SAS, LATTICE): {"gcc": "lc", "cc": "lc", "sc": "lc", "dcc": "lc"},
    (DICE, LATTICE): {"gcc": "lc", "cc": "lc", "sc": "lc", "dcc": "lc"},
}


# ---------------------------------------------------------------------------
# Public lookups
# ---------------------------------------------------------------------------


def option_table(source: Dialect, target: Dialect) -> OptionTable:
    """Return the table for an ordered pair; unknown pairs translate nothing."""
    return OPTION_TABLES.get((source, target), _IDENTITY)


def map_option(option: str, source: Dialect, target: Dialect) -> str:
    """Translate a single flag token from source to target.

    Returns:
        The replacement (possibly several space-separated tokens), the
        token unchanged when no entry matches, or "" when dropped.
    """
    mapped = option_table(source, target).translate(option)
    if mapped != option:
        logger.debug(
            "Option %r → %r (%s → %s)",
            option, mapped, source.display_name, target.display_name,
        )
    return mapped


def convert_flags(flags: str, source: Dialect, target: Dialect) -> str:
    """Translate a whitespace-separated flag list token by token.

    WHY: CFLAGS values are the densest concentration of dialect-specific
    vocabulary in a makefile.

    HOW: Split on whitespace, map each token, drop empty results, and
    re-join with single spaces.

    RULES:
    - source == target returns flags byte-for-byte unchanged
    - Token order is preserved; dropped tokens leave no gap
    """
    if source == target:
        return flags

    mapped: list[str] = []
    for token in flags.split():
        result = map_option(token, source, target)
        if result:
            mapped.append(result)
    return " ".join(mapped)


def map_compiler(value: str, source: Dialect, target: Dialect) -> str:
    """Translate a compiler variable value (e.g. CC = gcc → CC = sc).

    RULES:
    - Only the first token (the program) is translated; the rest is kept
    - Matching is case-insensitive
    - Unknown compilers and same-dialect pairs pass through unchanged
    """
    parts = value.split(None, 1)
    if not parts:
        return value

    table = COMPILER_TABLES.get((source, target), {})
    replacement = table.get(parts[0].lower())
    if replacement is None:
        return value

    logger.debug("Compiler %r → %r", parts[0], replacement)
    if len(parts) == 1:
        return replacement
    return "{} {}".format(replacement, parts[1])


def entries_for_review() -> list[tuple[Dialect, Dialect, str, Action]]:
    """List every table entry flagged review=True, for auditing.

    Returns:
        (source, target, key, action) tuples; prefix entries use the
        prefix followed by '*' as their key.
    """
    flagged: list[tuple[Dialect, Dialect, str, Action]] = []
    for (source, target), table in OPTION_TABLES.items():
        for key, action in table.exact.items():
            if action.review:
                flagged.append((source, target, key, action))
        for rule in table.prefixes:
            if rule.action.review:
                flagged.append((source, target, rule.prefix + "*", rule.action))
    return flagged
