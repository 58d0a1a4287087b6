"""Recipe command translation, one table per ordered dialect pair.

WHY: Recipes call programs by name, and every toolchain names its
compiler, linker and delete utility differently. A GNU ``rm -f *.o``
means nothing to AmigaDOS, and a SAS/C ``sc`` call needs ``OBJNAME=`` to
place its object file the way GCC's ``-o`` does.

HOW: COMMAND_TABLES maps (source, target) to a dict of lowercase program
name → rewrite. Only the first token of a command (the program) is looked
up. Three rewrite kinds exist:
  Rename(program, append) : swap the program, keep the arguments,
                             optionally append a suffix
  DeleteRewrite(...)      : rebuild a delete call: strip leading flags,
                             optionally drop wildcard arguments, append a
                             trailing keyword
  LinkPlaceholder()       : replace an Amiga linker call with a generic
                             GCC link line that needs manual editing

RULES:
- Program matching is case-insensitive and exact (``rm`` never matches
  ``rmdir``)
- Leading GNU recipe modifiers (``@``, ``-``, ``+``) are kept in place
- Arguments are never flag-mapped; only the program and the explicit
  rewrite rules change the text
- Same-dialect pairs have no table, so commands pass through unchanged
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Union

from makefile_converter.core.model import Dialect

logger = logging.getLogger(__name__)

GNU = Dialect.GNU_MAKE
SAS = Dialect.SAS_C
DICE = Dialect.DICE
LATTICE = Dialect.LATTICE

_MODIFIER_RE = re.compile(r"^([@+-]*)(\S+)(.*)$", re.DOTALL)
_WILDCARD_CHARS = ("*", "?")


@dataclass(frozen=True)
class Rename:
    """Replace the program name; the argument text is kept verbatim."""

    program: str
    append: str = ""
    note: str = ""
    review: bool = False


@dataclass(frozen=True)
class DeleteRewrite:
    """Rebuild a delete call for the target's delete utility.

    RULES:
    - Leading arguments starting with '-' are removed
    - drop_wildcards removes arguments containing '*' or '?'
    - strip_keywords are removed wherever they appear (case-insensitive)
    - trailing is appended last when non-empty
    """

    program: str
    drop_wildcards: bool = False
    trailing: str = ""
    strip_keywords: tuple[str, ...] = ()
    note: str = ""
    review: bool = False


@dataclass(frozen=True)
class LinkPlaceholder:
    """Replace a linker call with a generic GCC link line.

    Amiga linker arguments (FROM/TO/LIB keywords) have no mechanical GCC
    equivalent, so the result always needs manual editing.
    """

    replacement: str = "cc -o program"
    note: str = "linker arguments need manual conversion"
    review: bool = True


CommandRewrite = Union[Rename, DeleteRewrite, LinkPlaceholder]

# ---------------------------------------------------------------------------
# Rewrite tables
# ---------------------------------------------------------------------------

_TO_GNU_DELETE = DeleteRewrite(
    program="rm -f",
    strip_keywords=("QUIET", "FORCE"),
    note="AmigaDOS delete to POSIX rm",
)

COMMAND_TABLES: dict[tuple[Dialect, Dialect], dict[str, CommandRewrite]] = {
    (GNU, SAS): {
        "gcc": Rename("sc", append="OBJNAME=$*.o"),
        "cc": Rename("sc", append="OBJNAME=$*.o"),
        "rm": DeleteRewrite("delete", drop_wildcards=True, trailing="QUIET"),
    },
    (GNU, DICE): {
        "gcc": Rename("dcc"),
        "cc": Rename("dcc"),
        "rm": DeleteRewrite("delete", drop_wildcards=True),
    },
    (GNU, LATTICE): {
        "gcc": Rename("lc"),
        "cc": Rename("lc"),
        "rm": DeleteRewrite("Delete", drop_wildcards=True),
    },
    (SAS, GNU): {
        "sc": Rename("cc"),
        "slink": LinkPlaceholder(),
        "delete": _TO_GNU_DELETE,
    },
    (SAS, DICE): {
        "sc": Rename("dcc"),
    },
    (SAS, LATTICE): {
        "sc": Rename("lc"),
        "slink": Rename("blink", review=True),
    },
    (DICE, GNU): {
        "dcc": Rename("cc"),
        "delete": _TO_GNU_DELETE,
    },
    (DICE, SAS): {
        "dcc": Rename("sc"),
    },
    (DICE, LATTICE): {
        "dcc": Rename("lc"),
    },
    (LATTICE, GNU): {
        "lc": Rename("cc"),
        "blink": LinkPlaceholder(),
        "delete": _TO_GNU_DELETE,
    },
    (LATTICE, SAS): {
        "lc": Rename("sc"),
        "blink": Rename("slink"),
    },
    (LATTICE, DICE): {
        "lc": Rename("dcc"),
    },
}


# ---------------------------------------------------------------------------
# Rewriting
# ---------------------------------------------------------------------------


def _rewrite_delete(rewrite: DeleteRewrite, arguments: str) -> str:
    args = arguments.split()
    while args and args[0].startswith("-"):
        args.pop(0)
    if rewrite.drop_wildcards:
        args = [arg for arg in args if not any(ch in arg for ch in _WILDCARD_CHARS)]
    if rewrite.strip_keywords:
        stripped = {keyword.lower() for keyword in rewrite.strip_keywords}
        args = [arg for arg in args if arg.lower() not in stripped]

    parts = [rewrite.program, *args]
    if rewrite.trailing:
        parts.append(rewrite.trailing)
    return " ".join(parts)


def apply_rewrite(rewrite: CommandRewrite, program: str, arguments: str) -> str:
    """Render one rewrite for a command split into program and arguments.

    Args:
        rewrite: The table entry.
        program: The command's first token (without recipe modifiers).
        arguments: Everything after the program, leading whitespace included.
    """
    if isinstance(rewrite, LinkPlaceholder):
        return rewrite.replacement
    if isinstance(rewrite, DeleteRewrite):
        return _rewrite_delete(rewrite, arguments)

    text = rewrite.program + arguments
    if rewrite.append:
        text = "{} {}".format(text.rstrip(), rewrite.append)
    return text


def map_command(text: str, source: Dialect, target: Dialect) -> str:
    """Translate one recipe line from source to target.

    WHY: Commands are executed verbatim by the target make, so the
    program names must be ones the target toolchain installs.

    HOW: Split off recipe modifiers and the program token, look the
    program up in the pair's table, and rebuild the line.

    RULES:
    - source == target returns text unchanged
    - Unknown programs (including ``$(CC)`` references) pass through
    - An empty or whitespace-only text passes through

    Returns:
        The translated command text.
    """
    if source == target:
        return text

    match = _MODIFIER_RE.match(text)
    if match is None:
        return text

    modifiers, program, arguments = match.groups()
    rewrite = COMMAND_TABLES.get((source, target), {}).get(program.lower())
    if rewrite is None:
        return text

    mapped = modifiers + apply_rewrite(rewrite, program, arguments)
    logger.debug("Command %r → %r", text, mapped)
    return mapped
