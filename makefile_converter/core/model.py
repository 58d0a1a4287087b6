"""Dialect-neutral structural model for parsed and converted makefiles.

WHY: The four supported makefile dialects (GNU Make, SAS/C smakefile,
DICE dmakefile, Lattice lmkfile) disagree on comment leaders, pattern-rule
syntax, rule separators and compiler vocabulary. Parsers and emitters would
multiply into a 4x4 grid if each pair talked directly. The model gives every
parser a single target and every emitter a single source.

HOW: Plain dataclasses form a hierarchy:
  Variable         : one ``name = value`` assignment
  Command          : one recipe line belonging to a rule
  Rule             : a ``targets: dependencies`` header plus its commands
  Makefile         : the root aggregate filled by exactly one parser
  ConvertedMakefile: the engine's output, already translated for a target

RULES:
- Variables, rules, commands and comments are ordered lists; nothing is
  de-duplicated (a later VAR= does not replace an earlier one)
- targets/dependencies are raw strings, never tokenized
- Command.continuation is always False; kept for forward compatibility
- Variable.immediate is only ever True for DICE input; it is carried, not
  evaluated
- A Makefile is owned by one conversion and discarded afterwards
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Dialect(str, Enum):
    """The closed set of makefile dialects.

    RULES:
    - Values are snake_case identifiers (used in logs and config)
    - UNKNOWN is only ever produced by the detector; no parser or
      emitter is registered for it
    """

    GNU_MAKE = "gnu_make"
    SAS_C = "sas_c"
    DICE = "dice"
    LATTICE = "lattice"
    UNKNOWN = "unknown"

    @property
    def display_name(self) -> str:
        """Human-readable dialect name, e.g. 'SAS/C'."""
        return _DISPLAY_NAMES[self]

    @property
    def comment_leader(self) -> str:
        """Character that starts a comment line in this dialect."""
        return _COMMENT_LEADERS[self]


_DISPLAY_NAMES = {
    Dialect.GNU_MAKE: "GNU Make",
    Dialect.SAS_C: "SAS/C",
    Dialect.DICE: "DICE",
    Dialect.LATTICE: "Lattice",
    Dialect.UNKNOWN: "Unknown",
}

_COMMENT_LEADERS = {
    Dialect.GNU_MAKE: "#",
    Dialect.SAS_C: ";",
    Dialect.DICE: "#",
    Dialect.LATTICE: ";",
    Dialect.UNKNOWN: "#",
}

# Dialects that have a parser/emitter pair, in canonical order.
SUPPORTED_DIALECTS = (
    Dialect.GNU_MAKE,
    Dialect.SAS_C,
    Dialect.DICE,
    Dialect.LATTICE,
)


@dataclass
class Variable:
    """A single ``name = value`` assignment.

    RULES:
    - name and value are trimmed; value has at most one layer of
      surrounding double quotes removed (GNU only)
    - immediate: True for DICE, where values are fixed at definition time
    - operator: the assignment token as written (``=``, ``:=``, ``+=``,
      ``?=``, ``!=``, ``::=``); emitters write it back unchanged
    """

    name: str
    value: str
    immediate: bool = False
    operator: str = "="


@dataclass
class Command:
    """One recipe line, stored without its leading indentation."""

    text: str
    continuation: bool = False


@dataclass
class Rule:
    """A rule header and the recipe lines attached to it.

    WHY: Rules are the unit every emitter walks. Keeping targets and
    dependencies as raw strings means translation between dialects is a
    syntactic substitution, never a re-combination of file sets.

    RULES:
    - targets / dependencies: raw, trimmed text on either side of the separator
    - is_pattern_rule: the rule matches many file pairs (``%.o: %.c``,
      ``.c.o:``); emitters render it in their own native pattern form
    - is_form_variant: DICE double-colon (``::``) rule
    - commands: in source order
    """

    targets: str
    dependencies: str
    commands: list[Command] = field(default_factory=list)
    is_pattern_rule: bool = False
    is_form_variant: bool = False


@dataclass
class Makefile:
    """The complete structural model of one parsed makefile.

    RULES:
    - dialect: the dialect the file was parsed as
    - filename: path the model was read from ("" for in-memory input)
    - comments: trimmed comment lines, leader included, in file order
    """

    dialect: Dialect
    filename: str = ""
    variables: list[Variable] = field(default_factory=list)
    rules: list[Rule] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)


@dataclass
class ConvertedMakefile:
    """A model translated for a specific target dialect.

    WHY: Emitters must know both where the content came from (for the
    header) and where it is going. Separating the translated copy from
    the parsed Makefile keeps the parsed model untouched.

    HOW: Built by ``core.converter.convert_makefile``. Variable values and
    command texts are already routed through the mapping tables.

    RULES:
    - comments hold bare text, without any comment leader; the emitter
      prefixes its own leader
    - rules keep their targets/dependencies verbatim; pattern and form
      variant rendering is the emitter's job
    """

    source: Dialect
    target: Dialect
    filename: str
    variables: list[Variable] = field(default_factory=list)
    rules: list[Rule] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)
