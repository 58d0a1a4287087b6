"""Configuration constants, dialect alias tables, and .env loading.

WHY: Centralizes every policy table and tunable value so they are easy to
find, audit, and override. Format aliases, default conversion targets,
conventional file names and detection limits are plain data structures,
not buried in logic.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level dicts, tuples, and strings. parse_format_alias() and
default_target_for() wrap the two lookup tables with clear errors.

RULES:
- FORMAT_ALIASES maps lowercase alias → Dialect (matched case-insensitively)
- DEFAULT_TARGETS is a fixed policy: GNU and Lattice default to SAS/C,
  DICE and SAS/C default to GNU Make
- CANDIDATE_MAKEFILES is searched in order during auto-discovery
- All tunables can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from makefile_converter.core.errors import UnknownFormatError
from makefile_converter.core.model import Dialect

# Load .env from the project root (where the tool is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Format aliases: free-form name → Dialect
# ---------------------------------------------------------------------------

FORMAT_ALIASES: dict[str, Dialect] = {
    "smake": Dialect.SAS_C,
    "smakefile": Dialect.SAS_C,
    "sasc": Dialect.SAS_C,
    "dmake": Dialect.DICE,
    "dmakefile": Dialect.DICE,
    "dice": Dialect.DICE,
    "makefile": Dialect.GNU_MAKE,
    "make": Dialect.GNU_MAKE,
    "gnumakefile": Dialect.GNU_MAKE,
    "gnu": Dialect.GNU_MAKE,
    "gcc": Dialect.GNU_MAKE,
    "lmk": Dialect.LATTICE,
    "lmkfile": Dialect.LATTICE,
    "lattice": Dialect.LATTICE,
}


def parse_format_alias(alias: str) -> Dialect:
    """Map a user-supplied format alias to a Dialect.

    WHY: Users name formats the way their toolchain does ("smake",
    "dice", "gcc"). The CLI accepts any of them.

    HOW: Case-insensitive lookup in FORMAT_ALIASES.

    RULES:
    - Surrounding whitespace is ignored
    - Unknown aliases raise UnknownFormatError (never fall back)
    """
    dialect = FORMAT_ALIASES.get(alias.strip().lower())
    if dialect is None:
        raise UnknownFormatError(alias)
    return dialect


# ---------------------------------------------------------------------------
# Default conversion policy
# ---------------------------------------------------------------------------

DEFAULT_TARGETS: dict[Dialect, Dialect] = {
    Dialect.GNU_MAKE: Dialect.SAS_C,
    Dialect.LATTICE: Dialect.SAS_C,
    Dialect.DICE: Dialect.GNU_MAKE,
    Dialect.SAS_C: Dialect.GNU_MAKE,
}


def default_target_for(source: Dialect) -> Dialect:
    """Return the default target dialect for a source dialect.

    RULES:
    - Raises UnknownFormatError for Dialect.UNKNOWN (no default exists)
    """
    target = DEFAULT_TARGETS.get(source)
    if target is None:
        raise UnknownFormatError(source.value)
    return target


DEFAULT_OUTPUT_FILENAMES: dict[Dialect, str] = {
    Dialect.GNU_MAKE: "Makefile",
    Dialect.SAS_C: "smakefile",
    Dialect.DICE: "dmakefile",
    Dialect.LATTICE: "lmkfile",
}
"""Conventional output file name per target, used by --save."""

# ---------------------------------------------------------------------------
# Auto-discovery
# ---------------------------------------------------------------------------

CANDIDATE_MAKEFILES: tuple[str, ...] = (
    "makefile", "Makefile", "MAKEFILE", "GNUmakefile",
    "smakefile", "SMakefile", "SMAKEFILE",
    "dmakefile", "Dmakefile", "DMAKEFILE",
    "lmkfile", "LMKFILE",
)
"""Conventional makefile names, searched in this order."""

# ---------------------------------------------------------------------------
# Tunables
# ---------------------------------------------------------------------------

DETECT_LINE_LIMIT = int(os.getenv("MAKEFILE_CONVERTER_DETECT_LINES", "50"))
SOURCE_ENCODING = os.getenv("MAKEFILE_CONVERTER_ENCODING", "latin-1")
GENERATOR_NAME = os.getenv("MAKEFILE_CONVERTER_GENERATOR", "makefile-converter")
DEFAULT_VERBOSE = os.getenv("MAKEFILE_CONVERTER_VERBOSE", "false").lower() == "true"
