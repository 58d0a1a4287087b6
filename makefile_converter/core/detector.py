"""Heuristic makefile dialect detection.

WHY: The four dialects share most of their surface syntax. A file named
``makefile`` may be GNU, DICE or anything else, so the filename is not
evidence. Only characteristic fragments in the content tell them apart,
and several fragments can appear in the same file.

HOW: Scan the first N significant lines (non-empty, non-comment). For
each dialect keep one independent flag, set when a line contains any of
that dialect's signature fragments. Resolve with a fixed precedence.

RULES:
- Precedence when several flags are set: DICE (double-colon syntax) >
  GNU Make > SAS/C (dot-rule syntax) > Lattice
- The order in which fragments appear in the file never matters
- Lines starting with '#' or ';' are comments and are not scanned or counted
- An unreadable file yields Dialect.UNKNOWN (the caller decides whether
  that is fatal)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from makefile_converter.config import DETECT_LINE_LIMIT, SOURCE_ENCODING
from makefile_converter.core.model import Dialect

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Signature fragments (substring match, case-sensitive)
# ---------------------------------------------------------------------------

SIGNATURES: dict[Dialect, tuple[str, ...]] = {
    Dialect.GNU_MAKE: ("%.o:", "$@", "$<", "$^", "CC=gcc", "CC = gcc"),
    Dialect.DICE: ("%(left)", "%(right)", "::"),
    Dialect.SAS_C: (".c.o:", "$*.o", "OBJNAME=", "slink"),
    Dialect.LATTICE: ("blink", "lc ", "WITH"),
}

PRECEDENCE: tuple[Dialect, ...] = (
    Dialect.DICE,
    Dialect.GNU_MAKE,
    Dialect.SAS_C,
    Dialect.LATTICE,
)

_COMMENT_LEADERS = ("#", ";")


def detect_dialect_from_lines(
    lines: Iterable[str],
    line_limit: int = DETECT_LINE_LIMIT,
) -> Dialect:
    """Detect the dialect of in-memory makefile lines.

    Args:
        lines: Raw lines (newlines optional).
        line_limit: Maximum number of significant lines to inspect.

    Returns:
        The winning Dialect by precedence, or Dialect.UNKNOWN.
    """
    found: dict[Dialect, bool] = {dialect: False for dialect in PRECEDENCE}
    scanned = 0

    for raw in lines:
        if scanned >= line_limit:
            break
        line = raw.strip()
        if not line or line.startswith(_COMMENT_LEADERS):
            continue
        scanned += 1

        for dialect, fragments in SIGNATURES.items():
            if found[dialect]:
                continue
            for fragment in fragments:
                if fragment in line:
                    logger.debug(
                        "Line %d matches %s signature %r: %s",
                        scanned, dialect.display_name, fragment, line,
                    )
                    found[dialect] = True
                    break

    for dialect in PRECEDENCE:
        if found[dialect]:
            logger.debug("Detected %s after %d significant line(s)", dialect.display_name, scanned)
            return dialect

    logger.debug("No dialect signature found in %d significant line(s)", scanned)
    return Dialect.UNKNOWN


def detect_dialect(
    path: str | Path,
    line_limit: int = DETECT_LINE_LIMIT,
    encoding: str = SOURCE_ENCODING,
) -> Dialect:
    """Detect the dialect of a makefile on disk.

    WHY: Used when the user does not name the source format.

    HOW: Opens the file and streams lines into detect_dialect_from_lines;
    the file is closed before returning on every path.

    RULES:
    - Missing or unreadable files return Dialect.UNKNOWN
    - Undecodable bytes are replaced, never fatal

    Args:
        path: Path to the candidate makefile.
        line_limit: Maximum number of significant lines to inspect.
        encoding: Text encoding of the file.

    Returns:
        The detected Dialect, or Dialect.UNKNOWN.
    """
    try:
        with open(path, "r", encoding=encoding, errors="replace") as handle:
            return detect_dialect_from_lines(handle, line_limit=line_limit)
    except OSError as exc:
        logger.debug("Cannot open %s for detection: %s", path, exc)
        return Dialect.UNKNOWN
