"""Auto-discovery of the source makefile in a directory.

WHY: Most users run the converter inside a project directory without
naming the file. The tool should find the one conventional makefile, and
refuse to guess when there are several.

HOW: List the directory once and keep the CANDIDATE_MAKEFILES names that
exist as regular files, in candidate order.

RULES:
- Exactly one match → that path
- No match → NoMakefileFoundError
- Several matches → AmbiguousMakefileError listing all of them
- Names are compared against the real directory listing, so a
  case-insensitive filesystem does not report one file under several names
"""

from __future__ import annotations

import logging
from pathlib import Path

from makefile_converter.config import CANDIDATE_MAKEFILES
from makefile_converter.core.errors import AmbiguousMakefileError, NoMakefileFoundError

logger = logging.getLogger(__name__)


def find_candidates(directory: str | Path) -> list[Path]:
    """Return every conventional makefile present in directory, in candidate order."""
    base = Path(directory)
    present = {entry.name for entry in base.iterdir() if entry.is_file()}
    return [base / name for name in CANDIDATE_MAKEFILES if name in present]


def find_makefile(directory: str | Path | None = None) -> Path:
    """Locate the single conventional makefile in directory.

    Args:
        directory: Directory to search. Defaults to the current directory.

    Returns:
        Path to the only candidate found.

    Raises:
        NoMakefileFoundError: If no candidate exists.
        AmbiguousMakefileError: If more than one candidate exists.
    """
    base = Path(directory) if directory is not None else Path.cwd()
    candidates = find_candidates(base)
    logger.debug("Discovery in %s found: %s", base, [c.name for c in candidates])

    if not candidates:
        raise NoMakefileFoundError(str(base))
    if len(candidates) > 1:
        raise AmbiguousMakefileError([c.name for c in candidates])
    return candidates[0]
