"""Exception hierarchy for the conversion pipeline.

WHY: Every fatal condition aborts the single conversion immediately, and
the CLI needs to report each one clearly without catching unrelated bugs.
A typed hierarchy lets callers catch ``ConversionError`` once.

HOW: One subclass per error category: input acquisition, format
identification, target selection and output.

RULES:
- All pipeline errors derive from ConversionError
- Content-level anomalies (odd lines, empty rules) are never errors
- There is no retry anywhere; raising means the conversion is over
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for every fatal conversion error."""


class SourceFileError(ConversionError):
    """Raised when the source makefile is missing or cannot be read.

    RULES:
    - path is the file that failed
    - message includes the underlying OS reason when there is one
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read makefile '{path}': {reason}")


class NoMakefileFoundError(ConversionError):
    """Raised when auto-discovery finds no conventional makefile."""

    def __init__(self, directory: str) -> None:
        self.directory = directory
        super().__init__(
            f"No makefile found in '{directory}'. "
            "Pass the input file explicitly, or use --help for usage."
        )


class AmbiguousMakefileError(ConversionError):
    """Raised when auto-discovery finds more than one candidate.

    WHY: Picking one silently would convert the wrong file half the time.
    The user must choose.

    RULES:
    - candidates lists every file found, in discovery order
    """

    def __init__(self, candidates: list[str]) -> None:
        self.candidates = list(candidates)
        super().__init__(
            "Multiple makefiles found: {}. "
            "Specify which file to convert.".format(", ".join(self.candidates))
        )


class UnknownDialectError(ConversionError):
    """Raised when no dialect signature is recognized in the source."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Unable to determine makefile format for '{path}'")


class UnknownFormatError(ConversionError, ValueError):
    """Raised for a format alias that is not in the alias table."""

    def __init__(self, alias: str) -> None:
        self.alias = alias
        super().__init__(f"Unknown format '{alias}'")


class OutputFileError(ConversionError):
    """Raised when the destination file cannot be created or written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to create output file '{path}': {reason}")
