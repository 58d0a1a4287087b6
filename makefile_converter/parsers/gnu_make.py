"""GNU Make parser.

WHY: GNU makefiles are the common ground every Amiga toolchain is
converted to or from, so this parser sees the widest variety of input.

HOW: Uses the shared state machine unchanged. Pattern rules are recognized
by a ``%`` in the targets (``%.o: %.c``).

RULES:
- Comment leader: '#'
- Assignment values lose one layer of surrounding quotes
- Automatic variables ($@, $<, $^) are kept verbatim in commands
"""

from __future__ import annotations

from makefile_converter.core.model import Dialect
from makefile_converter.parsers.base import BaseParser


class GnuMakeParser(BaseParser):
    """Parser for GNU Make makefiles."""

    comment_leader = "#"
    strip_quotes = True

    @property
    def dialect(self) -> Dialect:
        return Dialect.GNU_MAKE
