"""Lattice lmkfile parser.

WHY: Lattice lmkfiles add two constructs the other dialects lack:
physical lines joined by a trailing backslash, and a ``WITH`` block that
feeds linker options to the preceding rule's link step.

HOW: logical_lines() joins continuation lines before the state machine
sees them. handle_block() switches to IN_OPTIONS_BLOCK on a bare ``WITH``
line and appends every following indented line to the most recent rule
as a Command. A blank line ends the block; an unindented line ends it too
and is then classified like any other line.

RULES:
- Comment leader: ';'
- A line ending in '\\' is joined (backslash removed) with the next line
- The WITH marker itself is not stored; its option lines are
- Option lines attach to the last rule; with no rule yet they are dropped
- Only indented lines are option lines, so a rule header or assignment
  right after the block is never swallowed
- Dot-rules (``.c.o:``) are recognized as in SAS/C
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Optional

from makefile_converter.core.model import Command, Dialect, Makefile, Rule
from makefile_converter.parsers.base import BaseParser, ParseCursor, ParserState
from makefile_converter.parsers.sas_c import match_dot_rule

logger = logging.getLogger(__name__)

WITH_MARKER = "WITH"


class LatticeParser(BaseParser):
    """Parser for Lattice lmkfiles."""

    comment_leader = ";"

    @property
    def dialect(self) -> Dialect:
        return Dialect.LATTICE

    def logical_lines(self, lines: Iterable[str]) -> Iterator[str]:
        pending: list[str] = []
        for raw in lines:
            line = raw.rstrip("\r\n")
            if line.endswith("\\"):
                pending.append(line[:-1])
                continue
            if pending:
                pending.append(line)
                yield "".join(pending)
                pending = []
            else:
                yield line
        if pending:
            yield "".join(pending)

    def handle_block(
        self,
        stripped: str,
        indented: bool,
        makefile: Makefile,
        cursor: ParseCursor,
    ) -> bool:
        if stripped.upper() == WITH_MARKER:
            logger.debug("WITH block opened")
            cursor.state = ParserState.IN_OPTIONS_BLOCK
            cursor.rule = makefile.rules[-1] if makefile.rules else None
            return True

        if cursor.state is not ParserState.IN_OPTIONS_BLOCK:
            return False

        if not indented:
            logger.debug("WITH block closed by unindented line: %s", stripped)
            cursor.close()
            return False

        if cursor.rule is not None:
            cursor.rule.commands.append(Command(text=stripped))
        else:
            logger.debug("WITH option outside any rule dropped: %s", stripped)
        return True

    def match_pattern_rule(self, stripped: str) -> Optional[Rule]:
        return match_dot_rule(stripped)
