"""Abstract base parser implementing the shared line-oriented state machine.

WHY: All four dialects are parsed by the same algorithm; they differ only
in a handful of parameters (comment leader, quote stripping, rule
separator, dot-rule syntax, and one dialect's block syntax). Keeping the
algorithm in one place means a fix applies to every dialect at once.

HOW: BaseParser walks logical lines and moves between three states:

    IDLE ──rule header──▶ IN_RULE ──blank / non-indented line──▶ IDLE
      ▲                      │
      └─ blank / non-indented ─ IN_OPTIONS_BLOCK (Lattice WITH only)

Each logical line is classified in order of precedence:
  1. blank                     → close the open rule / block
  2. comment leader            → store verbatim in Makefile.comments
  3. dialect block hook        → e.g. indented Lattice WITH options
  4. indented, rule open       → Command on the open rule
  5. assignment (``=`` before any ``:``) → Variable, closes the rule
  6. dialect pattern hook      → pattern Rule (e.g. ``.c.o:``), opens it
  7. rule separator            → Rule, opens it
  8. anything else             → closes an open rule, otherwise ignored

Subclasses override the class-level parameters and, where needed, the
``logical_lines``, ``handle_block``, ``match_pattern_rule`` and
``split_rule`` hooks.

RULES:
- Parsing never fails on line content; unmatched lines are dropped
  (with a DEBUG record)
- An unreadable file raises SourceFileError before any parsing
- End of input completes the model; an open rule simply ends
- The comment list is allocated once per model and appended to
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from makefile_converter.config import SOURCE_ENCODING
from makefile_converter.core.errors import SourceFileError
from makefile_converter.core.model import Command, Dialect, Makefile, Rule, Variable

logger = logging.getLogger(__name__)

_QUOTE = '"'
_OPERATOR_CHARS = ":+?!"


class ParserState(Enum):
    """States of the per-file parsing state machine."""

    IDLE = "idle"
    IN_RULE = "in_rule"
    IN_OPTIONS_BLOCK = "in_options_block"


@dataclass
class ParseCursor:
    """Mutable parsing position: the current state and the open rule."""

    state: ParserState = ParserState.IDLE
    rule: Optional[Rule] = None

    def open_rule(self, rule: Rule) -> None:
        self.state = ParserState.IN_RULE
        self.rule = rule

    def close(self) -> None:
        self.state = ParserState.IDLE
        self.rule = None


class BaseParser(ABC):
    """Abstract base for all dialect parsers.

    To add a new dialect:
    1. Create a new file in parsers/
    2. Subclass BaseParser and implement ``dialect``
    3. Set the class parameters and override hooks as needed
    4. Register in PARSERS dict in parsers/__init__.py
    """

    comment_leader: str = "#"
    """Character that starts a comment line."""

    strip_quotes: bool = False
    """Remove one layer of surrounding double quotes from assignment values."""

    immediate_variables: bool = False
    """Mark every Variable as immediate (resolved at definition time)."""

    wildcard: str = "%"
    """Token in a rule's targets that makes it a pattern rule."""

    @property
    @abstractmethod
    def dialect(self) -> Dialect:
        """The dialect this parser reads."""

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def parse_file(self, path: str | Path, encoding: str = SOURCE_ENCODING) -> Makefile:
        """Read a makefile from disk and parse it.

        The whole file is read and closed before parsing begins.

        Raises:
            SourceFileError: If the file is missing or unreadable.
        """
        try:
            with open(path, "r", encoding=encoding, errors="replace") as handle:
                lines = handle.readlines()
        except OSError as exc:
            raise SourceFileError(str(path), exc.strerror or str(exc)) from exc

        logger.debug("Read %d line(s) from %s", len(lines), path)
        return self.parse_lines(lines, filename=str(path))

    def parse_lines(self, lines: Iterable[str], filename: str = "") -> Makefile:
        """Parse raw lines into a fresh Makefile model.

        Args:
            lines: Physical lines, with or without trailing newlines.
            filename: Source path recorded on the model.

        Returns:
            The populated Makefile.
        """
        makefile = Makefile(dialect=self.dialect, filename=filename)
        cursor = ParseCursor()

        for number, line in enumerate(self.logical_lines(lines), start=1):
            self._consume(number, line, makefile, cursor)

        logger.debug(
            "Parsed %s makefile: %d variable(s), %d rule(s), %d comment(s)",
            self.dialect.display_name,
            len(makefile.variables),
            len(makefile.rules),
            len(makefile.comments),
        )
        return makefile

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def logical_lines(self, lines: Iterable[str]) -> Iterator[str]:
        """Yield logical lines. The default is one logical line per physical line."""
        for raw in lines:
            yield raw.rstrip("\r\n")

    def handle_block(
        self,
        stripped: str,
        indented: bool,
        makefile: Makefile,
        cursor: ParseCursor,
    ) -> bool:
        """Handle dialect-specific block syntax. Return True if the line was consumed."""
        return False

    def match_pattern_rule(self, stripped: str) -> Optional[Rule]:
        """Return a pattern Rule if the line uses the dialect's dot-rule syntax."""
        return None

    def split_rule(self, stripped: str) -> Optional[Rule]:
        """Split a ``targets: dependencies`` header on the first colon."""
        colon = stripped.find(":")
        if colon < 0:
            return None
        targets = stripped[:colon].strip()
        dependencies = stripped[colon + 1:].strip()
        return Rule(
            targets=targets,
            dependencies=dependencies,
            is_pattern_rule=self.wildcard in targets,
        )

    def split_variable(self, stripped: str) -> Optional[Variable]:
        """Split a ``name = value`` assignment.

        RULES:
        - The line must contain '=' with no ':' before it; a colon before
          the '=' makes the line a rule header
        - Operator flavors (``:=``, ``::=``, ``+=``, ``?=``, ``!=``) are
          recognized and kept on Variable.operator
        - Both sides are trimmed
        - With strip_quotes, one layer of surrounding double quotes is
          removed; single quotes are value text
        """
        equals = stripped.find("=")
        if equals < 0:
            return None
        head = stripped[:equals].rstrip()
        bare = head.rstrip(_OPERATOR_CHARS)
        name = bare.strip()
        if not name or ":" in name:
            return None
        operator = head[len(bare):] + "="

        value = stripped[equals + 1:].strip()
        if (
            self.strip_quotes
            and len(value) >= 2
            and value[0] == _QUOTE
            and value[-1] == _QUOTE
        ):
            value = value[1:-1]

        return Variable(
            name=name,
            value=value,
            immediate=self.immediate_variables,
            operator=operator,
        )

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    def _consume(
        self,
        number: int,
        line: str,
        makefile: Makefile,
        cursor: ParseCursor,
    ) -> None:
        stripped = line.strip()

        if not stripped:
            if cursor.state is not ParserState.IDLE:
                logger.debug("Line %d: blank line closes %s", number, cursor.state.value)
            cursor.close()
            return

        if stripped.startswith(self.comment_leader):
            makefile.comments.append(stripped)
            return

        indented = line[:1] in (" ", "\t")
        if self.handle_block(stripped, indented, makefile, cursor):
            return

        if indented and cursor.state is ParserState.IN_RULE and cursor.rule is not None:
            cursor.rule.commands.append(Command(text=stripped))
            return

        variable = self.split_variable(stripped)
        if variable is not None:
            logger.debug(
                "Line %d: variable %s %s %s",
                number, variable.name, variable.operator, variable.value,
            )
            makefile.variables.append(variable)
            cursor.close()
            return

        rule = self.match_pattern_rule(stripped)
        if rule is None:
            rule = self.split_rule(stripped)
        if rule is not None:
            logger.debug(
                "Line %d: rule '%s' <- '%s'%s%s",
                number,
                rule.targets,
                rule.dependencies,
                " (pattern)" if rule.is_pattern_rule else "",
                " (double-colon)" if rule.is_form_variant else "",
            )
            makefile.rules.append(rule)
            cursor.open_rule(rule)
            return

        if cursor.state is not ParserState.IDLE:
            logger.debug("Line %d: unindented line closes rule: %s", number, stripped)
            cursor.close()
        else:
            logger.debug("Line %d: ignored: %s", number, stripped)
