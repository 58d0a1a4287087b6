"""Abstract base emitter and output container.

WHY: Every target dialect writes the same ConvertedMakefile with the same
layout; only the comment leader, the pattern-rule form and a few
dialect quirks differ. This base class owns the layout so emitters only
describe those differences, and the CLI can work with any emitter
generically.

HOW: BaseEmitter is an ABC with two requirements: a ``name`` property and
a ``dialect`` property, plus the ``render_pattern_header()`` hook.
``emit()`` renders the whole file into one string and wraps it in an
EmitterOutput together with the target's conventional file name.

Layout:
  1. Two header comment lines (target format, generator)
  2. Source comments, re-prefixed with the target leader
  3. A blank line
  4. ``NAME <op> value`` per variable (``=``, ``+=``, ... as parsed), then
     a blank line if any were written
  5. Per rule: header, tab-indented commands, a blank line

RULES:
- Subclasses MUST implement ``name``, ``dialect`` and
  ``render_pattern_header()``
- Pattern suffixes come from the rule when present (``%.o``, ``*.o``),
  otherwise default to ``o`` / ``c``
- Rule headers with no dependencies carry no trailing whitespace
- ``emit()`` never touches the filesystem
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from makefile_converter.config import DEFAULT_OUTPUT_FILENAMES, GENERATOR_NAME
from makefile_converter.core.model import ConvertedMakefile, Dialect, Rule

_SUFFIX_RE = re.compile(r"[%*]\.(\w+)")

DEFAULT_OBJECT_SUFFIX = "o"
DEFAULT_SOURCE_SUFFIX = "c"


@dataclass
class EmitterOutput:
    """One rendered makefile.

    Attributes:
        filename: Conventional file name for the target dialect,
                  e.g. ``"smakefile"``. Used by ``--save``.
        content: The complete file text, newline-terminated.
    """

    filename: str
    content: str


def pattern_suffixes(rule: Rule) -> tuple[str, str]:
    """Return (object_suffix, source_suffix) for a pattern rule.

    ``%.o: %.c`` and ``*.o: *.c`` give ("o", "c"); a DICE ``%(left)``
    form carries no suffix, so the defaults are used.
    """
    target_match = _SUFFIX_RE.search(rule.targets)
    source_match = _SUFFIX_RE.search(rule.dependencies)
    return (
        target_match.group(1) if target_match else DEFAULT_OBJECT_SUFFIX,
        source_match.group(1) if source_match else DEFAULT_SOURCE_SUFFIX,
    )


def join_header(targets: str, separator: str, dependencies: str) -> str:
    """Build ``targets<sep> deps`` without trailing whitespace."""
    return "{}{} {}".format(targets, separator, dependencies).rstrip()


class BaseEmitter(ABC):
    """Abstract base for all dialect emitters.

    To add a new target dialect:
    1. Create a new file in emitters/
    2. Subclass BaseEmitter
    3. Implement name, dialect and render_pattern_header()
    4. Register in EMITTERS dict in emitters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Format name used in the header, e.g. 'SAS/C SMakefile'."""

    @property
    @abstractmethod
    def dialect(self) -> Dialect:
        """The dialect this emitter writes."""

    @property
    def comment_leader(self) -> str:
        return self.dialect.comment_leader

    @property
    def output_filename(self) -> str:
        return DEFAULT_OUTPUT_FILENAMES[self.dialect]

    @abstractmethod
    def render_pattern_header(self, rule: Rule) -> str:
        """Render a pattern rule header in the dialect's native form."""

    def render_rule_header(self, rule: Rule) -> str:
        """Render any rule header. Non-pattern rules use ``targets: deps``."""
        if rule.is_pattern_rule:
            return self.render_pattern_header(rule)
        return join_header(rule.targets, ":", rule.dependencies)

    def render_empty_rule(self) -> list[str]:
        """Recipe lines written for a rule that has no commands."""
        return []

    def comment(self, text: str) -> str:
        return "{} {}".format(self.comment_leader, text) if text else self.comment_leader

    def emit(
        self,
        converted: ConvertedMakefile,
        generator_name: str = GENERATOR_NAME,
    ) -> EmitterOutput:
        """Render a ConvertedMakefile as this dialect's file text.

        Args:
            converted: The translated model.
            generator_name: Tool name written on the second header line.

        Returns:
            EmitterOutput with the conventional file name and content.
        """
        lines = [
            self.comment("Converted to {} format from {}".format(
                self.name, converted.source.display_name,
            )),
            self.comment("Generated by {}".format(generator_name)),
        ]
        lines.extend(self.comment(text) for text in converted.comments)
        lines.append("")

        for variable in converted.variables:
            lines.append("{} {} {}".format(
                variable.name, variable.operator, variable.value,
            ).rstrip())
        if converted.variables:
            lines.append("")

        for rule in converted.rules:
            lines.append(self.render_rule_header(rule))
            if rule.commands:
                lines.extend("\t{}".format(command.text) for command in rule.commands)
            else:
                lines.extend(self.render_empty_rule())
            lines.append("")

        return EmitterOutput(
            filename=self.output_filename,
            content="\n".join(lines) + "\n",
        )
