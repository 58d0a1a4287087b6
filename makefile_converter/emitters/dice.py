"""DICE dmakefile emitter.

RULES:
- Comment leader: '#'
- Pattern rules render as ``%(left): %(right)``
- Form-variant rules keep the double colon: ``targets :: deps``
"""

from __future__ import annotations

from makefile_converter.core.model import Dialect, Rule
from makefile_converter.emitters.base import BaseEmitter, join_header


class DiceEmitter(BaseEmitter):
    """Writes DICE dmakefiles."""

    @property
    def name(self) -> str:
        return "DICE dmakefile"

    @property
    def dialect(self) -> Dialect:
        return Dialect.DICE

    def render_pattern_header(self, rule: Rule) -> str:
        return "%(left): %(right)"

    def render_rule_header(self, rule: Rule) -> str:
        if rule.is_form_variant and not rule.is_pattern_rule:
            return join_header(rule.targets, " ::", rule.dependencies)
        return super().render_rule_header(rule)
