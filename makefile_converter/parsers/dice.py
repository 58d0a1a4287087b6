"""DICE dmakefile parser.

WHY: DICE differs from GNU Make in two ways the model must keep: its
variables are resolved when defined (immediate), and it has a
double-colon rule form with independent command sets.

HOW: Marks every Variable immediate and checks for ``::`` before the
ordinary single-colon split. Targets containing ``%`` (e.g.
``%(left)``) make the rule a pattern rule.

RULES:
- Comment leader: '#'
- Every Variable has immediate=True (flag only, never re-evaluated)
- ``a :: b`` → Rule(targets="a", dependencies="b", is_form_variant=True)
"""

from __future__ import annotations

from typing import Optional

from makefile_converter.core.model import Dialect, Rule
from makefile_converter.parsers.base import BaseParser


class DiceParser(BaseParser):
    """Parser for DICE dmakefiles."""

    comment_leader = "#"
    immediate_variables = True

    @property
    def dialect(self) -> Dialect:
        return Dialect.DICE

    def split_rule(self, stripped: str) -> Optional[Rule]:
        double_colon = stripped.find("::")
        if double_colon < 0:
            return super().split_rule(stripped)

        targets = stripped[:double_colon].strip()
        return Rule(
            targets=targets,
            dependencies=stripped[double_colon + 2:].strip(),
            is_pattern_rule=self.wildcard in targets,
            is_form_variant=True,
        )
