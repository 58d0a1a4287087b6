"""SAS/C smakefile parser.

WHY: SAS/C smakefiles express pattern rules with the old dot-rule form
(``.c.o:``) and use ';' for comments, which the shared algorithm does not
know about on its own.

HOW: Sets the comment leader and recognizes dot-rules through the
match_pattern_rule hook. A dot-rule becomes a pattern Rule whose targets
and dependencies are wildcard placeholders built from the two suffixes.

RULES:
- Comment leader: ';'
- ``.c.o:`` → Rule(targets="*.o", dependencies="*.c", is_pattern_rule=True)
- ``.s.o:`` → Rule(targets="*.o", dependencies="*.s", is_pattern_rule=True)
- Values are taken verbatim (no quote stripping)
"""

from __future__ import annotations

import re
from typing import Optional

from makefile_converter.core.model import Dialect, Rule
from makefile_converter.parsers.base import BaseParser

DOT_RULE_RE = re.compile(r"^\.(\w+)\.(\w+)\s*:")


def match_dot_rule(stripped: str) -> Optional[Rule]:
    """Return a pattern Rule for a ``.src.obj:`` line, or None.

    Shared by the SAS/C and Lattice parsers, which use the same form.
    """
    match = DOT_RULE_RE.match(stripped)
    if match is None:
        return None
    source_suffix, object_suffix = match.groups()
    return Rule(
        targets="*.{}".format(object_suffix),
        dependencies="*.{}".format(source_suffix),
        is_pattern_rule=True,
    )


class SasCParser(BaseParser):
    """Parser for SAS/C smakefiles."""

    comment_leader = ";"

    @property
    def dialect(self) -> Dialect:
        return Dialect.SAS_C

    def match_pattern_rule(self, stripped: str) -> Optional[Rule]:
        return match_dot_rule(stripped)
