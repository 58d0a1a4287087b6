"""SAS/C smakefile emitter.

WHY: smake refuses nothing, but a rule with an empty recipe after a
conversion usually means a command was lost on the way. The emitter
marks such rules so a human looks at them.

RULES:
- Comment leader: ';'
- Pattern rules render as dot-rules (``.c.o:``)
- A rule with no commands gets exactly one placeholder comment line
"""

from __future__ import annotations

from makefile_converter.core.model import Dialect, Rule
from makefile_converter.emitters.base import BaseEmitter, pattern_suffixes

EMPTY_RULE_PLACEHOLDER = "\t; No commands specified - may need manual conversion"


def render_dot_rule(rule: Rule) -> str:
    """Render ``.src.obj:``. Shared with the Lattice emitter."""
    object_suffix, source_suffix = pattern_suffixes(rule)
    return ".{}.{}:".format(source_suffix, object_suffix)


class SasCEmitter(BaseEmitter):
    """Writes SAS/C smakefiles."""

    @property
    def name(self) -> str:
        return "SAS/C SMakefile"

    @property
    def dialect(self) -> Dialect:
        return Dialect.SAS_C

    def render_pattern_header(self, rule: Rule) -> str:
        return render_dot_rule(rule)

    def render_empty_rule(self) -> list[str]:
        return [EMPTY_RULE_PLACEHOLDER]
