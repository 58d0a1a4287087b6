"""GNU Make emitter.

RULES:
- Comment leader: '#'
- Pattern rules render as ``%.o: %.c``
- Double-colon rules are written as ordinary single-colon rules
"""

from __future__ import annotations

from makefile_converter.core.model import Dialect, Rule
from makefile_converter.emitters.base import BaseEmitter, pattern_suffixes


class GnuMakeEmitter(BaseEmitter):
    """Writes GNU Make makefiles."""

    @property
    def name(self) -> str:
        return "GNU Make"

    @property
    def dialect(self) -> Dialect:
        return Dialect.GNU_MAKE

    def render_pattern_header(self, rule: Rule) -> str:
        object_suffix, source_suffix = pattern_suffixes(rule)
        return "%.{}: %.{}".format(object_suffix, source_suffix)
