"""Lattice lmkfile emitter.

RULES:
- Comment leader: ';'
- Pattern rules render as dot-rules (``.c.o:``), like SAS/C
- Linker options that came from a WITH block are written as ordinary
  recipe lines; the WITH marker is not reconstructed
"""

from __future__ import annotations

from makefile_converter.core.model import Dialect, Rule
from makefile_converter.emitters.base import BaseEmitter
from makefile_converter.emitters.sas_c import render_dot_rule


class LatticeEmitter(BaseEmitter):
    """Writes Lattice lmkfiles."""

    @property
    def name(self) -> str:
        return "Lattice lmkfile"

    @property
    def dialect(self) -> Dialect:
        return Dialect.LATTICE

    def render_pattern_header(self, rule: Rule) -> str:
        return render_dot_rule(rule)
