"""Dialect emitter registry.

WHY: The conversion engine needs a single lookup from a target Dialect
to the emitter that writes it. Adding a dialect means one emitter class
and one line here.

HOW: EMITTERS maps Dialect to emitter *classes* (not instances).
Callers instantiate as needed: ``emitter = EMITTERS[Dialect.SAS_C]()``.

RULES:
- Every supported dialect has exactly one emitter
- Dialect.UNKNOWN is never registered
- Every emitter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from makefile_converter.core.model import Dialect
from makefile_converter.emitters.dice import DiceEmitter
from makefile_converter.emitters.gnu_make import GnuMakeEmitter
from makefile_converter.emitters.lattice import LatticeEmitter
from makefile_converter.emitters.sas_c import SasCEmitter

if TYPE_CHECKING:
    from makefile_converter.emitters.base import BaseEmitter

EMITTERS: dict[Dialect, type[BaseEmitter]] = {
    Dialect.GNU_MAKE: GnuMakeEmitter,
    Dialect.SAS_C: SasCEmitter,
    Dialect.DICE: DiceEmitter,
    Dialect.LATTICE: LatticeEmitter,
}
