"""Dialect parser registry.

WHY: The CLI and the conversion engine need a single lookup from a
detected Dialect to the parser that reads it.

HOW: PARSERS maps Dialect to parser *classes* (not instances). Callers
instantiate per conversion: ``parser = PARSERS[Dialect.DICE]()``.

RULES:
- Every supported dialect has exactly one parser
- Dialect.UNKNOWN is never registered
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from makefile_converter.core.model import Dialect
from makefile_converter.parsers.dice import DiceParser
from makefile_converter.parsers.gnu_make import GnuMakeParser
from makefile_converter.parsers.lattice import LatticeParser
from makefile_converter.parsers.sas_c import SasCParser

if TYPE_CHECKING:
    from makefile_converter.parsers.base import BaseParser

PARSERS: dict[Dialect, type[BaseParser]] = {
    Dialect.GNU_MAKE: GnuMakeParser,
    Dialect.SAS_C: SasCParser,
    Dialect.DICE: DiceParser,
    Dialect.LATTICE: LatticeParser,
}
