"""Makefile Converter: translate build files between four make dialects.

WHY: Amiga C projects ship makefiles for whichever compiler their author
owned: GNU Make with GCC, SAS/C smake, DICE dmake or Lattice lmk. Each
dialect disagrees on comments, pattern rules and compiler vocabulary, so
moving a project between toolchains means rewriting the build file by
hand. This package does the mechanical part of that rewrite.

HOW: Four-stage pipeline: detect (signature scan), parse (per-dialect
parser into a neutral model), convert (explicit per-pair mapping tables)
and emit (per-dialect writer). Each stage is independently testable.

RULES:
- Every parser fills the same Makefile model
- Every emitter consumes the same ConvertedMakefile
- Adding a dialect = one parser, one emitter, table entries; no core changes
"""

__version__ = "0.1.0"
