"""Option, compiler and command translation tables.

WHY: The translation knowledge (which flag means what in which
toolchain) is the part of the converter most likely to need review and
extension. Keeping it as data, separate from parsing and emitting, makes
every entry auditable on its own.

HOW: actions.py defines the entry kinds (Replace, Drop, PassThrough,
PrefixRule). options.py holds the flag and compiler tables, commands.py
the recipe-program rewrites. Each table is keyed by an ordered
(source, target) dialect pair.

RULES:
- Tables are built once at import and never mutated
- No table is derived from its reverse pair
"""

from makefile_converter.mapping.commands import map_command
from makefile_converter.mapping.options import (
    convert_flags,
    entries_for_review,
    map_compiler,
    map_option,
)

__all__ = [
    "convert_flags",
    "entries_for_review",
    "map_command",
    "map_compiler",
    "map_option",
]
