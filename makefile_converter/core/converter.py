"""Conversion engine: parsed Makefile → ConvertedMakefile → rendered output.

WHY: Parsers only know how to read their dialect and emitters only know
how to write theirs. Something has to walk the model in between and push
every dialect-specific value through the mapping tables, and something
has to wire detection, parsing, conversion and emission together for a
single request.

HOW: convert_makefile() copies the model into a ConvertedMakefile:
  - CC-style variables go through map_compiler()
  - CFLAGS-style variables go through convert_flags()
  - every recipe line goes through map_command()
  - comments lose the source comment leader
convert_lines() and convert_file() run the whole pipeline and return the
EmitterOutput; neither touches the destination.

RULES:
- The parsed Makefile is never mutated
- Rule headers, pattern and form-variant flags are copied verbatim
- source == target is a pure pass-through of values and commands
- Only variables named CC / CFLAGS (case-insensitive) are value-mapped
- Fatal conditions raise ConversionError subclasses; nothing is retried
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from makefile_converter.config import GENERATOR_NAME, default_target_for
from makefile_converter.core.detector import detect_dialect, detect_dialect_from_lines
from makefile_converter.core.discovery import find_makefile
from makefile_converter.core.errors import SourceFileError, UnknownDialectError
from makefile_converter.core.model import (
    Command,
    ConvertedMakefile,
    Dialect,
    Makefile,
    Rule,
    Variable,
)
from makefile_converter.core.settings import ConversionConfig
from makefile_converter.emitters import EMITTERS
from makefile_converter.emitters.base import EmitterOutput
from makefile_converter.mapping.commands import map_command
from makefile_converter.mapping.options import (
    COMPILER_VARIABLES,
    FLAGS_VARIABLES,
    convert_flags,
    map_compiler,
)
from makefile_converter.parsers import PARSERS

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Model translation
# ---------------------------------------------------------------------------


def _convert_variable(variable: Variable, source: Dialect, target: Dialect) -> Variable:
    key = variable.name.lower()
    value = variable.value
    if key in COMPILER_VARIABLES:
        value = map_compiler(value, source, target)
    elif key in FLAGS_VARIABLES:
        value = convert_flags(value, source, target)

    if value != variable.value:
        logger.debug("Variable %s: %r → %r", variable.name, variable.value, value)
    return Variable(
        name=variable.name,
        value=value,
        immediate=variable.immediate,
        operator=variable.operator,
    )


def _convert_rule(rule: Rule, source: Dialect, target: Dialect) -> Rule:
    return Rule(
        targets=rule.targets,
        dependencies=rule.dependencies,
        commands=[
            Command(
                text=map_command(command.text, source, target),
                continuation=command.continuation,
            )
            for command in rule.commands
        ],
        is_pattern_rule=rule.is_pattern_rule,
        is_form_variant=rule.is_form_variant,
    )


def strip_comment_leader(comment: str, leader: str) -> str:
    """Return comment text without its leading comment characters.

    Repeated leaders (``;;``, ``###``) are removed together.
    """
    if comment.startswith(leader):
        return comment.lstrip(leader).strip()
    return comment.strip()


def convert_makefile(makefile: Makefile, target: Dialect) -> ConvertedMakefile:
    """Translate a parsed Makefile for the target dialect.

    Args:
        makefile: The parsed source model. Not modified.
        target: Dialect the result will be emitted in.

    Returns:
        A ConvertedMakefile with mapped values, commands and bare comments.
    """
    source = makefile.dialect
    logger.debug(
        "Converting %s → %s: %d variable(s), %d rule(s)",
        source.display_name,
        target.display_name,
        len(makefile.variables),
        len(makefile.rules),
    )

    return ConvertedMakefile(
        source=source,
        target=target,
        filename=makefile.filename,
        variables=[_convert_variable(v, source, target) for v in makefile.variables],
        rules=[_convert_rule(r, source, target) for r in makefile.rules],
        comments=[
            strip_comment_leader(c, source.comment_leader) for c in makefile.comments
        ],
    )


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


def render(
    makefile: Makefile,
    target: Dialect,
    generator_name: str = GENERATOR_NAME,
) -> EmitterOutput:
    """Convert a parsed Makefile and render it with the target's emitter."""
    converted = convert_makefile(makefile, target)
    emitter = EMITTERS[target]()
    logger.debug("Rendering with %s emitter", emitter.name)
    return emitter.emit(converted, generator_name=generator_name)


def convert_lines(
    lines: Iterable[str],
    target: Optional[Dialect] = None,
    source: Optional[Dialect] = None,
    filename: str = "",
    generator_name: str = GENERATOR_NAME,
) -> EmitterOutput:
    """Convert in-memory makefile lines.

    WHY: Lets tests and library callers convert text without touching
    the filesystem.

    RULES:
    - source None runs the detector on the lines
    - target None applies the default target policy
    - An undetectable source raises UnknownDialectError

    Args:
        lines: Physical lines of the source makefile.
        target: Target dialect, or None for the default.
        source: Source dialect, or None to detect.
        filename: Name shown in the output header.
        generator_name: Generator name shown in the output header.

    Returns:
        The rendered EmitterOutput.
    """
    lines = list(lines)
    if source is None:
        source = detect_dialect_from_lines(lines)
        if source is Dialect.UNKNOWN:
            raise UnknownDialectError(filename or "<input>")
    if target is None:
        target = default_target_for(source)

    makefile = PARSERS[source]().parse_lines(lines, filename=filename)
    return render(makefile, target, generator_name=generator_name)


def resolve_input(config: ConversionConfig) -> Path:
    """Return the source path: the configured file, or the discovered one.

    Raises:
        SourceFileError: If the configured file does not exist.
        NoMakefileFoundError / AmbiguousMakefileError: From discovery.
    """
    if config.input_file is None:
        return find_makefile()

    path = Path(config.input_file)
    if not path.is_file():
        raise SourceFileError(str(path), "No such file")
    return path


def resolve_source(path: Path, config: ConversionConfig) -> Dialect:
    """Return the configured source dialect, or detect it from path.

    Raises:
        UnknownDialectError: If detection finds no signature.
    """
    if config.source_dialect is not None:
        return config.source_dialect

    source = detect_dialect(
        path,
        line_limit=config.detect_line_limit,
        encoding=config.encoding,
    )
    if source is Dialect.UNKNOWN:
        raise UnknownDialectError(str(path))
    logger.info("Detected %s format in %s", source.display_name, path)
    return source


def resolve_target(source: Dialect, config: ConversionConfig) -> Dialect:
    """Return the configured target dialect, or the default for source."""
    if config.target_dialect is not None:
        return config.target_dialect
    return default_target_for(source)


def convert_file(config: ConversionConfig) -> EmitterOutput:
    """Run the full pipeline for one conversion request.

    WHY: Tests and any embedding caller share one entry point that does
    everything except writing the result.

    HOW: Resolve input → detect (unless the source is given) → parse →
    convert → emit. The result is fully rendered in memory.

    RULES:
    - Detection failure raises UnknownDialectError
    - No destination is opened here; the caller writes the output

    Args:
        config: The conversion request.

    Returns:
        EmitterOutput with the target's conventional filename and content.
    """
    path = resolve_input(config)
    source = resolve_source(path, config)
    target = resolve_target(source, config)

    makefile = PARSERS[source]().parse_file(path, encoding=config.encoding)
    return render(makefile, target, generator_name=config.generator_name)
