"""Command-line interface for the Makefile Converter.

WHY: Users need a simple way to convert a project's build file from the
terminal. The CLI wires together the full pipeline (source discovery,
dialect detection, parsing, table-driven conversion, emission and file
output) behind a single command.

HOW: Uses argparse to accept an optional input file, target and source
format aliases, an output path and the --save / --verbose switches. The
arguments become a ConversionConfig, and each pipeline step reports a
status line on stderr. The converted makefile goes to stdout unless a
destination was chosen.

RULES:
- Positional argument: input makefile (optional; auto-discovered when omitted)
- -t/--target and -s/--source-format accept any alias in FORMAT_ALIASES
- Without -t, the default target policy (DEFAULT_TARGETS) applies
- -o wins over --save; --save writes the target's conventional file name
- Status output goes to stderr (not stdout), so stdout can be piped
- The output is fully rendered before the destination is opened
- Any ConversionError prints "Error: ..." and exits with status 1
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from makefile_converter import __version__
from makefile_converter.config import (
    DEFAULT_OUTPUT_FILENAMES,
    DEFAULT_TARGETS,
    DEFAULT_VERBOSE,
    FORMAT_ALIASES,
    parse_format_alias,
)
from makefile_converter.core.converter import (
    render,
    resolve_input,
    resolve_source,
    resolve_target,
)
from makefile_converter.core.errors import ConversionError, OutputFileError
from makefile_converter.core.model import SUPPORTED_DIALECTS
from makefile_converter.core.settings import ConversionConfig
from makefile_converter.emitters.base import EmitterOutput
from makefile_converter.parsers import PARSERS

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the converted makefile
    can be piped.

    RULES:
    - All status messages go to stderr
    - Always flush after writing
    """
    print(msg, file=sys.stderr, flush=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _destination(config: ConversionConfig, output: EmitterOutput) -> Optional[Path]:
    """Return where the output goes, or None for stdout.

    RULES:
    - An explicit output_file always wins
    - save without output_file uses the target's conventional name in CWD
    """
    if config.output_file:
        return Path(config.output_file)
    if config.save:
        return Path.cwd() / output.filename
    return None


def _write_output(output: EmitterOutput, destination: Optional[Path], encoding: str) -> None:
    """Write rendered content to destination, or to stdout when None.

    Raises:
        OutputFileError: If the destination cannot be created or written.
    """
    if destination is None:
        sys.stdout.write(output.content)
        sys.stdout.flush()
        return

    try:
        with open(destination, "w", encoding=encoding, errors="replace", newline="\n") as handle:
            handle.write(output.content)
    except OSError as exc:
        raise OutputFileError(str(destination), exc.strerror or str(exc)) from exc


def _build_config(args: argparse.Namespace) -> ConversionConfig:
    """Turn parsed arguments into a ConversionConfig.

    Raises:
        UnknownFormatError: If -t or -s names an unknown alias.
    """
    return ConversionConfig(
        input_file=args.input_file,
        output_file=args.output,
        source_dialect=parse_format_alias(args.source_format) if args.source_format else None,
        target_dialect=parse_format_alias(args.target) if args.target else None,
        save=args.save,
        verbose=args.verbose,
    )


def run(config: ConversionConfig) -> EmitterOutput:
    """Execute one conversion and write its result.

    WHY: This is the core of the CLI. It orchestrates every step from
    locating the source to writing the destination.

    HOW: Calls the converter's resolve/parse/render steps in turn,
    reporting each on stderr, then writes the fully rendered output.

    RULES:
    - Status messages to stderr at each step
    - Nothing is written if any earlier step fails

    Returns:
        The EmitterOutput that was written.
    """
    path = resolve_input(config)
    if config.input_file is None:
        _status("Found makefile: {}".format(path))

    source = resolve_source(path, config)
    _status("Source format: {}".format(source.display_name))

    target = resolve_target(source, config)
    _status("Target format: {}".format(target.display_name))

    makefile = PARSERS[source]().parse_file(path, encoding=config.encoding)
    _status("  Parsed {} variable(s), {} rule(s)".format(
        len(makefile.variables), len(makefile.rules),
    ))

    output = render(makefile, target, generator_name=config.generator_name)

    destination = _destination(config, output)
    _write_output(output, destination, config.encoding)
    if destination is not None:
        _status("Converted to '{}'".format(destination))
    return output


def _epilog() -> str:
    lines = ["format aliases:"]
    for dialect in SUPPORTED_DIALECTS:
        aliases = [alias for alias, value in FORMAT_ALIASES.items() if value is dialect]
        lines.append("  {:<10} {}".format(dialect.display_name, ", ".join(aliases)))
    lines.append("")
    lines.append("default conversions (without -t):")
    for source, target in DEFAULT_TARGETS.items():
        lines.append("  {:<10} -> {} ({})".format(
            source.display_name, target.display_name, DEFAULT_OUTPUT_FILENAMES[target],
        ))
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable; tests can inspect the parser without running a conversion.

    RULES:
    - Positional: input_file (optional)
    - Optional: -o/--output, -t/--target, -s/--source-format
    - Switches: --save, -v/--verbose
    """
    parser = argparse.ArgumentParser(
        prog="makefile-converter",
        description="Convert makefiles between GNU Make, SAS/C smake, "
                    "DICE dmake and Lattice lmk formats.",
        epilog=_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default=None,
        help="Makefile to convert (default: the single conventional makefile "
             "in the current directory).",
    )

    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output file (default: standard output).",
    )

    parser.add_argument(
        "-t", "--target",
        default=None,
        help="Target format alias (default: chosen from the source format).",
    )

    parser.add_argument(
        "-s", "--source-format",
        default=None,
        help="Source format alias; skips format detection.",
    )

    parser.add_argument(
        "--save",
        action="store_true",
        help="Write to the target's conventional file name when -o is not given.",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=DEFAULT_VERBOSE,
        help="Trace detection, parsing and conversion on stderr.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    WHY: This is the function that __main__.py calls and that users
    invoke via the ``makefile-converter`` console script.

    HOW: Parses arguments, configures logging, then runs one conversion.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    - Exit status 1 on any ConversionError
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = _build_config(args)
        run(config)
    except ConversionError as e:
        logger.debug("Conversion failed", exc_info=True)
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
