"""Tests for the conversion engine and the end-to-end structural properties.

WHY: Whatever a conversion does to individual tokens, it must never lose
or invent structure: the same variables and rules must come out the
other side, in the same order, for every ordered dialect pair.

HOW: Convert each sample to every other dialect, re-parse the emitted
text with the target's own parser, and compare structure. Byte equality
is only asserted for the concrete GNU → SAS/C case.

RULES:
- Structural equivalence: same counts, same ordered variable names,
  same ordered non-pattern rule targets
- X → X conversion leaves values and rule headers unchanged
- The parsed model is never mutated by conversion
"""

import copy

import pytest

from makefile_converter.config import GENERATOR_NAME
from makefile_converter.core.converter import (
    convert_file,
    convert_lines,
    convert_makefile,
    strip_comment_leader,
)
from makefile_converter.core.errors import (
    SourceFileError,
    UnknownDialectError,
    UnknownFormatError,
)
from makefile_converter.core.model import SUPPORTED_DIALECTS, Dialect
from makefile_converter.core.settings import ConversionConfig
from makefile_converter.parsers import PARSERS

from conftest import GNU_SAMPLE, SAMPLES, lines_of

CROSS_PAIRS = [
    (source, target)
    for source in SUPPORTED_DIALECTS
    for target in SUPPORTED_DIALECTS
    if source is not target
]


def _parse(dialect, text):
    return PARSERS[dialect]().parse_lines(lines_of(text))


def _structure(makefile):
    return (
        [v.name for v in makefile.variables],
        [r.targets for r in makefile.rules if not r.is_pattern_rule],
        [r.is_pattern_rule for r in makefile.rules],
    )


# =========================================================================
# Structural preservation across all ordered pairs
# =========================================================================

class TestStructuralPreservation:

    @pytest.mark.parametrize("source, target", CROSS_PAIRS)
    def test_reparse_keeps_structure(self, source, target):
        original = _parse(source, SAMPLES[source])
        output = convert_lines(lines_of(SAMPLES[source]), target=target, source=source)
        reparsed = _parse(target, output.content)

        assert len(reparsed.variables) == len(original.variables)
        assert len(reparsed.rules) == len(original.rules)
        assert _structure(reparsed) == _structure(original)

    @pytest.mark.parametrize("source, target", CROSS_PAIRS)
    def test_command_counts_kept(self, source, target):
        original = _parse(source, SAMPLES[source])
        converted = convert_makefile(original, target)
        assert [len(r.commands) for r in converted.rules] == [
            len(r.commands) for r in original.rules
        ]

    @pytest.mark.parametrize("source, target", CROSS_PAIRS)
    def test_round_trip_keeps_structure(self, source, target):
        there = convert_lines(lines_of(SAMPLES[source]), target=target, source=source)
        back = convert_lines(lines_of(there.content), target=source, source=target)
        assert _structure(_parse(source, back.content)) == _structure(_parse(source, SAMPLES[source]))


# =========================================================================
# Same-dialect pass-through
# =========================================================================

class TestIdempotence:

    @pytest.mark.parametrize("dialect", SUPPORTED_DIALECTS)
    def test_same_dialect_keeps_values_and_headers(self, dialect):
        original = _parse(dialect, SAMPLES[dialect])
        output = convert_lines(lines_of(SAMPLES[dialect]), target=dialect, source=dialect)
        reparsed = _parse(dialect, output.content)

        assert [(v.name, v.value) for v in reparsed.variables] == [
            (v.name, v.value) for v in original.variables
        ]
        assert [(r.targets, r.dependencies, r.is_form_variant) for r in reparsed.rules] == [
            (r.targets, r.dependencies, r.is_form_variant) for r in original.rules
        ]
        assert [[c.text for c in r.commands] for r in reparsed.rules] == [
            [c.text for c in r.commands] for r in original.rules
        ]

    def test_assignment_operators_survive(self):
        lines = [
            "CFLAGS = -O2\n",
            "CFLAGS += -g\n",
            "NOW := $(shell date)\n",
            "\n",
            "all:\n",
            "\techo $(CFLAGS)\n",
        ]
        content = convert_lines(
            lines, target=Dialect.GNU_MAKE, source=Dialect.GNU_MAKE
        ).content
        assert "CFLAGS = -O2\nCFLAGS += -g\nNOW := $(shell date)\n" in content

    @pytest.mark.parametrize("dialect", SUPPORTED_DIALECTS)
    def test_second_pass_is_stable(self, dialect):
        first = convert_lines(lines_of(SAMPLES[dialect]), target=dialect, source=dialect)
        second = convert_lines(lines_of(first.content), target=dialect, source=dialect)
        assert _structure(_parse(dialect, second.content)) == _structure(
            _parse(dialect, first.content)
        )


# =========================================================================
# Concrete conversions
# =========================================================================

class TestGnuToSas:
    """The canonical GCC → SAS/C scenario."""

    def test_minimal_scenario(self):
        lines = [
            "CC=gcc\n",
            "CFLAGS=-O2 -Iinclude\n",
            "\n",
            "%.o: %.c\n",
            "\tgcc -c $< -o $@\n",
        ]
        content = convert_lines(lines, target=Dialect.SAS_C).content
        assert "CC = sc\n" in content
        assert "CFLAGS = OPTIMIZE INCLUDEDIR=include\n" in content
        assert "\n.c.o:\n\tsc -c $< -o $@ OBJNAME=$*.o\n" in content

    def test_full_sample(self, gnu_lines):
        output = convert_lines(gnu_lines, target=Dialect.SAS_C, generator_name="test")
        assert output.filename == "smakefile"
        assert output.content == (
            "; Converted to SAS/C SMakefile format from GNU Make\n"
            "; Generated by test\n"
            "; Sample GNU makefile\n"
            "\n"
            "CC = sc\n"
            "CFLAGS = OPTIMIZE INCLUDEDIR=include\n"
            "OBJS = main.o util.o\n"
            "\n"
            "all: prog\n"
            "\t; No commands specified - may need manual conversion\n"
            "\n"
            "prog: $(OBJS)\n"
            "\t$(CC) -o prog $(OBJS)\n"
            "\n"
            ".c.o:\n"
            "\tsc -c $< -o $@ OBJNAME=$*.o\n"
            "\n"
            "clean:\n"
            "\tdelete prog QUIET\n"
            "\n"
        )


class TestOtherPairs:

    def test_sas_to_gnu(self, sas_lines):
        content = convert_lines(sas_lines, target=Dialect.GNU_MAKE).content
        assert "CC = cc\n" in content
        assert "CFLAGS = -O2 -g -Iinclude -DAMIGA\n" in content
        assert "%.o: %.c\n\tcc $(CFLAGS) $*.c OBJNAME=$*.o\n" in content
        assert "\tcc -o program\n" in content
        assert "\trm -f main.o util.o\n" in content

    def test_dice_to_gnu(self, dice_lines):
        content = convert_lines(dice_lines).content
        assert content.startswith("# Converted to GNU Make format from DICE\n")
        assert "CFLAGS = -O2 -g -m68000\n" in content
        assert "\ninstall: prog\n" in content
        assert "::" not in content

    def test_lattice_to_sas(self, lattice_lines):
        content = convert_lines(lattice_lines).content
        assert "CFLAGS = OPTIMIZE DEBUG=L INCLUDEDIR=include DEF=AMIGA\n" in content
        assert "\tslink FROM lib:c.o main.o util.o TO prog\n" in content
        assert "\tLIB lib:lc.lib lib:amiga.lib\n" in content

    def test_only_compiler_and_flags_variables_are_mapped(self):
        lines = ["CC = gcc\n", "LDFLAGS = -O2\n", "MYCC = gcc\n", "$<\n"]
        content = convert_lines(lines, target=Dialect.SAS_C, source=Dialect.GNU_MAKE).content
        assert "LDFLAGS = -O2\n" in content
        assert "MYCC = gcc\n" in content

    def test_variable_names_matched_case_insensitively(self):
        lines = ["cc = gcc\n", "cflags = -O2\n"]
        content = convert_lines(lines, target=Dialect.DICE, source=Dialect.GNU_MAKE).content
        assert "cc = dcc\n" in content
        assert "cflags = -O\n" in content


# =========================================================================
# Engine details
# =========================================================================

class TestConvertMakefile:

    def test_parsed_model_not_mutated(self):
        makefile = _parse(Dialect.GNU_MAKE, GNU_SAMPLE)
        snapshot = copy.deepcopy(makefile)
        convert_makefile(makefile, Dialect.SAS_C)
        assert makefile == snapshot

    def test_comments_lose_source_leader(self, sas_lines):
        makefile = PARSERS[Dialect.SAS_C]().parse_lines(sas_lines)
        converted = convert_makefile(makefile, Dialect.GNU_MAKE)
        assert converted.comments == ["SAS/C smakefile"]

    def test_operator_carried_while_value_is_mapped(self):
        makefile = _parse(Dialect.GNU_MAKE, "CFLAGS = -O2\nCFLAGS += -g\n")
        converted = convert_makefile(makefile, Dialect.SAS_C)
        assert [(v.operator, v.value) for v in converted.variables] == [
            ("=", "OPTIMIZE"),
            ("+=", "DEBUG=L"),
        ]

    def test_immediate_flag_carried(self, dice_lines):
        makefile = PARSERS[Dialect.DICE]().parse_lines(dice_lines)
        converted = convert_makefile(makefile, Dialect.GNU_MAKE)
        assert all(v.immediate for v in converted.variables)

    def test_strip_comment_leader(self):
        assert strip_comment_leader(";; note", ";") == "note"
        assert strip_comment_leader("#", "#") == ""
        assert strip_comment_leader("plain", "#") == "plain"


# =========================================================================
# Pipeline entry points
# =========================================================================

class TestConvertLines:

    def test_undetectable_input_raises(self):
        with pytest.raises(UnknownDialectError):
            convert_lines(["all: prog\n"])

    def test_default_target_policy(self, samples):
        expected = {
            Dialect.GNU_MAKE: "smakefile",
            Dialect.LATTICE: "smakefile",
            Dialect.DICE: "Makefile",
            Dialect.SAS_C: "Makefile",
        }
        for dialect, text in samples.items():
            assert convert_lines(lines_of(text)).filename == expected[dialect]

    def test_default_generator_name(self):
        content = convert_lines(lines_of(GNU_SAMPLE)).content
        assert content.splitlines()[1] == "; Generated by {}".format(GENERATOR_NAME)


class TestConvertFile:

    def test_explicit_file(self, gnu_file):
        output = convert_file(ConversionConfig(input_file=str(gnu_file)))
        assert output.filename == "smakefile"
        assert "CC = sc" in output.content

    def test_explicit_source_skips_detection(self, tmp_path):
        path = tmp_path / "build.mk"
        path.write_text("CC = sc\nall:\n\tsc main.c\n", encoding="latin-1")
        config = ConversionConfig(
            input_file=str(path),
            source_dialect=Dialect.SAS_C,
            target_dialect=Dialect.DICE,
        )
        output = convert_file(config)
        assert "CC = dcc\n" in output.content
        assert "\tdcc main.c\n" in output.content

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceFileError):
            convert_file(ConversionConfig(input_file=str(tmp_path / "missing")))

    def test_unknown_format_file(self, tmp_path):
        path = tmp_path / "Makefile"
        path.write_text("all:\n\techo hi\n", encoding="latin-1")
        with pytest.raises(UnknownDialectError) as exc_info:
            convert_file(ConversionConfig(input_file=str(path)))
        assert "Unable to determine makefile format" in str(exc_info.value)

    def test_discovery_in_cwd(self, gnu_file, monkeypatch):
        monkeypatch.chdir(gnu_file.parent)
        output = convert_file(ConversionConfig())
        assert output.filename == "smakefile"

    def test_unknown_format_error_is_value_error(self):
        assert issubclass(UnknownFormatError, ValueError)
