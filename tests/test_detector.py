"""Unit tests for the heuristic dialect detector.

WHY: A wrong detection sends the file through the wrong parser, and the
whole conversion is garbage. Precedence between overlapping signatures
is the subtle part.

HOW: Tests feed in-memory lines to detect_dialect_from_lines() and
files in tmp_path to detect_dialect().

RULES:
- Precedence: DICE > GNU Make > SAS/C > Lattice
- Comment and blank lines are neither scanned nor counted
"""

from makefile_converter.core.detector import detect_dialect, detect_dialect_from_lines
from makefile_converter.core.model import Dialect

from conftest import SAMPLES, lines_of


# =========================================================================
# Signature matching
# =========================================================================

class TestSignatures:
    """Each sample is recognized as its own dialect."""

    def test_samples_detect_as_their_own_dialect(self):
        for dialect, text in SAMPLES.items():
            assert detect_dialect_from_lines(lines_of(text)) is dialect

    def test_gnu_automatic_variables(self):
        assert detect_dialect_from_lines(["prog: main.o\n", "\tcc -o $@ $^\n"]) is Dialect.GNU_MAKE

    def test_gnu_compiler_assignment_without_spaces(self):
        assert detect_dialect_from_lines(["CC=gcc"]) is Dialect.GNU_MAKE

    def test_sas_objname(self):
        assert detect_dialect_from_lines(["\tsc main.c OBJNAME=main.o"]) is Dialect.SAS_C

    def test_lattice_with_block(self):
        assert detect_dialect_from_lines(["prog: a.o", "WITH"]) is Dialect.LATTICE

    def test_lattice_compiler_needs_trailing_space(self):
        """'lc' at end of line is not the 'lc ' signature."""
        assert detect_dialect_from_lines(["CC = lc"]) is Dialect.UNKNOWN

    def test_no_signature_is_unknown(self):
        assert detect_dialect_from_lines(["all: prog", "\techo done"]) is Dialect.UNKNOWN

    def test_empty_input_is_unknown(self):
        assert detect_dialect_from_lines([]) is Dialect.UNKNOWN


# =========================================================================
# Precedence
# =========================================================================

class TestPrecedence:
    """Several flags can be set at once; the fixed order decides."""

    def test_dice_beats_gnu(self):
        lines = ["%.o: %.c", "install :: prog"]
        assert detect_dialect_from_lines(lines) is Dialect.DICE

    def test_gnu_beats_sas(self):
        lines = [".c.o:", "\tgcc -c $< -o $@"]
        assert detect_dialect_from_lines(lines) is Dialect.GNU_MAKE

    def test_sas_beats_lattice(self):
        lines = ["prog: main.o", "\tblink FROM main.o", ".c.o:"]
        assert detect_dialect_from_lines(lines) is Dialect.SAS_C

    def test_order_in_file_does_not_matter(self):
        forward = ["\tblink FROM main.o", "\tslink FROM main.o"]
        assert detect_dialect_from_lines(forward) is Dialect.SAS_C
        assert detect_dialect_from_lines(list(reversed(forward))) is Dialect.SAS_C


# =========================================================================
# Line limit and comments
# =========================================================================

class TestLineLimit:
    """Only the first N significant lines are scanned."""

    def test_signature_after_limit_is_ignored(self):
        lines = ["X{} = {}".format(i, i) for i in range(50)] + ["%.o: %.c"]
        assert detect_dialect_from_lines(lines) is Dialect.UNKNOWN

    def test_signature_within_limit_is_found(self):
        lines = ["X{} = {}".format(i, i) for i in range(49)] + ["%.o: %.c"]
        assert detect_dialect_from_lines(lines) is Dialect.GNU_MAKE

    def test_comments_and_blanks_do_not_count(self):
        lines = ["# comment", ""] * 60 + ["%.o: %.c"]
        assert detect_dialect_from_lines(lines) is Dialect.GNU_MAKE

    def test_signature_inside_comment_is_ignored(self):
        lines = ["; this smakefile uses slink", "# and $@"]
        assert detect_dialect_from_lines(lines) is Dialect.UNKNOWN

    def test_custom_limit(self):
        lines = ["A = 1", "%.o: %.c"]
        assert detect_dialect_from_lines(lines, line_limit=1) is Dialect.UNKNOWN


# =========================================================================
# Files
# =========================================================================

class TestDetectFile:
    """detect_dialect() on real files."""

    def test_detects_file(self, sas_file):
        assert detect_dialect(sas_file) is Dialect.SAS_C

    def test_missing_file_is_unknown(self, tmp_path):
        assert detect_dialect(tmp_path / "nope") is Dialect.UNKNOWN

    def test_undecodable_bytes_are_tolerated(self, tmp_path):
        path = tmp_path / "Makefile"
        path.write_bytes(b"# \xff\xfe\n%.o: %.c\n")
        assert detect_dialect(path, encoding="utf-8") is Dialect.GNU_MAKE
