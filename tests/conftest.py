"""Shared test fixtures for the makefile_converter test suite.

WHY: Most test modules need the same small makefiles, one per dialect,
with known variable, rule and command counts. Centralizing them here
keeps every module's expectations consistent.

HOW: Module-level constants hold the raw text of each sample; fixtures
return them as lists of lines, write them to tmp_path, or expose the
whole set keyed by Dialect for cross-pair tests.

RULES:
- Each sample is detected as its own dialect by the signature scan
- Counts documented next to each sample are relied on by several modules
- Samples use only constructs the parsers support
"""

from typing import Dict, List

import pytest

from makefile_converter.core.model import Dialect


# ---------------------------------------------------------------------------
# Sample makefiles
# ---------------------------------------------------------------------------

# 1 comment, 3 variables, 4 rules (all, prog, %.o pattern, clean)
GNU_SAMPLE = """\
# Sample GNU makefile
CC = gcc
CFLAGS = -O2 -Iinclude
OBJS = main.o util.o

all: prog

prog: $(OBJS)
\t$(CC) -o prog $(OBJS)

%.o: %.c
\tgcc -c $< -o $@

clean:
\trm -f *.o prog
"""

# 1 comment, 2 variables, 3 rules (prog, .c.o pattern, clean)
SAS_SAMPLE = """\
; SAS/C smakefile
CC = sc
CFLAGS = OPTIMIZE DEBUG=L INCLUDEDIR=include: DEF=AMIGA NOSTANDARDIO

prog: main.o util.o
\tslink FROM lib:c.o main.o util.o TO prog LIB lib:sc.lib

.c.o:
\tsc $(CFLAGS) $*.c OBJNAME=$*.o

clean:
\tdelete main.o util.o QUIET
"""

# 1 comment, 3 variables, 3 rules (prog, %(left) pattern, install ::)
DICE_SAMPLE = """\
# DICE dmakefile
CC = dcc
CFLAGS = -O -d1 -ms
OBJS = main.o util.o

prog : $(OBJS)
\tdcc $(CFLAGS) %(right) -o %(left)

%(left) : %(right)
\tdcc $(CFLAGS) -c %(right) -o %(left)

install :: prog
\tcopy prog c:
"""

# 1 comment, 2 variables, 2 rules; the prog rule has 3 commands
# (the blink call plus the two WITH option lines)
LATTICE_SAMPLE = """\
; Lattice lmkfile
CC = lc
CFLAGS = -O -d2 -Iinclude \\
    -DAMIGA

prog: main.o util.o
    blink FROM lib:c.o main.o util.o TO prog
WITH
    LIB lib:lc.lib lib:amiga.lib
    NODEBUG

main.o: main.c
    lc $(CFLAGS) main.c
"""

SAMPLES: Dict[Dialect, str] = {
    Dialect.GNU_MAKE: GNU_SAMPLE,
    Dialect.SAS_C: SAS_SAMPLE,
    Dialect.DICE: DICE_SAMPLE,
    Dialect.LATTICE: LATTICE_SAMPLE,
}


def lines_of(text: str) -> List[str]:
    """Split sample text into physical lines, newlines kept."""
    return text.splitlines(keepends=True)


@pytest.fixture
def gnu_lines():
    return lines_of(GNU_SAMPLE)


@pytest.fixture
def sas_lines():
    return lines_of(SAS_SAMPLE)


@pytest.fixture
def dice_lines():
    return lines_of(DICE_SAMPLE)


@pytest.fixture
def lattice_lines():
    return lines_of(LATTICE_SAMPLE)


@pytest.fixture
def samples():
    """All four samples keyed by Dialect."""
    return dict(SAMPLES)


@pytest.fixture
def gnu_file(tmp_path):
    """The GNU sample written as tmp_path/Makefile."""
    path = tmp_path / "Makefile"
    path.write_text(GNU_SAMPLE, encoding="latin-1")
    return path


@pytest.fixture
def sas_file(tmp_path):
    """The SAS/C sample written as tmp_path/smakefile."""
    path = tmp_path / "smakefile"
    path.write_text(SAS_SAMPLE, encoding="latin-1")
    return path
