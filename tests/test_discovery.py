"""Tests for source makefile auto-discovery."""

import pytest

from makefile_converter.core.discovery import find_candidates, find_makefile
from makefile_converter.core.errors import AmbiguousMakefileError, NoMakefileFoundError


class TestFindMakefile:

    def test_single_candidate(self, tmp_path):
        (tmp_path / "smakefile").write_text("CC = sc\n")
        assert find_makefile(tmp_path) == tmp_path / "smakefile"

    def test_none_found(self, tmp_path):
        (tmp_path / "README").write_text("hi\n")
        with pytest.raises(NoMakefileFoundError):
            find_makefile(tmp_path)

    def test_several_found_lists_all(self, tmp_path):
        (tmp_path / "dmakefile").write_text("")
        (tmp_path / "lmkfile").write_text("")
        with pytest.raises(AmbiguousMakefileError) as exc_info:
            find_makefile(tmp_path)
        assert exc_info.value.candidates == ["dmakefile", "lmkfile"]
        assert "dmakefile, lmkfile" in str(exc_info.value)

    def test_directories_are_not_candidates(self, tmp_path):
        (tmp_path / "makefile").mkdir()
        with pytest.raises(NoMakefileFoundError):
            find_makefile(tmp_path)

    def test_defaults_to_cwd(self, tmp_path, monkeypatch):
        (tmp_path / "GNUmakefile").write_text("")
        monkeypatch.chdir(tmp_path)
        assert find_makefile().name == "GNUmakefile"

    def test_unconventional_names_ignored(self, tmp_path):
        (tmp_path / "build.mk").write_text("")
        (tmp_path / "LMKFILE").write_text("")
        assert [p.name for p in find_candidates(tmp_path)] == ["LMKFILE"]
