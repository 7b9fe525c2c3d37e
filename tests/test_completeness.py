"""Tests for the output file completeness check."""

import tempfile
from pathlib import Path

import pytest
from hypothesis import given, strategies as st

from umd_inspector.models import CompletenessResult, MediaType
from umd_inspector.services.completeness import CompletenessChecker, check_all_output_files_exist
from umd_inspector.services.output_files import OutputFiles

ALL_SUFFIXES = ["_disc.txt", "_mainError.txt", "_mainInfo.txt", "_volDesc.txt"]


def write_outputs(base: Path, suffixes: list[str]) -> None:
    """Create empty output files for the given suffixes."""
    for suffix in suffixes:
        Path(f"{base}{suffix}").write_text("", encoding="utf-8")


class TestNonUmdMediaTypes:
    """Media types without mandatory output."""

    @given(
        media_type=st.sampled_from([m for m in MediaType if m is not MediaType.UMD]),
        present=st.lists(st.sampled_from(ALL_SUFFIXES), unique=True),
    )
    def test_other_media_types_always_complete(self, media_type: MediaType, present: list[str]) -> None:
        """Any non-UMD media type is complete whatever is on disk."""
        with tempfile.TemporaryDirectory() as temp_dir:
            base = Path(temp_dir) / "dump"
            write_outputs(base, present)

            calls: list[str] = []
            assert check_all_output_files_exist(str(base), media_type, calls.append)
            assert calls == []

    def test_other_media_type_on_missing_directory(self, tmp_path: Path) -> None:
        result = CompletenessChecker().check(tmp_path / "nowhere" / "dump", MediaType.DVD)
        assert result == CompletenessResult(ok=True)


class TestUmdCompleteness:
    """Completeness of UMD dumps."""

    def test_all_files_present(self, tmp_path: Path) -> None:
        base = tmp_path / "game"
        write_outputs(base, ALL_SUFFIXES)

        calls: list[str] = []
        assert check_all_output_files_exist(str(base), MediaType.UMD, calls.append)
        assert calls == []

    def test_disc_and_main_info_missing(self, tmp_path: Path) -> None:
        """Diagnostic lists missing files in check order without a leading separator."""
        base = str(tmp_path / "game")
        write_outputs(Path(base), ["_mainError.txt", "_volDesc.txt"])

        calls: list[str] = []
        assert not check_all_output_files_exist(base, MediaType.UMD, calls.append)
        assert calls == [f"{base}_disc.txt;{base}_mainInfo.txt"]

    def test_nothing_present(self, tmp_path: Path) -> None:
        base = str(tmp_path / "game")
        result = CompletenessChecker().check(base, MediaType.UMD)

        assert not result.ok
        assert result.missing == tuple(f"{base}{suffix}" for suffix in ALL_SUFFIXES)
        assert not result.message.startswith(";")

    def test_directory_does_not_count_as_output(self, tmp_path: Path) -> None:
        base = tmp_path / "game"
        write_outputs(base, ["_disc.txt", "_mainError.txt", "_mainInfo.txt"])
        Path(f"{base}_volDesc.txt").mkdir()

        result = CompletenessChecker().check(base, MediaType.UMD)

        assert not result.ok
        assert result.missing == (f"{base}_volDesc.txt",)

    def test_failure_without_callback(self, tmp_path: Path) -> None:
        assert not check_all_output_files_exist(tmp_path / "game", MediaType.UMD)

    def test_image_is_not_required(self, tmp_path: Path) -> None:
        """The .iso is hashed elsewhere and is not part of the check."""
        base = tmp_path / "game"
        write_outputs(base, ALL_SUFFIXES)
        assert not OutputFiles.for_base(base).image.exists()
        assert CompletenessChecker().check(base, MediaType.UMD).ok

    @given(present=st.lists(st.sampled_from(ALL_SUFFIXES), unique=True))
    def test_missing_list_matches_filesystem(self, present: list[str]) -> None:
        """Exactly the absent files are reported, in check order, with one callback."""
        with tempfile.TemporaryDirectory() as temp_dir:
            base = str(Path(temp_dir) / "dump")
            write_outputs(Path(base), present)

            calls: list[str] = []
            ok = check_all_output_files_exist(base, MediaType.UMD, calls.append)

            expected_missing = [f"{base}{s}" for s in ALL_SUFFIXES if s not in present]
            assert ok == (not expected_missing)
            if expected_missing:
                assert calls == [";".join(expected_missing)]
            else:
                assert calls == []


@pytest.mark.parametrize("suffix", ALL_SUFFIXES)
def test_single_missing_file(tmp_path: Path, suffix: str) -> None:
    base = str(tmp_path / "game")
    write_outputs(Path(base), [s for s in ALL_SUFFIXES if s != suffix])

    result = CompletenessChecker().check(base, MediaType.UMD)
    assert result.missing == (f"{base}{suffix}",)
    assert result.message == f"{base}{suffix}"
