"""Tests for disc image hashing and artifact capture."""

import base64
import hashlib
import zlib
from pathlib import Path

from hypothesis import given, settings, HealthCheck, strategies as st

from umd_inspector.models import ImageHashes
from umd_inspector.services.artifacts import collect_artifacts, encode_artifact
from umd_inspector.services.checksums import compute_image_hashes


class TestImageHashes:
    """Tests for compute_image_hashes."""

    def test_known_content(self, tmp_path: Path) -> None:
        data = b"PSP GAME" * 1000
        image = tmp_path / "game.iso"
        image.write_bytes(data)

        hashes = compute_image_hashes(image)

        assert hashes == ImageHashes(
            size=len(data),
            crc32=f"{zlib.crc32(data):08x}",
            md5=hashlib.md5(data).hexdigest(),
            sha1=hashlib.sha1(data).hexdigest(),
        )

    def test_empty_image(self, tmp_path: Path) -> None:
        image = tmp_path / "game.iso"
        image.write_bytes(b"")

        hashes = compute_image_hashes(image)

        assert hashes is not None
        assert hashes.size == 0
        assert hashes.crc32 == "00000000"

    def test_missing_image(self, tmp_path: Path) -> None:
        assert compute_image_hashes(tmp_path / "absent.iso") is None

    @given(data=st.binary(max_size=5000), chunk_size=st.integers(min_value=1, max_value=1024))
    @settings(max_examples=30, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_chunk_size_does_not_change_result(self, tmp_path: Path, data: bytes, chunk_size: int) -> None:
        image = tmp_path / "chunked.iso"
        image.write_bytes(data)

        hashes = compute_image_hashes(image, chunk_size=chunk_size)

        assert hashes is not None
        assert hashes.size == len(data)
        assert hashes.crc32 == f"{zlib.crc32(data):08x}"
        assert hashes.sha1 == hashlib.sha1(data).hexdigest()


class TestArtifacts:
    """Tests for Base64 artifact capture."""

    def test_encode_artifact(self, tmp_path: Path) -> None:
        path = tmp_path / "game_disc.txt"
        path.write_bytes(b"TITLE: Foo\r\nFileSize: 1\r\n")

        encoded = encode_artifact(path)

        assert base64.b64decode(encoded) == b"TITLE: Foo\r\nFileSize: 1\r\n"

    def test_only_main_info_present(self, tmp_path: Path) -> None:
        base = tmp_path / "game"
        Path(f"{base}_mainInfo.txt").write_text("sectors", encoding="utf-8")

        artifacts = collect_artifacts(base)

        assert list(artifacts) == ["mainInfo"]
        assert base64.b64decode(artifacts["mainInfo"]) == b"sectors"

    def test_all_present_in_fixed_order(self, tmp_path: Path) -> None:
        base = tmp_path / "game"
        for suffix in ["_volDesc.txt", "_mainInfo.txt", "_mainError.txt", "_disc.txt"]:
            Path(f"{base}{suffix}").write_text(suffix, encoding="utf-8")

        artifacts = collect_artifacts(base)

        assert list(artifacts) == ["disc", "mainError", "mainInfo", "volDesc"]
        assert base64.b64decode(artifacts["volDesc"]) == b"_volDesc.txt"

    def test_image_is_not_an_artifact(self, tmp_path: Path) -> None:
        base = tmp_path / "game"
        Path(f"{base}.iso").write_bytes(b"\x00" * 16)
        assert collect_artifacts(base) == {}

    def test_directory_with_log_name_is_skipped(self, tmp_path: Path) -> None:
        base = tmp_path / "game"
        Path(f"{base}_disc.txt").mkdir()
        assert collect_artifacts(base) == {}
