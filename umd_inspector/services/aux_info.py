"""Auxiliary disc info extraction from _disc.txt.

Relevant lines in _disc.txt look like:

    TITLE: Some Game
    DISC_VERSION 1.00
    pspUmdTypes GAME
    L0 length 100000
    FileSize: 204800000

Title and version keep their first occurrence. The tool repeats the type,
L0 length and file size lines as it refines them, so those keep their last
occurrence.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

import structlog

from ..models.extraction import AuxInfo, ExtractionStatus
from ..models.media import DiscCategory
from .categories import lookup_category
from .errors import LogParseError

log = structlog.stdlib.get_logger()

TITLE_PREFIX = "TITLE"
TITLE_VALUE_OFFSET = len("TITLE: ")
VERSION_PREFIX = "DISC_VERSION"
UMD_TYPE_PREFIX = "pspUmdTypes"
L0_LENGTH_PREFIX = "L0 length"
FILE_SIZE_PREFIX = "FileSize:"

SECTOR_SIZE = 2048


@dataclass
class _ScanState:
    """Fields captured so far during a scan."""
    title: str | None = None
    category: DiscCategory | None = None
    version: str | None = None
    layerbreak: str | None = None
    size_bytes: int = -1


class AuxInfoExtractor:
    """Reads title, category, version, layer break and size from a _disc.txt log."""

    def extract(self, path: str | Path) -> AuxInfo:
        """Extract auxiliary info in a single pass over the file.

        Extraction is all-or-nothing: if any line fails to parse, or no
        L0 length line is present, nothing is reported.

        Args:
            path: Location of the _disc.txt file

        Returns:
            AuxInfo with status FOUND and the captured fields, or an empty
            AuxInfo with status MISSING_FILE or MALFORMED
        """
        path = Path(path)
        if not path.is_file():
            log.debug("Disc log not found", path=str(path))
            return AuxInfo(ExtractionStatus.MISSING_FILE)

        try:
            with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
                state = self._scan(f, path)
            layerbreak = self._resolve_layerbreak(state, path)
        except LogParseError as e:
            log.info(
                "Auxiliary disc info not found",
                path=str(path),
                reason=e.message,
                line_number=e.line_number,
            )
            return AuxInfo(ExtractionStatus.MALFORMED)
        except OSError as e:
            log.warning("Failed to read disc log", path=str(path), error=str(e))
            return AuxInfo(ExtractionStatus.MALFORMED)

        info = AuxInfo(
            status=ExtractionStatus.FOUND,
            title=state.title,
            category=state.category,
            version=state.version,
            layerbreak=layerbreak,
            size_bytes=state.size_bytes,
        )
        log.debug(
            "Auxiliary disc info extracted",
            path=str(path),
            title=info.title,
            category=info.category.value if info.category else None,
            version=info.version,
            layerbreak=info.layerbreak,
            size_bytes=info.size_bytes,
        )
        return info

    def _scan(self, handle: TextIO, path: Path) -> _ScanState:
        state = _ScanState()

        for line_number, raw_line in enumerate(handle, 1):
            line = raw_line.strip()

            if line.startswith(TITLE_PREFIX) and state.title is None:
                if len(line) < TITLE_VALUE_OFFSET:
                    raise LogParseError("Truncated TITLE line", path, line_number, line)
                state.title = line[TITLE_VALUE_OFFSET:]
            elif line.startswith(VERSION_PREFIX) and state.version is None:
                state.version = _token(line, 1, path, line_number)
            elif line.startswith(UMD_TYPE_PREFIX):
                state.category = lookup_category(_token(line, 1, path, line_number))
            elif line.startswith(L0_LENGTH_PREFIX):
                state.layerbreak = _token(line, 2, path, line_number)
            elif line.startswith(FILE_SIZE_PREFIX):
                size = _token(line, 1, path, line_number)
                try:
                    state.size_bytes = int(size)
                except ValueError:
                    raise LogParseError("FileSize is not an integer", path, line_number, line) from None

        return state

    @staticmethod
    def _resolve_layerbreak(state: _ScanState, path: Path) -> int | None:
        """Parse the L0 length and drop it when layer 0 spans the whole disc."""
        if state.layerbreak is None:
            raise LogParseError("No L0 length line", path)
        try:
            layerbreak = int(state.layerbreak)
        except ValueError:
            raise LogParseError("L0 length is not an integer", path, line=state.layerbreak) from None

        if layerbreak * SECTOR_SIZE == state.size_bytes:
            return None
        return layerbreak


def _token(line: str, index: int, path: Path, line_number: int) -> str:
    """Get a whitespace-delimited token from a line."""
    tokens = line.split()
    if len(tokens) <= index:
        raise LogParseError(f"Expected at least {index + 1} fields", path, line_number, line)
    return tokens[index]


def get_umd_aux_info(path: str | Path) -> AuxInfo:
    """Convenience function to extract auxiliary info from a _disc.txt file."""
    return AuxInfoExtractor().extract(path)
