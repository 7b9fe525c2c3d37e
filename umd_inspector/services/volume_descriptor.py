"""Primary volume descriptor extraction from _mainInfo.txt.

_mainInfo.txt holds hex dumps of the sectors UmdImageCreator read. The
primary volume descriptor lives in LBA 16; the dump of that sector starts
with a fixed banner, and the rows from offset 0x310 onwards carry the
descriptor's date and application fields:

    ========== LBA[000016, 0x0000010]: Main Channel ==========
    ...
    0310 : ...
    0320 : 20 20 20 20 ...   <- first captured row
    ...
    0370 : ...               <- sixth captured row
"""

from collections.abc import Iterator
from itertools import islice
from pathlib import Path
from typing import TextIO

import structlog

from ..models.extraction import ExtractionStatus, VolumeDescriptorResult
from .errors import LogParseError

log = structlog.stdlib.get_logger()

PVD_SECTOR_BANNER = "========== LBA[000016, 0x0000010]: Main Channel =========="
PVD_ROW_MARKER = "0310"
PVD_ROW_COUNT = 6


class VolumeDescriptorExtractor:
    """Reads the primary volume descriptor rows out of a _mainInfo.txt log."""

    def __init__(
        self,
        banner: str = PVD_SECTOR_BANNER,
        marker: str = PVD_ROW_MARKER,
        row_count: int = PVD_ROW_COUNT,
    ) -> None:
        self.banner = banner
        self.marker = marker
        self.row_count = row_count

    def extract(self, path: str | Path) -> str | None:
        """Get the newline-terminated PVD rows, or None if they can't be read."""
        result = self.read(path)
        return result.text if result.status is ExtractionStatus.FOUND else None

    def read(self, path: str | Path) -> VolumeDescriptorResult:
        """Read the PVD rows, reporting why they are absent when they are.

        Args:
            path: Location of the _mainInfo.txt file

        Returns:
            VolumeDescriptorResult with FOUND and the text, MISSING_FILE, or
            MALFORMED when the markers or rows are not there
        """
        path = Path(path)
        if not path.is_file():
            log.debug("Main info log not found", path=str(path))
            return VolumeDescriptorResult(ExtractionStatus.MISSING_FILE)

        try:
            with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
                text = self._scan(f, path)
        except LogParseError as e:
            log.info("Primary volume descriptor not found", path=str(path), reason=e.message)
            return VolumeDescriptorResult(ExtractionStatus.MALFORMED)
        except OSError as e:
            log.warning("Failed to read main info log", path=str(path), error=str(e))
            return VolumeDescriptorResult(ExtractionStatus.MALFORMED)

        log.debug("Primary volume descriptor extracted", path=str(path))
        return VolumeDescriptorResult(ExtractionStatus.FOUND, text)

    def _scan(self, handle: TextIO, path: Path) -> str:
        lines = _iter_lines(handle)

        for line in lines:
            if line.startswith(self.banner):
                break
        else:
            raise LogParseError("PVD sector banner not found", path=path)

        for line in lines:
            if line.startswith(self.marker):
                break
        else:
            raise LogParseError(f"Row {self.marker} not found after PVD banner", path=path)

        rows = list(islice(lines, self.row_count))
        if len(rows) < self.row_count:
            # Rows past end of file are reported as blank lines
            log.debug("PVD block truncated", path=str(path), rows=len(rows))
            rows.extend([""] * (self.row_count - len(rows)))

        return "".join(f"{row}\n" for row in rows)


def _iter_lines(handle: TextIO) -> Iterator[str]:
    """Yield lines without their line terminators."""
    for line in handle:
        yield line.rstrip("\r\n")


def get_pvd(path: str | Path) -> str | None:
    """Convenience function to extract the PVD block from a _mainInfo.txt file."""
    return VolumeDescriptorExtractor().extract(path)
