"""Result models produced by the log scanners and the completeness check."""

from dataclasses import dataclass
from enum import Enum

from .media import DiscCategory


class ExtractionStatus(Enum):
    """Outcome of reading a single log file."""
    FOUND = "found"
    MISSING_FILE = "missing_file"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class VolumeDescriptorResult:
    """Primary volume descriptor block read from a _mainInfo.txt file."""
    status: ExtractionStatus
    text: str | None = None


@dataclass(frozen=True)
class AuxInfo:
    """Auxiliary disc information read from a _disc.txt file."""
    status: ExtractionStatus
    title: str | None = None
    category: DiscCategory | None = None
    version: str | None = None
    layerbreak: int | None = None  # L0 length in sectors, None for single layer
    size_bytes: int = -1  # -1 = unknown

    @property
    def found(self) -> bool:
        return self.status is ExtractionStatus.FOUND


@dataclass(frozen=True)
class CompletenessResult:
    """Result of checking that all expected output files exist."""
    ok: bool
    missing: tuple[str, ...] = ()

    @property
    def message(self) -> str:
        """Missing filenames joined with ';'."""
        return ";".join(self.missing)


@dataclass(frozen=True)
class ImageHashes:
    """Size and checksums of a disc image."""
    size: int
    crc32: str
    md5: str
    sha1: str
