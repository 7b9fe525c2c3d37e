"""Submission info record populated from a UMD dump."""

from dataclasses import dataclass, field
from typing import Any

from .extraction import AuxInfo, ImageHashes
from .media import DiscCategory, MediaType


@dataclass
class CommonDiscInfo:
    """General information about the disc."""
    title: str | None = None
    category: DiscCategory | None = None


@dataclass
class VersionAndEditions:
    """Version information about the disc."""
    version: str | None = None


@dataclass
class SizeAndChecksums:
    """Image size, checksums and layer layout."""
    size: int | None = None
    crc32: str | None = None
    md5: str | None = None
    sha1: str | None = None
    layerbreak: int | None = None


@dataclass
class Extras:
    """Extra dump information."""
    pvd: str | None = None


@dataclass
class SubmissionInfo:
    """Caller-owned submission record.

    Only the fields filled from UmdImageCreator output are modelled here.
    """
    common_disc_info: CommonDiscInfo = field(default_factory=CommonDiscInfo)
    version_and_editions: VersionAndEditions = field(default_factory=VersionAndEditions)
    size_and_checksums: SizeAndChecksums = field(default_factory=SizeAndChecksums)
    extras: Extras = field(default_factory=Extras)
    artifacts: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serialisable dictionary."""
        category = self.common_disc_info.category
        return {
            "common_disc_info": {
                "title": self.common_disc_info.title,
                "category": category.value if category else None,
            },
            "version_and_editions": {
                "version": self.version_and_editions.version,
            },
            "size_and_checksums": {
                "size": self.size_and_checksums.size,
                "crc32": self.size_and_checksums.crc32,
                "md5": self.size_and_checksums.md5,
                "sha1": self.size_and_checksums.sha1,
                "layerbreak": self.size_and_checksums.layerbreak,
            },
            "extras": {
                "pvd": self.extras.pvd,
            },
            "artifacts": dict(self.artifacts),
        }


@dataclass(frozen=True)
class SubmissionFragment:
    """Everything one extraction pass found for a base path."""
    media_type: MediaType
    pvd: str | None = None
    hashes: ImageHashes | None = None
    aux: AuxInfo | None = None
    artifacts: dict[str, str] = field(default_factory=dict)
