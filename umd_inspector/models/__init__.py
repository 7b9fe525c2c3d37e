"""Data models for the UMD dump inspector."""

from .config import AppConfig
from .extraction import (
    AuxInfo,
    CompletenessResult,
    ExtractionStatus,
    ImageHashes,
    VolumeDescriptorResult,
)
from .media import DiscCategory, MediaType
from .submission import (
    CommonDiscInfo,
    Extras,
    SizeAndChecksums,
    SubmissionFragment,
    SubmissionInfo,
    VersionAndEditions,
)

__all__ = [
    "AppConfig",
    "AuxInfo",
    "CommonDiscInfo",
    "CompletenessResult",
    "DiscCategory",
    "ExtractionStatus",
    "Extras",
    "ImageHashes",
    "MediaType",
    "SizeAndChecksums",
    "SubmissionFragment",
    "SubmissionInfo",
    "VersionAndEditions",
    "VolumeDescriptorResult",
]
