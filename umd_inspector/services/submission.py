"""Submission info generation from UmdImageCreator output.

build_fragment() reads everything a dump offers for a base path without
touching any caller state; merge_fragment() folds that fragment into a
caller-owned SubmissionInfo.
"""

from collections.abc import Callable
from pathlib import Path

import structlog

from ..models.extraction import ExtractionStatus
from ..models.media import DiscCategory, MediaType
from ..models.submission import SubmissionFragment, SubmissionInfo
from .artifacts import collect_artifacts
from .aux_info import AuxInfoExtractor
from .checksums import compute_image_hashes
from .completeness import check_all_output_files_exist
from .output_files import OutputFiles
from .volume_descriptor import VolumeDescriptorExtractor

log = structlog.stdlib.get_logger()


def build_fragment(
    base_path: str | Path,
    media_type: MediaType,
    compute_checksums: bool = True,
) -> SubmissionFragment:
    """Extract everything a dump provides for a base path.

    Args:
        base_path: Base path the dumping tool was invoked with
        media_type: Media type of the dump
        compute_checksums: Whether to hash the disc image

    Returns:
        A new SubmissionFragment
    """
    files = OutputFiles.for_base(base_path)
    pvd = None
    hashes = None
    aux = None

    if media_type is MediaType.UMD:
        pvd = VolumeDescriptorExtractor().extract(files.main_info)
        if compute_checksums:
            hashes = compute_image_hashes(files.image)
        aux = AuxInfoExtractor().extract(files.disc)

    fragment = SubmissionFragment(
        media_type=media_type,
        pvd=pvd,
        hashes=hashes,
        aux=aux,
        artifacts=collect_artifacts(base_path),
    )
    log.info(
        "Submission fragment built",
        base_path=str(base_path),
        media_type=media_type.value,
        pvd_found=pvd is not None,
        hashed=hashes is not None,
        aux_status=aux.status.value if aux else None,
        artifacts=list(fragment.artifacts),
    )
    return fragment


def merge_fragment(info: SubmissionInfo, fragment: SubmissionFragment) -> SubmissionInfo:
    """Write a fragment's fields into a submission record.

    Text fields are never left as None for a UMD dump, a missing category
    becomes Games, and a successfully read _disc.txt size replaces the
    measured image size.

    Returns:
        The same SubmissionInfo, for chaining
    """
    if fragment.media_type is MediaType.UMD:
        info.extras.pvd = fragment.pvd or ""

        if fragment.hashes is not None:
            info.size_and_checksums.size = fragment.hashes.size
            info.size_and_checksums.crc32 = fragment.hashes.crc32
            info.size_and_checksums.md5 = fragment.hashes.md5
            info.size_and_checksums.sha1 = fragment.hashes.sha1

        aux = fragment.aux
        if aux is not None and aux.status is ExtractionStatus.FOUND:
            info.common_disc_info.title = aux.title or ""
            info.common_disc_info.category = aux.category or DiscCategory.GAMES
            info.version_and_editions.version = aux.version or ""
            info.size_and_checksums.size = aux.size_bytes

            if aux.layerbreak is not None:
                info.size_and_checksums.layerbreak = int(aux.layerbreak)

    for name, content in fragment.artifacts.items():
        info.artifacts[name] = content

    return info


def populate(
    info: SubmissionInfo,
    base_path: str | Path,
    media_type: MediaType,
    compute_checksums: bool = True,
) -> SubmissionInfo:
    """Build a fragment for a base path and merge it into info in place."""
    fragment = build_fragment(base_path, media_type, compute_checksums=compute_checksums)
    return merge_fragment(info, fragment)


class UmdImageCreatorOutput:
    """Output handling for one UmdImageCreator run of a given media type."""

    def __init__(self, media_type: MediaType, compute_checksums: bool = True) -> None:
        self.media_type = media_type
        self.compute_checksums = compute_checksums

    def check_all_output_files_exist(
        self,
        base_path: str | Path,
        on_failure: Callable[[str], None] | None = None,
    ) -> bool:
        """Return True if the dump left every required file behind."""
        return check_all_output_files_exist(base_path, self.media_type, on_failure)

    def generate_submission_info(
        self,
        info: SubmissionInfo,
        base_path: str | Path,
        drive: str | None = None,  # noqa: ARG002
    ) -> None:
        """Fill info from the dump's output files.

        Args:
            info: Submission record to update in place
            base_path: Base path the dumping tool was invoked with
            drive: Drive the dump was made from (reserved for future use)
        """
        populate(info, base_path, self.media_type, compute_checksums=self.compute_checksums)
