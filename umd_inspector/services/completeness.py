"""Verification that a dump produced every expected output file."""

from collections.abc import Callable
from pathlib import Path

import structlog

from ..models.extraction import CompletenessResult
from ..models.media import MediaType
from .output_files import OutputFiles

log = structlog.stdlib.get_logger()


class CompletenessChecker:
    """Checks UmdImageCreator output for missing files."""

    def check(self, base_path: str | Path, media_type: MediaType) -> CompletenessResult:
        """Check which required output files are missing.

        Only UMD dumps have mandatory output; any other media type is
        reported complete without touching the file system.

        Args:
            base_path: Base path the dumping tool was invoked with
            media_type: Media type of the dump

        Returns:
            CompletenessResult with missing filenames in check order
        """
        if media_type is not MediaType.UMD:
            log.debug("No required output for media type", media_type=media_type.value)
            return CompletenessResult(ok=True)

        files = OutputFiles.for_base(base_path)
        missing = tuple(str(path) for path in files.required_logs() if not path.is_file())

        if missing:
            log.warning("Dump output incomplete", base_path=str(base_path), missing=list(missing))
            return CompletenessResult(ok=False, missing=missing)

        log.info("Dump output complete", base_path=str(base_path))
        return CompletenessResult(ok=True)


def check_all_output_files_exist(
    base_path: str | Path,
    media_type: MediaType,
    on_failure: Callable[[str], None] | None = None,
) -> bool:
    """Return True if every required output file exists.

    On failure, on_failure is called once with the missing filenames
    joined by ';'.
    """
    result = CompletenessChecker().check(base_path, media_type)
    if not result.ok and on_failure is not None:
        on_failure(result.message)
    return result.ok
