"""Base64 capture of the dumping tool's log files."""

import base64
from pathlib import Path

import structlog

from .output_files import OutputFiles

log = structlog.stdlib.get_logger()


def encode_artifact(path: str | Path) -> str:
    """Read a file and return its bytes Base64-encoded as ASCII text.

    Raises:
        OSError: If the file cannot be read
    """
    data = Path(path).read_bytes()
    return base64.b64encode(data).decode("ascii")


def collect_artifacts(base_path: str | Path) -> dict[str, str]:
    """Encode every log file that exists for a base path.

    Args:
        base_path: Base path the dumping tool was invoked with

    Returns:
        Artifact name -> Base64 content, for existing files only
    """
    artifacts: dict[str, str] = {}
    for name, path in OutputFiles.for_base(base_path).artifact_paths().items():
        if not path.is_file():
            continue
        try:
            artifacts[name] = encode_artifact(path)
        except OSError as e:
            log.warning("Failed to read artifact", artifact=name, path=str(path), error=str(e))
            continue
        log.debug("Artifact attached", artifact=name, path=str(path))

    log.info("Artifacts collected", base_path=str(base_path), artifacts=list(artifacts))
    return artifacts
