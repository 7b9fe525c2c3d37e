"""Disc image size and checksum calculation."""

import hashlib
import zlib
from pathlib import Path

import structlog

from ..models.extraction import ImageHashes

log = structlog.stdlib.get_logger()

DEFAULT_CHUNK_SIZE = 1024 * 1024


def compute_image_hashes(path: str | Path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> ImageHashes | None:
    """Calculate size, CRC32, MD5 and SHA-1 of a file in one pass.

    Args:
        path: Path to the disc image
        chunk_size: Number of bytes read per iteration

    Returns:
        ImageHashes with lower-case hex digests, or None if the file
        does not exist or cannot be read
    """
    path = Path(path)
    if not path.is_file():
        log.debug("Disc image not found", path=str(path))
        return None

    crc = 0
    md5 = hashlib.md5()
    sha1 = hashlib.sha1()
    size = 0

    try:
        with open(path, "rb") as f:
            while chunk := f.read(chunk_size):
                crc = zlib.crc32(chunk, crc)
                md5.update(chunk)
                sha1.update(chunk)
                size += len(chunk)
    except OSError as e:
        log.warning("Failed to hash disc image", path=str(path), error=str(e))
        return None

    hashes = ImageHashes(
        size=size,
        crc32=f"{crc & 0xFFFFFFFF:08x}",
        md5=md5.hexdigest(),
        sha1=sha1.hexdigest(),
    )
    log.info("Disc image hashed", path=str(path), size=size, crc32=hashes.crc32)
    return hashes
