"""Configuration data models."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppConfig:
    """Application configuration settings."""
    log_level: str
    media_type: str
    compute_checksums: bool = True
    json_indent: int = 2
    log_dir: Path | None = None  # None = console only
