"""File naming convention for UmdImageCreator output.

The tool is invoked with a base path and writes its logs and the disc image
next to it using fixed suffixes:

{base}_disc.txt       auxiliary disc info (title, version, layer sizes)
{base}_mainError.txt  read errors
{base}_mainInfo.txt   sector dumps, including the primary volume descriptor
{base}_volDesc.txt    parsed volume descriptors
{base}.iso            the disc image
"""

from dataclasses import dataclass
from pathlib import Path

DISC_SUFFIX = "_disc.txt"
MAIN_ERROR_SUFFIX = "_mainError.txt"
MAIN_INFO_SUFFIX = "_mainInfo.txt"
VOL_DESC_SUFFIX = "_volDesc.txt"
IMAGE_SUFFIX = ".iso"

# Artifact name -> log suffix, in the order files are checked and attached
ARTIFACT_SUFFIXES: dict[str, str] = {
    "disc": DISC_SUFFIX,
    "mainError": MAIN_ERROR_SUFFIX,
    "mainInfo": MAIN_INFO_SUFFIX,
    "volDesc": VOL_DESC_SUFFIX,
}


@dataclass(frozen=True)
class OutputFiles:
    """Paths of every file the tool writes for one base path."""
    base_path: str

    @classmethod
    def for_base(cls, base_path: str | Path) -> "OutputFiles":
        return cls(str(base_path))

    def _with_suffix(self, suffix: str) -> Path:
        # Suffixes are appended, not substituted: "game.v1" -> "game.v1_disc.txt"
        return Path(f"{self.base_path}{suffix}")

    @property
    def disc(self) -> Path:
        return self._with_suffix(DISC_SUFFIX)

    @property
    def main_error(self) -> Path:
        return self._with_suffix(MAIN_ERROR_SUFFIX)

    @property
    def main_info(self) -> Path:
        return self._with_suffix(MAIN_INFO_SUFFIX)

    @property
    def vol_desc(self) -> Path:
        return self._with_suffix(VOL_DESC_SUFFIX)

    @property
    def image(self) -> Path:
        return self._with_suffix(IMAGE_SUFFIX)

    def required_logs(self) -> list[Path]:
        """Log files a complete UMD dump must contain, in check order."""
        return [self.disc, self.main_error, self.main_info, self.vol_desc]

    def artifact_paths(self) -> dict[str, Path]:
        """Artifact name -> log path, in attachment order."""
        return {name: self._with_suffix(suffix) for name, suffix in ARTIFACT_SUFFIXES.items()}
