"""Media type and disc category enumerations."""

from enum import Enum


class MediaType(Enum):
    """Physical media types a dump can be made from."""
    NONE = "none"
    CD_ROM = "cd-rom"
    DVD = "dvd"
    BLU_RAY = "blu-ray"
    FLOPPY = "floppy"
    UMD = "umd"

    @classmethod
    def parse(cls, value: str) -> "MediaType":
        """Parse a media type name, ignoring case and punctuation.

        Accepts the enum value ("cd-rom"), the member name ("CD_ROM") and
        the compact spelling ("cdrom").

        Raises:
            ValueError: If the name does not match any media type
        """
        normalized = value.strip().lower().replace("_", "").replace("-", "").replace(" ", "")
        for member in cls:
            if member.value.replace("-", "") == normalized:
                return member
        raise ValueError(f"Unknown media type: {value!r}")


class DiscCategory(Enum):
    """Disc categories used in dump submissions."""
    GAMES = "Games"
    DEMOS = "Demos"
    VIDEO = "Video"
    AUDIO = "Audio"
    MULTIMEDIA = "Multimedia"
    APPLICATIONS = "Applications"
    COVERDISCS = "Coverdiscs"
    EDUCATIONAL = "Educational"
    BONUS_DISCS = "Bonus Discs"
    PREPRODUCTION = "Preproduction"
    ADD_ONS = "Add-Ons"
