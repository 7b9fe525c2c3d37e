"""Lookup of UMD type codes reported by UmdImageCreator."""

import structlog

from ..models.media import DiscCategory

log = structlog.stdlib.get_logger()


# pspUmdTypes codes as printed in _disc.txt. The tool prints either the
# symbolic name or the raw UMD_DATA type flag depending on version.
UMD_TYPE_TO_CATEGORY: dict[str, DiscCategory] = {
    "GAME": DiscCategory.GAMES,
    "VIDEO": DiscCategory.VIDEO,
    "AUDIO": DiscCategory.AUDIO,
    "0x10": DiscCategory.GAMES,
    "0x20": DiscCategory.VIDEO,
    "0x40": DiscCategory.AUDIO,
}


def lookup_category(code: str) -> DiscCategory | None:
    """Map a pspUmdTypes code to a disc category.

    Args:
        code: The code token from the pspUmdTypes line

    Returns:
        The matching category, or None when the code is unknown
    """
    category = UMD_TYPE_TO_CATEGORY.get(code)
    if category is None:
        # Hex flags may be printed with upper-case digits
        normalized = code.lower() if code.lower().startswith("0x") else code.upper()
        category = UMD_TYPE_TO_CATEGORY.get(normalized)
    if category is None:
        log.warning("Unknown UMD type code", code=code)
    return category


def get_known_codes() -> list[str]:
    """Get all codes that map to a category."""
    return list(UMD_TYPE_TO_CATEGORY.keys())
