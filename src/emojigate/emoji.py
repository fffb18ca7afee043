"""Emoji-prefix predicate over Unicode code point ranges."""

from __future__ import annotations

# Inclusive (first, last) code point ranges accepted as a leading emoji.
EMOJI_RANGES: tuple[tuple[int, int], ...] = (
    (0x1F600, 0x1F64F),  # Emoticons
    (0x1F300, 0x1F5FF),  # Miscellaneous Symbols and Pictographs
    (0x1F680, 0x1F6FF),  # Transport and Map Symbols
    (0x1F1E0, 0x1F1FF),  # Regional indicators (flags)
    (0x2600, 0x26FF),  # Miscellaneous Symbols
    (0x2700, 0x27BF),  # Dingbats
    (0x1F900, 0x1F9FF),  # Supplemental Symbols and Pictographs
    (0x1FA00, 0x1FA6F),  # Chess Symbols
    (0x1F004, 0x1F0CF),  # Mahjong and playing cards
    (0x2300, 0x23FF),  # Miscellaneous Technical
    (0x2B00, 0x2BFF),  # Miscellaneous Symbols and Arrows
)


def is_emoji_codepoint(codepoint: int) -> bool:
    """Return True if *codepoint* falls in one of ``EMOJI_RANGES``."""
    return any(first <= codepoint <= last for first, last in EMOJI_RANGES)


def starts_with_emoji(name: str) -> bool:
    """Return True if the first character of *name* is an emoji.

    No normalization is applied, so a leading space or variation selector
    makes the name non-compliant.
    """
    if not name:
        return False
    return is_emoji_codepoint(ord(name[0]))
