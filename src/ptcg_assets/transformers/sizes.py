"""Output size tables.

Sizes were chosen for a viewing distance of roughly 60cm from the monitor.

Cards (output jpg and webp; round the corners with
`border-radius: 4.75% / 3.5%` to hide the jpg fill color):
    xs: Card name readable on most cards; HP and typing discernible on cards
        with good contrast. Familiar cards are recognizable from the art.
    s:  Card name, HP, type, energy costs, attack damage, weakness,
        resistance and retreat icons readable. Attack text readable with
        some effort.
    m:  Card body fully readable, even for long attacks. Collection number
        readable with some effort. Copyright text unreadable.
    l:  All text fully readable, including flavor and copyright.
    xl: Source quality (734x1024), not resized.

Products (output png and webp). Pack images are fitted inside square
bounds:
    xs: Art visible
    s:  Expansion text and "Prerelease" visible
    m:  "x additional game cards" readable with effort
    l:  Everything readable
"""

from schemas.transform import ResizeRule

CARD_SIZES: dict[str, ResizeRule | None] = {
    "xs": ResizeRule(width=84, height=116),
    "s": ResizeRule(width=180, height=251),
    "m": ResizeRule(width=299, height=417),
    "l": ResizeRule(width=473, height=660),
    "xl": None,
}

PACK_SIZES: dict[str, ResizeRule] = {
    "xs": ResizeRule(width=84, height=84),
    "s": ResizeRule(width=180, height=180),
    "m": ResizeRule(width=299, height=299),
    "l": ResizeRule(width=473, height=473),
}

SYMBOL_SIZE = ResizeRule(width=15, height=15)

LOGO_SIZE = ResizeRule(width=186, height=62, fit="inside")
