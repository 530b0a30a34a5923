"""Naming rules used to derive card file names and URLs."""

import re

from schemas.catalog import CardFlags, ItemRecord, ItemType

from ..exceptions import NonInjectiveMappingError

SPELLED_OUT_NUMBERS = frozenset({"FOUR", "THREE", "TWO", "ONE"})

# First match wins; the flags are mutually exclusive in practice.
ART_SUFFIXES: list[tuple[CardFlags, str]] = [
    (CardFlags.OP_ART, "op"),
    (CardFlags.XY_ART, "xy"),
    (CardFlags.YELLOW_A_ART, "ya"),
    (CardFlags.ALT_ART, "a"),
    (CardFlags.SILVER_ART, "_silver"),
    (CardFlags.GOLD_ART, "_gold"),
]

LANGUAGE_SUFFIXES: dict[ItemType, str] = {
    ItemType.LANGUAGE_DE: "de",
    ItemType.LANGUAGE_EN: "en",
    ItemType.LANGUAGE_ES: "es",
    ItemType.LANGUAGE_FR: "fr",
    ItemType.LANGUAGE_IT: "it",
    ItemType.LANGUAGE_PTBR: "pt",
}

_DIGITS = re.compile(r"\d+")
_GROUP_PREFIX = re.compile(r"^([^\d\s]+)\d")
_STRIPPED_NAME_CHARS = re.compile(r"['.()#&{}*:—?!♀♂]")
_SPACE_RUNS = re.compile(r" {2,}")
_WORD_SEPARATORS = re.compile(r"[- ]")


def invert_mapping(mapping: dict[str, str]) -> dict[str, str]:
    """Invert a one-to-one mapping.

    Raises:
        NonInjectiveMappingError: If two keys map to the same value
    """
    inverted: dict[str, str] = {}
    for key, value in mapping.items():
        if value in inverted:
            raise NonInjectiveMappingError(value, inverted[value], key)
        inverted[value] = key
    return inverted


def normalize_collection_number(number: str) -> str:
    """Normalize a collection number for use in a file name.

    Spelled-out numbers are title cased ("FOUR" -> "Four") and every run of
    digits is zero-padded to three places ("RC25" -> "RC025"). When a number
    is made of several groups and the first one carries a letter prefix,
    bare numeric groups inherit it ("S15 01" -> "S015 S001").
    """
    if number in SPELLED_OUT_NUMBERS:
        return number.title()

    groups = number.split(" ")
    prefix_match = _GROUP_PREFIX.match(groups[0])
    if len(groups) > 1 and prefix_match:
        prefix = prefix_match.group(1)
        groups = [groups[0]] + [
            prefix + group if group.isdigit() else group for group in groups[1:]
        ]

    return " ".join(
        _DIGITS.sub(lambda m: m.group(0).zfill(3), group) for group in groups
    )


def slugify_card_name(name: str) -> str:
    """Slug a card name: "M. Lucario & Friends?!" -> "m_lucario_friends"."""
    slug = name.lower().replace("é", "e")
    slug = _STRIPPED_NAME_CHARS.sub("", slug)
    slug = _SPACE_RUNS.sub(" ", slug).strip()
    return _WORD_SEPARATORS.sub("_", slug)


def art_suffix(flags: CardFlags) -> str | None:
    for flag, suffix in ART_SUFFIXES:
        if flags & flag:
            return suffix
    return None


def variant_suffix(item: ItemRecord) -> str | None:
    """The art treatment suffix, falling back to the language suffix."""
    suffix = art_suffix(item.card_flags)
    if suffix is not None:
        return suffix
    return LANGUAGE_SUFFIXES.get(item.item_type)
