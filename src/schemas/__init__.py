"""Schema definitions for ptcg-assets."""

from .catalog import (
    CARD_ITEM_TYPES,
    Catalog,
    CardFlags,
    ExpansionRecord,
    ItemRecord,
    ItemType,
)
from .manifest import SourceManifest
from .pokemontcg_set import PokemonTcgSet
from .transform import FitMode, ImageFormat, ResizeRule, TransformSpec

__all__ = [
    "CARD_ITEM_TYPES",
    "Catalog",
    "CardFlags",
    "ExpansionRecord",
    "FitMode",
    "ImageFormat",
    "ItemRecord",
    "ItemType",
    "PokemonTcgSet",
    "ResizeRule",
    "SourceManifest",
    "TransformSpec",
]
