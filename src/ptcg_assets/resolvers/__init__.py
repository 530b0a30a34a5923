"""Resolution of catalog items to canonical source images."""

from .card_resolver import VARIANT_DUPLICATES, CardResolver, ResolvedCard
from .naming import (
    invert_mapping,
    normalize_collection_number,
    slugify_card_name,
    variant_suffix,
)

__all__ = [
    "CardResolver",
    "ResolvedCard",
    "VARIANT_DUPLICATES",
    "invert_mapping",
    "normalize_collection_number",
    "slugify_card_name",
    "variant_suffix",
]
