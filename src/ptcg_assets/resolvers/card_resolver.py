"""Resolution of catalog items to canonical source images.

Every card item maps to one canonical identity, the local name of its source
image (`{expansion_code}/{asset_name}`), and to the remote URL the image is
fetched from.

The identity is keyed on the collection number rather than on the remote
slug: art treatments of one card carry different slugs but share a single
local file, so two of them resolving to different URLs is a conflict unless
the identity is a known duplicate.
"""

import logging
from dataclasses import dataclass

from schemas.catalog import Catalog, ExpansionRecord, ItemRecord, ItemType

from ..exceptions import CatalogError, InvalidExpansionError
from .naming import (
    LANGUAGE_SUFFIXES,
    invert_mapping,
    normalize_collection_number,
    slugify_card_name,
    variant_suffix,
)

logger = logging.getLogger(__name__)

CARD_ART_BASE_URL = "https://cdn.malie.io/file/malie-io/art/cards/png/en_US/"
DEFAULT_LOCALE = "en_US"

# Classified as its own series and does not follow the short code convention.
RSP_EXPANSION_CODE = "RSP"
RSP_PATH = "RSP/RSP/"

# Art variants that render identically to their base card.
VARIANT_DUPLICATES = frozenset(
    {
        # xy variants (different foil mask)
        "FFI/46",
        "FFI/63",
        "FFI/83",
        "AOR/54",
        "BKT/84",
        # a variants
        "UNB/76",
        "UNM/114",
    }
)


@dataclass(frozen=True)
class ResolvedCard:
    """A card item resolved to its canonical source image.

    Attributes:
        identity: Canonical identity, "{expansion_code}/{asset_name}"
        url: Remote URL of the source image
        item_id: Catalog id of the item that produced this resolution
    """

    identity: str
    url: str
    item_id: int

    @property
    def expansion_code(self) -> str:
        return self.identity.split("/", 1)[0]


class CardResolver:
    """Maps card items to canonical identities and source URLs.

    Example:
        resolver = CardResolver(catalog)
        resolved = resolver.resolve(item)
        if resolved is not None:
            print(resolved.identity, resolved.url)
    """

    def __init__(
        self,
        catalog: Catalog,
        known_duplicates: frozenset[str] | set[str] = VARIANT_DUPLICATES,
        locale: str = DEFAULT_LOCALE,
    ):
        """Initialize the resolver.

        Args:
            catalog: The read-only catalog for this run
            known_duplicates: Identities whose conflicting resolutions are
                visually equivalent and may be dropped
            locale: Locale token leading every file name

        Raises:
            NonInjectiveMappingError: If the short code table is not one-to-one
        """
        self.catalog = catalog
        self.known_duplicates = frozenset(known_duplicates)
        self.locale = locale
        self._short_codes = invert_mapping(catalog.short_codes)

    def is_known_duplicate(self, identity: str) -> bool:
        return identity in self.known_duplicates

    def short_code(self, expansion_code: str) -> str:
        """Short code used in remote file names.

        RSP is not bound to the short code table and falls back to its own
        expansion code.

        Raises:
            CatalogError: If any other expansion has no short code
        """
        if expansion_code == RSP_EXPANSION_CODE:
            return self._short_codes.get(expansion_code, expansion_code)
        try:
            return self._short_codes[expansion_code]
        except KeyError:
            raise CatalogError(
                f"No short code for expansion {expansion_code!r}"
            ) from None

    def resolve(self, item: ItemRecord) -> ResolvedCard | None:
        """Resolve an item to its canonical identity and source URL.

        Args:
            item: Catalog item to resolve

        Returns:
            The resolution, or None for items that have no source image of
            their own (non-cards, league alternates)

        Raises:
            InvalidExpansionError: If the item's expansion is unknown or invalid
            CatalogError: If the expansion has no short code
        """
        if not item.is_card:
            return None
        # Always accompanied by an ItemType.LEAGUE variant
        if item.item_type == ItemType.LEAGUE_ALTERNATE:
            return None

        expansion = self.catalog.expansion(item.expansion_code)
        if expansion is None or not expansion.valid:
            raise InvalidExpansionError(item.id, item.expansion_code)

        identity = f"{expansion.code}/{self.asset_name(item)}"
        return ResolvedCard(
            identity=identity,
            url=self.source_url(item, expansion),
            item_id=item.id,
        )

    def asset_name(self, item: ItemRecord) -> str:
        """Local file name (without extension) of an item's source image.

        Art treatments share the file of their base card; language variants
        get their own.
        """
        name = "_".join(item.collection_number.split())
        language = LANGUAGE_SUFFIXES.get(item.item_type)
        if language is not None:
            name = f"{name}_{language}"
        return name

    def item_slug(self, item: ItemRecord, expansion: ExpansionRecord) -> str:
        """Remote file name (without extension) of an item's source image."""
        discriminant = [
            self.locale,
            self.short_code(expansion.code),
            normalize_collection_number(item.collection_number),
            slugify_card_name(item.name),
        ]
        suffix = variant_suffix(item)
        if suffix is not None:
            discriminant.append(suffix)
        return "-".join(discriminant)

    def source_url(self, item: ItemRecord, expansion: ExpansionRecord) -> str:
        url = CARD_ART_BASE_URL
        if expansion.code == RSP_EXPANSION_CODE:
            url += RSP_PATH
        else:
            short_code = self.short_code(expansion.code)
            url += f"{expansion.series}/{short_code}-{expansion.code.replace('-', '_')}/"
        return f"{url}{self.item_slug(item, expansion)}.png"
