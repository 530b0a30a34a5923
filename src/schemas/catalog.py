"""Upstream item catalog schemas.

The catalog is the read-only item database the card sources are derived
from. It ships as three JSON tables in one directory:

    data/
    ├── expansions.json         # list of ExpansionRecord
    ├── items.json              # {item_id: ItemRecord}
    └── ptcgo-set-map.json      # {short_code: expansion_code}
"""

from enum import Enum, IntFlag

from pydantic import BaseModel, Field


class ItemType(str, Enum):
    """Kind of catalog item."""

    CARD = "card"
    LEAGUE = "league"
    LEAGUE_ALTERNATE = "league_alternate"
    LANGUAGE_DE = "language_de"
    LANGUAGE_EN = "language_en"
    LANGUAGE_ES = "language_es"
    LANGUAGE_FR = "language_fr"
    LANGUAGE_IT = "language_it"
    LANGUAGE_PTBR = "language_ptbr"
    BOOSTER = "booster"
    DECK = "deck"
    DECK_BOX = "deck_box"
    COIN = "coin"
    SLEEVE = "sleeve"
    AVATAR = "avatar"


CARD_ITEM_TYPES = frozenset(
    {
        ItemType.CARD,
        ItemType.LEAGUE,
        ItemType.LEAGUE_ALTERNATE,
        ItemType.LANGUAGE_DE,
        ItemType.LANGUAGE_EN,
        ItemType.LANGUAGE_ES,
        ItemType.LANGUAGE_FR,
        ItemType.LANGUAGE_IT,
        ItemType.LANGUAGE_PTBR,
    }
)


class CardFlags(IntFlag):
    """Special art treatments a card can carry."""

    NONE = 0
    OP_ART = 1
    XY_ART = 2
    YELLOW_A_ART = 4
    ALT_ART = 8
    SILVER_ART = 16
    GOLD_ART = 32


class ExpansionRecord(BaseModel):
    """An expansion (set) in the catalog.

    Attributes:
        code: Expansion code (e.g., "RSP", "SM-P")
        series: Name of the parent series (e.g., "Black & White")
        valid: False for placeholder expansions that have no card art
    """

    code: str
    series: str
    valid: bool = True

    model_config = {"frozen": True}


class ItemRecord(BaseModel):
    """A single catalog item.

    Attributes:
        id: Numeric item identifier
        item_type: Kind of item (card, language variant, booster, ...)
        flags: Bit set of CardFlags
        col_no: Printed collection number, may be non-numeric ("FOUR", "S15 01")
        no: Numeric collection number, used when col_no is missing
        name: Display name
        expansion_code: Code of the owning expansion
    """

    id: int
    item_type: ItemType = Field(alias="type")
    flags: int = 0
    col_no: str | None = Field(default=None, alias="colNo")
    no: int | None = None
    name: str
    expansion_code: str = Field(alias="expansion")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    @property
    def card_flags(self) -> CardFlags:
        return CardFlags(self.flags)

    @property
    def is_card(self) -> bool:
        return self.item_type in CARD_ITEM_TYPES

    @property
    def collection_number(self) -> str:
        """The collection number as printed, falling back to the numeric one."""
        if self.col_no is not None:
            return self.col_no
        return str(self.no)


class Catalog(BaseModel):
    """The full read-only catalog for one run.

    Attributes:
        expansions: Expansion records keyed by code, in catalog order
        items: Item records in catalog order
        short_codes: Table mapping short codes to expansion codes
    """

    expansions: dict[str, ExpansionRecord] = {}
    items: list[ItemRecord] = []
    short_codes: dict[str, str] = {}

    model_config = {"frozen": True}

    def expansion(self, code: str) -> ExpansionRecord | None:
        return self.expansions.get(code)
