"""Schemas for the public Pokemon TCG sets API."""

from pydantic import BaseModel, Field


class PokemonTcgSet(BaseModel):
    """A set entry from the /v1/sets endpoint.

    Only the fields needed to locate expansion artwork are modelled.
    """

    code: str
    name: str
    ptcgo_code: str | None = Field(default=None, alias="ptcgoCode")
    series: str | None = None
    symbol_url: str = Field(alias="symbolUrl")
    logo_url: str = Field(alias="logoUrl")

    model_config = {"extra": "allow", "populate_by_name": True}
