"""Client for the public Pokemon TCG sets API."""

import logging

from pydantic import ValidationError as PydanticValidationError

from schemas.pokemontcg_set import PokemonTcgSet

from .client import Client
from .exceptions import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_SETS_BASE_URL = "https://api.pokemontcg.io"


class PokemonTcgClient(Client):
    """Client for the pokemontcg.io sets endpoint.

    The sets listing carries the symbol and logo artwork URLs for every
    expansion, keyed by its PTCGO code.

    Example:
        config = {"base_url": "https://api.pokemontcg.io"}
        async with PokemonTcgClient(config) as client:
            sets = await client.fetch()
    """

    API_PATH = "/v1/sets"

    async def fetch(self) -> list[PokemonTcgSet]:
        """Fetch every set.

        Returns:
            List of validated PokemonTcgSet objects

        Raises:
            ValidationError: If the response fails schema validation
            APIError: If the API returns a non-2xx response
            ConnectionError: If the network connection fails
        """
        response = await self.get(self.API_PATH)
        data = response.json()
        sets = data.get("sets", [])
        logger.debug(f"Fetched {len(sets)} sets from {self.base_url}")
        return self._validate_sets(sets)

    def _validate_sets(self, sets: list[dict]) -> list[PokemonTcgSet]:
        """Validate raw set entries against the PokemonTcgSet schema.

        Raises:
            ValidationError: If any entry fails validation
        """
        validated: list[PokemonTcgSet] = []

        for i, entry in enumerate(sets):
            try:
                validated.append(PokemonTcgSet.model_validate(entry))
            except PydanticValidationError as e:
                set_code = entry.get("code", f"index {i}")
                raise ValidationError(
                    f"Set {set_code} failed validation",
                    errors=[str(err) for err in e.errors()],
                ) from e

        return validated
