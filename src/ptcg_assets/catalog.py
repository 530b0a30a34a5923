"""Loading of the upstream catalog tables."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from schemas.catalog import Catalog, ExpansionRecord, ItemRecord

from .exceptions import CatalogError

logger = logging.getLogger(__name__)

EXPANSIONS_FILE = "expansions.json"
ITEMS_FILE = "items.json"
SHORT_CODES_FILE = "ptcgo-set-map.json"


def load_catalog(catalog_dir: Path) -> Catalog:
    """Load the catalog tables from a directory.

    Args:
        catalog_dir: Directory containing expansions.json, items.json and
            ptcgo-set-map.json

    Returns:
        The validated, read-only Catalog

    Raises:
        CatalogError: If a table is missing or fails validation
    """
    expansions_data = _read_table(catalog_dir / EXPANSIONS_FILE)
    items_data = _read_table(catalog_dir / ITEMS_FILE)
    short_codes = _read_table(catalog_dir / SHORT_CODES_FILE)

    try:
        expansions = [ExpansionRecord.model_validate(e) for e in expansions_data]
        items = [
            ItemRecord.model_validate({**definition, "id": int(item_id)})
            for item_id, definition in items_data.items()
        ]
        catalog = Catalog(
            expansions={e.code: e for e in expansions},
            items=items,
            short_codes=short_codes,
        )
    except (PydanticValidationError, AttributeError, ValueError) as e:
        raise CatalogError(f"Invalid catalog in {catalog_dir}: {e}") from e

    logger.info(
        f"Loaded catalog with {len(catalog.expansions)} expansions "
        f"and {len(catalog.items)} items"
    )
    return catalog


def _read_table(path: Path):
    if not path.exists():
        raise CatalogError(f"Catalog table not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise CatalogError(f"Catalog table {path} is not valid JSON: {e}") from e
