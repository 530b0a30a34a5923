"""Pytest fixtures for ptcg-assets tests."""

import json
from pathlib import Path

import pytest
from PIL import Image

from schemas.catalog import Catalog, ExpansionRecord, ItemRecord


@pytest.fixture
def sample_expansions():
    """Expansion records as they appear in expansions.json."""
    return [
        {"code": "RSP", "series": "Black & White", "valid": True},
        {"code": "SM-P", "series": "Sun & Moon", "valid": True},
        {"code": "FFI", "series": "XY", "valid": True},
        {"code": "BAD", "series": "XY", "valid": False},
    ]


@pytest.fixture
def sample_short_codes():
    """Short code table as it appears in ptcgo-set-map.json."""
    return {
        "PR-BW": "RSP",
        "SMP": "SM-P",
        "FFI": "FFI",
        "BAD": "BAD",
    }


@pytest.fixture
def sample_items():
    """Item definitions as they appear in items.json, in catalog order."""
    return {
        "1": {"type": "card", "expansion": "RSP", "colNo": "S15 01", "name": "Pikachu"},
        "2": {"type": "card", "expansion": "SM-P", "no": 25, "name": "Flabébé"},
        "3": {"type": "card", "expansion": "FFI", "colNo": "46", "name": "M. Lucario & Friends?!"},
        "4": {
            "type": "card",
            "expansion": "FFI",
            "colNo": "46",
            "name": "M. Lucario & Friends?!",
            "flags": 2,
        },
        "5": {"type": "league_alternate", "expansion": "FFI", "colNo": "63", "name": "Shauna"},
        "6": {"type": "booster", "expansion": "FFI", "name": "Furious Fists Booster"},
        "7": {"type": "card", "expansion": "BAD", "colNo": "1", "name": "Missing No"},
        "8": {"type": "language_de", "expansion": "FFI", "colNo": "46", "name": "M. Lucario & Friends?!"},
    }


@pytest.fixture
def catalog(sample_expansions, sample_items, sample_short_codes) -> Catalog:
    """A small catalog covering every resolution path."""
    expansions = [ExpansionRecord.model_validate(e) for e in sample_expansions]
    return Catalog(
        expansions={e.code: e for e in expansions},
        items=[
            ItemRecord.model_validate({**definition, "id": int(item_id)})
            for item_id, definition in sample_items.items()
        ],
        short_codes=sample_short_codes,
    )


@pytest.fixture
def catalog_dir(tmp_path, sample_expansions, sample_items, sample_short_codes) -> Path:
    """Catalog tables written to a directory."""
    directory = tmp_path / "data"
    directory.mkdir()
    (directory / "expansions.json").write_text(json.dumps(sample_expansions))
    (directory / "items.json").write_text(json.dumps(sample_items, ensure_ascii=False), encoding="utf-8")
    (directory / "ptcgo-set-map.json").write_text(json.dumps(sample_short_codes))
    return directory


@pytest.fixture
def make_png():
    """Factory writing a solid-color PNG image to a path."""

    def _make_png(
        path: Path,
        size: tuple[int, int] = (60, 84),
        color: tuple[int, ...] = (200, 30, 30, 255),
        mode: str = "RGBA",
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new(mode, size, color).save(path, format="PNG")
        return path

    return _make_png
