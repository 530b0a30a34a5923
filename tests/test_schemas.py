"""Tests for schema definitions and catalog loading."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from ptcg_assets.catalog import load_catalog
from ptcg_assets.exceptions import CatalogError
from schemas import (
    Catalog,
    CardFlags,
    ExpansionRecord,
    ItemRecord,
    ItemType,
    ResizeRule,
    SourceManifest,
    TransformSpec,
)


class TestItemRecord:
    """Tests for ItemRecord."""

    def test_parses_catalog_aliases(self):
        """Catalog field names map to Python attribute names."""
        item = ItemRecord.model_validate(
            {"id": 3, "type": "card", "expansion": "FFI", "colNo": "46", "name": "Lucario", "flags": 2}
        )

        assert item.item_type == ItemType.CARD
        assert item.expansion_code == "FFI"
        assert item.col_no == "46"
        assert item.card_flags == CardFlags.XY_ART

    def test_collection_number_falls_back_to_no(self):
        """The numeric number is used when colNo is missing."""
        item = ItemRecord(id=1, type="card", expansion="FFI", no=7, name="Eevee")

        assert item.collection_number == "7"

    @pytest.mark.parametrize(
        "item_type, is_card",
        [
            ("card", True),
            ("league", True),
            ("league_alternate", True),
            ("language_ptbr", True),
            ("booster", False),
            ("sleeve", False),
        ],
    )
    def test_is_card(self, item_type, is_card):
        """Language and league variants count as cards; products do not."""
        item = ItemRecord(id=1, type=item_type, expansion="FFI", name="x")

        assert item.is_card is is_card

    def test_unknown_type_rejected(self):
        """Unknown item types fail validation."""
        with pytest.raises(ValidationError):
            ItemRecord(id=1, type="playmat", expansion="FFI", name="x")

    def test_extra_fields_ignored(self):
        """Unmodelled catalog fields are ignored."""
        item = ItemRecord.model_validate(
            {"id": 1, "type": "card", "expansion": "FFI", "name": "x", "rarity": "rare"}
        )

        assert not hasattr(item, "rarity")

    def test_frozen(self):
        """Items are immutable."""
        item = ItemRecord(id=1, type="card", expansion="FFI", name="x")

        with pytest.raises(ValidationError):
            item.name = "y"


class TestCatalog:
    """Tests for Catalog."""

    def test_expansion_lookup(self, catalog):
        """Expansions are looked up by code."""
        assert catalog.expansion("FFI") == ExpansionRecord(code="FFI", series="XY")
        assert catalog.expansion("NOPE") is None

    def test_expansions_default_valid(self):
        """Expansions are valid unless marked otherwise."""
        assert ExpansionRecord(code="FFI", series="XY").valid is True


class TestLoadCatalog:
    """Tests for load_catalog()."""

    def test_loads_tables(self, catalog_dir, catalog):
        """All three tables are loaded into a Catalog."""
        loaded = load_catalog(catalog_dir)

        assert isinstance(loaded, Catalog)
        assert loaded == catalog
        assert [item.id for item in loaded.items] == [1, 2, 3, 4, 5, 6, 7, 8]
        assert loaded.items[1].name == "Flabébé"

    def test_missing_table(self, catalog_dir):
        """A missing table raises CatalogError."""
        (catalog_dir / "ptcgo-set-map.json").unlink()

        with pytest.raises(CatalogError, match="ptcgo-set-map.json"):
            load_catalog(catalog_dir)

    def test_invalid_json(self, catalog_dir):
        """Malformed JSON raises CatalogError."""
        (catalog_dir / "items.json").write_text("{not json")

        with pytest.raises(CatalogError, match="not valid JSON"):
            load_catalog(catalog_dir)

    def test_invalid_record(self, catalog_dir):
        """Records failing validation raise CatalogError."""
        (catalog_dir / "items.json").write_text(json.dumps({"1": {"type": "card"}}))

        with pytest.raises(CatalogError, match="Invalid catalog"):
            load_catalog(catalog_dir)

    def test_non_numeric_item_id(self, catalog_dir):
        """Item ids must be numeric."""
        (catalog_dir / "items.json").write_text(
            json.dumps({"abc": {"type": "card", "expansion": "FFI", "name": "x"}})
        )

        with pytest.raises(CatalogError):
            load_catalog(catalog_dir)


class TestTransformSpec:
    """Tests for TransformSpec and ResizeRule."""

    def test_defaults(self):
        """Resize, sharpen and override are off by default."""
        spec = TransformSpec(in_dir=Path("in"), out_dir=Path("out"), formats=["png"])

        assert spec.resize is None
        assert spec.sharpen is False
        assert spec.override is False

    def test_resize_rule_default_fit(self):
        """Resizes fit inside the bounds by default."""
        assert ResizeRule(width=10, height=10).fit == "inside"

    def test_rejects_empty_formats(self):
        """At least one format is required."""
        with pytest.raises(ValidationError, match="at least one"):
            TransformSpec(in_dir=Path("in"), out_dir=Path("out"), formats=[])

    def test_rejects_duplicate_formats(self):
        """Each format may appear once."""
        with pytest.raises(ValidationError, match="duplicate"):
            TransformSpec(in_dir=Path("in"), out_dir=Path("out"), formats=["png", "png"])

    def test_rejects_unknown_format(self):
        """Only jpg, png and webp are supported."""
        with pytest.raises(ValidationError):
            TransformSpec(in_dir=Path("in"), out_dir=Path("out"), formats=["gif"])

    @pytest.mark.parametrize(
        "formats, flatten",
        [
            (["jpg", "webp"], True),
            (["jpg"], True),
            (["webp"], True),
            (["png", "webp"], False),
            (["png"], False),
        ],
    )
    def test_needs_flatten(self, formats, flatten):
        """Outputs containing jpg, or webp alone, are flattened."""
        spec = TransformSpec(in_dir=Path("in"), out_dir=Path("out"), formats=formats)

        assert spec.needs_flatten is flatten


class TestSourceManifest:
    """Tests for SourceManifest."""

    def test_preserves_insertion_order(self):
        """Serialization keeps insertion order."""
        manifest = SourceManifest()
        manifest["b.png"] = "https://x/b"
        manifest["a.png"] = "https://x/a"

        assert list(json.loads(manifest.model_dump_json())) == ["b.png", "a.png"]

    def test_instances_do_not_share_state(self):
        """Each manifest starts empty."""
        first = SourceManifest()
        first["a.png"] = "https://x/a"

        assert len(SourceManifest()) == 0

    def test_mapping_protocol(self):
        """Manifests support membership, lookup and length."""
        manifest = SourceManifest({"a.png": "https://x/a"})

        assert "a.png" in manifest
        assert manifest["a.png"] == "https://x/a"
        assert len(manifest) == 1
        assert list(manifest.items()) == [("a.png", "https://x/a")]
