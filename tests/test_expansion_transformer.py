"""Tests for the ExpansionTransformer class."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from PIL import Image

from ptcg_assets.transformers.expansion_transformer import ExpansionTransformer
from ptcg_assets.transformers.image_optimizer import ImageOptimizer, OptimizeSummary
from ptcg_assets.transformers.sizes import LOGO_SIZE, PACK_SIZES, SYMBOL_SIZE
from schemas.transform import ResizeRule


@pytest.fixture
def mock_optimizer():
    """An optimizer that records the specs it is given."""
    optimizer = MagicMock(spec=ImageOptimizer)
    optimizer.optimize = AsyncMock(return_value=OptimizeSummary())
    return optimizer


class TestTransformSpecs:
    """Tests for the jobs ExpansionTransformer schedules."""

    @pytest.mark.asyncio
    async def test_schedules_logo_symbol_and_pack_jobs(self, tmp_path, mock_optimizer):
        """Logos, symbols, external symbols and packs are processed in order."""
        await ExpansionTransformer(tmp_path, optimizer=mock_optimizer).transform()

        specs = [call.args[0] for call in mock_optimizer.optimize.await_args_list]
        sources = tmp_path / "sources" / "expansion"
        external = tmp_path / "external" / "expansion"
        assets = tmp_path / "assets" / "expansion"

        logo, symbol, external_symbol, *packs = specs
        assert (logo.in_dir, logo.out_dir) == (sources / "logo", assets / "logo")
        assert logo.formats == ["png", "webp"]
        assert logo.resize == LOGO_SIZE

        assert (symbol.in_dir, symbol.out_dir) == (sources / "symbol", assets / "symbol")
        assert symbol.formats == ["png"]
        assert symbol.resize == SYMBOL_SIZE
        assert symbol.override is False

        assert external_symbol.in_dir == external / "symbol"
        assert external_symbol.out_dir == assets / "symbol"
        assert external_symbol.override is True

        assert [p.out_dir for p in packs] == [assets / "pack" / letter for letter in PACK_SIZES]
        assert all(p.in_dir == external / "pack" for p in packs)
        assert all(p.formats == ["png", "webp"] for p in packs)
        assert [p.resize for p in packs] == list(PACK_SIZES.values())

    @pytest.mark.asyncio
    async def test_creates_output_directories(self, tmp_path, mock_optimizer):
        """Output directories exist for logos, symbols and every pack size."""
        await ExpansionTransformer(tmp_path, optimizer=mock_optimizer).transform()

        assets = tmp_path / "assets" / "expansion"
        assert (assets / "logo").is_dir()
        assert (assets / "symbol").is_dir()
        for letter in PACK_SIZES:
            assert (assets / "pack" / letter).is_dir()


class TestTransformOutputs:
    """Tests for the files ExpansionTransformer produces."""

    @pytest.mark.asyncio
    async def test_external_symbol_replaces_downloaded_one(self, tmp_path, make_png):
        """Hand-maintained symbols always win over downloaded ones."""
        make_png(tmp_path / "sources" / "expansion" / "symbol" / "FFI.png", color=(255, 0, 0, 255))
        make_png(tmp_path / "external" / "expansion" / "symbol" / "FFI.png", color=(0, 0, 255, 255))
        transformer = ExpansionTransformer(tmp_path, pack_sizes={})

        await transformer.transform()
        await transformer.transform()

        with Image.open(tmp_path / "assets" / "expansion" / "symbol" / "FFI.png") as image:
            rgba = image.convert("RGBA")
            assert image.size[0] <= 15 and image.size[1] <= 15
            r, _, b, _ = rgba.getpixel((0, 0))
        assert b > r

    @pytest.mark.asyncio
    async def test_packs_fit_square_bounds(self, tmp_path, make_png):
        """Pack images are fitted inside square bounds."""
        make_png(tmp_path / "external" / "expansion" / "pack" / "ffi-booster.png", size=(120, 200))
        transformer = ExpansionTransformer(
            tmp_path, pack_sizes={"xs": ResizeRule(width=84, height=84)}
        )

        summary = await transformer.transform()

        pack_dir = tmp_path / "assets" / "expansion" / "pack" / "xs"
        assert {p.name for p in summary.written} == {"ffi-booster.png", "ffi-booster.webp"}
        with Image.open(pack_dir / "ffi-booster.png") as image:
            assert image.height == 84
            assert image.width <= 84
