"""Expansion logo, symbol and pack image processing."""

import logging
from pathlib import Path

from schemas.transform import ResizeRule, TransformSpec

from .image_optimizer import ImageOptimizer, OptimizeSummary
from .sizes import LOGO_SIZE, PACK_SIZES, SYMBOL_SIZE
from .transformer import AssetTransformer

logger = logging.getLogger(__name__)

EXPANSION_SOURCES_DIR = Path("sources/expansion")
EXPANSION_EXTERNAL_DIR = Path("external/expansion")
EXPANSION_ASSETS_DIR = Path("assets/expansion")


class ExpansionTransformer(AssetTransformer):
    """Transforms expansion logos, symbols and packs.

    Symbols are png only since webp comes out larger at that size. Symbols
    maintained by hand under external/ replace the downloaded ones, and
    pack images only exist under external/.

    Output layout:
        assets/expansion/logo/{code}.{png|webp}
        assets/expansion/symbol/{code}.png
        assets/expansion/pack/{size}/{name}.{png|webp}
    """

    def __init__(
        self,
        root: Path,
        optimizer: ImageOptimizer | None = None,
        pack_sizes: dict[str, ResizeRule] = PACK_SIZES,
    ):
        super().__init__(root, optimizer)
        self.pack_sizes = pack_sizes

    async def transform(self) -> OptimizeSummary:
        assets = self.root / EXPANSION_ASSETS_DIR
        sources = self.root / EXPANSION_SOURCES_DIR
        external = self.root / EXPANSION_EXTERNAL_DIR

        await self._make_directories(
            [assets / "pack" / letter for letter in self.pack_sizes]
            + [assets / "symbol", assets / "logo"]
        )

        summary = OptimizeSummary()

        logger.info("Processing logos")
        summary.merge(
            await self.optimizer.optimize(
                TransformSpec(
                    in_dir=sources / "logo",
                    out_dir=assets / "logo",
                    resize=LOGO_SIZE,
                    formats=["png", "webp"],
                )
            )
        )

        logger.info("Processing symbols")
        summary.merge(
            await self.optimizer.optimize(
                TransformSpec(
                    in_dir=sources / "symbol",
                    out_dir=assets / "symbol",
                    resize=SYMBOL_SIZE,
                    formats=["png"],
                )
            )
        )
        summary.merge(
            await self.optimizer.optimize(
                TransformSpec(
                    in_dir=external / "symbol",
                    out_dir=assets / "symbol",
                    resize=SYMBOL_SIZE,
                    formats=["png"],
                    override=True,
                )
            )
        )

        for letter, size in self.pack_sizes.items():
            logger.info(f"Processing packs {letter.upper()}")
            summary.merge(
                await self.optimizer.optimize(
                    TransformSpec(
                        in_dir=external / "pack",
                        out_dir=assets / "pack" / letter,
                        resize=size,
                        formats=["png", "webp"],
                    )
                )
            )

        logger.info(
            f"Expansions processed: {len(summary.written)} written, "
            f"{len(summary.skipped)} skipped, {len(summary.failed)} failed"
        )
        return summary
