"""Card image processing."""

import logging
from collections.abc import Iterable
from pathlib import Path

from schemas.transform import ResizeRule, TransformSpec

from .image_optimizer import ImageOptimizer, OptimizeSummary
from .sizes import CARD_SIZES
from .transformer import AssetTransformer

logger = logging.getLogger(__name__)

CARD_SOURCES_DIR = Path("sources/card")
CARD_ASSETS_DIR = Path("assets/card")


class CardTransformer(AssetTransformer):
    """Transforms card sources into every card size.

    Resized cards are written as jpg and sharpened webp; the unresized xl
    size is written as webp only.

    Output layout:
        assets/card/{size}/{expansion_code}/{asset_name}.{jpg|webp}
    """

    def __init__(
        self,
        root: Path,
        expansion_codes: Iterable[str],
        optimizer: ImageOptimizer | None = None,
        sizes: dict[str, ResizeRule | None] = CARD_SIZES,
    ):
        super().__init__(root, optimizer)
        self.expansion_codes = list(expansion_codes)
        self.sizes = sizes

    async def transform(self) -> OptimizeSummary:
        await self._make_directories(
            self.root / CARD_ASSETS_DIR / letter / code
            for letter in self.sizes
            for code in self.expansion_codes
        )

        summary = OptimizeSummary()
        for code in self.expansion_codes:
            for letter, resize in self.sizes.items():
                logger.info(f"Processing cards {code} {letter.upper()}")
                summary.merge(await self.optimizer.optimize(self.spec_for(code, letter, resize)))

        logger.info(
            f"Cards processed: {len(summary.written)} written, "
            f"{len(summary.skipped)} skipped, {len(summary.failed)} failed"
        )
        return summary

    def spec_for(self, code: str, letter: str, resize: ResizeRule | None) -> TransformSpec:
        return TransformSpec(
            in_dir=self.root / CARD_SOURCES_DIR / code,
            out_dir=self.root / CARD_ASSETS_DIR / letter / code,
            resize=resize,
            formats=["jpg", "webp"] if resize else ["webp"],
            sharpen=resize is not None,
        )
