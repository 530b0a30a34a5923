"""Base class for asset-family transformers.

Asset-family transformers turn the source images of one asset family
(cards, expansions) into the published asset tree by running the image
optimizer over every size and format the family needs.
"""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

from .image_optimizer import ImageOptimizer, OptimizeSummary


class AssetTransformer(ABC):
    """Abstract base class for asset-family transformers."""

    def __init__(self, root: Path, optimizer: ImageOptimizer | None = None):
        """Initialize the transformer.

        Args:
            root: Project root holding sources/, external/ and assets/
            optimizer: Optional ImageOptimizer for dependency injection
        """
        self.root = root
        self.optimizer = optimizer or ImageOptimizer()

    @abstractmethod
    async def transform(self) -> OptimizeSummary:
        """Produce every output variant of the asset family.

        Returns:
            OptimizeSummary across all optimize runs
        """
        pass

    async def _make_directories(self, directories: Iterable[Path]) -> None:
        """Create output directories concurrently."""
        await asyncio.gather(
            *(
                asyncio.to_thread(directory.mkdir, parents=True, exist_ok=True)
                for directory in directories
            )
        )
