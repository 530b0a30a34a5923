"""Pipeline orchestrator sequencing source acquisition and processing.

Each asset family (cards, expansions) runs a sources step followed by a
process step. Steps can be run on their own or composed:

    sources:  card-sources      | expansion-sources
    process:  card-process      | expansion-process
    assets:   card-sources -> card-process  |  expansion-sources -> expansion-process
"""

import asyncio
import logging
from pathlib import Path

from schemas.catalog import Catalog

from ptcg_assets.aggregators.card_manifest import CardManifestBuilder
from ptcg_assets.aggregators.expansion_sources import ExpansionSourceAggregator
from ptcg_assets.aggregators.source_downloader import (
    DownloadSummary,
    SourceDownloader,
    load_manifest,
)
from ptcg_assets.clients.sets_client import DEFAULT_SETS_BASE_URL, PokemonTcgClient
from ptcg_assets.resolvers.card_resolver import VARIANT_DUPLICATES, CardResolver
from ptcg_assets.transformers.card_transformer import CardTransformer
from ptcg_assets.transformers.expansion_transformer import ExpansionTransformer
from ptcg_assets.transformers.image_optimizer import ImageOptimizer, OptimizeSummary

logger = logging.getLogger(__name__)


class Orchestrator:
    """Runs pipeline steps against one project root.

    Attributes:
        root: Project root holding sources/, external/ and assets/
        catalog: Read-only catalog for this run
        client_config: Config dict for the sets API client
        known_duplicates: Identities whose conflicting sources are equivalent
        optimizer: ImageOptimizer shared by the process steps
    """

    def __init__(
        self,
        root: Path,
        catalog: Catalog,
        client_config: dict | None = None,
        known_duplicates: frozenset[str] = VARIANT_DUPLICATES,
        optimizer: ImageOptimizer | None = None,
        download_timeout: float = 30.0,
    ):
        self.root = root
        self.catalog = catalog
        self.client_config = client_config or {"base_url": DEFAULT_SETS_BASE_URL}
        self.known_duplicates = known_duplicates
        self.optimizer = optimizer or ImageOptimizer()
        self.download_timeout = download_timeout

    async def card_sources(self) -> DownloadSummary:
        """Build the card manifest and download every card source."""
        builder = CardManifestBuilder(
            CardResolver(self.catalog, known_duplicates=self.known_duplicates),
            self.root,
        )
        await builder.run(self.catalog)
        manifest = load_manifest(builder.manifest_path)

        async with SourceDownloader(timeout=self.download_timeout) as downloader:
            summary = await downloader.download_manifest(manifest, self.root)

        logger.info("Card sources saved")
        return summary

    async def expansion_sources(self) -> DownloadSummary:
        """Download symbol and logo sources for every expansion."""
        async with PokemonTcgClient(self.client_config) as client:
            async with SourceDownloader(timeout=self.download_timeout) as downloader:
                aggregator = ExpansionSourceAggregator(client, downloader, self.root)
                summary = await aggregator.run(self.catalog)

        logger.info("Expansion sources saved")
        return summary

    async def card_process(self) -> OptimizeSummary:
        """Produce every card size from the card sources."""
        transformer = CardTransformer(
            self.root, self.catalog.expansions.keys(), optimizer=self.optimizer
        )
        return await transformer.transform()

    async def expansion_process(self) -> OptimizeSummary:
        """Produce logos, symbols and packs from the expansion sources."""
        transformer = ExpansionTransformer(self.root, optimizer=self.optimizer)
        return await transformer.transform()

    async def sources(self) -> None:
        await asyncio.gather(self.card_sources(), self.expansion_sources())

    async def process(self) -> None:
        await asyncio.gather(self.card_process(), self.expansion_process())

    async def cards(self) -> None:
        await self.card_sources()
        await self.card_process()

    async def expansions(self) -> None:
        await self.expansion_sources()
        await self.expansion_process()

    async def assets(self) -> None:
        await asyncio.gather(self.cards(), self.expansions())

    async def run(self, step: str) -> None:
        """Run a step by its command name (e.g. "card-sources").

        Raises:
            KeyError: If the step name is unknown
        """
        method = STEPS[step]
        await getattr(self, method)()


STEPS = {
    "card-sources": "card_sources",
    "expansion-sources": "expansion_sources",
    "card-process": "card_process",
    "expansion-process": "expansion_process",
    "sources": "sources",
    "process": "process",
    "assets": "assets",
}
