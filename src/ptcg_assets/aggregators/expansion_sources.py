"""Expansion symbol and logo source acquisition."""

import asyncio
import logging
from pathlib import Path

from schemas.catalog import Catalog
from schemas.manifest import SourceManifest
from schemas.pokemontcg_set import PokemonTcgSet

from ..clients.sets_client import PokemonTcgClient
from .source_downloader import DownloadSummary, SourceDownloader

logger = logging.getLogger(__name__)

EXPANSION_SOURCES_DIR = Path("sources/expansion")
MANIFEST_FILENAME = "manifest.json"


class ExpansionSourceAggregator:
    """Collects symbol and logo source images for every expansion.

    Artwork URLs come from the public sets API, matched to catalog
    expansions by PTCGO code. Expansions the API does not know are skipped.

    Example:
        async with PokemonTcgClient(config) as client, SourceDownloader() as downloader:
            aggregator = ExpansionSourceAggregator(client, downloader, Path("."))
            await aggregator.run(catalog)
    """

    def __init__(
        self,
        sets_client: PokemonTcgClient,
        downloader: SourceDownloader,
        root: Path,
        sources_dir: Path = EXPANSION_SOURCES_DIR,
    ):
        self.sets_client = sets_client
        self.downloader = downloader
        self.root = root
        self.sources_dir = sources_dir

    @property
    def manifest_path(self) -> Path:
        return self.root / self.sources_dir / MANIFEST_FILENAME

    async def run(self, catalog: Catalog) -> DownloadSummary:
        """Fetch set info, write the expansion manifest and download it."""
        sets = await self.sets_client.fetch()

        await asyncio.gather(
            asyncio.to_thread(
                (self.root / self.sources_dir / "symbol").mkdir, parents=True, exist_ok=True
            ),
            asyncio.to_thread(
                (self.root / self.sources_dir / "logo").mkdir, parents=True, exist_ok=True
            ),
        )

        manifest = self.build(catalog, sets)
        self.manifest_path.write_text(manifest.model_dump_json(indent=2), encoding="utf-8")
        return await self.downloader.download_manifest(manifest, self.root)

    def build(self, catalog: Catalog, sets: list[PokemonTcgSet]) -> SourceManifest:
        """Map symbol and logo paths to artwork URLs, in catalog order."""
        sets_by_code = {s.ptcgo_code: s for s in sets if s.ptcgo_code}
        manifest = SourceManifest()

        for code in catalog.expansions:
            info = sets_by_code.get(code)
            if info is None:
                logger.warning(f"Skipping image downloads for expansion {code}")
                continue

            manifest[(self.sources_dir / "symbol" / f"{code}.png").as_posix()] = info.symbol_url
            manifest[(self.sources_dir / "logo" / f"{code}.png").as_posix()] = info.logo_url

        return manifest
