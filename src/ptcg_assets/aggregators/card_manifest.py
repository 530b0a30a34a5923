"""Card source manifest building."""

import asyncio
import logging
from collections.abc import Iterable
from pathlib import Path

from schemas.catalog import Catalog, ExpansionRecord, ItemRecord
from schemas.manifest import SourceManifest

from ..exceptions import InvalidExpansionError, ResolutionConflict
from ..resolvers.card_resolver import CardResolver, ResolvedCard

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "manifest.json"
CARD_SOURCES_DIR = Path("sources/card")


class CardManifestBuilder:
    """Builds the manifest of card source images to download.

    Every card item in the catalog is resolved to a canonical identity and
    source URL. The manifest maps the local source path of each identity to
    its URL; two items that resolve to the same identity but to different
    URLs abort the build unless the identity is a known duplicate.

    Example:
        builder = CardManifestBuilder(CardResolver(catalog), Path("."))
        manifest = await builder.run(catalog)
    """

    def __init__(
        self,
        resolver: CardResolver,
        root: Path,
        sources_dir: Path = CARD_SOURCES_DIR,
    ):
        """Initialize the manifest builder.

        Args:
            resolver: Resolver mapping items to identities and URLs
            root: Project root; manifest paths are relative to it
            sources_dir: Root-relative directory card sources are stored in
        """
        self.resolver = resolver
        self.root = root
        self.sources_dir = sources_dir

    @property
    def manifest_path(self) -> Path:
        return self.root / self.sources_dir / MANIFEST_FILENAME

    async def run(self, catalog: Catalog) -> SourceManifest:
        """Prepare directories, build the manifest and write it.

        Returns:
            The written SourceManifest

        Raises:
            ResolutionConflict: If two items claim the same identity
        """
        await self.prepare_directories(catalog.expansions.values())
        manifest = self.build(catalog.items)
        self.write(manifest, self.manifest_path)
        return manifest

    async def prepare_directories(self, expansions: Iterable[ExpansionRecord]) -> None:
        """Create one source directory per expansion, concurrently."""
        sources_dir = self.root / self.sources_dir
        await asyncio.gather(
            *(
                asyncio.to_thread(
                    (sources_dir / expansion.code).mkdir, parents=True, exist_ok=True
                )
                for expansion in expansions
            )
        )

    def build(self, items: Iterable[ItemRecord]) -> SourceManifest:
        """Resolve items into a manifest, in catalog order.

        Args:
            items: Catalog items to resolve

        Returns:
            SourceManifest mapping local source paths to URLs

        Raises:
            ResolutionConflict: If two items resolve to the same identity with
                different URLs and the identity is not a known duplicate
        """
        manifest = SourceManifest()
        owners: dict[str, int] = {}

        for item in items:
            try:
                resolved = self.resolver.resolve(item)
            except InvalidExpansionError as e:
                logger.warning(f"Invalid expansion, skipping: {e}")
                continue

            if resolved is None:
                logger.debug(f"Item {item.id} has no source image of its own")
                continue

            file = self.source_path(resolved)
            if file in manifest:
                if manifest[file] == resolved.url:
                    continue
                if self.resolver.is_known_duplicate(resolved.identity):
                    logger.debug(
                        f"Keeping {manifest[file]} for {resolved.identity}, "
                        f"dropping equivalent {resolved.url}"
                    )
                    continue
                self._conflict(resolved, manifest[file], owners.get(file))

            manifest[file] = resolved.url
            owners[file] = resolved.item_id

        logger.info(f"Resolved {len(manifest)} card sources")
        return manifest

    def source_path(self, resolved: ResolvedCard) -> str:
        """Root-relative path of the source image for a resolution."""
        return (self.sources_dir / f"{resolved.identity}.png").as_posix()

    def write(self, manifest: SourceManifest, path: Path) -> None:
        """Write the manifest as pretty-printed JSON, in insertion order."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(manifest.model_dump_json(indent=2), encoding="utf-8")
        logger.debug(f"Wrote source manifest to {path}")

    def _conflict(
        self, resolved: ResolvedCard, existing_url: str, existing_item_id: int | None
    ) -> None:
        error = ResolutionConflict(
            identity=resolved.identity,
            existing_url=existing_url,
            new_url=resolved.url,
            existing_item_id=existing_item_id,
            item_id=resolved.item_id,
        )
        logger.error(error.message)
        raise error
