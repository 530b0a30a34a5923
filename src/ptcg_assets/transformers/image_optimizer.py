"""Batch image optimizer.

Turns a directory of canonical source images into resized and compressed
output variants, one per (source file, format) pair.
"""

import asyncio
import contextlib
import logging
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image

from schemas.transform import TransformSpec

from ..exceptions import TransformWriteError
from .encoders import ENCODERS, prepare_image

logger = logging.getLogger(__name__)


@dataclass
class OptimizeSummary:
    """Outcome of one or more optimize runs.

    Attributes:
        written: Variants written during the run
        skipped: Variants left alone because they already existed
        failed: Variants that could not be written, with their errors
    """

    written: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    failed: list[TransformWriteError] = field(default_factory=list)

    def merge(self, other: "OptimizeSummary") -> "OptimizeSummary":
        self.written.extend(other.written)
        self.skipped.extend(other.skipped)
        self.failed.extend(other.failed)
        return self


class ImageOptimizer:
    """Produces output variants for every .png in a directory.

    Every (source file, format) pair is independent: an existing output is
    skipped unless the job asks to override it, and a failed write is
    retried once, then logged, without affecting its siblings. All variants
    of one optimize call are scheduled at once.

    Example:
        optimizer = ImageOptimizer()
        await optimizer.optimize(
            TransformSpec(in_dir=Path("sources/card/RSP"),
                          out_dir=Path("assets/card/s/RSP"),
                          formats=["jpg", "webp"],
                          resize=ResizeRule(width=180, height=251),
                          sharpen=True)
        )
    """

    def __init__(self, concurrency: int | None = None) -> None:
        """Initialize the optimizer.

        Args:
            concurrency: Maximum number of source files processed at once.
                         Unbounded when None.
        """
        self.concurrency = concurrency

    async def optimize(self, spec: TransformSpec) -> OptimizeSummary:
        """Produce every output variant described by a transform spec.

        Args:
            spec: The transform job

        Returns:
            OptimizeSummary of written, skipped and failed variants
        """
        files = await asyncio.to_thread(self._list_sources, spec.in_dir)
        summary = OptimizeSummary()
        limit = asyncio.Semaphore(self.concurrency) if self.concurrency else None

        await asyncio.gather(
            *(self._optimize_file(source, spec, summary, limit) for source in files)
        )

        logger.debug(
            f"Optimized {spec.in_dir} -> {spec.out_dir}: {len(summary.written)} written, "
            f"{len(summary.skipped)} skipped, {len(summary.failed)} failed"
        )
        return summary

    def _list_sources(self, in_dir: Path) -> list[Path]:
        return sorted(in_dir.glob("*.png"))

    async def _optimize_file(
        self,
        source: Path,
        spec: TransformSpec,
        summary: OptimizeSummary,
        limit: asyncio.Semaphore | None,
    ) -> None:
        async with limit if limit is not None else contextlib.nullcontext():
            pending: list[tuple[str, Path]] = []
            for image_format in spec.formats:
                output = spec.out_dir / f"{source.stem}.{image_format}"
                if not spec.override and await asyncio.to_thread(output.exists):
                    summary.skipped.append(output)
                    continue
                pending.append((image_format, output))

            if not pending:
                return

            try:
                image = await asyncio.to_thread(
                    prepare_image, source, spec.resize, spec.needs_flatten
                )
            except Exception as e:
                for _, output in pending:
                    error = TransformWriteError(output, [e])
                    logger.error(f"Cannot read source {source}: {error.message}")
                    summary.failed.append(error)
                return

            try:
                await asyncio.gather(
                    *(
                        self._save_variant(image, image_format, output, spec.sharpen, summary)
                        for image_format, output in pending
                    )
                )
            finally:
                image.close()

    async def _save_variant(
        self,
        image: Image.Image,
        image_format: str,
        output: Path,
        sharpen: bool,
        summary: OptimizeSummary,
    ) -> None:
        # Highly parallel writes occasionally fail on some filesystems.
        try:
            await asyncio.to_thread(self._write_variant, image, image_format, output, sharpen)
        except Exception as first_error:
            logger.info(f"Retrying saving {output}")
            try:
                await asyncio.to_thread(
                    self._write_variant, image, image_format, output, sharpen
                )
            except Exception as second_error:
                error = TransformWriteError(output, [first_error, second_error])
                logger.error(f"File error: {error.message}")
                summary.failed.append(error)
                return

        summary.written.append(output)

    def _write_variant(
        self, image: Image.Image, image_format: str, output: Path, sharpen: bool
    ) -> None:
        """Encode one variant and move it into place.

        Output paths only ever hold complete files, so an interrupted write is
        picked up again by the next run.
        """
        encode = ENCODERS[image_format]
        partial = output.with_name(f".{output.name}.part")
        try:
            partial.write_bytes(encode(image, sharpen))
            partial.replace(output)
        finally:
            partial.unlink(missing_ok=True)
