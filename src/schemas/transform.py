"""Image transform job schemas."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, field_validator

ImageFormat = Literal["jpg", "png", "webp"]
FitMode = Literal["inside", "cover", "contain", "fill"]


class ResizeRule(BaseModel):
    """Target bounds for a resize.

    Attributes:
        width: Target width in pixels
        height: Target height in pixels
        fit: How aspect ratio and bounds interact. "inside" preserves the
            aspect ratio, fits within the bounds and never upscales.
    """

    width: int
    height: int
    fit: FitMode = "inside"

    model_config = {"frozen": True}


class TransformSpec(BaseModel):
    """One batch image-conversion job.

    Attributes:
        in_dir: Directory holding the source .png files
        out_dir: Directory the variants are written to
        formats: Output formats to produce for every source file
        resize: Optional resize applied before encoding
        sharpen: Sharpen before webp encoding (and use a lower webp quality)
        override: Rewrite variants that already exist
    """

    in_dir: Path
    out_dir: Path
    formats: list[ImageFormat]
    resize: ResizeRule | None = None
    sharpen: bool = False
    override: bool = False

    @field_validator("formats")
    @classmethod
    def formats_not_empty(cls, formats: list[str]) -> list[str]:
        if not formats:
            raise ValueError("at least one output format is required")
        if len(set(formats)) != len(formats):
            raise ValueError(f"duplicate output formats: {formats}")
        return formats

    @property
    def needs_flatten(self) -> bool:
        """Whether the alpha channel is flattened before encoding.

        jpg has no alpha channel; webp-only outputs are flattened too so
        they match the jpg variants they are served alongside.
        """
        return "jpg" in self.formats or self.formats == ["webp"]
