"""Image preparation and per-format encoding.

The png and jpg outputs are squeezed as small as possible to keep the total
size of the asset tree down; most browsers are expected to consume webp.
"""

import io
from pathlib import Path

import imagequant
from PIL import Image, ImageFilter, ImageOps

from schemas.transform import ResizeRule

# Shows through where transparency is flattened away.
FLATTEN_BACKGROUND = "#FFE164"

PNG_MIN_QUALITY = 30
PNG_MAX_QUALITY = 60

JPEG_QUALITY = 50

WEBP_QUALITY = 70
WEBP_SHARPENED_QUALITY = 60
WEBP_ALPHA_QUALITY = 30
WEBP_METHOD = 6

_RESAMPLE = Image.Resampling.LANCZOS


def has_alpha(image: Image.Image) -> bool:
    return image.mode in ("RGBA", "LA", "PA") or (
        image.mode == "P" and "transparency" in image.info
    )


def load_image(path: Path) -> Image.Image:
    """Decode a source image into RGBA or RGB."""
    with Image.open(path) as image:
        image.load()
        return image.convert("RGBA" if has_alpha(image) else "RGB")


def resize_image(image: Image.Image, rule: ResizeRule) -> Image.Image:
    """Resize an image according to a resize rule's fit mode.

    inside:  keep aspect ratio, fit within the bounds, never upscale
    cover:   keep aspect ratio, fill the bounds, crop the overflow
    contain: keep aspect ratio, pad to the bounds with transparency
    fill:    stretch to the exact bounds
    """
    size = (rule.width, rule.height)
    if rule.fit == "inside":
        resized = image.copy()
        resized.thumbnail(size, _RESAMPLE)
        return resized
    if rule.fit == "cover":
        return ImageOps.fit(image, size, _RESAMPLE)
    if rule.fit == "contain":
        return ImageOps.pad(image.convert("RGBA"), size, _RESAMPLE, color=(0, 0, 0, 0))
    return image.resize(size, _RESAMPLE)


def flatten_image(image: Image.Image, background: str = FLATTEN_BACKGROUND) -> Image.Image:
    """Composite an image onto a solid background, dropping its alpha channel."""
    if not has_alpha(image):
        return image.convert("RGB")
    rgba = image.convert("RGBA")
    flattened = Image.new("RGB", rgba.size, background)
    flattened.paste(rgba, mask=rgba.getchannel("A"))
    return flattened


def prepare_image(path: Path, resize: ResizeRule | None, flatten: bool) -> Image.Image:
    """Run the part of the pipeline shared by every output format."""
    image = load_image(path)
    if resize is not None:
        image = resize_image(image, resize)
    if flatten:
        image = flatten_image(image)
    return image


def encode_png(image: Image.Image, sharpen: bool = False) -> bytes:
    # Lossy palette quantization, as pngquant does.
    quantized = imagequant.quantize_pil_image(
        image.convert("RGBA"),
        dithering_level=0.0,
        max_colors=256,
        min_quality=PNG_MIN_QUALITY,
        max_quality=PNG_MAX_QUALITY,
    )
    buffer = io.BytesIO()
    quantized.save(buffer, format="PNG", optimize=True)
    return buffer.getvalue()


def encode_jpg(image: Image.Image, sharpen: bool = False) -> bytes:
    buffer = io.BytesIO()
    image.convert("RGB").save(
        buffer,
        format="JPEG",
        quality=JPEG_QUALITY,
        subsampling=0,  # 4:4:4
        optimize=True,
    )
    return buffer.getvalue()


def encode_webp(image: Image.Image, sharpen: bool = False) -> bytes:
    # Sharpened output tolerates a lower quality.
    if sharpen:
        image = image.filter(ImageFilter.SHARPEN)
    buffer = io.BytesIO()
    image.save(
        buffer,
        format="WEBP",
        quality=WEBP_SHARPENED_QUALITY if sharpen else WEBP_QUALITY,
        alpha_quality=WEBP_ALPHA_QUALITY,
        method=WEBP_METHOD,
    )
    return buffer.getvalue()


ENCODERS = {
    "png": encode_png,
    "jpg": encode_jpg,
    "webp": encode_webp,
}
