"""Image decoding and encoding."""
import logging
from pathlib import Path
from typing import BinaryIO, Optional, Union
from PIL import Image

from upscale.errors import DecodeError, EncodeError, ImageIOError
from upscale.options import DEFAULT_JPEG_QUALITY, Options
from upscale.scale import by_factor

logger = logging.getLogger(__name__)

JPEG_SUFFIXES = (".jpg", ".jpeg")


def flatten_to_rgb(pil_img: Image.Image) -> Image.Image:
    """
    Drop the alpha channel by compositing over black.

    This keeps the premultiplied color, which is what an encoder without
    alpha support sees.

    Args:
        pil_img: PIL Image in any mode

    Returns:
        PIL Image in RGB mode
    """
    if "A" not in pil_img.getbands() and pil_img.mode != "P":
        return pil_img.convert("RGB")
    rgba = pil_img if pil_img.mode == "RGBA" else pil_img.convert("RGBA")
    black = Image.new("RGBA", rgba.size, (0, 0, 0, 255))
    return Image.alpha_composite(black, rgba).convert("RGB")


def decode_image(fp: BinaryIO) -> Image.Image:
    """
    Decode an image from a binary file object and convert it to RGBA mode.

    The container format is detected from the bytes. Pixel data is loaded
    eagerly so the caller may close fp afterwards.

    Args:
        fp: Readable binary file object

    Returns:
        PIL Image in RGBA mode

    Raises:
        DecodeError: If the bytes are not a valid or recognized image
    """
    try:
        img = Image.open(fp)
        img.load()
    except (
        OSError,
        EOFError,
        SyntaxError,
        ValueError,
        Image.DecompressionBombError
    ) as e:
        raise DecodeError(f"Cannot decode image: {e}") from e
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    return img


def load_image_rgba(path: Union[str, Path, BinaryIO]) -> Image.Image:
    """
    Load an image and convert it to RGBA mode.

    File objects are decoded as-is and left open for the caller to close.

    Args:
        path: Path to the image file, or a readable binary file object

    Returns:
        PIL Image in RGBA mode

    Raises:
        ImageIOError: If the file cannot be opened
        DecodeError: If the file is not a valid image
    """
    if hasattr(path, "read"):
        return decode_image(path)
    try:
        fh = open(path, "rb")
    except OSError as e:
        raise ImageIOError(f"{path}: {e}") from e
    with fh:
        img = decode_image(fh)
    logger.debug("Loaded %s (%dx%d)", path, img.width, img.height)
    return img


def load_and_upscale(
    path: Union[str, Path],
    factor: float,
    options: Optional[Options] = None
) -> Image.Image:
    """
    Load an image file and scale it by a factor.

    Args:
        path: Path to the image file
        factor: Scale factor; non-positive values mean 1
        options: Upscale options (default: Catmull-Rom)

    Returns:
        Scaled image

    Raises:
        ImageIOError: If the file cannot be opened
        DecodeError: If the file is not a valid image
    """
    return by_factor(load_image_rgba(path), factor, options)


def save_as_jpeg(
    img: Image.Image,
    sink: BinaryIO,
    quality: int = DEFAULT_JPEG_QUALITY
) -> None:
    """
    Encode an image as JPEG.

    Quality outside [1, 100] is replaced by 85. Alpha is flattened over
    black.

    Args:
        img: PIL Image to encode
        sink: Writable binary file object
        quality: JPEG quality (1-100)

    Raises:
        EncodeError: If encoding or writing fails
    """
    if quality <= 0 or quality > 100:
        logger.debug("JPEG quality %r out of range, using %d", quality, DEFAULT_JPEG_QUALITY)
        quality = DEFAULT_JPEG_QUALITY
    try:
        flatten_to_rgb(img).save(sink, format="JPEG", quality=quality)
    except (OSError, ValueError) as e:
        raise EncodeError(f"JPEG encode failed: {e}") from e


def save_as_png(img: Image.Image, sink: BinaryIO) -> None:
    """
    Encode an image as PNG (lossless).

    Args:
        img: PIL Image to encode
        sink: Writable binary file object

    Raises:
        EncodeError: If encoding or writing fails
    """
    try:
        img.save(sink, format="PNG")
    except (OSError, ValueError) as e:
        raise EncodeError(f"PNG encode failed: {e}") from e


def save_image(
    img: Image.Image,
    output_path: Union[str, Path],
    quality: int = DEFAULT_JPEG_QUALITY
) -> None:
    """
    Save an image, choosing JPEG or PNG from the file suffix.

    .jpg and .jpeg are written as JPEG, everything else as PNG.

    Args:
        img: PIL Image to save
        output_path: Destination path
        quality: JPEG quality (ignored for PNG)

    Raises:
        ImageIOError: If the destination cannot be opened
        EncodeError: If encoding or writing fails
    """
    output_path = Path(output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fh = open(output_path, "wb")
    except OSError as e:
        raise ImageIOError(f"{output_path}: {e}") from e
    with fh:
        if output_path.suffix.lower() in JPEG_SUFFIXES:
            save_as_jpeg(img, fh, quality)
        else:
            save_as_png(img, fh)
    logger.debug("Saved %s (%dx%d)", output_path, img.width, img.height)
