"""Image scaling operations."""
from typing import Any, Optional
from PIL import Image

from upscale.options import Options, default_options
from upscale.resample import resample
from upscale.size_utils import (
    target_size_by_factor,
    target_size_for_width,
    target_size_for_height
)


def _algorithm(options: Optional[Options]) -> Any:
    """Return the algorithm selector of options, or the default one."""
    return (options or default_options()).algorithm


def by_factor(
    pil_img: Image.Image,
    factor: float,
    options: Optional[Options] = None
) -> Image.Image:
    """
    Scale image by a multiplication factor.

    Args:
        pil_img: Input PIL Image
        factor: Scale factor; non-positive values mean 1
        options: Upscale options (default: Catmull-Rom)

    Returns:
        Scaled image
    """
    target_wh = target_size_by_factor(pil_img.size, factor)
    return resample(pil_img, target_wh, _algorithm(options))


def to_size(
    pil_img: Image.Image,
    width: int,
    height: int,
    options: Optional[Options] = None
) -> Image.Image:
    """
    Scale image to exact dimensions.

    Non-positive dimensions return pil_img unchanged.

    Args:
        pil_img: Input PIL Image
        width: Target width
        height: Target height
        options: Upscale options (default: Catmull-Rom)

    Returns:
        Scaled image
    """
    return resample(pil_img, (width, height), _algorithm(options))


def to_width(
    pil_img: Image.Image,
    width: int,
    options: Optional[Options] = None
) -> Image.Image:
    """
    Scale image to a width, maintaining aspect ratio.

    Args:
        pil_img: Input PIL Image
        width: Target width
        options: Upscale options (default: Catmull-Rom)

    Returns:
        Scaled image
    """
    target_wh = target_size_for_width(pil_img.size, width)
    return resample(pil_img, target_wh, _algorithm(options))


def to_height(
    pil_img: Image.Image,
    height: int,
    options: Optional[Options] = None
) -> Image.Image:
    """
    Scale image to a height, maintaining aspect ratio.

    Args:
        pil_img: Input PIL Image
        height: Target height
        options: Upscale options (default: Catmull-Rom)

    Returns:
        Scaled image
    """
    target_wh = target_size_for_height(pil_img.size, height)
    return resample(pil_img, target_wh, _algorithm(options))


def double(pil_img: Image.Image) -> Image.Image:
    """
    Double image size with default options.

    Args:
        pil_img: Input PIL Image

    Returns:
        Image with twice the width and height
    """
    return by_factor(pil_img, 2, default_options())


def triple(pil_img: Image.Image) -> Image.Image:
    """
    Triple image size with default options.

    Args:
        pil_img: Input PIL Image

    Returns:
        Image with three times the width and height
    """
    return by_factor(pil_img, 3, default_options())


def quadruple(pil_img: Image.Image) -> Image.Image:
    """
    Quadruple image size with default options.

    Args:
        pil_img: Input PIL Image

    Returns:
        Image with four times the width and height
    """
    return by_factor(pil_img, 4, default_options())
