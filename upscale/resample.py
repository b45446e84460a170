"""
Kernel-based image resampling.

Pillow maps destination pixel centers back onto the source, drops taps
falling outside it and filters RGBA on premultiplied values. The resized
layer is then composited source-over onto a transparent canvas of the
target size.
"""
import logging
from typing import Any, Dict, Tuple
from PIL import Image
from PIL.Image import Resampling

from upscale.options import Algorithm

logger = logging.getLogger(__name__)

# Resampling constants
NEAREST = Resampling.NEAREST
BILINEAR = Resampling.BILINEAR
# Cubic convolution with a = -0.5
CATMULL_ROM = Resampling.BICUBIC

RESAMPLING: Dict[Algorithm, Resampling] = {
    Algorithm.nearest_neighbor: NEAREST,
    Algorithm.bilinear: BILINEAR,
    Algorithm.catmull_rom: CATMULL_ROM,
}


def resolve_algorithm(algorithm: Any) -> Algorithm:
    """
    Map an algorithm selector to a known Algorithm.

    Unknown or missing selectors fall back to Catmull-Rom.

    Args:
        algorithm: Algorithm member or its string value

    Returns:
        Algorithm to use
    """
    try:
        return Algorithm(algorithm)
    except ValueError:
        logger.debug("Unknown algorithm %r, falling back to catmull_rom", algorithm)
        return Algorithm.catmull_rom


def transparent_canvas(size: Tuple[int, int]) -> Image.Image:
    """Return a fully transparent RGBA image of (width, height)."""
    return Image.new("RGBA", size, (0, 0, 0, 0))


def resample(
    pil_img: Image.Image,
    target_wh: Tuple[int, int],
    algorithm: Any = Algorithm.catmull_rom
) -> Image.Image:
    """
    Resample an image to exact dimensions with the selected kernel.

    If either target dimension is non-positive, the source image itself is
    returned (same object, not a copy). Otherwise a new RGBA image of
    exactly target_wh is allocated and filled.

    Args:
        pil_img: Source PIL Image with positive width and height
        target_wh: Target (width, height) tuple
        algorithm: Algorithm selector; unknown values use Catmull-Rom

    Returns:
        Resampled RGBA image, or pil_img for non-positive targets
    """
    width, height = target_wh
    if width <= 0 or height <= 0:
        return pil_img

    algo = resolve_algorithm(algorithm)
    logger.debug(
        "Resampling %dx%d -> %dx%d (%s)",
        pil_img.width, pil_img.height, width, height, algo.value
    )

    src = pil_img if pil_img.mode == "RGBA" else pil_img.convert("RGBA")
    layer = src.resize((width, height), resample=RESAMPLING[algo])
    return Image.alpha_composite(transparent_canvas((width, height)), layer)
