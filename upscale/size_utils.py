"""Target size calculation for scaling operations."""
import logging
from typing import Tuple

logger = logging.getLogger(__name__)


def target_size_by_factor(
    src_wh: Tuple[int, int],
    factor: float
) -> Tuple[int, int]:
    """
    Calculate target size for a uniform scale factor.

    Products are truncated toward zero. Non-positive factors are treated
    as identity scaling.

    Args:
        src_wh: Source (width, height) tuple
        factor: Scale factor (e.g., 2.0)

    Returns:
        (target_width, target_height) tuple
    """
    if factor <= 0:
        logger.debug("Non-positive scale factor %r, using 1", factor)
        factor = 1
    w, h = src_wh
    return (int(w * factor), int(h * factor))


def target_size_for_width(
    src_wh: Tuple[int, int],
    width: int
) -> Tuple[int, int]:
    """
    Calculate target size for a fixed width, maintaining aspect ratio.

    Args:
        src_wh: Source (width, height) tuple
        width: Target width

    Returns:
        (width, target_height) tuple
    """
    w, h = src_wh
    ratio = h / w
    return (width, int(width * ratio))


def target_size_for_height(
    src_wh: Tuple[int, int],
    height: int
) -> Tuple[int, int]:
    """
    Calculate target size for a fixed height, maintaining aspect ratio.

    Args:
        src_wh: Source (width, height) tuple
        height: Target height

    Returns:
        (target_width, height) tuple
    """
    w, h = src_wh
    ratio = w / h
    return (int(height * ratio), height)
