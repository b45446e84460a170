"""Resampling algorithm selection and upscale options."""
import enum
from dataclasses import dataclass


class Algorithm(str, enum.Enum):
    """Interpolation kernel enumeration."""
    nearest_neighbor = "nearest_neighbor"
    bilinear = "bilinear"
    catmull_rom = "catmull_rom"


# Defaults
DEFAULT_ALGORITHM = Algorithm.catmull_rom
DEFAULT_JPEG_QUALITY = 85


@dataclass(frozen=True)
class Options:
    """
    Configuration for an upscale operation.

    The algorithm is not validated here; unknown values fall back to
    Catmull-Rom when the image is resampled.
    """
    algorithm: Algorithm = DEFAULT_ALGORITHM


def default_options() -> Options:
    """Return options using the Catmull-Rom kernel."""
    return Options(algorithm=DEFAULT_ALGORITHM)
