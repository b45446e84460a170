"""Upscale - Image upscaling with selectable interpolation kernels."""
from upscale.options import Algorithm, Options, default_options
from upscale.scale import (
    by_factor,
    to_size,
    to_width,
    to_height,
    double,
    triple,
    quadruple
)
from upscale.io import load_and_upscale, save_as_jpeg, save_as_png, save_image
from upscale.errors import UpscaleError, ImageIOError, DecodeError, EncodeError
from upscale.pipeline import process_one

__version__ = "0.1.0"
__all__ = [
    "Algorithm",
    "Options",
    "default_options",
    "by_factor",
    "to_size",
    "to_width",
    "to_height",
    "double",
    "triple",
    "quadruple",
    "load_and_upscale",
    "save_as_jpeg",
    "save_as_png",
    "save_image",
    "process_one",
    "UpscaleError",
    "ImageIOError",
    "DecodeError",
    "EncodeError",
]
