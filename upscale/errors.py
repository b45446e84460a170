"""Exceptions raised by the upscale package."""


class UpscaleError(Exception):
    """Base class for upscale errors."""


class ImageIOError(UpscaleError, OSError):
    """The image resource could not be opened, read or written."""


class DecodeError(UpscaleError, ValueError):
    """The bytes are not a valid or recognized image container."""


class EncodeError(UpscaleError):
    """The encoder or the underlying writer rejected the output."""
