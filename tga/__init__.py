from .encoder import TGAEncoder, encode, save, write
from .errors import (
    DimensionTooLarge,
    EncodeError,
    InvalidPixelData,
    PixelCountMismatch,
    SinkWriteFailed,
)
from .tga import TGA, PixelBGRA
from .utils import load_image

__all__ = [
    "TGAEncoder",
    "TGA",
    "PixelBGRA",
    "EncodeError",
    "DimensionTooLarge",
    "PixelCountMismatch",
    "InvalidPixelData",
    "SinkWriteFailed",
    "encode",
    "write",
    "save",
    "load_image",
]
