import numbers
import struct
from dataclasses import dataclass


class TGA:
    # TGA Constants
    HEADER_SIZE = 18
    IMAGE_TYPE_TRUECOLOR = 2  # uncompressed, no color map
    PIXEL_DEPTH = 32  # bits per pixel, BGRA
    ALPHA_BITS = 8
    ORIGIN_UPPER_LEFT = 0x20  # descriptor bit 5
    DIMENSION_MAX = 65535

    # id_length(1), color_map_type(1), image_type(1),
    # color map spec: first_entry(2), length(2), entry_size(1),
    # x_origin(2), y_origin(2), width(2), height(2), depth(1), descriptor(1)
    HEADER_FORMAT = "<BBBHHBHHHHBB"

    @classmethod
    def descriptor(cls):
        """Bits 3-0 hold the alpha depth, bit 5 puts row 0 at the top."""
        return cls.ALPHA_BITS | cls.ORIGIN_UPPER_LEFT

    @classmethod
    def header(cls, width, height):
        """
        Pack the 18-byte header for a 32-bit BGRA image.

        Dimensions are packed as-is; range checking belongs to the encoder.
        """
        return struct.pack(
            cls.HEADER_FORMAT,
            0,  # no image ID field
            0,  # no color map
            cls.IMAGE_TYPE_TRUECOLOR,
            0,
            0,
            0,
            0,
            0,
            width,
            height,
            cls.PIXEL_DEPTH,
            cls.descriptor(),
        )


@dataclass(frozen=True)
class PixelBGRA:
    """
    One 32-bit pixel, fields in on-disk order.

    Defaults to transparent black.
    """

    b: int = 0
    g: int = 0
    r: int = 0
    a: int = 0

    def __post_init__(self):
        for name in ("b", "g", "r", "a"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise TypeError(
                    f"PixelBGRA: channel {name}={value!r} is not an integer"
                )
            if not 0 <= value <= 255:
                raise ValueError(f"PixelBGRA: channel {name}={value} is not 0..255")

    @classmethod
    def from_rgba(cls, rgba):
        r, g, b, a = rgba
        return cls(b=b, g=g, r=r, a=a)

    def to_rgba(self):
        return (self.r, self.g, self.b, self.a)

    def __bytes__(self):
        return bytes((self.b, self.g, self.r, self.a))
