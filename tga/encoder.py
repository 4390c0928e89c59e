import numbers

import numpy as np

from .errors import (
    DimensionTooLarge,
    InvalidPixelData,
    PixelCountMismatch,
    SinkWriteFailed,
)
from .tga import TGA, PixelBGRA

# RGBA -> BGRA
_SWIZZLE = [2, 1, 0, 3]


def _check_dimensions(width, height):
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise TypeError(
                f"TGA.encode: dimensions must be integers, got {type(value).__name__}"
            )

    if not (0 <= width <= TGA.DIMENSION_MAX and 0 <= height <= TGA.DIMENSION_MAX):
        raise DimensionTooLarge(width, height)


def _rgba_array(pixels) -> np.ndarray:
    """Read any supported pixel input as an (n, 4) uint8 RGBA array."""
    if isinstance(pixels, (bytes, bytearray, memoryview)):
        data = bytes(pixels)
        if len(data) % 4:
            raise InvalidPixelData(
                f"TGA.encode: {len(data)} bytes is not a whole number of RGBA pixels"
            )
        return np.frombuffer(data, dtype=np.uint8).reshape(-1, 4)

    if isinstance(pixels, np.ndarray):
        arr = pixels
    else:
        rows = [p.to_rgba() if isinstance(p, PixelBGRA) else p for p in pixels]
        if not rows:
            return np.empty((0, 4), dtype=np.uint8)
        try:
            arr = np.asarray(rows)
        except ValueError as exc:
            # ragged rows
            raise InvalidPixelData(f"TGA.encode: malformed pixel rows: {exc}") from exc

    if arr.size == 0:
        return np.empty((0, 4), dtype=np.uint8)

    if arr.ndim < 2 or arr.shape[-1] != 4:
        raise InvalidPixelData(
            f"TGA.encode: expected 4 channels per pixel, got array of shape {arr.shape}"
        )

    if not np.issubdtype(arr.dtype, np.integer):
        raise InvalidPixelData(
            f"TGA.encode: channel values must be integers, got dtype {arr.dtype}"
        )

    if arr.dtype != np.uint8 and (arr.min() < 0 or arr.max() > 255):
        raise InvalidPixelData("TGA.encode: channel values must be in 0..255")

    return arr.reshape(-1, 4).astype(np.uint8, copy=False)


class TGAEncoder:
    """
    Encoder for uncompressed 32-bit BGRA TGA files.

    Pixels come in row-major, top row first. Plain tuples, numpy arrays and
    flat buffers are read in RGBA order and swapped to BGRA on the way out;
    PixelBGRA values are written by channel name. Nothing is written to a
    sink until every check has passed.
    """

    @staticmethod
    def header(width: int, height: int) -> bytes:
        _check_dimensions(width, height)
        return TGA.header(int(width), int(height))

    @staticmethod
    def encode(width: int, height: int, pixels) -> bytes:
        """
        Encode a TGA file.

        :param width: Image width, 0..65535.
        :param height: Image height, 0..65535.
        :param pixels: width * height pixels: PixelBGRA values, (r, g, b, a) tuples,
                       an RGBA numpy array or a flat RGBA bytes-like object.
        :return: bytes object containing the 18-byte header followed by the BGRA pixels.
        """
        _check_dimensions(width, height)
        # numpy scalars would overflow width * height in their own dtype
        width, height = int(width), int(height)
        header = TGA.header(width, height)

        rgba = _rgba_array(pixels)
        if len(rgba) != width * height:
            raise PixelCountMismatch(width * height, len(rgba))

        return header + rgba[:, _SWIZZLE].tobytes()

    @staticmethod
    def write(sink, width: int, height: int, pixels) -> int:
        """
        Encode and hand the file to ``sink.write``.

        Short writes from raw streams are retried with the remainder; a sink whose
        ``write`` returns None is taken to have accepted everything. The sink is not
        flushed or closed. Returns the number of bytes written.
        """
        data = TGAEncoder.encode(width, height, pixels)
        _write_bytes(sink, data)
        return len(data)

    @staticmethod
    def save(path, width: int, height: int, pixels) -> int:
        """Encode to a file. The file is only opened once encoding has succeeded."""
        data = TGAEncoder.encode(width, height, pixels)
        with open(path, "wb") as f:
            _write_bytes(f, data)
        return len(data)


def _write_bytes(sink, data):
    view = memoryview(data)
    while view:
        try:
            n = sink.write(view)
        except Exception as exc:
            raise SinkWriteFailed(exc) from exc

        if n is None:
            break
        if n == 0:
            err = OSError(f"sink accepted 0 of {len(view)} remaining bytes")
            raise SinkWriteFailed(err) from err
        view = view[n:]


encode = TGAEncoder.encode
write = TGAEncoder.write
save = TGAEncoder.save
