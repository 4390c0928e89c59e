class EncodeError(Exception):
    """Base class for everything TGAEncoder raises."""


class DimensionTooLarge(EncodeError, ValueError):
    def __init__(self, width, height):
        self.width = width
        self.height = height
        super().__init__(
            f"TGA.encode: {width}x{height} does not fit the 16-bit size fields (0..65535)"
        )


class PixelCountMismatch(EncodeError, ValueError):
    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"TGA.encode: expected {expected} pixels for the given size, got {actual}"
        )


class InvalidPixelData(EncodeError, ValueError):
    """Pixel input that cannot be read as 4-channel 8-bit color."""


class SinkWriteFailed(EncodeError):
    """The output sink refused the bytes. The sink's own error is the cause."""

    def __init__(self, sink_error):
        self.sink_error = sink_error
        super().__init__(f"TGA.encode: sink write failed: {sink_error}")
