import numpy as np
from PIL import Image


def load_image(filepath: str) -> tuple[np.ndarray, dict]:
    """Load an image and return RGBA pixel data as numpy array + description."""

    ext = filepath.lower().split(".")[-1]

    if ext in ("dng", "cr2", "nef", "arw", "raw"):
        # RAW formats - requires rawpy
        import rawpy

        with rawpy.imread(filepath) as raw:
            rgb = raw.postprocess()
        img = Image.fromarray(rgb)
    else:
        # Standard formats (PNG, JPEG, etc.)
        img = Image.open(filepath)

    # The encoder only takes 4 channels
    if img.mode != "RGBA":
        img = img.convert("RGBA")

    return np.array(img), {
        "width": img.size[0],
        "height": img.size[1],
        "channels": 4,
    }
