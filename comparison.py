#! Our encoder is numpy plus a header, Pillow's TGA writer is C. Both write uncompressed 32-bit files here.

import time

from PIL import Image

from tga import TGAEncoder, load_image

INPUT_IMAGE = "fruits.png"
OUTPUT_TGA = "fruits.tga"
OUTPUT_PILLOW_TGA = "fruits_pillow.tga"


def time_compare(pixel_data, desc):
    # Our encoder
    start_time = time.time()
    written = TGAEncoder.save(OUTPUT_TGA, desc["width"], desc["height"], pixel_data)
    end_time = time.time()
    print(f"Saved TGA to {OUTPUT_TGA} in {end_time - start_time:.2f} seconds")
    print(f"Encoded TGA to {written} bytes")

    # Pillow, no RLE
    start_time = time.time()
    image = Image.fromarray(pixel_data)
    image.save(OUTPUT_PILLOW_TGA, format="TGA", compression=None)
    end_time = time.time()
    print(f"Saved Pillow TGA to {OUTPUT_PILLOW_TGA} in {end_time - start_time:.2f} seconds")
    with open(OUTPUT_PILLOW_TGA, "rb") as f:
        print(f"Encoded Pillow TGA to {len(f.read())} bytes")


if __name__ == "__main__":
    pixel_data, desc = load_image(INPUT_IMAGE)
    print(
        f"Loaded image {INPUT_IMAGE}: {desc['width']}x{desc['height']} Channels: {desc['channels']}"
    )
    print(f"Original {INPUT_IMAGE} {pixel_data.nbytes} bytes")

    time_compare(pixel_data, desc)
