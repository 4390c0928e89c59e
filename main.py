import argparse
import sys
from pathlib import Path

from tga import EncodeError, TGAEncoder, load_image

INPUT_IMAGE = "fruits.png"


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert an image to an uncompressed 32-bit TGA file."
    )
    parser.add_argument(
        "input", nargs="?", default=INPUT_IMAGE, help="Image to convert (.png/.jpg/.dng/...)"
    )
    parser.add_argument("output", nargs="?", help="Output .tga path (default: input with .tga suffix)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    output = args.output or str(Path(args.input).with_suffix(".tga"))

    try:
        # UnidentifiedImageError is an OSError too
        pixel_data, desc = load_image(args.input)
        print(f"Loaded image {args.input}: {desc['width']}x{desc['height']} Channels: {desc['channels']}")
        print(f"Original {args.input} {pixel_data.nbytes} bytes")

        written = TGAEncoder.save(output, desc["width"], desc["height"], pixel_data)
    except (EncodeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Encoded TGA to {written} bytes at {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
