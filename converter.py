from PIL import Image

from tga import TGAEncoder, load_image

INPUT_IMAGE = "fruits.png"


def image_to_tga(src_path, tga_path):
    pixel_data, desc = load_image(src_path)

    written = TGAEncoder.save(tga_path, desc["width"], desc["height"], pixel_data)
    print(f"Converted {src_path} to {tga_path} ({written} bytes)")
    return written


def tga_to_png(tga_path, png_path):
    # Pillow's TGA reader doubles as an independent check of our output
    with Image.open(tga_path, formats=["TGA"]) as img:
        img.convert("RGBA").save(png_path)
    print(f"Converted {tga_path} to {png_path}")


if __name__ == "__main__":
    # Example conversions
    image_to_tga(INPUT_IMAGE, "fruits_converted.tga")
    tga_to_png("fruits_converted.tga", "fruits_reconverted.png")
    assert (
        Image.open(INPUT_IMAGE).convert("RGBA").tobytes()
        == Image.open("fruits_reconverted.png").tobytes()
    ), "Reconverted image does not match original!"
