import numpy as np
from PIL import Image

import main
from converter import image_to_tga, tga_to_png
from tga import TGAEncoder, load_image


def write_png(path, mode="RGBA"):
    pixels = np.arange(4 * 3 * 4, dtype=np.uint8).reshape(3, 4, 4)
    Image.fromarray(pixels).convert(mode).save(path)
    return pixels


def test_load_image_converts_to_rgba(tmp_path):
    path = tmp_path / "gray.png"
    write_png(path, mode="L")

    pixel_data, desc = load_image(str(path))
    assert pixel_data.shape == (3, 4, 4)
    assert desc == {"width": 4, "height": 3, "channels": 4}


def test_image_to_tga(tmp_path):
    src = tmp_path / "in.png"
    dst = tmp_path / "out.tga"
    pixels = write_png(src)

    written = image_to_tga(str(src), str(dst))

    assert written == 18 + 4 * 4 * 3
    assert dst.read_bytes() == TGAEncoder.encode(4, 3, pixels)


def test_round_trip_through_pillow(tmp_path):
    src = tmp_path / "in.png"
    dst = tmp_path / "out.tga"
    back = tmp_path / "back.png"
    write_png(src)

    image_to_tga(str(src), str(dst))
    tga_to_png(str(dst), str(back))

    assert Image.open(src).tobytes() == Image.open(back).tobytes()


def test_main(tmp_path, capsys):
    src = tmp_path / "in.png"
    write_png(src)

    assert main.main([str(src)]) == 0
    assert (tmp_path / "in.tga").exists()
    assert "Encoded TGA to 66 bytes" in capsys.readouterr().out


def test_main_reports_encode_error(tmp_path, capsys, monkeypatch):
    src = tmp_path / "wide.png"
    out = tmp_path / "wide.tga"

    def fake_load_image(filepath):
        return np.zeros((1, 1, 4), dtype=np.uint8), {"width": 65536, "height": 1, "channels": 4}

    monkeypatch.setattr(main, "load_image", fake_load_image)

    assert main.main([str(src), str(out)]) == 1
    err = capsys.readouterr().err
    assert "Error:" in err
    assert "65536" in err
    assert not out.exists()


def test_main_reports_unreadable_input(tmp_path, capsys):
    missing = tmp_path / "missing.png"
    assert main.main([str(missing)]) == 1

    not_an_image = tmp_path / "notes.png"
    not_an_image.write_text("hello")
    assert main.main([str(not_an_image)]) == 1

    assert capsys.readouterr().err.count("Error:") == 2
    assert not (tmp_path / "notes.tga").exists()
