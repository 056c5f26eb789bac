import pytest
from PIL import Image as PILImage

from rubydung.image import Image, Texture, load_image


def _write_rgb(path):
    img = PILImage.new("RGB", (2, 3))
    colors = [(255, 0, 0), (0, 255, 0), (0, 0, 255), (9, 9, 9), (1, 2, 3), (7, 8, 9)]
    img.putdata(colors)
    img.save(path)
    return img


def test_loads_rgb_dimensions_and_pixels(tmp_path):
    path = tmp_path / "rgb.png"
    original = _write_rgb(path)
    image = load_image(path)
    assert (image.width, image.height, image.channels) == (2, 3, 3)
    assert image.pixels == original.tobytes()
    assert image.path == str(path)


def test_flip_reverses_row_order(tmp_path):
    path = tmp_path / "rgb.png"
    _write_rgb(path)
    normal = load_image(path)
    flipped = load_image(path, flip=True)
    row = normal.width * normal.channels
    rows = [normal.pixels[i:i + row] for i in range(0, len(normal.pixels), row)]
    assert flipped.pixels == b"".join(reversed(rows))


def test_grayscale_keeps_single_channel(tmp_path):
    path = tmp_path / "gray.png"
    PILImage.new("L", (4, 4), 128).save(path)
    image = load_image(path)
    assert image.channels == 1
    assert len(image.pixels) == 16


def test_rgba_keeps_alpha(tmp_path):
    path = tmp_path / "rgba.png"
    PILImage.new("RGBA", (1, 1), (10, 20, 30, 40)).save(path)
    image = load_image(path)
    assert image.channels == 4
    assert image.pixels == bytes([10, 20, 30, 40])


def test_palette_without_transparency_becomes_rgb(tmp_path):
    path = tmp_path / "pal.png"
    PILImage.new("RGB", (2, 2), (5, 6, 7)).convert("P").save(path)
    image = load_image(path)
    assert image.channels == 3
    assert image.pixels[:3] == bytes([5, 6, 7])


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_image(tmp_path / "missing.png")


def test_non_image_raises(tmp_path):
    path = tmp_path / "not_an_image.png"
    path.write_bytes(b"plain text")
    with pytest.raises(OSError):
        load_image(path)


def test_texture_rejects_unsupported_channels():
    with pytest.raises(ValueError):
        Texture().upload(Image(1, 1, 5, bytes(5)))


def test_texture_rejects_wrong_pixel_length():
    with pytest.raises(ValueError):
        Texture().upload(Image(2, 2, 3, bytes(3)))