"""Decoded images and the OpenGL textures made from them."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Union

from PIL import Image as PILImage

NEAREST = 0x2600
LINEAR = 0x2601

_TEXTURE_2D = 0x0DE1
_TEXTURE0 = 0x84C0
_TEXTURE_WRAP_S = 0x2802
_TEXTURE_WRAP_T = 0x2803
_TEXTURE_MIN_FILTER = 0x2801
_TEXTURE_MAG_FILTER = 0x2800
_REPEAT = 0x2901
_RGB = 0x1907
_UNSIGNED_BYTE = 0x1401
_UNPACK_ALIGNMENT = 0x0CF5

_CHANNELS = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}
_FORMATS = {1: 0x1903, 2: 0x8227, 3: 0x1907, 4: 0x1908}


class _LazyGL:
    """Resolves OpenGL entry points on first use."""

    def __getattr__(self, name: str) -> Any:
        from pyglet import gl

        return getattr(gl, name)


_gl = _LazyGL()


@dataclass
class Image:
    """8-bit pixel data stored row by row, first row on top unless flipped."""

    width: int
    height: int
    channels: int
    pixels: bytes
    path: str = ""


def _native_mode(img: PILImage.Image) -> str:
    if img.mode in _CHANNELS:
        return img.mode
    if img.mode == "P":
        return "RGBA" if "transparency" in img.info else "RGB"
    if img.mode in ("1", "I", "I;16", "F"):
        return "L"
    return "RGBA" if "A" in img.getbands() else "RGB"


def load_image(path: Union[str, os.PathLike], flip: bool = False) -> Image:
    """Decode an image file, keeping its own channel count.

    Raises OSError when the file is missing or not a readable image.
    """
    with PILImage.open(path) as img:
        img.load()
        converted = img.convert(_native_mode(img))
    if flip:
        converted = converted.transpose(PILImage.Transpose.FLIP_TOP_BOTTOM)
    return Image(
        width=converted.width,
        height=converted.height,
        channels=_CHANNELS[converted.mode],
        pixels=converted.tobytes(),
        path=os.fspath(path),
    )


class Texture:
    """A 2D OpenGL texture with repeat wrapping and mipmaps."""

    def __init__(self) -> None:
        self.id = 0
        self.width = 0
        self.height = 0

    def upload(self, image: Image, filter_mode: int = NEAREST) -> None:
        """Send ``image`` to the GPU using ``filter_mode`` for both filters."""
        if image.channels not in _FORMATS:
            raise ValueError(f"unsupported channel count: {image.channels}")
        expected = image.width * image.height * image.channels
        if len(image.pixels) != expected:
            raise ValueError(f"expected {expected} bytes of pixels, got {len(image.pixels)}")

        if not self.id:
            handle = _gl.GLuint(0)
            _gl.glGenTextures(1, handle)
            self.id = handle.value
        _gl.glBindTexture(_TEXTURE_2D, self.id)
        _gl.glTexParameteri(_TEXTURE_2D, _TEXTURE_WRAP_S, _REPEAT)
        _gl.glTexParameteri(_TEXTURE_2D, _TEXTURE_WRAP_T, _REPEAT)
        _gl.glTexParameteri(_TEXTURE_2D, _TEXTURE_MIN_FILTER, filter_mode)
        _gl.glTexParameteri(_TEXTURE_2D, _TEXTURE_MAG_FILTER, filter_mode)
        _gl.glPixelStorei(_UNPACK_ALIGNMENT, 1)

        data = (_gl.GLubyte * len(image.pixels)).from_buffer_copy(image.pixels)
        _gl.glTexImage2D(
            _TEXTURE_2D,
            0,
            _RGB,
            image.width,
            image.height,
            0,
            _FORMATS[image.channels],
            _UNSIGNED_BYTE,
            data,
        )
        _gl.glGenerateMipmap(_TEXTURE_2D)
        self.width = image.width
        self.height = image.height

    def bind(self) -> None:
        _gl.glActiveTexture(_TEXTURE0)
        _gl.glBindTexture(_TEXTURE_2D, self.id)

    def unbind(self) -> None:
        _gl.glBindTexture(_TEXTURE_2D, 0)


def load_texture(path: Union[str, os.PathLike], filter_mode: int = NEAREST) -> Texture:
    """Load an image flipped for OpenGL's bottom-up rows and upload it."""
    image = load_image(path, flip=True)
    texture = Texture()
    texture.upload(image, filter_mode)
    return texture