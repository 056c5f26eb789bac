"""GPU vertex, index and vertex-array objects and their attribute layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List

import numpy as np

FLOAT = 0x1406
ARRAY_BUFFER = 0x8892
ELEMENT_ARRAY_BUFFER = 0x8893
STATIC_DRAW = 0x88E4


class _LazyGL:
    """Resolves OpenGL entry points on first use."""

    def __getattr__(self, name: str) -> Any:
        from pyglet import gl

        return getattr(gl, name)


_gl = _LazyGL()


@dataclass(frozen=True)
class VertexAttrib:
    """One vertex attribute: shader location, component count, type and placement in bytes."""

    index: int
    size: int
    type: int
    stride: int
    offset: int
    normalized: bool = False


class VertexLayout:
    """An ordered list of vertex attributes."""

    def __init__(self) -> None:
        self.attributes: List[VertexAttrib] = []

    def add_attribute(
        self,
        index: int,
        size: int,
        type: int,
        stride: int,
        offset: int,
        normalized: bool = False,
    ) -> None:
        self.attributes.append(VertexAttrib(index, size, type, stride, offset, normalized))

    def apply(self) -> None:
        """Describe and enable every attribute for the bound vertex array."""
        for attr in self.attributes:
            _gl.glVertexAttribPointer(
                attr.index,
                attr.size,
                attr.type,
                1 if attr.normalized else 0,
                attr.stride,
                attr.offset,
            )
            _gl.glEnableVertexAttribArray(attr.index)


def _new_handle(generator: Any) -> int:
    handle = _gl.GLuint(0)
    generator(1, handle)
    return handle.value


def _release(deleter: Any, handle: int) -> None:
    deleter(1, _gl.GLuint(handle))


def _as_array(data: Iterable[Any], dtype: Any) -> np.ndarray:
    source = data if isinstance(data, np.ndarray) else list(data)
    return np.ascontiguousarray(source, dtype=dtype)


def _upload(target: int, array: np.ndarray) -> None:
    _gl.glBufferData(target, int(array.nbytes), array.ctypes.data, STATIC_DRAW)


class VertexBuffer:
    """Buffer of 32-bit float vertex data."""

    def __init__(self) -> None:
        self.id = _new_handle(_gl.glGenBuffers)
        self.size = 0
        self.count = 0
        self._data = np.zeros(0, dtype=np.float32)

    def build(self, data: Iterable[float]) -> None:
        """Upload ``data``; ``size`` becomes its length in bytes."""
        self._data = _as_array(data, np.float32)
        self.size = int(self._data.nbytes)
        self.count = int(self._data.size)
        self.bind()
        _upload(ARRAY_BUFFER, self._data)

    def bind(self) -> None:
        _gl.glBindBuffer(ARRAY_BUFFER, self.id)

    def unbind(self) -> None:
        _gl.glBindBuffer(ARRAY_BUFFER, 0)

    def delete(self) -> None:
        if self.id:
            _release(_gl.glDeleteBuffers, self.id)
            self.id = 0


class IndexBuffer:
    """Buffer of unsigned 32-bit element indices."""

    def __init__(self) -> None:
        self.id = _new_handle(_gl.glGenBuffers)
        self.size = 0
        self.count = 0
        self._data = np.zeros(0, dtype=np.uint32)

    def build(self, data: Iterable[int]) -> None:
        """Upload ``data``; ``size`` becomes its length in bytes."""
        self._data = _as_array(data, np.uint32)
        self.size = int(self._data.nbytes)
        self.count = int(self._data.size)
        self.bind()
        _upload(ELEMENT_ARRAY_BUFFER, self._data)

    def bind(self) -> None:
        _gl.glBindBuffer(ELEMENT_ARRAY_BUFFER, self.id)

    def unbind(self) -> None:
        _gl.glBindBuffer(ELEMENT_ARRAY_BUFFER, 0)

    def delete(self) -> None:
        if self.id:
            _release(_gl.glDeleteBuffers, self.id)
            self.id = 0


class VertexArray:
    """Vertex array object; bound as soon as it is created."""

    def __init__(self) -> None:
        self.id = _new_handle(_gl.glGenVertexArrays)
        self.bind()

    def bind(self) -> None:
        _gl.glBindVertexArray(self.id)

    def unbind(self) -> None:
        _gl.glBindVertexArray(0)

    def link(self, layout: VertexLayout) -> None:
        layout.apply()

    def delete(self) -> None:
        if self.id:
            _release(_gl.glDeleteVertexArrays, self.id)
            self.id = 0