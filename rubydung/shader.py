"""GLSL programs loaded from one file that holds both shader stages."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Union

import numpy as np

from . import log

# Attribute locations shared by the vertex layouts and the shaders.
SHADER_VERTEX_BIT = 0
SHADER_COLOR_BIT = 1
SHADER_TEX_BIT = 2
SHADER_BRIG_BIT = 3
SHADER_OPAQ_BIT = 4

SHADER_USE_COLOR = 1 >> SHADER_COLOR_BIT
SHADER_USE_TEX = 1 >> SHADER_TEX_BIT
SHADER_USE_BRIG = 1 >> SHADER_BRIG_BIT
SHADER_USE_SCALAR = 1 >> SHADER_OPAQ_BIT

VERTEX_SHADER = 0x8B31
FRAGMENT_SHADER = 0x8B30


class _LazyGL:
    """Resolves OpenGL entry points on first use."""

    def __getattr__(self, name: str) -> Any:
        from pyglet import gl

        return getattr(gl, name)


_gl = _LazyGL()


class ShaderError(Exception):
    """A shader file could not be read, compiled or linked."""


@dataclass(frozen=True)
class ShaderSources:
    vertex: str
    fragment: str


def parse_shader_text(text: str) -> ShaderSources:
    """Split a combined shader text into its vertex and fragment sources.

    A line containing ``#shader`` switches stages when it also names
    ``vertex`` or ``fragment``; any other such line leaves the stage as it
    was. Lines before the first stage header are discarded.
    """
    parts: Dict[str, List[str]] = {"vertex": [], "fragment": []}
    current: Optional[str] = None
    for line in text.splitlines():
        if "#shader" in line:
            if "vertex" in line:
                current = "vertex"
            elif "fragment" in line:
                current = "fragment"
        elif current is not None:
            parts[current].append(line + "\n")
    return ShaderSources("".join(parts["vertex"]), "".join(parts["fragment"]))


def parse_shader_file(path: Union[str, os.PathLike]) -> ShaderSources:
    """Read and split a combined shader file."""
    try:
        with open(path, encoding="utf-8") as stream:
            text = stream.read()
    except OSError as exc:
        raise ShaderError(f'failed to open shader file "{os.fspath(path)}"') from exc
    return parse_shader_text(text)


def _link_program(sources: ShaderSources, path: str) -> Any:
    """Compile both stages and link them into a program object."""
    from pyglet.graphics.shader import Shader as Stage
    from pyglet.graphics.shader import ShaderException, ShaderProgram

    stages = []
    for kind, source in (("vertex", sources.vertex), ("fragment", sources.fragment)):
        try:
            stages.append(Stage(source, kind))
        except ShaderException as exc:
            log.error(f"{kind} shader error")
            raise ShaderError(f"{kind} shader error: {exc}") from exc
    try:
        return ShaderProgram(*stages)
    except ShaderException as exc:
        raise ShaderError(f'failed to link shader "{path}": {exc}') from exc


class Shader:
    """A linked vertex + fragment program with cached uniform locations."""

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self.path = os.fspath(path)
        sources = parse_shader_file(path)
        self._locations: Dict[str, int] = {}
        self._program: Any = _link_program(sources, self.path)
        self.id = self._program.id

    def _location(self, name: str) -> int:
        if name not in self._locations:
            encoded = name.encode("utf-8") + b"\0"
            buffer = (_gl.GLchar * len(encoded)).from_buffer_copy(encoded)
            location = _gl.glGetUniformLocation(self.id, buffer)
            if location == -1:
                log.debug(f'shader location of "{name}" not found')
            self._locations[name] = location
        return self._locations[name]

    def bind(self) -> None:
        _gl.glUseProgram(self.id)

    def unbind(self) -> None:
        _gl.glUseProgram(0)

    def delete(self) -> None:
        if self._program is not None:
            self._program.delete()
            self._program = None
            self.id = 0

    def set_bool(self, name: str, value: bool) -> None:
        location = self._location(name)
        if location != -1:
            _gl.glUniform1i(location, 1 if value else 0)

    def set_int(self, name: str, value: int) -> None:
        location = self._location(name)
        if location != -1:
            _gl.glUniform1i(location, int(value))

    def set_float(self, name: str, value: float) -> None:
        location = self._location(name)
        if location != -1:
            _gl.glUniform1f(location, float(value))

    def set_vec2(self, name: str, value: Iterable[float]) -> None:
        location = self._location(name)
        if location != -1:
            x, y = (float(c) for c in value)
            _gl.glUniform2f(location, x, y)

    def set_vec3(self, name: str, value: Iterable[float]) -> None:
        location = self._location(name)
        if location != -1:
            x, y, z = (float(c) for c in value)
            _gl.glUniform3f(location, x, y, z)

    def set_vec4(self, name: str, value: Iterable[float]) -> None:
        location = self._location(name)
        if location != -1:
            x, y, z, w = (float(c) for c in value)
            _gl.glUniform4f(location, x, y, z, w)

    def _set_matrix(self, name: str, value: Any, size: int, setter: Any) -> None:
        matrix = np.asarray(value, dtype=np.float32)
        if matrix.shape != (size, size):
            raise ValueError(f"expected a {size}x{size} matrix, got shape {matrix.shape}")
        location = self._location(name)
        if location == -1:
            return
        # Matrices act on column vectors; OpenGL wants them column-major.
        values = matrix.T.ravel().tolist()
        data = (_gl.GLfloat * len(values))(*values)
        setter(location, 1, False, data)

    def set_mat2(self, name: str, value: Any) -> None:
        self._set_matrix(name, value, 2, _gl.glUniformMatrix2fv)

    def set_mat3(self, name: str, value: Any) -> None:
        self._set_matrix(name, value, 3, _gl.glUniformMatrix3fv)

    def set_mat4(self, name: str, value: Any) -> None:
        self._set_matrix(name, value, 4, _gl.glUniformMatrix4fv)