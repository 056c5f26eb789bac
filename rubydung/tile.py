"""Block types and their unit-cube face geometry."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple

TEXCOORD_SIZE = 2 * 4
VERTICES_SIZE = 3 * 4
LIGHTS_SIZE = 4
FACE_SIZE = TEXCOORD_SIZE + VERTICES_SIZE + LIGHTS_SIZE

# Width and height of one tile in the 16x16 terrain atlas, slightly shrunk.
UV_SPAN = 0.0624375
ATLAS_TILES = 16.0


class Face(IntEnum):
    FRONT = 1
    BACK = 2
    LEFT = 3
    RIGHT = 4
    BOTTOM = 5
    TOP = 6


class TileType(IntEnum):
    AIR = -1
    GRASS = 0
    ROCK = 1


_Corner = Tuple[float, float, float]

_FACE_CORNERS: Dict[Face, Tuple[_Corner, _Corner, _Corner, _Corner]] = {
    Face.FRONT: ((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0)),
    Face.BACK: ((0.0, 0.0, 1.0), (1.0, 0.0, 1.0), (1.0, 1.0, 1.0), (0.0, 1.0, 1.0)),
    Face.LEFT: ((0.0, 1.0, 1.0), (0.0, 1.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 1.0)),
    Face.RIGHT: ((1.0, 1.0, 1.0), (1.0, 1.0, 0.0), (1.0, 0.0, 0.0), (1.0, 0.0, 1.0)),
    Face.BOTTOM: ((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 0.0, 1.0), (0.0, 0.0, 1.0)),
    Face.TOP: ((0.0, 1.0, 0.0), (1.0, 1.0, 0.0), (1.0, 1.0, 1.0), (0.0, 1.0, 1.0)),
}

_EMPTY_FACE = (0.0,) * VERTICES_SIZE


class Tile:
    """A block model: four corners per cube face and one set of atlas coordinates.

    Air has no model; its vertices and texture coordinates are all zero.
    """

    __slots__ = ("type", "texcoords", "_faces")

    def __init__(self, tile_type: TileType | int) -> None:
        self.type = TileType(tile_type)
        if self.type is TileType.AIR:
            self.texcoords: Tuple[float, ...] = (0.0,) * TEXCOORD_SIZE
            self._faces: Dict[Face, Tuple[float, ...]] = {face: _EMPTY_FACE for face in Face}
            return

        u0 = int(self.type) / ATLAS_TILES
        u1 = u0 + UV_SPAN
        v0 = 1.0
        v1 = v0 - UV_SPAN
        self.texcoords = (u0, v0, u1, v0, u1, v1, u0, v1)
        self._faces = {
            face: tuple(component for corner in corners for component in corner)
            for face, corners in _FACE_CORNERS.items()
        }

    def __repr__(self) -> str:
        return f"Tile({self.type.name})"

    def face_vertices(self, face: Face) -> Tuple[float, ...]:
        """The twelve coordinates (four corners of x, y, z) of ``face``."""
        return self._faces[Face(face)]


ROCK_TILE = Tile(TileType.ROCK)
GRASS_TILE = Tile(TileType.GRASS)