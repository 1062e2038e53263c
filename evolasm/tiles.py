"""Tiles and the terrain grid generated from noise."""

from __future__ import annotations

from enum import Enum, auto
from typing import Protocol

from evolasm.content import Content
from evolasm.noise import PerlinNoise
from evolasm.primitives import Texture, Transformable, Vector2
from evolasm.sprite import Vertex

TILE_SIZE = 16


class TileType(Enum):
    WATER = auto()
    STONE = auto()
    WOOD = auto()
    SAND = auto()
    GRASS = auto()
    DIRT = auto()
    IRON = auto()
    COAL = auto()
    COPPER = auto()


class PhysicalType(Enum):
    GAS = auto()
    LIQUID = auto()
    SOLID = auto()


class _NoiseSource(Protocol):
    def value_noise_2d(self, x: float, y: float) -> float: ...


class Tile(Transformable):
    """One cell of the grid; only dirty tiles are ticked."""

    def __init__(self) -> None:
        super().__init__()
        self._dirty = False
        self.phys_type = PhysicalType.GAS
        self.ticks = 0

    @property
    def dirty(self) -> bool:
        return self._dirty

    def tick(self) -> None:
        """Advance one simulation step, counting the steps taken."""
        self.ticks += 1

    def set_dirty(self) -> None:
        self._dirty = True


def terrain_index(value: float) -> int | None:
    """Tilemap column for a noise value, or None where no tile is drawn."""
    if value > 0.41:
        return 6  # snow
    if value > 0.25:
        return 3  # stone
    if value > 0.05:
        return 1  # grass
    if value > 0.0:
        return 0  # dirt
    if value < -0.1:
        return 5  # very deep water
    if value < -0.03:
        return 4  # deep water
    if value < 0.0:
        return 2  # water
    return None


def _tile_quad(x: int, y: int, kind: int) -> list[Vertex]:
    left, top = float(x * TILE_SIZE), float(y * TILE_SIZE)
    right, bottom = left + TILE_SIZE, top + TILE_SIZE
    tex_left = float(kind * TILE_SIZE)
    tex_right = tex_left + TILE_SIZE
    return [
        Vertex(Vector2(left, top), Vector2(tex_left, 0.0)),
        Vertex(Vector2(right, top), Vector2(tex_right, 0.0)),
        Vertex(Vector2(right, bottom), Vector2(tex_right, float(TILE_SIZE))),
        Vertex(Vector2(left, bottom), Vector2(tex_left, float(TILE_SIZE))),
    ]


class TileGrid:
    """A width by height grid of tiles with terrain quads from noise."""

    def __init__(
        self,
        width: int,
        height: int,
        noise: _NoiseSource | None = None,
        tilemap: Texture | None = None,
    ) -> None:
        self.width = width
        self.height = height
        if noise is None:
            noise = PerlinNoise()
        self.tilemap = tilemap if tilemap is not None else Content.instance().textures.get("tilemap")
        self._tiles: list[Tile] = []
        self.vertices: list[Vertex] = []
        for y in range(height):
            for x in range(width):
                tile = Tile()
                tile.set_position(x * TILE_SIZE, y * TILE_SIZE)
                self._tiles.append(tile)
                kind = terrain_index(noise.value_noise_2d(x, y))
                if kind is not None:
                    self.vertices.extend(_tile_quad(x, y, kind))

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) outside {self.width}x{self.height} grid")
        return x + y * self.width

    def tick(self) -> None:
        for tile in self._tiles:
            if tile.dirty:
                tile.tick()

    def tile(self, x: int, y: int) -> Tile:
        return self._tiles[self._index(x, y)]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        self._tiles[self._index(x, y)] = tile