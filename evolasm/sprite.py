"""Textured quad drawn for a game object."""

from __future__ import annotations

from dataclasses import dataclass, field

from evolasm.content import Content
from evolasm.primitives import Color, FloatRect, Texture, Vector2


@dataclass
class Vertex:
    """A corner of a textured quad."""

    position: Vector2 = field(default_factory=Vector2)
    tex_coords: Vector2 = field(default_factory=Vector2)
    color: Color = Color.WHITE


def _corners(width: float, height: float) -> list[Vector2]:
    return [
        Vector2(0.0, 0.0),
        Vector2(width, 0.0),
        Vector2(width, height),
        Vector2(0.0, height),
    ]


class Sprite:
    """Four vertices showing one texture, optionally mirrored horizontally."""

    def __init__(self, texture: Texture | None = None) -> None:
        self.vertices = [Vertex() for _ in range(4)]
        self.texture = texture
        self.size = Vector2()
        self.flipped = False

    @property
    def collision(self) -> FloatRect:
        return FloatRect()

    def set_size(self, size: Vector2) -> None:
        for vertex, corner in zip(self.vertices, _corners(size.x, size.y)):
            vertex.position = corner
        self.size = size

    def set_texture(self, texture: Texture | str) -> None:
        """Use a texture, or look one up by name in the shared content."""
        if isinstance(texture, str):
            texture = Content.instance().textures[texture]
        self.texture = texture
        size = texture.size
        for vertex, corner in zip(self.vertices, _corners(size.x, size.y)):
            vertex.tex_coords = corner

    def set_color(self, color: Color) -> None:
        for vertex in self.vertices:
            vertex.color = color

    def flip(self, value: bool) -> None:
        """Mirror the texture horizontally, or undo the mirroring."""
        if value == self.flipped:
            return
        if self.texture is None:
            raise RuntimeError("cannot flip a sprite without a texture")
        self.flipped = value
        size = self.texture.size
        corners = _corners(size.x, size.y)
        if value:
            corners = [
                Vector2(size.x, 0.0),
                Vector2(0.0, 0.0),
                Vector2(0.0, size.y),
                Vector2(size.x, size.y),
            ]
        for vertex, corner in zip(self.vertices, corners):
            vertex.tex_coords = corner