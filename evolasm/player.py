"""The keyboard-controlled player."""

from __future__ import annotations

from evolasm.content import Content
from evolasm.gameobject import Entity
from evolasm.primitives import Key, Keyboard, Texture, Vector2
from evolasm.tiles import TILE_SIZE, PhysicalType


class Player(Entity):
    """Moves one step per key press onto free (gas) tiles."""

    def __init__(self, keyboard: Keyboard | None = None, texture: Texture | None = None) -> None:
        super().__init__("player")
        self.keyboard = keyboard if keyboard is not None else Keyboard()
        if texture is None:
            texture = Content.instance().textures.get("player")
        if texture is not None:
            self.sprite.set_texture(texture)
        self._pressed = False

    def _movement(self) -> Vector2:
        speed = self.speed
        if self.keyboard.is_pressed(Key.W):
            return Vector2(0.0, -speed)
        if self.keyboard.is_pressed(Key.S):
            return Vector2(0.0, speed)
        if self.keyboard.is_pressed(Key.A):
            return Vector2(-speed, 0.0)
        if self.keyboard.is_pressed(Key.D):
            return Vector2(speed, 0.0)
        self._pressed = False
        return Vector2()

    def tick(self) -> None:
        movement = self._movement()
        if self._pressed:
            return
        self._pressed = movement.x != 0 or movement.y != 0
        if self.tile_grid is None:
            raise RuntimeError("player has no tile grid")
        target = self.position + movement
        try:
            tile = self.tile_grid.tile(int(target.x / TILE_SIZE), int(target.y / TILE_SIZE))
        except IndexError:
            return
        if tile.phys_type is PhysicalType.GAS:
            self.move(movement)