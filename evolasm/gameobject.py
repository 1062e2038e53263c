"""Base game objects and entities with health."""

from __future__ import annotations

from typing import TYPE_CHECKING

from evolasm.primitives import Color, FloatRect, Transformable
from evolasm.sprite import Sprite

if TYPE_CHECKING:
    from evolasm.tiles import TileGrid


class GameObject(Transformable):
    """Something placed in the world with a sprite and a name."""

    def __init__(self, name: str) -> None:
        super().__init__()
        self.name = name
        self.game_color = Color.WHITE
        self.destroyed = False
        self.tile_grid: TileGrid | None = None
        self.sprite = Sprite()
        self.age = 0

    def tick(self) -> None:
        """Advance one simulation step, counting the steps lived."""
        self.age += 1

    def destroy(self) -> None:
        self.destroyed = True

    @property
    def collision(self) -> FloatRect:
        return FloatRect.from_vectors(self.position, self.sprite.size)


class Entity(GameObject):
    """A game object with health and speed."""

    def __init__(self, name: str, max_health: float = 100.0, speed: float = 16.0) -> None:
        super().__init__(name)
        self.max_health = max_health
        self._health = max_health
        self.speed = speed

    @property
    def health(self) -> float:
        return self._health

    @health.setter
    def health(self, value: float) -> None:
        self._health = min(value, self.max_health)

    def damage(self, amount: float) -> None:
        """Reduce health; the entity dies once health drops below zero."""
        if amount < 0:
            return
        self._health -= amount
        if self._health < 0:
            self.kill()

    def heal(self, amount: float) -> None:
        if amount < 0:
            return
        self._health = min(self._health + amount, self.max_health)

    def kill(self) -> None:
        self.destroy()