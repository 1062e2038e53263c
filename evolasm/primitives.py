"""Small geometry, colour, input and view types shared by the game."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import ClassVar


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]


Color.WHITE = Color(255, 255, 255)
Color.BLACK = Color(0, 0, 0)


@dataclass(frozen=True)
class FloatRect:
    """An axis-aligned rectangle."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_vectors(cls, position: Vector2, size: Vector2) -> FloatRect:
        return cls(position.x, position.y, size.x, size.y)

    def contains(self, point: Vector2) -> bool:
        return (
            self.left <= point.x < self.left + self.width
            and self.top <= point.y < self.top + self.height
        )


@dataclass(frozen=True)
class Texture:
    """Size and origin of a loaded image."""

    width: int
    height: int
    source: Path | None = None

    @property
    def size(self) -> Vector2:
        return Vector2(float(self.width), float(self.height))


class Key(Enum):
    """Keyboard keys the game reacts to."""

    W = auto()
    A = auto()
    S = auto()
    D = auto()
    ESCAPE = auto()


@dataclass
class Keyboard:
    """Tracks which keys are currently held down."""

    pressed: set[Key] = field(default_factory=set)

    def press(self, key: Key) -> None:
        self.pressed.add(key)

    def release(self, key: Key) -> None:
        self.pressed.discard(key)

    def is_pressed(self, key: Key) -> bool:
        return key in self.pressed


class Transformable:
    """Something with a position in the world."""

    def __init__(self) -> None:
        self.position = Vector2()

    def set_position(self, x: float, y: float) -> None:
        self.position = Vector2(float(x), float(y))

    def move(self, offset: Vector2) -> None:
        self.position = self.position + offset


@dataclass
class View:
    """A 2D camera view: the world rectangle shown on screen."""

    center: Vector2 = field(default_factory=Vector2)
    size: Vector2 = field(default_factory=Vector2)

    def move(self, offset: Vector2) -> None:
        self.center = self.center + offset

    def zoom(self, factor: float) -> None:
        self.size = self.size * factor

    def set_center(self, center: Vector2) -> None:
        self.center = center

    def set_size(self, size: Vector2) -> None:
        self.size = size


def distance(a: Vector2, b: Vector2) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)