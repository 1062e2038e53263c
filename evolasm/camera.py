"""World camera that follows a target or moves with the keyboard."""

from __future__ import annotations

from evolasm.primitives import Key, Keyboard, Transformable, Vector2, View

_FOCUS_OFFSET = Vector2(8, 8)


class Camera:
    """Owns the view and moves it each frame; starts locked."""

    def __init__(self, default_view: View, speed: float = 10.0) -> None:
        self.view = View(default_view.center, default_view.size)
        self.view.move(Vector2(-(1200 // 2), -(720 // 2)))
        self.focused: Transformable | None = None
        self.speed = speed
        self._locked = True
        self._moving = False

    @property
    def is_locked(self) -> bool:
        return self._locked

    @property
    def is_moving(self) -> bool:
        return self._moving

    @property
    def position(self) -> Vector2:
        return self.view.center

    def focus(self, target: Transformable | None) -> None:
        """Follow target (or nothing) and unlock the camera."""
        self.unlock()
        self.focused = target

    def set_position(self, position: Vector2) -> None:
        self.view.set_center(position)

    def update(self, keyboard: Keyboard) -> None:
        if self._locked:
            return
        self._moving = False
        if self.focused is None:
            dx = dy = 0.0
            if keyboard.is_pressed(Key.A):
                dx = -self.speed
            elif keyboard.is_pressed(Key.D):
                dx = self.speed
            if keyboard.is_pressed(Key.W):
                dy = -self.speed
            elif keyboard.is_pressed(Key.S):
                dy = self.speed
            self._moving = dx != 0 or dy != 0
            if self._moving:
                self.view.move(Vector2(dx, dy))
        else:
            self.view.set_center(self.focused.position + _FOCUS_OFFSET)

    def zoom(self, factor: float = 0.1) -> None:
        if self._locked:
            return
        self.view.zoom(1.0 - factor)

    def resize(self, width: float, height: float) -> None:
        self.view.set_size(Vector2(float(width), float(height)))

    def lock(self) -> None:
        self._locked = True

    def unlock(self) -> None:
        self._locked = False