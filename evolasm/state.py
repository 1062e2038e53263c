"""Game states and the manager that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod

from evolasm import logger


class StateNotFoundError(KeyError):
    """No state is registered under the requested name."""


class State(ABC):
    """One screen or mode of the game.

    ``running`` is true between ``start`` and ``end``; ``overlay_frames``
    counts how many times the overlay has been drawn.
    """

    running: bool = False
    overlay_frames: int = 0

    def start(self) -> None:
        """Called when the state becomes current."""
        self.running = True

    @abstractmethod
    def tick(self) -> None:
        """Advance one simulation step."""

    def end(self) -> None:
        """Called when another state replaces this one."""
        self.running = False

    def draw_overlay(self) -> None:
        """Draw interface widgets on top of the world."""
        self.overlay_frames += 1


class StateManager:
    """Named states with one of them current."""

    def __init__(self) -> None:
        self._states: dict[str, State] = {}
        self.current: State | None = None

    def add(self, name: str, state: State) -> None:
        self._states[name] = state
        logger.info(f"StateManager: added new state {name}")

    def remove(self, name: str) -> None:
        state = self._states.pop(name, None)
        if state is not None and state is self.current:
            self.current = None

    def set(self, name: str) -> None:
        """End the current state and start the one named."""
        if self.current is not None:
            self.current.end()
        state = self._states.get(name)
        if state is None:
            logger.error(f"StateManager: state {name} not found")
            raise StateNotFoundError(name)
        self.current = state
        logger.info(f"StateManager: set state to {name}")
        state.start()

    def get(self, name: str) -> State | None:
        return self._states.get(name)

    def tick(self) -> None:
        if self.current is None:
            raise RuntimeError("no current state to tick")
        self.current.tick()

    def draw_overlay(self) -> None:
        if self.current is not None:
            self.current.draw_overlay()