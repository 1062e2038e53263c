"""A simple multicast event."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Event(Generic[T]):
    """Holds subscribers and calls each of them, in order, on invoke."""

    def __init__(self) -> None:
        self._functions: list[Callable[[T], None]] = []

    def subscribe(self, function: Callable[[T], None]) -> None:
        self._functions.append(function)

    def invoke(self, args: T) -> None:
        for function in self._functions:
            function(args)

    def __iadd__(self, function: Callable[[T], None]) -> Event[T]:
        self.subscribe(function)
        return self

    def __len__(self) -> int:
        return len(self._functions)