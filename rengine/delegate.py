"""Multicast callback list."""

from __future__ import annotations

from typing import Any, Callable


class Delegate:
    """Calls every bound callback, in binding order, with the same arguments."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[..., Any]] = []

    def bind(self, callback: Callable[..., Any]) -> None:
        """Add a callback; bound methods carry their object with them."""
        self._callbacks.append(callback)

    def __call__(self, *args: Any) -> None:
        for callback in self._callbacks:
            callback(*args)

    def __len__(self) -> int:
        return len(self._callbacks)