"""Keyboard state and key-event bindings."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from rengine.delegate import Delegate

KEY_COUNT = 256


class KeyAction(enum.IntEnum):
    UP = 0
    PRESS = 1
    HOLD = 2


@dataclass
class KeyEvent:
    """A delegate fired when a key reaches a given action."""

    action: int
    key: int
    callback: Delegate = field(default_factory=Delegate)


class InputBuffer:
    """Per-key state and the events bound to key actions."""

    def __init__(self) -> None:
        self.key_events: list[KeyEvent] = []
        self._key_state = [int(KeyAction.UP)] * KEY_COUNT

    @property
    def key_state(self) -> tuple[int, ...]:
        """Current action of every key code."""
        return tuple(self._key_state)

    def bind_key_event(
        self, key: int, action: int, callback: Callable[[], object]
    ) -> None:
        """Bind a callback to a key action.

        The callback is also added to every event already bound to the same
        key and action, and a new event holding only it is appended.
        """
        for event in self.key_events:
            if event.key == key and event.action == action:
                event.callback.bind(callback)
        delegate = Delegate()
        delegate.bind(callback)
        self.key_events.append(KeyEvent(action, key, delegate))

    def key_callback(self, key: int, action: int) -> None:
        """Fire every event bound to this key and action."""
        for event in list(self.key_events):
            if event.key == key and event.action == action:
                event.callback()

    def update_key_states(self, pressed_keys: Iterable[int]) -> None:
        """Advance every key's state from the set of pressed keys and fire events.

        A pressed key goes to PRESS, or to HOLD if it was in PRESS; a key that
        is not pressed goes to UP.
        """
        pressed = set(pressed_keys)
        for key in range(KEY_COUNT):
            if key in pressed:
                previous = self._key_state[key]
                self._key_state[key] = int(
                    KeyAction.HOLD if previous == KeyAction.PRESS else KeyAction.PRESS
                )
            else:
                self._key_state[key] = int(KeyAction.UP)
            self.key_callback(key, self._key_state[key])


input_buffer = InputBuffer()