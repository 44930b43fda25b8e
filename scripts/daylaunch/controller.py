"""
Selection controller.

A small state machine over the configured groups. It knows nothing about
terminals: a front end feeds it InputEvent values one at a time and renders
the Frame it exposes after every transition.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from daylaunch.process_launcher import launch_group
from daylaunch.providers import Group, LaunchError, LaunchSpecModel, StartupError

FOOTER_HINT = "↑/k: Up | ↓/j: Down | Enter: Select | q/Esc: Quit"


class InputEvent(Enum):
    NAVIGATE_UP = "up"
    NAVIGATE_DOWN = "down"
    CONFIRM = "confirm"
    QUIT = "quit"
    IGNORED = "ignored"


class ControllerState(Enum):
    RUNNING = "running"
    CONFIRMED = "confirmed"
    QUIT = "quit"


# Key names as reported by the terminal layer
KEYMAP: dict[str, InputEvent] = {
    "q": InputEvent.QUIT,
    "escape": InputEvent.QUIT,
    "down": InputEvent.NAVIGATE_DOWN,
    "j": InputEvent.NAVIGATE_DOWN,
    "up": InputEvent.NAVIGATE_UP,
    "k": InputEvent.NAVIGATE_UP,
    "enter": InputEvent.CONFIRM,
}


def map_key(key: str) -> InputEvent:
    """Translate a key name into an input event."""
    return KEYMAP.get(key, InputEvent.IGNORED)


@dataclass(frozen=True)
class Frame:
    """Everything the renderer needs for one draw."""

    title: str
    group_names: tuple[str, ...]
    selected_index: int
    footer_hint: str = FOOTER_HINT


class SelectionController:
    """Owns the selected index and reacts to input events."""

    def __init__(
        self,
        model: LaunchSpecModel,
        group_launcher: Callable[[Group], list[LaunchError]] = launch_group,
    ) -> None:
        if not model.groups:
            raise StartupError("no groups configured")
        self._model = model
        self._group_launcher = group_launcher
        self._selected = 0
        self._state = ControllerState.RUNNING
        self._launch_errors: list[LaunchError] = []
        self._launched: Group | None = None

    @property
    def selected_index(self) -> int:
        return self._selected

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def launch_errors(self) -> list[LaunchError]:
        return list(self._launch_errors)

    @property
    def launched_group(self) -> Group | None:
        """Group launched on confirm, None until then."""
        return self._launched

    @property
    def selected_group(self) -> Group:
        return self._model.groups[self._selected]

    def frame(self) -> Frame:
        return Frame(
            title=self._model.title,
            group_names=self._model.group_names,
            selected_index=self._selected,
        )

    def dispatch(self, event: InputEvent) -> ControllerState:
        """Apply one event and return the resulting state.

        Events arriving once the controller has finished are ignored.
        """
        if self._state is not ControllerState.RUNNING:
            return self._state

        count = len(self._model.groups)
        if event is InputEvent.NAVIGATE_DOWN:
            self._selected = (self._selected + 1) % count
        elif event is InputEvent.NAVIGATE_UP:
            self._selected = count - 1 if self._selected == 0 else self._selected - 1
        elif event is InputEvent.CONFIRM:
            self._confirm()
        elif event is InputEvent.QUIT:
            self._state = ControllerState.QUIT
        return self._state

    def _confirm(self) -> None:
        group = self.selected_group
        self._state = ControllerState.CONFIRMED
        self._launched = group
        self._launch_errors = list(self._group_launcher(group))
