"""
Daylaunch TUI Application.

Maps key presses to controller events and redraws after every transition.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure scripts directory is in path
SCRIPT_DIR = Path(__file__).resolve().parent.parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from textual.app import App  # noqa: E402
from textual.binding import Binding  # noqa: E402

from daylaunch.controller import (  # noqa: E402
    KEYMAP,
    ControllerState,
    SelectionController,
    map_key,
)
from daylaunch.providers import InputError, LaunchSpecModel  # noqa: E402
from daylaunch.views.menu import MenuScreen  # noqa: E402

# Redraw interval in seconds; input handling does not depend on it
POLL_INTERVAL = 0.25


class LauncherApp(App):
    """Group picker application."""

    TITLE = "Daylaunch"

    CSS = """
    Screen {
        background: $surface;
    }
    """

    # Priority bindings so no widget can swallow navigation keys
    BINDINGS = [
        Binding(key, f"handle_key('{key}')", show=False, priority=True)
        for key in KEYMAP
    ]

    def __init__(self, controller: SelectionController, **kwargs) -> None:
        super().__init__(**kwargs)
        self._controller = controller
        self._menu: MenuScreen | None = None
        self._redraw_timer = None

    @property
    def controller(self) -> SelectionController:
        return self._controller

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self._menu = MenuScreen(self._controller.frame())
        self.push_screen(self._menu)
        self._redraw_timer = self.set_interval(POLL_INTERVAL, self._redraw)

    def _redraw(self) -> None:
        if self._menu is None or not self._menu.is_mounted:
            return
        if self._controller.state is ControllerState.RUNNING:
            self._menu.show(self._controller.frame())

    def action_handle_key(self, key: str) -> None:
        """Apply one key press to the controller."""
        state = self._controller.dispatch(map_key(key))
        if state is ControllerState.RUNNING:
            self._redraw()
            return
        if self._redraw_timer:
            self._redraw_timer.stop()
            self._redraw_timer = None
        self.exit(state)


def run(model: LaunchSpecModel) -> SelectionController:
    """Run the menu until the user confirms or quits.

    Raises StartupError before drawing anything if the model has no groups,
    and InputError (after the terminal is restored) if the app stopped on an
    unhandled error.
    """
    controller = SelectionController(model)
    app = LauncherApp(controller)
    app.run()
    if app.return_code and controller.state is ControllerState.RUNNING:
        raise InputError(f"menu stopped unexpectedly (exit code {app.return_code})")
    return controller
