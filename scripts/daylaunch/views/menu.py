"""Menu screen: title banner, options list and control legend."""

from rich.text import Text
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Label, Static

from daylaunch.controller import Frame


def render_options(group_names: tuple[str, ...], selected_index: int) -> Text:
    """Build the option rows, highlighting the selected one."""
    text = Text()
    for i, name in enumerate(group_names):
        if i:
            text.append("\n")
        style = "bold black on cyan" if i == selected_index else "white"
        text.append(f"  ▸ {name}", style=style)
    return text


class OptionsPanel(Static):
    """Bordered list of group names."""

    DEFAULT_CSS = """
    OptionsPanel {
        height: 1fr;
        min-height: 10;
        border: round cyan;
        border-title-color: cyan;
        padding: 0 1;
    }
    """

    def show(self, frame: Frame) -> None:
        self.update(render_options(frame.group_names, frame.selected_index))


class MenuScreen(Screen):
    """The only screen of the launcher."""

    DEFAULT_CSS = """
    MenuScreen {
        padding: 2;
    }

    MenuScreen #title {
        width: 100%;
        height: 3;
        content-align: center middle;
        text-style: bold;
        color: cyan;
    }

    MenuScreen #footer {
        width: 100%;
        height: 3;
        content-align: center middle;
        color: $text-muted;
    }
    """

    def __init__(self, frame: Frame, **kwargs) -> None:
        super().__init__(**kwargs)
        self._frame = frame

    @property
    def frame(self) -> Frame:
        return self._frame

    def compose(self) -> ComposeResult:
        yield Label(Text(self._frame.title), id="title")
        panel = OptionsPanel(
            render_options(self._frame.group_names, self._frame.selected_index),
            id="options",
        )
        panel.border_title = "Options"
        yield panel
        yield Label(Text(self._frame.footer_hint), id="footer")

    def show(self, frame: Frame) -> None:
        """Redraw with ``frame``."""
        self._frame = frame
        self.query_one(OptionsPanel).show(frame)
