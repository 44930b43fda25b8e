"""
ConfigProvider implementation reading a JSON groups file.
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

# Add scripts to path for imports
SCRIPT_DIR = Path(__file__).resolve().parent.parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from daylaunch.providers import (  # noqa: E402
    DEFAULT_TITLE,
    ExecutableSpec,
    Group,
    LaunchSpecModel,
    StartupError,
)

CONFIG_ENV_VAR = "DAYLAUNCH_CONFIG"
CONFIG_FILENAME = "groups.json"


def default_config_path() -> Path:
    """Resolve the config location when none is given explicitly."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg).expanduser() if xdg else Path.home() / ".config"
    return base / "daylaunch" / CONFIG_FILENAME


def default_config() -> dict:
    """Starter config with the stock groups."""
    return {
        "title": DEFAULT_TITLE,
        "groups": [
            {"name": "Nothing", "apps": []},
            {
                "name": "Study",
                "apps": [
                    {"name": "Obsidian", "command": "obsidian"},
                    {"name": "Brave", "command": "brave-browser"},
                ],
            },
            {
                "name": "Docker",
                "apps": [
                    {
                        "name": "Start containers",
                        "command": "docker start $(docker ps -aq)",
                        "shell": True,
                    },
                    {"name": "Konsole", "command": "konsole"},
                    {"name": "Obsidian", "command": "obsidian"},
                ],
            },
            {
                "name": "Dev",
                "apps": [
                    {"name": "VS Code", "command": "code"},
                    {"name": "Obsidian", "command": "obsidian"},
                ],
            },
            {
                "name": "Play",
                "apps": [
                    {"name": "Discord", "command": "discord"},
                    {"name": "Steam", "command": "steam"},
                ],
            },
        ],
    }


def write_default_config(path: Path, force: bool = False) -> Path:
    """Write the starter config to ``path``."""
    if path.exists() and not force:
        raise StartupError(f"Config already exists: {path} (use --force to overwrite)")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(default_config(), indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        raise StartupError(f"Cannot write {path}: {e}") from e
    return path


def _require_str(value, where: str, allow_empty: bool = False) -> str:
    if not isinstance(value, str) or (not allow_empty and not value.strip()):
        raise StartupError(f"{where}: must be a non-empty string")
    return value


def _require_list(value, where: str) -> list:
    if not isinstance(value, list):
        raise StartupError(f"{where}: must be a list")
    return value


def _app_from_dict(data, where: str) -> ExecutableSpec:
    """Convert an app entry to ExecutableSpec."""
    if not isinstance(data, dict):
        raise StartupError(f"{where}: must be an object")

    command = _require_str(data.get("command"), f"{where}.command")
    name = _require_str(data.get("name", command), f"{where}.name")

    args = _require_list(data.get("args", []), f"{where}.args")
    for i, arg in enumerate(args):
        _require_str(arg, f"{where}.args[{i}]", allow_empty=True)

    use_shell = data.get("shell", False)
    if not isinstance(use_shell, bool):
        raise StartupError(f"{where}.shell: must be true or false")

    return ExecutableSpec(name=name, command=command, args=tuple(args), use_shell=use_shell)


def _group_from_dict(data, where: str) -> Group:
    """Convert a group entry to Group."""
    if not isinstance(data, dict):
        raise StartupError(f"{where}: must be an object")

    name = _require_str(data.get("name"), f"{where}.name")
    apps = _require_list(data.get("apps", []), f"{where}.apps")
    return Group(
        name=name,
        apps=tuple(_app_from_dict(a, f"{where}.apps[{i}]") for i, a in enumerate(apps)),
    )


def model_from_dict(data, source: str | None = None) -> LaunchSpecModel:
    """Validate raw config data and build the launch spec model."""
    if not isinstance(data, dict):
        raise StartupError("config root must be an object")

    title = _require_str(data.get("title", DEFAULT_TITLE), "title")
    groups = _require_list(data.get("groups"), "groups")
    if not groups:
        raise StartupError("groups: at least one group is required")

    return LaunchSpecModel(
        groups=tuple(_group_from_dict(g, f"groups[{i}]") for i, g in enumerate(groups)),
        title=title,
        source=source,
    )


class FileConfigProvider:
    """ConfigProvider implementation that reads a JSON file."""

    def __init__(self, config_file: Path | None = None):
        if config_file is None:
            config_file = default_config_path()
        self._config_file = config_file

    @property
    def path(self) -> Path:
        return self._config_file

    def load(self) -> LaunchSpecModel:
        """Load, validate and return the launch spec model."""
        if not self._config_file.exists():
            raise StartupError(
                f"Config not found: {self._config_file} (run with --init to create one)"
            )

        try:
            data = json.loads(self._config_file.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise StartupError(f"Invalid JSON in {self._config_file}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise StartupError(f"Cannot read {self._config_file}: {e}") from e

        try:
            return model_from_dict(data, source=str(self._config_file))
        except StartupError as e:
            raise StartupError(f"{self._config_file}: {e}") from e
