"""
Launch spec model and provider protocols.

The model is built once by a config provider and never mutated afterwards;
the controller and the launcher only read from it.
"""

from dataclasses import dataclass, field
from typing import Protocol

DEFAULT_TITLE = "What are you going to do today?"


class DaylaunchError(Exception):
    """Base class for all daylaunch errors."""


class StartupError(DaylaunchError):
    """Config is missing, unreadable, invalid or has no groups."""


class InputError(DaylaunchError):
    """Reading keyboard input failed; the session cannot continue."""


class LaunchError(DaylaunchError):
    """A single executable could not be started."""

    def __init__(self, spec_name: str, cause: Exception) -> None:
        super().__init__(f"failed to launch '{spec_name}': {cause}")
        self.spec_name = spec_name
        self.cause = cause


@dataclass(frozen=True)
class ExecutableSpec:
    """One process to start."""

    name: str
    command: str
    args: tuple[str, ...] = ()
    use_shell: bool = False

    def __post_init__(self) -> None:
        if not self.command:
            raise ValueError(f"ExecutableSpec '{self.name}' has an empty command")


@dataclass(frozen=True)
class Group:
    """Named, ordered set of executables launched together."""

    name: str
    apps: tuple[ExecutableSpec, ...] = ()


@dataclass(frozen=True)
class LaunchSpecModel:
    """Complete launch configuration."""

    groups: tuple[Group, ...]
    title: str = DEFAULT_TITLE
    source: str | None = field(default=None, compare=False)

    @property
    def group_names(self) -> tuple[str, ...]:
        return tuple(g.name for g in self.groups)

    def find_group(self, name: str) -> Group | None:
        """Return the first group called ``name`` (case-insensitive)."""
        wanted = name.casefold()
        for group in self.groups:
            if group.name.casefold() == wanted:
                return group
        return None


class ConfigProvider(Protocol):
    """Protocol for obtaining the launch spec model."""

    def load(self) -> LaunchSpecModel:
        """Load and validate the model, raising StartupError on failure."""
        ...
