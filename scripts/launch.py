#!/usr/bin/env python3
"""
Daylaunch

Pick a group from a terminal menu and start every application in it.

Usage:
    launch.py                  Open the interactive menu
    launch.py --list           Print configured groups and exit
    launch.py --group NAME     Launch a group without the menu
    launch.py --init [--force] Write a starter config and exit

Config is read from --config, $DAYLAUNCH_CONFIG, or
$XDG_CONFIG_HOME/daylaunch/groups.json (~/.config/daylaunch/groups.json).

Requirements:
    pip install textual
"""

import argparse
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from daylaunch.config_provider import (  # noqa: E402
    FileConfigProvider,
    default_config_path,
    write_default_config,
)
from daylaunch.providers import (  # noqa: E402
    ConfigProvider,
    DaylaunchError,
    Group,
    LaunchError,
    LaunchSpecModel,
)


def print_groups(model: LaunchSpecModel) -> int:
    """Print configured groups and their apps."""
    for group in model.groups:
        print(f"{group.name} ({len(group.apps)} app{'s' if len(group.apps) != 1 else ''})")
        for app in group.apps:
            argv = " ".join([app.command, *app.args])
            marker = "$ " if app.use_shell else ""
            print(f"  ▸ {app.name}: {marker}{argv}")
    return 0


def report_launch(group: Group, errors: list[LaunchError]) -> int:
    """Print launch failures to stderr and a one-line summary."""
    for error in errors:
        print(f"Error: {error}", file=sys.stderr)

    total = len(group.apps)
    started = total - len(errors)
    if total == 0:
        print(f"{group.name}: nothing to launch")
    else:
        print(f"{group.name}: launched {started}/{total}")
    return 1 if errors else 0


def launch_named_group(model: LaunchSpecModel, name: str) -> int:
    """Launch a group by name without the menu."""
    from daylaunch.process_launcher import launch_group

    group = model.find_group(name)
    if group is None:
        print(f"Error: Unknown group: {name}", file=sys.stderr)
        print(f"Available: {', '.join(model.group_names)}", file=sys.stderr)
        return 1
    return report_launch(group, launch_group(group))


def run_menu(model: LaunchSpecModel) -> int:
    """Open the interactive menu and report what was launched."""
    from daylaunch.app import run

    controller = run(model)
    if controller.launched_group is None:
        return 0
    return report_launch(controller.launched_group, controller.launch_errors)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Daylaunch - start a group of applications",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to groups.json (default: ~/.config/daylaunch/groups.json)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print configured groups and exit",
    )
    parser.add_argument(
        "--group",
        metavar="NAME",
        help="Launch the named group without opening the menu",
    )
    parser.add_argument(
        "--init",
        action="store_true",
        help="Write a starter config and exit",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="With --init, overwrite an existing config",
    )

    args = parser.parse_args(argv)
    config_path = args.config or default_config_path()

    try:
        if args.init:
            path = write_default_config(config_path, force=args.force)
            print(f"Wrote starter config to {path}")
            return 0

        provider: ConfigProvider = FileConfigProvider(config_path)
        model = provider.load()

        if args.list:
            return print_groups(model)

        if args.group:
            return launch_named_group(model, args.group)

        return run_menu(model)
    except DaylaunchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
