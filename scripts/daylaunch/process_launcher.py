"""
Detached process creation.

Launched processes are fire-and-forget: they get their own session (or a
detached process group on Windows), never share the menu's terminal handles
and are not waited on.
"""

from __future__ import annotations

import os
import subprocess

from daylaunch.providers import ExecutableSpec, Group, LaunchError


def _detach_kwargs() -> dict:
    """Popen arguments that decouple the child from our terminal session."""
    if os.name == "posix":
        return {"start_new_session": True}
    # No sessions on Windows: a detached console and a new process group is
    # the closest equivalent. Console-less children may still share a job
    # object with the launcher when it runs under one.
    flags = getattr(subprocess, "DETACHED_PROCESS", 0) | getattr(
        subprocess, "CREATE_NEW_PROCESS_GROUP", 0
    )
    return {"creationflags": flags}


def build_command(spec: ExecutableSpec) -> list[str] | str:
    """Command passed to Popen: argv list, or a script string for the shell."""
    if spec.use_shell:
        return " ".join([spec.command, *spec.args])
    return [spec.command, *spec.args]


def launch(spec: ExecutableSpec) -> subprocess.Popen:
    """Start ``spec`` detached and return as soon as the process exists.

    Raises LaunchError if the process could not be created.
    """
    try:
        return subprocess.Popen(
            build_command(spec),
            shell=spec.use_shell,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            close_fds=True,
            **_detach_kwargs(),
        )
    except (OSError, ValueError) as e:
        raise LaunchError(spec.name, e) from e


def launch_group(group: Group) -> list[LaunchError]:
    """Launch every app of ``group`` in order, collecting failures.

    A failing entry never prevents the remaining entries from being tried.
    """
    errors: list[LaunchError] = []
    for spec in group.apps:
        # Children outlive us, so the Popen handle is not kept or waited on
        try:
            launch(spec)
        except LaunchError as e:
            errors.append(e)
    return errors
