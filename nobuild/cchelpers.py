"""Shortcuts that add common C compiler arguments to a command."""

from __future__ import annotations

import os

from .command import Cmd

__all__ = ["cc", "cc_flags", "cc_output", "cc_inputs"]

_MSVC = os.name == "nt"


def cc(cmd: Cmd) -> None:
    """Append the name of the platform's C compiler."""
    cmd.append("cl.exe" if _MSVC else "cc")


def cc_flags(cmd: Cmd) -> None:
    """Append the recommended warning flags, if the compiler has any."""
    if not _MSVC:
        cmd.append("-Wall", "-Wextra")


def cc_output(cmd: Cmd, output_path: str | os.PathLike[str]) -> None:
    """Append the arguments that name the compiler's output file."""
    path = os.fspath(output_path)
    if _MSVC:
        cmd.append(f"/Fe:{path}")
    else:
        cmd.append("-o", path)


def cc_inputs(cmd: Cmd, *args: str | os.PathLike[str]) -> None:
    """Append the source files to compile."""
    cmd.append(*(os.fspath(arg) for arg in args))