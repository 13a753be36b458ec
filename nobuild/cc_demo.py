"""Builds the sample program through the generic compiler interface."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from typing import Optional

from .command import CommandError
from .compiler import CompilerCommand, detect
from .logs import LogLevel, log

__all__ = ["build_demo_command", "main"]


def build_demo_command(environ: Optional[Mapping[str, str]] = None) -> CompilerCommand:
    """Return the command that compiles ``sample.c`` into ``sample``."""
    cmd = CompilerCommand(detect(environ))
    cmd.std("c17")
    cmd.flags("debug")
    cmd.flags("werror", "wall", "wextra")
    cmd.output("sample")
    cmd.inputs("sample.c")
    return cmd


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Compile the sample program; return the process exit status."""
    cmd = build_demo_command()
    if os.name != "posix":
        log(LogLevel.WARNING, "running cc is only supported on UNIX-like systems")
        return 0
    try:
        cmd.run()
    except CommandError as exc:
        log(LogLevel.ERROR, str(exc))
        return 1
    return 0