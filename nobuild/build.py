"""The project's build script: compiles the sample programs and optionally runs them."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import Optional

from .cchelpers import cc_output
from .command import Cmd
from .logs import LogLevel, log
from .process import ProcessError

__all__ = ["compiler_from_env", "compile_program", "run_program", "main"]

_WINDOWS = os.name == "nt"


def compiler_from_env(default: str) -> str:
    """Return the compiler named by ``CC``, or ``default`` when it is unset."""
    return os.environ.get("CC", default)


def compile_program(cmd: Cmd, output: str, *args: str | os.PathLike[str]) -> None:
    """Compile ``args`` into ``output`` with strict warnings; raise on failure."""
    if _WINDOWS:
        cmd.append(compiler_from_env("cl"), "/nologo", "/std:c17", "/Wall")
    else:
        cmd.append(
            compiler_from_env("cc"),
            "-std=c17",
            "-pedantic",
            "-g",
            "-Wall",
            "-Wextra",
            "-Werror",
        )
    cc_output(cmd, output)
    cmd.append(*(os.fspath(arg) for arg in args))
    cmd.run_sync_and_reset()


def run_program(cmd: Cmd, *args: str) -> None:
    """Run a program with its arguments; raise on failure."""
    if not args:
        raise ValueError("run needs at least the program to start")
    cmd.append(*args)
    cmd.run_sync_and_reset()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build everything; with a ``test`` argument also run the results."""
    argv = list(sys.argv if argv is None else argv)
    cmd = Cmd()
    try:
        compile_program(cmd, "sample", "sample.c")
        compile_program(cmd, "cc-test", "cc.c", "cc-test.c")
        if sys.platform.startswith("linux"):
            compile_program(cmd, "xlib", "xlib.c", "-lX11")
        else:
            log(LogLevel.WARNING, "xlib only compiles on linux")
        for arg in argv:
            if arg == "test":
                run_program(cmd, "./sample")
                run_program(cmd, "./cc-test")
    except ProcessError as exc:
        log(LogLevel.ERROR, str(exc))
        return 1
    return 0