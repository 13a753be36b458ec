"""Rebuilding the build program itself when its sources change."""

from __future__ import annotations

import os
from collections.abc import Sequence

from .command import Cmd
from .files import FileSystemError, delete_file, rename
from .logs import LogLevel, log
from .paths import needs_rebuild
from .process import ProcessError

__all__ = ["rebuild_command", "go_rebuild_urself"]

_WINDOWS = os.name == "nt"


def rebuild_command(
    binary_path: str | os.PathLike[str], source_path: str | os.PathLike[str]
) -> list[str]:
    """Return the compiler invocation that builds ``binary_path`` from ``source_path``."""
    binary, source = os.fspath(binary_path), os.fspath(source_path)
    if _WINDOWS:
        return ["cl.exe", f"/Fe:{binary}", source]
    return ["cc", "-o", binary, source]


def _fail(exc: Exception) -> SystemExit:
    log(LogLevel.ERROR, str(exc))
    return SystemExit(1)


def go_rebuild_urself(
    argv: Sequence[str], source_path: str | os.PathLike[str], *args: str | os.PathLike[str]
) -> None:
    """Rebuild and re-run the running program if any of its sources is newer.

    ``argv[0]`` is the program's own path; the remaining arguments are passed
    on to the rebuilt program. Returns only when no rebuild is needed;
    otherwise it ends the interpreter with the outcome as exit status.
    """
    argv = [os.fspath(arg) for arg in argv]
    if not argv:
        raise ValueError("argv must hold the path of the running program")
    binary_path, rest = argv[0], argv[1:]
    if _WINDOWS and not binary_path.endswith(".exe"):
        binary_path = f"{binary_path}.exe"

    try:
        if not needs_rebuild(binary_path, [source_path, *args]):
            return
    except FileSystemError as exc:
        raise _fail(exc) from exc

    old_binary_path = f"{binary_path}.old"
    try:
        rename(binary_path, old_binary_path)
    except FileSystemError as exc:
        raise _fail(exc) from exc

    cmd = Cmd()
    cmd.append(*rebuild_command(binary_path, source_path))
    try:
        cmd.run_sync_and_reset()
    except ProcessError as exc:
        log(LogLevel.ERROR, str(exc))
        try:
            rename(old_binary_path, binary_path)
        except FileSystemError as restore_exc:
            log(LogLevel.ERROR, str(restore_exc))
        raise SystemExit(1) from exc

    try:
        delete_file(old_binary_path)
    except FileSystemError as exc:
        log(LogLevel.ERROR, str(exc))

    cmd.append(binary_path, *rest)
    try:
        cmd.run_sync_and_reset()
    except ProcessError as exc:
        raise _fail(exc) from exc
    raise SystemExit(0)