"""Path queries: staleness checks, existence, names and the working directory."""

from __future__ import annotations

import errno
import os
from collections.abc import Iterable

from .files import FileSystemError
from .logs import LogLevel, log

__all__ = [
    "needs_rebuild",
    "needs_rebuild1",
    "file_exists",
    "path_name",
    "get_current_dir",
    "set_current_dir",
]


def needs_rebuild(
    output_path: str | os.PathLike[str],
    input_paths: Iterable[str | os.PathLike[str]],
) -> bool:
    """Tell whether ``output_path`` is missing or older than any input.

    A missing input is an error, since it is needed for the build.
    """
    try:
        output_time = int(os.stat(output_path).st_mtime)
    except FileNotFoundError:
        return True
    except OSError as exc:
        raise FileSystemError(
            f"could not stat {os.fspath(output_path)}: {exc.strerror}"
        ) from exc

    for input_path in input_paths:
        try:
            input_time = int(os.stat(input_path).st_mtime)
        except OSError as exc:
            raise FileSystemError(
                f"could not stat {os.fspath(input_path)}: {exc.strerror}"
            ) from exc
        if input_time > output_time:
            return True
    return False


def needs_rebuild1(
    output_path: str | os.PathLike[str], input_path: str | os.PathLike[str]
) -> bool:
    """Tell whether ``output_path`` must be rebuilt from one input."""
    return needs_rebuild(output_path, [input_path])


def file_exists(path: str | os.PathLike[str]) -> bool:
    """Tell whether ``path`` exists; other failures to check are errors."""
    try:
        os.stat(path)
    except OSError as exc:
        if exc.errno == errno.ENOENT:
            return False
        raise FileSystemError(
            f"could not check if file {os.fspath(path)} exists: {exc.strerror}"
        ) from exc
    return True


def path_name(path: str) -> str:
    """Return the last component of ``path``."""
    separators = "/\\" if os.name == "nt" else "/"
    cut = max(path.rfind(sep) for sep in separators)
    return path[cut + 1 :]


def get_current_dir() -> str:
    """Return the current working directory."""
    try:
        return os.getcwd()
    except OSError as exc:
        raise FileSystemError(f"could not get current directory: {exc.strerror}") from exc


def set_current_dir(path: str | os.PathLike[str]) -> None:
    """Change the current working directory to ``path``."""
    try:
        os.chdir(path)
    except OSError as exc:
        message = f"could not set current directory to {os.fspath(path)}: {exc.strerror}"
        log(LogLevel.ERROR, message)
        raise FileSystemError(message) from exc