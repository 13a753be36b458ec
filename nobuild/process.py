"""Child processes: waiting on them, batching them and redirecting their streams."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Iterator
from dataclasses import dataclass, field, fields
from typing import IO, Optional, Union

from .files import FileSystemError

__all__ = [
    "ProcessError",
    "Redirect",
    "Procs",
    "proc_wait",
    "fd_open_for_read",
    "fd_open_for_write",
]

Stream = Union[IO[bytes], int]


class ProcessError(RuntimeError):
    """A child process could not be waited on or did not succeed."""


def fd_open_for_read(path: str | os.PathLike[str]) -> IO[bytes]:
    """Open ``path`` for reading, for use as a child's standard input."""
    try:
        return open(path, "rb")
    except OSError as exc:
        raise FileSystemError(
            f"could not open file {os.fspath(path)}: {exc.strerror}"
        ) from exc


def fd_open_for_write(path: str | os.PathLike[str]) -> IO[bytes]:
    """Create or truncate ``path`` for writing, with mode rw-r--r--."""
    flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0)
    try:
        fd = os.open(path, flags, 0o644)
    except OSError as exc:
        raise FileSystemError(
            f"could not open file {os.fspath(path)}: {exc.strerror}"
        ) from exc
    return os.fdopen(fd, "wb")


@dataclass
class Redirect:
    """Replacement standard streams for a child process; None inherits ours."""

    fdin: Optional[Stream] = None
    fdout: Optional[Stream] = None
    fderr: Optional[Stream] = None

    def close(self) -> None:
        """Close every stream held and forget it."""
        for spec in fields(self):
            stream = getattr(self, spec.name)
            if stream is None:
                continue
            if isinstance(stream, int):
                os.close(stream)
            else:
                stream.close()
            setattr(self, spec.name, None)

    def __enter__(self) -> Redirect:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def proc_wait(proc: Optional[subprocess.Popen]) -> None:
    """Wait for ``proc`` to finish and raise unless it exited with status 0."""
    if proc is None:
        raise ProcessError("cannot wait on an invalid process")
    try:
        code = proc.wait()
    except OSError as exc:
        raise ProcessError(f"could not wait on command (pid {proc.pid}): {exc}") from exc
    if code < 0:
        raise ProcessError(f"command process was terminated by signal {-code}")
    if code != 0:
        raise ProcessError(f"command exited with exit code {code}")


@dataclass
class Procs:
    """A batch of running child processes."""

    items: list[subprocess.Popen] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[subprocess.Popen]:
        return iter(self.items)

    def wait(self) -> None:
        """Wait for every process; raise afterwards if any of them failed."""
        failures = []
        for proc in self.items:
            try:
                proc_wait(proc)
            except ProcessError as exc:
                failures.append(str(exc))
        if failures:
            raise ProcessError("; ".join(failures))

    def wait_and_reset(self) -> None:
        """Wait for every process and empty the batch, even on failure."""
        try:
            self.wait()
        finally:
            self.items.clear()

    def append_with_flush(self, proc: subprocess.Popen, max_procs_count: int) -> None:
        """Add ``proc``; once the batch holds ``max_procs_count``, drain it."""
        self.items.append(proc)
        if len(self.items) >= max_procs_count:
            self.wait_and_reset()