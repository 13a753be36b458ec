"""Commands: argument lists that are rendered, started and waited on."""

from __future__ import annotations

import subprocess
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional, Union

from .logs import LogLevel, log
from .process import ProcessError, Redirect, proc_wait

__all__ = ["CommandError", "Cmd"]


class CommandError(ProcessError):
    """A command could not be started."""


@dataclass
class Cmd:
    """A program and its arguments, built up piece by piece."""

    items: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def append(self, *args: str) -> None:
        """Add arguments at the end."""
        self.items.extend(args)

    def extend(self, other: Union[Cmd, Iterable[str]]) -> None:
        """Add all the arguments of another command."""
        self.items.extend(other.items if isinstance(other, Cmd) else other)

    def reset(self) -> None:
        """Forget every argument."""
        self.items.clear()

    def render(self) -> str:
        """Return the command as one line, quoting arguments with spaces."""
        return " ".join(f"'{arg}'" if " " in arg else arg for arg in self.items)

    def run_async(self, redirect: Optional[Redirect] = None) -> subprocess.Popen:
        """Start the command and return the running process."""
        if not self.items:
            raise CommandError("could not run empty command")
        log(LogLevel.INFO, f"CMD: {self.render()}")
        if redirect is None:
            redirect = Redirect()
        try:
            return subprocess.Popen(
                list(self.items),
                stdin=redirect.fdin,
                stdout=redirect.fdout,
                stderr=redirect.fderr,
            )
        except OSError as exc:
            reason = exc.strerror or str(exc)
            raise CommandError(
                f"could not exec child process for {self.items[0]}: {reason}"
            ) from exc

    def run_sync(self, redirect: Optional[Redirect] = None) -> None:
        """Run the command to completion; raise unless it succeeds."""
        proc_wait(self.run_async(redirect))

    def run_async_and_reset(self, redirect: Optional[Redirect] = None) -> subprocess.Popen:
        """Start the command, then empty it and close the redirected streams."""
        try:
            return self.run_async(redirect)
        finally:
            self.reset()
            if redirect is not None:
                redirect.close()

    def run_sync_and_reset(self, redirect: Optional[Redirect] = None) -> None:
        """Run the command, then empty it and close the redirected streams."""
        try:
            self.run_sync(redirect)
        finally:
            self.reset()
            if redirect is not None:
                redirect.close()