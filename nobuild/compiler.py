"""C compilers, their flag vocabularies and commands that invoke them."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

from .command import CommandError
from .logs import LogLevel, log

__all__ = ["Compiler", "CompilerCommand", "detect", "CC", "GCC", "CLANG"]

# The std flag name is cut to this many characters before it is looked up.
_STD_FLAG_LIMIT = 7

_COMMON_FLAGS: Mapping[str, str] = MappingProxyType(
    {
        "debug": "-g",
        "werror": "-Werror",
        "wall": "-Wall",
        "wextra": "-Wextra",
        "syntax-only": "-fsyntax-only",
        "std=c89": "-std=c89",
        "std=c99": "-std=c99",
        "std=c11": "-std=c11",
        "std=c17": "-std=c17",
        "std=c23": "-std=c23",
    }
)


@dataclass(frozen=True)
class Compiler:
    """A C compiler: its program name, known flags and output arguments.

    ``output`` holds argument templates; ``%s`` in one is replaced by the
    output path.
    """

    name: str
    flags: Mapping[str, str] = field(default_factory=dict)
    output: tuple[str, ...] = ()

    def lookup_flag(self, name: str) -> Optional[str]:
        """Return the argument that spells the generic flag ``name``, if known."""
        return self.flags.get(name)


CC = Compiler("cc", _COMMON_FLAGS, ("-o", "%s"))
GCC = Compiler("gcc", _COMMON_FLAGS)
CLANG = Compiler("clang", _COMMON_FLAGS)

_KNOWN = {compiler.name: compiler for compiler in (GCC, CLANG, CC)}


def detect(environ: Optional[Mapping[str, str]] = None) -> Compiler:
    """Pick the compiler named by ``CC`` in ``environ`` (the process environment by default)."""
    env = os.environ if environ is None else environ
    name = env.get("CC")
    if name is None:
        return CC
    return _KNOWN.get(name, Compiler(name))


@dataclass
class CompilerCommand:
    """An invocation of a compiler, built up from generic flag names."""

    compiler: Optional[Compiler] = None
    args: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.compiler is None:
            self.compiler = detect()
        if not self.args:
            self.args.append(self.compiler.name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.args)

    def __len__(self) -> int:
        return len(self.args)

    def std(self, cstd: str) -> bool:
        """Select the C standard ``cstd``; an unknown one is ignored with a warning.

        Returns whether a flag was added.
        """
        flag = self.compiler.lookup_flag(f"std={cstd}"[:_STD_FLAG_LIMIT])
        if flag is None:
            log(LogLevel.WARNING, f"unknown C std ({cstd}) by {self.compiler.name}, ignoring")
            return False
        self.args.append(flag)
        return True

    def flags(self, *args: str) -> None:
        """Add flags by generic name; unknown names are skipped with a warning."""
        for name in args:
            flag = self.compiler.lookup_flag(name)
            if flag is None:
                log(LogLevel.WARNING, f"unknown flag: {name}")
                continue
            self.args.append(flag)

    def output(self, path: str | os.PathLike[str]) -> None:
        """Add the arguments that name the output file, as the compiler spells them."""
        target = os.fspath(path)
        for template in self.compiler.output:
            self.args.append(template.replace("%s", target, 1) if "%s" in template else template)

    def inputs(self, *args: str | os.PathLike[str]) -> None:
        """Add the files to compile."""
        self.args.extend(os.fspath(arg) for arg in args)

    def run(self) -> int:
        """Run the compiler and return its exit status, logging any failure."""
        try:
            proc = subprocess.Popen(list(self.args))
        except OSError as exc:
            raise CommandError(
                f"cannot exec CMD {self.args[0]}: {exc.strerror or exc}"
            ) from exc
        code = proc.wait()
        if code < 0:
            log(LogLevel.ERROR, f"process exited abnormally with {-code}")
        elif code != 0:
            log(LogLevel.ERROR, f"process exited with {code}")
        return code