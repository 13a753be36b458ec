"""File-system helpers: copying, reading, writing, deleting and renaming."""

from __future__ import annotations

import os
import shutil
import stat
from enum import Enum

from .logs import LogLevel, log

__all__ = [
    "FileType",
    "FileSystemError",
    "mkdir_if_not_exists",
    "copy_file",
    "copy_directory_recursively",
    "read_entire_dir",
    "write_entire_file",
    "read_entire_file",
    "get_file_type",
    "delete_file",
    "rename",
]


class FileType(Enum):
    """Kind of object a path refers to."""

    REGULAR = 0
    DIRECTORY = 1
    SYMLINK = 2
    OTHER = 3


class FileSystemError(OSError):
    """A file-system operation could not be carried out."""


def mkdir_if_not_exists(path: str | os.PathLike[str]) -> bool:
    """Create the directory ``path``.

    Returns True when it was created and False when it already existed.
    """
    try:
        os.mkdir(path, 0o755)
    except FileExistsError:
        log(LogLevel.INFO, f"directory `{os.fspath(path)}` already exists")
        return False
    except OSError as exc:
        raise FileSystemError(
            f"could not create directory `{os.fspath(path)}`: {exc.strerror}"
        ) from exc
    log(LogLevel.INFO, f"created directory `{os.fspath(path)}`")
    return True


def copy_file(src_path: str | os.PathLike[str], dst_path: str | os.PathLike[str]) -> None:
    """Copy the contents and permission bits of one file to another."""
    src, dst = os.fspath(src_path), os.fspath(dst_path)
    log(LogLevel.INFO, f"copying {src} -> {dst}")
    try:
        shutil.copyfile(src, dst)
        shutil.copymode(src, dst)
    except OSError as exc:
        raise FileSystemError(f"could not copy {src} to {dst}: {exc}") from exc


def read_entire_dir(parent: str | os.PathLike[str]) -> list[str]:
    """Return the names of the entries of the directory ``parent``."""
    try:
        return os.listdir(parent)
    except OSError as exc:
        raise FileSystemError(
            f"could not open directory {os.fspath(parent)}: {exc.strerror}"
        ) from exc


def write_entire_file(path: str | os.PathLike[str], data: bytes | str) -> None:
    """Replace the contents of ``path`` with ``data``."""
    if isinstance(data, str):
        data = data.encode()
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as exc:
        raise FileSystemError(
            f"could not write file {os.fspath(path)}: {exc.strerror}"
        ) from exc


def read_entire_file(path: str | os.PathLike[str]) -> bytes:
    """Return the whole contents of ``path``."""
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as exc:
        raise FileSystemError(
            f"could not read file {os.fspath(path)}: {exc.strerror}"
        ) from exc


def get_file_type(path: str | os.PathLike[str]) -> FileType:
    """Tell what kind of object ``path`` refers to, following symlinks."""
    try:
        mode = os.stat(path).st_mode
    except OSError as exc:
        raise FileSystemError(
            f"could not get stat of {os.fspath(path)}: {exc.strerror}"
        ) from exc
    if stat.S_ISREG(mode):
        return FileType.REGULAR
    if stat.S_ISDIR(mode):
        return FileType.DIRECTORY
    if stat.S_ISLNK(mode):
        return FileType.SYMLINK
    return FileType.OTHER


def delete_file(path: str | os.PathLike[str]) -> None:
    """Delete a file or an empty directory."""
    name = os.fspath(path)
    log(LogLevel.INFO, f"deleting {name}")
    try:
        if os.path.isdir(name) and not os.path.islink(name):
            os.rmdir(name)
        else:
            os.remove(name)
    except OSError as exc:
        raise FileSystemError(f"could not delete file {name}: {exc.strerror}") from exc


def rename(old_path: str | os.PathLike[str], new_path: str | os.PathLike[str]) -> None:
    """Move ``old_path`` to ``new_path``, replacing what is there."""
    old, new = os.fspath(old_path), os.fspath(new_path)
    log(LogLevel.INFO, f"renaming {old} -> {new}")
    try:
        os.replace(old, new)
    except OSError as exc:
        raise FileSystemError(f"could not rename {old} to {new}: {exc.strerror}") from exc


def copy_directory_recursively(
    src_path: str | os.PathLike[str], dst_path: str | os.PathLike[str]
) -> None:
    """Copy a file or a whole directory tree; symlinks are skipped."""
    src, dst = os.fspath(src_path), os.fspath(dst_path)
    kind = get_file_type(src)
    if kind is FileType.DIRECTORY:
        mkdir_if_not_exists(dst)
        for child in read_entire_dir(src):
            if child in (".", ".."):
                continue
            copy_directory_recursively(f"{src}/{child}", f"{dst}/{child}")
    elif kind is FileType.REGULAR:
        copy_file(src, dst)
    elif kind is FileType.SYMLINK:
        log(LogLevel.WARNING, "Copying symlinks is not supported yet")
    else:
        raise FileSystemError(f"unsupported type of file {src}")