"""Depth-first directory traversal over a pluggable filesystem."""
import enum
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, TextIO


ROOT = "."
VCS_DIR_NAME = ".git"


class ScanError(OSError):
    """Raised when a directory or file under the scan root cannot be read."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return str(self.args[0])


class WalkAction(enum.Enum):
    """What the traversal should do after visiting an entry."""

    CONTINUE = "continue"
    SKIP_SUBTREE = "skip_subtree"


@dataclass(frozen=True)
class Entry:
    """A directory entry relative to the scan root."""

    name: str
    path: str
    is_dir: bool
    links_to_dir: bool = False


class FileSystem(Protocol):
    """Read-only view of a directory tree addressed by relative POSIX paths."""

    def list_dir(self, path: str) -> list[Entry]:
        ...

    def open_text(self, path: str) -> TextIO:
        ...


def join_path(parent: str, name: str) -> str:
    """Join a relative parent path and a child name with '/'."""
    if parent == ROOT:
        return name
    return f"{parent}/{name}"


class LocalFileSystem:
    """FileSystem backed by the real disk, rooted at a directory.

    Listings are sorted by name so a walk is reproducible. Symlinks are
    never reported as directories, so symlinked directories are not
    descended into; they are flagged with ``links_to_dir`` instead.
    """

    def __init__(self, root: Path, encoding: str = "utf-8") -> None:
        self.root = root
        self.encoding = encoding

    def _resolve(self, path: str) -> Path:
        if path == ROOT:
            return self.root
        return self.root / path

    def list_dir(self, path: str) -> list[Entry]:
        with os.scandir(self._resolve(path)) as it:
            entries = [
                Entry(
                    name=dir_entry.name,
                    path=join_path(path, dir_entry.name),
                    is_dir=dir_entry.is_dir(follow_symlinks=False),
                    links_to_dir=dir_entry.is_symlink() and dir_entry.is_dir(),
                )
                for dir_entry in it
            ]
        return sorted(entries, key=lambda entry: entry.name)

    def open_text(self, path: str) -> TextIO:
        # Only "\n" splits lines; a lone "\r" stays part of the line
        return self._resolve(path).open(encoding=self.encoding, errors="replace", newline="\n")


def walk(fs: FileSystem, visit: Callable[[Entry], WalkAction]) -> None:
    """Visit every entry below the root in depth-first pre-order.

    Siblings are visited in the order the filesystem lists them. When
    ``visit`` returns SKIP_SUBTREE for a directory, nothing beneath it is
    listed. Errors raised by ``visit`` abort the walk unchanged.

    Args:
        fs: Filesystem to traverse
        visit: Callback invoked once per entry

    Raises:
        ScanError: If a directory cannot be listed
    """
    stack = list(reversed(_list_dir(fs, ROOT)))

    while stack:
        entry = stack.pop()
        action = visit(entry)

        if entry.is_dir and action is WalkAction.CONTINUE:
            stack.extend(reversed(_list_dir(fs, entry.path)))


def _list_dir(fs: FileSystem, path: str) -> list[Entry]:
    try:
        return fs.list_dir(path)
    except OSError as e:
        raise ScanError(f"Cannot list directory {path}: {e}", path) from e


def is_vcs_dir(entry: Entry) -> bool:
    """Check whether an entry is a version-control metadata directory."""
    return entry.is_dir and entry.name == VCS_DIR_NAME
