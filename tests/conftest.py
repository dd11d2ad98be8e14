"""Shared fixtures: an in-memory filesystem and logging cleanup."""
import io
import logging

import pytest

from longlocs.walker import ROOT, Entry, join_path


class TrackedFile(io.StringIO):
    """StringIO that records when it is closed."""

    def __init__(self, content: str, closed_paths: list[str], path: str) -> None:
        super().__init__(content, newline="\n")
        self._closed_paths = closed_paths
        self._path = path

    def close(self) -> None:
        if not self.closed:
            self._closed_paths.append(self._path)
        super().close()


class FailingFile(TrackedFile):
    """TrackedFile whose iteration raises OSError after a number of lines."""

    def __init__(self, content: str, closed_paths: list[str], path: str, fail_after: int) -> None:
        super().__init__(content, closed_paths, path)
        self._remaining = fail_after

    def __next__(self) -> str:
        if self._remaining == 0:
            raise OSError(5, "Input/output error")
        self._remaining -= 1
        return super().__next__()


class MemoryFileSystem:
    """FileSystem built from a mapping of relative path to file content.

    Directories are implied by file paths; a path ending in "/" declares an
    empty directory. Paths in ``failing`` raise OSError when listed or opened;
    paths in ``failing_reads`` open but fail after the given number of lines.
    """

    def __init__(
        self,
        files: dict[str, str | None],
        failing: set[str] | None = None,
        failing_reads: dict[str, int] | None = None,
    ):
        self.files = {path: content for path, content in files.items() if not path.endswith("/")}
        self.dirs = {ROOT}
        for path in files:
            parts = path.rstrip("/").split("/")
            last = len(parts) if path.endswith("/") else len(parts) - 1
            for i in range(1, last + 1):
                self.dirs.add("/".join(parts[:i]))
        self.failing = failing or set()
        self.failing_reads = failing_reads or {}
        self.listed: list[str] = []
        self.opened: list[str] = []
        self.closed: list[str] = []

    def list_dir(self, path: str) -> list[Entry]:
        if path in self.failing:
            raise PermissionError(13, "Permission denied", path)
        self.listed.append(path)
        prefix = "" if path == ROOT else f"{path}/"
        names = {}
        for candidate in self.dirs | set(self.files):
            if candidate == ROOT or not candidate.startswith(prefix):
                continue
            rest = candidate[len(prefix):]
            if rest and "/" not in rest:
                names[rest] = candidate in self.dirs
        return [
            Entry(name=name, path=join_path(path, name), is_dir=is_dir)
            for name, is_dir in sorted(names.items())
        ]

    def open_text(self, path: str) -> TrackedFile:
        if path in self.failing:
            raise PermissionError(13, "Permission denied", path)
        self.opened.append(path)
        if path in self.failing_reads:
            return FailingFile(self.files[path], self.closed, path, self.failing_reads[path])
        return TrackedFile(self.files[path], self.closed, path)


@pytest.fixture
def memory_fs():
    """Factory for in-memory filesystems."""
    return MemoryFileSystem


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to streams captured by earlier tests."""
    yield
    logger = logging.getLogger("longlocs")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
