"""Tree scanner: find and count over-length lines."""
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import TextIO

from longlocs.extensions import matches
from longlocs.logging_config import get_logger
from longlocs.metrics import ScanMetrics
from longlocs.types import Violation
from longlocs.walker import Entry, FileSystem, ScanError, WalkAction, is_vcs_dir, walk

logger = get_logger(__name__)

EmitFn = Callable[[Violation], None]


@dataclass
class ScanResult:
    """Report of violation counts keyed by path relative to the scan root.

    A path is only present once it has at least one violation, and keys
    keep the order in which their first violation was found.
    """

    report: dict[str, int] = field(default_factory=dict)

    @property
    def total_count(self) -> int:
        """Sum of all per-file counts."""
        return sum(self.report.values())


def strip_terminator(line: str) -> str:
    """Remove one trailing "\\n", then one trailing "\\r"."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def scan_lines(path: str, lines: Iterable[str], max_line_length: int) -> Iterator[Violation]:
    """Yield a violation for every line strictly longer than the maximum.

    Args:
        path: Path reported in each violation
        lines: Lines as delivered by a line-oriented reader
        max_line_length: Longest allowed line

    Yields:
        Violations in line order, numbered from 1
    """
    for number, line in enumerate(lines, start=1):
        text = strip_terminator(line)
        if len(text) > max_line_length:
            yield Violation(path=path, line=number, length=len(text), text=text)


def scan_file(
    fs: FileSystem,
    path: str,
    max_line_length: int,
    emit: EmitFn,
    metrics: ScanMetrics | None = None,
) -> int:
    """Stream one file and emit its violations.

    The file handle is closed on every exit path, including when reading
    or ``emit`` raises part way through.

    Args:
        fs: Filesystem the path belongs to
        path: Path relative to the scan root
        max_line_length: Longest allowed line
        emit: Called once per violation, in line order
        metrics: Optional metrics to update

    Returns:
        Number of violations found in the file

    Raises:
        ScanError: If the file cannot be opened or read
    """
    try:
        f = fs.open_text(path)
    except OSError as e:
        raise ScanError(f"Cannot open file {path}: {e}", path) from e

    count = 0
    with f:
        lines = _read_lines(f, path, metrics)
        for violation in scan_lines(path, lines, max_line_length):
            count += 1
            emit(violation)

    return count


def _read_lines(f: TextIO, path: str, metrics: ScanMetrics | None) -> Iterator[str]:
    try:
        for line in f:
            if metrics is not None:
                metrics.lines_scanned += 1
            yield line
    except OSError as e:
        raise ScanError(f"Cannot read file {path}: {e}", path) from e


def scan_tree(
    fs: FileSystem,
    extensions: frozenset[str],
    max_line_length: int,
    emit: EmitFn,
    metrics: ScanMetrics | None = None,
    on_file: Callable[[str], None] | None = None,
) -> ScanResult:
    """Walk the tree and count over-length lines per matching file.

    Rules applied at each entry, in order: version-control directories are
    pruned, other directories are descended into, files whose extension is
    not in ``extensions`` or that link to a directory are skipped, and the
    remaining files are scanned.

    Args:
        fs: Filesystem rooted at the scan root
        extensions: Normalized extension set
        max_line_length: Longest allowed line
        emit: Called once per violation, in discovery order
        metrics: Optional metrics to update
        on_file: Called with each path just before it is scanned

    Returns:
        ScanResult with the per-file report

    Raises:
        ScanError: On the first directory or file that cannot be read
    """
    if metrics is None:
        metrics = ScanMetrics()

    result = ScanResult()

    def record(violation: Violation) -> None:
        path = violation["path"]
        result.report[path] = result.report.get(path, 0) + 1
        metrics.violations += 1
        emit(violation)

    def visit(entry: Entry) -> WalkAction:
        if is_vcs_dir(entry):
            logger.debug(f"Pruning {entry.path}")
            metrics.directories_pruned += 1
            return WalkAction.SKIP_SUBTREE

        if entry.is_dir:
            metrics.directories_visited += 1
            return WalkAction.CONTINUE

        metrics.files_seen += 1
        if not matches(extensions, entry.name):
            logger.debug(f"Skipping {entry.path}")
            metrics.files_skipped += 1
            return WalkAction.CONTINUE

        if entry.links_to_dir:
            logger.debug(f"Skipping {entry.path}: symlink to a directory")
            metrics.files_skipped += 1
            return WalkAction.CONTINUE

        if on_file is not None:
            on_file(entry.path)
        scan_file(fs, entry.path, max_line_length, record, metrics)
        metrics.files_scanned += 1
        return WalkAction.CONTINUE

    walk(fs, visit)
    return result
