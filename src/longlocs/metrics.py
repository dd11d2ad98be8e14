"""Metrics collected while walking and scanning a tree."""
import time
from dataclasses import dataclass, field


@dataclass
class ScanMetrics:
    """Counters for a single scan."""

    # Timing
    start_time: float = field(default_factory=time.time)
    end_time: float | None = None

    # Traversal
    directories_visited: int = 0
    directories_pruned: int = 0

    # Files
    files_seen: int = 0
    files_scanned: int = 0
    files_skipped: int = 0

    # Lines
    lines_scanned: int = 0
    violations: int = 0

    def finish(self) -> None:
        """Mark the scan as finished."""
        self.end_time = time.time()

    @property
    def elapsed_seconds(self) -> float:
        """Get elapsed time in seconds."""
        end = self.end_time or time.time()
        return end - self.start_time

    def to_dict(self) -> dict:
        """Convert metrics to dictionary."""
        return {
            "elapsed_seconds": round(self.elapsed_seconds, 2),
            "directories_visited": self.directories_visited,
            "directories_pruned": self.directories_pruned,
            "files_seen": self.files_seen,
            "files_scanned": self.files_scanned,
            "files_skipped": self.files_skipped,
            "lines_scanned": self.lines_scanned,
            "violations": self.violations,
        }
