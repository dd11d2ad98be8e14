"""longlocs: report lines longer than a maximum length."""

from longlocs.__version__ import __version__
from longlocs.config import ScanConfig, build_config, load_config
from longlocs.extensions import matches, parse_extensions
from longlocs.orchestrator import run_scan
from longlocs.scanner import ScanResult, scan_file, scan_tree
from longlocs.types import Violation
from longlocs.walker import Entry, FileSystem, LocalFileSystem, ScanError, WalkAction, walk

__all__ = [
    "__version__",
    "ScanConfig",
    "build_config",
    "load_config",
    "matches",
    "parse_extensions",
    "run_scan",
    "ScanResult",
    "scan_file",
    "scan_tree",
    "Violation",
    "Entry",
    "FileSystem",
    "LocalFileSystem",
    "ScanError",
    "WalkAction",
    "walk",
]
