"""Report formatting and output."""
import json

from longlocs.scanner import ScanResult
from longlocs.types import Violation


def format_violation(violation: Violation, verbose: bool = False) -> str:
    """Format a single violation for standard output.

    Args:
        violation: Violation to format
        verbose: Append the raw line on its own line

    Returns:
        "<path>:<line> (<length> chars) " plus the raw text in verbose mode
    """
    content = f"\n{violation['text']}" if verbose else ""
    return f"{violation['path']}:{violation['line']} ({violation['length']} chars) {content}"


def format_json_report(report: dict[str, int]) -> str:
    """Format the per-file counts as JSON.

    Args:
        report: Mapping of relative path to violation count

    Returns:
        JSON string with two-space indentation and sorted keys
    """
    return json.dumps(report, indent=2, sort_keys=True)


def get_exit_code(result: ScanResult, strict: bool = False) -> int:
    """Get exit code based on results.

    Args:
        result: Completed scan result
        strict: Treat violations as a failure

    Returns:
        1 if strict and violations were found, otherwise 0
    """
    if strict and result.total_count > 0:
        return 1
    return 0
