import json

from longlocs.reporter import format_json_report, format_violation, get_exit_code
from longlocs.scanner import ScanResult
from longlocs.types import Violation


def test_format_violation():
    """Test the path:line (N chars) format."""
    violation = Violation(path="src/main.go", line=42, length=130, text="x" * 130)

    assert format_violation(violation) == "src/main.go:42 (130 chars) "


def test_format_violation_verbose():
    """Test verbose mode appends the raw line on its own line."""
    violation = Violation(path="a.go", line=1, length=5, text="hello")

    assert format_violation(violation, verbose=True) == "a.go:1 (5 chars) \nhello"


def test_format_json_report():
    """Test JSON report uses two-space indentation and sorted keys."""
    report = {"z.go": 1, "a/b.go": 2, "a.go": 3}

    output = format_json_report(report)

    assert json.loads(output) == report
    assert output == '{\n  "a.go": 3,\n  "a/b.go": 2,\n  "z.go": 1\n}'


def test_format_json_report_empty():
    """Test an empty report renders as an empty object."""
    assert format_json_report({}) == "{}"


def test_reporter_get_exit_code():
    """Test exit code is only non-zero in strict mode with violations."""
    clean = ScanResult()
    dirty = ScanResult(report={"a.go": 1})

    assert get_exit_code(clean) == 0
    assert get_exit_code(dirty) == 0
    assert get_exit_code(clean, strict=True) == 0
    assert get_exit_code(dirty, strict=True) == 1
