"""Tests for metrics tracking."""
import time

from longlocs.metrics import ScanMetrics


def test_metrics_initialization():
    """Test metrics starts with zeros."""
    metrics = ScanMetrics()

    assert metrics.files_scanned == 0
    assert metrics.violations == 0
    assert metrics.end_time is None


def test_metrics_elapsed_time():
    """Test elapsed time calculation."""
    metrics = ScanMetrics()
    time.sleep(0.1)
    metrics.finish()

    assert metrics.elapsed_seconds >= 0.1
    assert metrics.elapsed_seconds < 1.0


def test_metrics_to_dict():
    """Test conversion to dictionary."""
    metrics = ScanMetrics()
    metrics.files_scanned = 7
    metrics.directories_pruned = 1
    metrics.finish()

    d = metrics.to_dict()

    assert d["files_scanned"] == 7
    assert d["directories_pruned"] == 1
    assert "elapsed_seconds" in d
