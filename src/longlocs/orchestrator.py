"""Main orchestrator coordinating a scan."""
import os

from longlocs.config import ScanConfig
from longlocs.logging_config import get_logger
from longlocs.metrics import ScanMetrics
from longlocs.scanner import EmitFn, ScanResult, scan_tree
from longlocs.validation import (
    validate_extensions,
    validate_max_line_length,
    validate_working_directory,
)
from longlocs.walker import LocalFileSystem

logger = get_logger(__name__)


def _scan_with_progress(
    fs: LocalFileSystem, config: ScanConfig, emit: EmitFn, metrics: ScanMetrics
) -> ScanResult:
    """Run the scan behind a rich spinner on stderr."""
    from rich.console import Console
    from rich.progress import Progress, SpinnerColumn, TextColumn

    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        TextColumn("[bold cyan]{task.completed:.0f} files"),
        TextColumn("{task.fields[current]}"),
        console=Console(stderr=True),
        transient=True,
        redirect_stdout=False,
    ) as progress:
        task = progress.add_task("Scanning", total=None, current="")

        def on_file(path: str) -> None:
            progress.update(task, advance=1, current=path)

        return scan_tree(
            fs, config.extensions, config.max_line_length, emit, metrics=metrics, on_file=on_file
        )


def should_show_progress(config: ScanConfig) -> bool:
    """Check whether the progress spinner is enabled."""
    return config.show_progress and not os.environ.get("LONGLOCS_NO_PROGRESS")


def run_scan(config: ScanConfig, emit: EmitFn) -> tuple[ScanResult, ScanMetrics]:
    """Run a scan.

    Args:
        config: Validated configuration
        emit: Output sink called once per violation, in discovery order

    Returns:
        Tuple of (scan result, metrics object)

    Raises:
        ConfigError: If the configuration is invalid
        ScanError: If a directory or file cannot be read
    """
    metrics = ScanMetrics()
    validate_working_directory(config.working_directory)
    validate_extensions(config.extensions)
    validate_max_line_length(config.max_line_length)

    logger.info(f"Searching for long lines in files rooted at: {config.working_directory}")
    logger.info(
        "Files considered will end in one of the following extensions: "
        f"{sorted(config.extensions)}"
    )
    logger.info(f"Long lines are those that are longer than: {config.max_line_length}")

    fs = LocalFileSystem(config.working_directory, encoding=config.encoding)

    if should_show_progress(config):
        result = _scan_with_progress(fs, config, emit, metrics)
    else:
        result = scan_tree(fs, config.extensions, config.max_line_length, emit, metrics=metrics)

    metrics.finish()
    logger.debug(f"Scan metrics: {metrics.to_dict()}")
    return result, metrics
