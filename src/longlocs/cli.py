"""Command-line interface for longlocs."""
import sys
from pathlib import Path

import click

from longlocs.__version__ import __version__
from longlocs.config import CONFIG_FILE_NAME, build_config, load_config
from longlocs.logging_config import get_logger, setup_logging
from longlocs.orchestrator import run_scan
from longlocs.reporter import format_json_report, format_violation, get_exit_code
from longlocs.types import Violation


@click.command()
@click.version_option(version=__version__, prog_name="longlocs")
@click.option(
    "--wd",
    "working_directory",
    type=click.Path(path_type=Path),
    help="The root directory from which to (recursively) search. Defaults to the cwd.",
)
@click.option(
    "--ext",
    "extensions",
    type=str,
    help="A comma-separated list of file extensions, without leading dots.",
)
@click.option(
    "--len",
    "max_line_length",
    type=int,
    help="Any lines longer than this will be reported. Defaults to 120.",
)
@click.option(
    "-v", "--verbose", is_flag=True, help="Emit the content of long lines, not just file:line."
)
@click.option("--strict", is_flag=True, help="Exit with status 1 when long lines are found")
@click.option("--progress", is_flag=True, help="Show a progress spinner on stderr")
@click.option("--debug", is_flag=True, help="Log every pruned directory and skipped file")
@click.option("--quiet", is_flag=True, help="Suppress progress messages (errors only)")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help=f"Path to config file (default: {CONFIG_FILE_NAME} in the working directory)",
)
def main(
    working_directory: Path | None,
    extensions: str | None,
    max_line_length: int | None,
    verbose: bool,
    strict: bool,
    progress: bool,
    debug: bool,
    quiet: bool,
    config: Path | None,
) -> None:
    """Report lines longer than a maximum length in a directory tree."""
    setup_logging(debug=debug, quiet=quiet)
    logger = get_logger(__name__)

    try:
        root = working_directory or Path.cwd()
        config_path = config or root / CONFIG_FILE_NAME
        cfg = build_config(
            load_config(config_path),
            working_directory=working_directory,
            extensions=extensions,
            max_line_length=max_line_length,
            # Flags only override the config file when set
            verbose=verbose or None,
            strict=strict or None,
            show_progress=progress or None,
        )

        def emit(violation: Violation) -> None:
            click.echo(format_violation(violation, verbose=cfg.verbose))

        result, _ = run_scan(cfg, emit)

        logger.info(f"Final Report: {format_json_report(result.report)}")
        logger.info(f"Total count of long lines: {result.total_count}")

        sys.exit(get_exit_code(result, strict=cfg.strict))

    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user", err=True)
        sys.exit(130)  # Standard SIGINT exit code
    except (ValueError, OSError) as e:
        # Configuration errors and unreadable directories or files
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    except Exception as e:
        logger.exception("Unexpected error during execution")
        click.echo(
            f"An unexpected error occurred: {e}\n" "Run with --debug for details.", err=True
        )
        sys.exit(2)


if __name__ == "__main__":
    main()
