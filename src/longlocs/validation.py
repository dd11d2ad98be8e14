"""Input validation functions."""
from collections.abc import Collection
from pathlib import Path


class ConfigError(ValueError):
    """Raised when the scan configuration is invalid."""


def validate_working_directory(working_directory: Path) -> None:
    """Validate the scan root exists and is a directory.

    Args:
        working_directory: Path to validate

    Raises:
        ConfigError: If path does not exist or is not a directory
    """
    if not working_directory.exists():
        raise ConfigError(f"Working directory does not exist: {working_directory}")

    if not working_directory.is_dir():
        raise ConfigError(f"Working directory is not a directory: {working_directory}")


def validate_max_line_length(max_line_length: int) -> None:
    """Validate the maximum line length.

    Args:
        max_line_length: Threshold to validate

    Raises:
        ConfigError: If the threshold is negative
    """
    if max_line_length < 0:
        raise ConfigError(
            f"Must supply a non-negative maximum line length, got: {max_line_length}"
        )


def validate_extensions(extensions: Collection[str]) -> None:
    """Validate the extension set.

    Args:
        extensions: Normalized extension set

    Raises:
        ConfigError: If no extensions were supplied
    """
    if not extensions:
        raise ConfigError("Must supply one or more file extensions via '--ext'")
