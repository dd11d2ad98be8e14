"""Configuration management for longlocs."""
import codecs
import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from longlocs.extensions import parse_extensions
from longlocs.validation import ConfigError, validate_extensions, validate_max_line_length

CONFIG_FILE_NAME = ".longlocs.json"
DEFAULT_MAX_LINE_LENGTH = 120


class ScanConfig(BaseModel):
    """Configuration for a scan with validation."""

    working_directory: Path = Field(
        default_factory=Path.cwd, description="Root directory to search recursively"
    )
    extensions: frozenset[str] = Field(description="File extensions to scan, without dots")
    max_line_length: int = Field(
        default=DEFAULT_MAX_LINE_LENGTH, description="Lines longer than this are reported"
    )
    verbose: bool = Field(default=False, description="Emit the content of long lines")
    encoding: str = Field(default="utf-8", description="Text encoding of scanned files")
    show_progress: bool = Field(default=False, description="Show a progress spinner")
    strict: bool = Field(default=False, description="Exit non-zero when violations are found")

    @field_validator("extensions", mode="before")
    @classmethod
    def parse_extension_list(cls, v: Any) -> frozenset[str]:
        """Accept a comma-separated string or a list of extensions."""
        if isinstance(v, str):
            return parse_extensions(v)
        if isinstance(v, (list, tuple, set, frozenset)) and all(isinstance(x, str) for x in v):
            return parse_extensions(v)
        raise ValueError("extensions must be a comma-separated string or a list")

    @field_validator("extensions")
    @classmethod
    def validate_extension_set(cls, v: frozenset[str]) -> frozenset[str]:
        """Reject an empty extension set."""
        validate_extensions(v)
        return v

    @field_validator("max_line_length")
    @classmethod
    def validate_threshold(cls, v: int) -> int:
        """Reject negative thresholds."""
        validate_max_line_length(v)
        return v

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Ensure the encoding is known to Python."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v

    model_config = {"frozen": True}


def load_config(config_path: Path) -> dict[str, Any]:
    """Load configuration values from a JSON file.

    Supports both snake_case (preferred) and camelCase keys. A relative
    working directory is resolved against the file's directory.

    Args:
        config_path: Path to .longlocs.json file

    Returns:
        Dict of values found in the file, empty if the file does not exist

    Raises:
        ConfigError: If the file cannot be read or is not a JSON object
    """
    if not config_path.exists():
        return {}

    try:
        with config_path.open(encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a JSON object")

    values = {
        "working_directory": data.get("working_directory", data.get("workingDirectory")),
        "extensions": data.get("extensions"),
        "max_line_length": data.get("max_line_length", data.get("maxLineLength")),
        "verbose": data.get("verbose"),
        "encoding": data.get("encoding"),
        "show_progress": data.get("show_progress", data.get("showProgress")),
        "strict": data.get("strict"),
    }

    if values["working_directory"] is not None:
        values["working_directory"] = config_path.parent / values["working_directory"]

    return {key: value for key, value in values.items() if value is not None}


def build_config(file_values: dict[str, Any] | None = None, **overrides: Any) -> ScanConfig:
    """Merge file values with command-line overrides and validate.

    Overrides that are None are treated as not given.

    Args:
        file_values: Values loaded from a config file
        **overrides: Values from the command line, which take precedence

    Returns:
        Validated ScanConfig

    Raises:
        ConfigError: If the merged values are invalid
    """
    merged = dict(file_values or {})
    merged.update({key: value for key, value in overrides.items() if value is not None})

    if "extensions" not in merged:
        raise ConfigError("Must supply one or more file extensions via '--ext'")

    try:
        return ScanConfig(**merged)
    except ValidationError as e:
        raise ConfigError(_format_validation_error(e)) from e


def _format_validation_error(error: ValidationError) -> str:
    messages = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"])
        message = detail["msg"].removeprefix("Value error, ")
        messages.append(f"{field}: {message}" if field else message)
    return "; ".join(messages)
