"""Loading of JSON calculation files into CalculationConfiguration.

Every failure surfaces as a ConfigError. Schema failures are reported per
configuration section (``opening``, ``door``, ``shaker``...) so a file with
several broken sections lists each of them.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cabinetcalc.application.config.schema import CalculationConfiguration

logger = logging.getLogger(__name__)

ROOT_SECTION = "(root)"


class ConfigError(Exception):
    """A calculation file could not be read, parsed or validated.

    Attributes:
        message: Human-readable summary
        error_type: One of file_not_found, permission_denied, file_read_error,
            json_parse, validation
        path: The file involved, or None for in-memory data
        details: For json_parse, one dict with line, column and message.
            For validation, one dict per problem with section, path,
            message, value and error_type.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []

    def __str__(self) -> str:
        return self.message

    @property
    def sections(self) -> list[str]:
        """Configuration sections with validation problems, in report order."""
        return list(dict.fromkeys(d["section"] for d in self.details if "section" in d))


def _problem(loc: tuple[str | int, ...], message: str, value: Any, kind: str) -> dict[str, Any]:
    section = str(loc[0]) if loc else ROOT_SECTION
    return {
        "section": section,
        "path": ".".join(str(part) for part in loc) or ROOT_SECTION,
        "message": message,
        "value": value,
        "error_type": kind,
    }


def _validation_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for section in dict.fromkeys(d["section"] for d in details):
        lines.append(f"  [{section}]")
        for detail in details:
            if detail["section"] != section:
                continue
            entry = f"    - {detail['path']}: {detail['message']}"
            if detail["value"] is not None:
                entry += f" (got: {detail['value']!r})"
            lines.append(entry)
    return "\n".join(lines)


def _validate(data: Any, path: Path | None) -> CalculationConfiguration:
    if not isinstance(data, dict):
        details = [
            _problem((), "A calculation file must be a JSON object", None, "dict_type")
        ]
        raise ConfigError(_validation_message(details), "validation", path, details)

    try:
        config = CalculationConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = [
            _problem(err["loc"], err["msg"], err.get("input"), err["type"])
            for err in e.errors()
        ]
        raise ConfigError(
            _validation_message(details), "validation", path, details
        ) from e

    configured = [name for name in data if name not in ("schema_version", "opening")]
    logger.debug(f"Validated calculation config with sections {configured}")
    return config


def _read_json(path: Path) -> Any:
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigError(
            f"Config file not found: {path}", "file_not_found", path
        ) from e
    except PermissionError as e:
        raise ConfigError(
            f"Permission denied reading config file: {path}", "permission_denied", path
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Error reading config file: {path}: {e}", "file_read_error", path
        ) from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in config file: {path} "
            f"(line {e.lineno}, column {e.colno}): {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e


def load_config(path: Path) -> CalculationConfiguration:
    """Load and validate a calculation file.

    Args:
        path: Path to the JSON calculation file

    Returns:
        A validated CalculationConfiguration

    Raises:
        ConfigError: If the file is missing, unreadable, not valid JSON, or
            does not match the schema. ``error_type`` names the failure.
    """
    logger.debug(f"Loading calculation config from {path}")
    return _validate(_read_json(path), path)


def load_config_from_dict(data: dict[str, Any]) -> CalculationConfiguration:
    """Validate calculation data that is already in memory.

    Raises:
        ConfigError: With ``error_type`` "validation" and ``path`` None.
    """
    return _validate(data, None)
