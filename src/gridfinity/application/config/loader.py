"""Reading and writing JSON plan files.

Every failure (a missing or unreadable file, broken JSON, a schema
violation, a failed write) surfaces as a :class:`ConfigError` whose
``error_type`` says which stage failed and whose ``details`` carry the
location of each problem.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from gridfinity.application.config.schema import PlannerConfiguration


class ConfigError(Exception):
    """A plan could not be loaded, validated or saved.

    Attributes:
        message: Human readable summary, also used as ``str(error)``.
        error_type: One of file_not_found, permission_denied, file_read_error,
            json_parse, validation or file_write_error.
        path: The plan file involved, when there is one.
        details: One dict per problem. JSON errors carry line, column and
            message; validation errors carry path, message, value and
            error_type.
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


def _json_path(loc: tuple[str | int, ...]) -> str:
    """Render a Pydantic error location the way it would appear in the file.

    Examples:
        >>> _json_path(("printer", "exclusion_zone", "left"))
        'printer.exclusion_zone.left'
        >>> _json_path(("drawers", 2, "width"))
        'drawers[2].width'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


def _describe_problem(detail: dict[str, Any]) -> str:
    where = detail["path"] or "(root)"
    value = detail.get("value")
    if value is None or isinstance(value, dict):
        return f"  - {where}: {detail['message']}"
    return f"  - {where}: {detail['message']} (got: {value!r})"


def _validate(data: Any, path: Path | None = None) -> PlannerConfiguration:
    try:
        return PlannerConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = [
            {
                "path": _json_path(problem["loc"]),
                "message": problem["msg"],
                "value": problem.get("input"),
                "error_type": problem["type"],
            }
            for problem in e.errors()
        ]
        summary = "\n".join(
            ["Configuration validation failed:"] + [_describe_problem(d) for d in details]
        )
        raise ConfigError(summary, "validation", path, details) from e


def _read_plan_file(path: Path) -> str:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}", "file_not_found", path)
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            f"Permission denied reading config file: {path}", "permission_denied", path
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Error reading config file: {path}: {e}", "file_read_error", path
        ) from e


def _parse_json(content: str, path: Path) -> Any:
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        location = f"line {e.lineno}, column {e.colno}"
        raise ConfigError(
            f"Invalid JSON in config file: {path} ({location}): {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e


def load_config(path: Path) -> PlannerConfiguration:
    """Load and validate a plan from a JSON file.

    Args:
        path: Plan file to read.

    Returns:
        The validated plan.

    Raises:
        ConfigError: With ``error_type`` file_not_found, permission_denied,
            file_read_error, json_parse or validation.

    Example:
        >>> try:
        ...     plan = load_config(Path("kitchen-drawer.json"))
        ... except ConfigError as e:
        ...     print(e)
    """
    return _validate(_parse_json(_read_plan_file(path), path), path)


def load_config_from_dict(data: dict[str, Any]) -> PlannerConfiguration:
    """Validate a plan that is already in memory.

    Raises:
        ConfigError: With ``error_type`` validation.
    """
    return _validate(data)


def save_config(config: PlannerConfiguration, path: Path) -> None:
    """Write a plan to ``path`` as indented JSON.

    Unset optional fields are omitted so saved files stay minimal.

    Raises:
        ConfigError: With error_type "permission_denied" or "file_write_error".
    """
    content = config.model_dump_json(indent=2, exclude_none=True)
    try:
        path.write_text(content + "\n", encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            f"Permission denied writing config file: {path}", "permission_denied", path
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Error writing config file: {path}: {e}", "file_write_error", path
        ) from e
