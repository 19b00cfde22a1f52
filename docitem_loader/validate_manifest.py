"""Schema gate for API documentation manifests."""

import logging
from pathlib import Path
from typing import Any

from jsonschema import Draft7Validator

from docitem_loader.errors import ManifestValidationError

logger = logging.getLogger(__name__)

SCHEMA_FILE_NAME = "api-json-schema.json"
BUNDLED_SCHEMA_PATH = Path(__file__).parent / "schemas" / SCHEMA_FILE_NAME


def format_violations(document: Any, schema: dict[str, Any]) -> list[str]:
    """Return one ``path - message`` line per schema violation, in path order."""
    errors = sorted(
        Draft7Validator(schema).iter_errors(document),
        key=lambda e: [str(p) for p in e.absolute_path],
    )
    return [
        f"{'/'.join(str(p) for p in e.absolute_path) or '(root)'} - {e.message}"
        for e in errors
    ]


def validate_manifest(
    document: Any,
    schema: dict[str, Any],
    tool_name: str = "ApiJsonGenerator",
    path: Path | None = None,
) -> None:
    """Raise ManifestValidationError unless the document conforms to the schema."""
    violations = format_violations(document, schema)
    if not violations:
        return

    detail = "\n".join(violations)
    message = (
        f"{tool_name} validation error - output does not conform to "
        f"{SCHEMA_FILE_NAME}:\n{detail}"
    )
    if path is not None:
        message = f"{message}\n(manifest: {path})"
    logger.error(message)
    raise ManifestValidationError(message, path=path, detail=detail)
