"""JSON Schema for batch reports and the matching validator."""

from __future__ import annotations

from typing import Any, Dict, Mapping

import jsonschema

REPORT_TYPE = "novus.batch_report.v1"

_STATUSES = ["solved", "failed", "error"]

BATCH_REPORT_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "https://novus.local/schemas/batch_report.v1.json",
    "type": "object",
    "required": ["type", "total", "solved", "failed", "checksum", "puzzles"],
    "additionalProperties": False,
    "properties": {
        "type": {"const": REPORT_TYPE},
        "total": {"type": "integer", "minimum": 0},
        "solved": {"type": "integer", "minimum": 0},
        "failed": {"type": "integer", "minimum": 0},
        "checksum": {"type": "integer", "minimum": 0},
        "puzzles": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "status", "updates", "get_stuck", "back_tracked", "grid"],
                "additionalProperties": False,
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "status": {"enum": _STATUSES},
                    "updates": {"type": "integer", "minimum": 0},
                    "get_stuck": {"type": "integer", "minimum": 0},
                    "back_tracked": {"type": "integer", "minimum": 0},
                    "grid": {"type": "string", "pattern": "^[0-9]{81}$"},
                    "error": {"type": "string"},
                    "techniques": {
                        "type": "object",
                        "additionalProperties": {"type": "integer", "minimum": 0},
                    },
                },
            },
        },
    },
}


class ReportValidationError(ValueError):
    """Raised when a batch report does not match :data:`BATCH_REPORT_SCHEMA`."""

    def __init__(self, code: str, detail: str | None = None) -> None:
        self.code = code
        self.detail = detail
        message = code if detail is None else f"{code}:{detail}"
        super().__init__(message)


_VALIDATOR = jsonschema.Draft202012Validator(BATCH_REPORT_SCHEMA)


def validate_report(payload: Mapping[str, Any]) -> None:
    """Validate ``payload`` and cross-check its counters."""

    errors = sorted(
        _VALIDATOR.iter_errors(payload), key=lambda err: [str(part) for part in err.path]
    )
    if errors:
        first = errors[0]
        path = "/".join(str(part) for part in first.path) or "<root>"
        raise ReportValidationError("schema-violation", f"{path}: {first.message}")

    puzzles = payload["puzzles"]
    if payload["total"] != len(puzzles):
        raise ReportValidationError("inconsistent-total", f"{payload['total']} != {len(puzzles)}")
    if payload["solved"] + payload["failed"] != payload["total"]:
        raise ReportValidationError("inconsistent-counts")


__all__ = ["BATCH_REPORT_SCHEMA", "REPORT_TYPE", "ReportValidationError", "validate_report"]
