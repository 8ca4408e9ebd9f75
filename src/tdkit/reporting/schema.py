"""JSON schema definition for reporter output."""
from __future__ import annotations

SCHEMA_VERSION = "1.0.0"

JSON_SCHEMA_V1 = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "tdkit report",
    "type": "object",
    "required": ["schema_version", "generated_at", "suite", "summary", "cases"],
    "properties": {
        "schema_version": {"type": "string"},
        "generated_at": {"type": "string", "format": "date-time"},
        "suite": {"type": "string"},
        "summary": {
            "type": "object",
            "required": ["total", "passed", "failed", "timed_out", "duration_s"],
            "properties": {
                "total": {"type": "integer", "minimum": 0},
                "passed": {"type": "integer", "minimum": 0},
                "failed": {"type": "integer", "minimum": 0},
                "timed_out": {"type": "integer", "minimum": 0},
                "duration_s": {"type": "number", "minimum": 0},
            },
        },
        "cases": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "outcome", "duration_ms"],
                "properties": {
                    "name": {"type": "string"},
                    "outcome": {"type": "string", "enum": ["passed", "failed", "timed_out"]},
                    "duration_ms": {"type": "number", "minimum": 0},
                    "reason": {"type": "string"},
                    "expected": {},
                    "actual": {},
                    "location": {"type": "string"},
                },
            },
        },
    },
}
