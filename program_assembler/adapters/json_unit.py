"""Adapter: JSON hand-off document to TranslationUnit.

WHY: Front ends written as separate tools (or in other languages) need a
file format for their two output sequences. A small JSON document keeps
both lists together with explicit ordering and no escaping ambiguity for
blank lines.

HOW: The document is read and validated against HANDOFF_SCHEMA with
jsonschema on first access. Only after validation succeeds are the
instruction stream and literal pool returned.

RULES:
- Top level: {"source"?: str, "instructions": [str, ...], "literals"?: [str, ...]}
- "literals" defaults to [] and must not contain duplicates
- No other top-level keys are allowed
- Unreadable files, invalid JSON and schema failures raise TranslationError
- source_filename is "source" when given, else the document's file name
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import jsonschema

from program_assembler.adapters.base import FrontEndAdapter, TranslationError

logger = logging.getLogger(__name__)

HANDOFF_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Translation unit hand-off",
    "type": "object",
    "required": ["instructions"],
    "additionalProperties": False,
    "properties": {
        "source": {"type": "string"},
        "instructions": {
            "type": "array",
            "items": {"type": "string"},
        },
        "literals": {
            "type": "array",
            "items": {"type": "string"},
            "uniqueItems": True,
        },
    },
}


def load_handoff(path: str | Path) -> dict[str, Any]:
    """Read and validate a hand-off document.

    Raises:
        TranslationError: If the file cannot be read, is not JSON, or does
            not conform to HANDOFF_SCHEMA.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TranslationError("Cannot read {}: {}".format(path, exc)) from exc

    try:
        document = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise TranslationError("Invalid JSON in {}: {}".format(path, exc)) from exc

    try:
        jsonschema.validate(instance=document, schema=HANDOFF_SCHEMA)
    except jsonschema.ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise TranslationError(
            "Hand-off document {} is invalid at {}: {}".format(path, location, exc.message)
        ) from exc

    logger.info("Loaded hand-off document %s", path)
    return document


class JsonUnitAdapter(FrontEndAdapter):
    """Front-end adapter reading a JSON hand-off document."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.source_filename = self.path.name
        self._document: Optional[dict[str, Any]] = None

    @property
    def name(self) -> str:
        return "JSON hand-off"

    def _load(self) -> dict[str, Any]:
        if self._document is None:
            self._document = load_handoff(self.path)
            self.source_filename = self._document.get("source", self.path.name)
        return self._document

    def instruction_stream(self) -> list[str]:
        return list(self._load()["instructions"])

    def literal_pool(self) -> list[str]:
        return list(self._load().get("literals", []))
