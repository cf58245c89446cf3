"""JSON listing emitter with the splice layout recorded.

WHY: Tooling around the compiler (test harnesses, editors showing the
generated program) wants the merged lines together with where the
literal block landed, without re-parsing the text to find it.

HOW: Builds a dict with the source name, the merged lines, and a
"splice" object (start index, literal count, separator index). The dict
is validated against LISTING_SCHEMA with jsonschema before it is
serialized.

RULES:
- splice.start is always SPLICE_POINT
- splice.separator_index == splice.start + splice.literal_count
- lines[splice.separator_index] is the blank separator
- Schema validation is mandatory and raises on invalid output
- Output suffix: "-listing.json"
- Media type: "application/json"
"""

from __future__ import annotations

import json
from typing import Any

import jsonschema

from program_assembler.config import SPLICE_POINT
from program_assembler.core.ir import MergedProgram
from program_assembler.formatters.base import BaseEmitter, EmitterOutput

LISTING_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Merged program listing",
    "type": "object",
    "required": ["source", "lines", "splice"],
    "additionalProperties": False,
    "properties": {
        "source": {"type": "string"},
        "lines": {
            "type": "array",
            "items": {"type": "string"},
            "minItems": SPLICE_POINT + 2,
        },
        "splice": {
            "type": "object",
            "required": ["start", "literal_count", "separator_index"],
            "additionalProperties": False,
            "properties": {
                "start": {"const": SPLICE_POINT},
                "literal_count": {"type": "integer", "minimum": 0},
                "separator_index": {"type": "integer", "minimum": SPLICE_POINT},
            },
        },
    },
}


class JsonListingEmitter(BaseEmitter):
    """Emitter producing a JSON listing of the merged program."""

    @property
    def name(self) -> str:
        return "JSON listing"

    def format(self, program: MergedProgram) -> list[EmitterOutput]:
        """Render the merged program as a validated JSON listing.

        Raises:
            jsonschema.ValidationError: If the generated listing does not
                conform to LISTING_SCHEMA.
        """
        output: dict[str, Any] = {
            "source": program.source_filename,
            "lines": list(program.lines),
            "splice": {
                "start": SPLICE_POINT,
                "literal_count": program.literal_count,
                "separator_index": program.separator_index,
            },
        }

        jsonschema.validate(instance=output, schema=LISTING_SCHEMA)

        return [
            EmitterOutput(
                suffix="-listing.json",
                content=json.dumps(output, indent=2, ensure_ascii=False) + "\n",
                media_type="application/json",
            )
        ]
