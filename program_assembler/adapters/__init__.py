"""Front-end adapter registry.

WHY: The CLI and HTTP layers need a single lookup to turn an input into a
TranslationUnit. A central dict makes it trivial to add a new hand-off
format: create the adapter class, import it here, add one line.

HOW: ADAPTERS maps string keys to file-based adapter *classes* (not
instances), each constructed from a path. adapter_for_path() picks one
by file extension. BuilderAdapter and SequenceAdapter are exported for
in-memory hand-offs but are not path-based, so they are not in the
registry.

RULES:
- Keys are snake_case identifiers (used in CLI flags)
- ".json" inputs use the JSON hand-off adapter, everything else the listing adapter
- Adapters are constructed lazily; no file is read until a sequence is requested
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from program_assembler.adapters.base import FrontEndAdapter, TranslationError
from program_assembler.adapters.in_process import BuilderAdapter, SequenceAdapter
from program_assembler.adapters.json_unit import JsonUnitAdapter
from program_assembler.adapters.listing import ListingAdapter
from program_assembler.config import JSON_UNIT_SUFFIX

ADAPTERS: dict[str, type[FrontEndAdapter]] = {
    "json": JsonUnitAdapter,
    "listing": ListingAdapter,
}


def adapter_for_path(path: str | Path, key: Optional[str] = None) -> FrontEndAdapter:
    """Build the adapter for ``path``, by explicit key or by extension.

    Raises:
        TranslationError: If ``key`` is not a registered adapter.
    """
    if key is None:
        key = "json" if Path(path).suffix.lower() == JSON_UNIT_SUFFIX else "listing"
    if key not in ADAPTERS:
        raise TranslationError(
            "Unknown adapter '{}'. Available adapters: {}".format(
                key, ", ".join(sorted(ADAPTERS)),
            )
        )
    return ADAPTERS[key](path)


__all__ = [
    "ADAPTERS",
    "BuilderAdapter",
    "FrontEndAdapter",
    "JsonUnitAdapter",
    "ListingAdapter",
    "SequenceAdapter",
    "TranslationError",
    "adapter_for_path",
]
