"""Output emitter registry.

WHY: The CLI and API layers need a single lookup to find the right
emitter by name. A central dict makes it trivial to add new formats:
create the emitter class, import it here, add one line.

HOW: EMITTERS maps string keys to emitter *classes* (not instances).
Callers instantiate as needed: ``emitter = EMITTERS["plain_text"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags and URL paths)
- Values are BaseEmitter subclasses (not instances)
- Every emitter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from program_assembler.formatters.json_listing import JsonListingEmitter
from program_assembler.formatters.plain_text import PlainTextEmitter

if TYPE_CHECKING:
    from program_assembler.formatters.base import BaseEmitter

EMITTERS: dict[str, type[BaseEmitter]] = {
    "plain_text": PlainTextEmitter,
    "json_listing": JsonListingEmitter,
}
