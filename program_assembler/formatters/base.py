"""Abstract base emitter and output container.

WHY: Every output consumes the same MergedProgram but produces different
file content. This base class enforces a consistent interface so the CLI
and the HTTP API can work with any emitter generically.

HOW: BaseEmitter is an ABC with two requirements: a ``name`` property
and a ``format()`` method. EmitterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list; current emitters return exactly one item
- ``suffix`` is appended to the source stem, e.g. ``".ll"`` or ``"-listing.json"``
- The caller is responsible for prepending the source filename stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from program_assembler.core.ir import MergedProgram


@dataclass
class EmitterOutput:
    """One output file produced by an emitter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``".ll"`` → ``"hello.ll"``.
        content: The file content.
        media_type: MIME type for the content, e.g. ``"text/plain"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseEmitter(ABC):
    """Abstract base for all output emitters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseEmitter
    3. Implement format() and name
    4. Register in EMITTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Plain text program'."""

    @abstractmethod
    def format(self, program: MergedProgram) -> list[EmitterOutput]:
        """Render the merged program into one or more output files."""
