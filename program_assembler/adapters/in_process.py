"""Adapters for hand-offs that are already in memory.

A parser's semantic actions write into an InstructionStreamBuilder and a
LiteralPool owned by the run; BuilderAdapter hands both to the engine.
SequenceAdapter wraps two plain lists, e.g. the body of an HTTP request.
"""

from __future__ import annotations

from typing import Sequence

from program_assembler.adapters.base import FrontEndAdapter
from program_assembler.core.builder import InstructionStreamBuilder, LiteralPool


class SequenceAdapter(FrontEndAdapter):
    """Expose two ready-made line sequences through the front-end contract."""

    def __init__(
        self,
        instructions: Sequence[str],
        literals: Sequence[str] = (),
        source_filename: str = "<memory>",
    ) -> None:
        self._instructions = list(instructions)
        self._literals = list(literals)
        self.source_filename = source_filename

    @property
    def name(self) -> str:
        return "In-memory sequences"

    def instruction_stream(self) -> list[str]:
        return list(self._instructions)

    def literal_pool(self) -> list[str]:
        return list(self._literals)


class BuilderAdapter(FrontEndAdapter):
    """Expose builder values through the front-end contract."""

    def __init__(
        self,
        stream: InstructionStreamBuilder,
        pool: LiteralPool,
        source_filename: str = "<memory>",
    ) -> None:
        self._stream = stream
        self._pool = pool
        self.source_filename = source_filename

    @property
    def name(self) -> str:
        return "In-process builder"

    def instruction_stream(self) -> list[str]:
        return self._stream.build()

    def literal_pool(self) -> list[str]:
        return self._pool.declarations()
