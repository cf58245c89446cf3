"""Plain text program emitter.

WHY: The merged program is consumed by the next tool in the chain (an
IR assembler or interpreter) as ordinary text. Each line of the merged
sequence becomes one output record, written verbatim and in order.

RULES:
- One line per record, each terminated by "\\n"
- No framing, header or footer beyond the program's own lines
- Output suffix: ".ll"
- Media type: "text/plain"
"""

from __future__ import annotations

from program_assembler.core.ir import MergedProgram
from program_assembler.formatters.base import BaseEmitter, EmitterOutput


class PlainTextEmitter(BaseEmitter):

    @property
    def name(self) -> str:
        return "Plain text program"

    def format(self, program: MergedProgram) -> list[EmitterOutput]:
        return [
            EmitterOutput(
                suffix=".ll",
                content=program.text(),
                media_type="text/plain",
            )
        ]
