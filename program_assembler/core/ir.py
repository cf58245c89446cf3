"""Intermediate representation dataclasses for translation units.

WHY: The front end and the assembly engine are independent stages. The
front end produces two ordered line sequences as a side effect of
translation; the engine merges them. Passing them around as an explicit
value (rather than reading a process-wide literal table) keeps each
compilation run self-contained and lets several runs share a process.

HOW: Two dataclasses:
  TranslationUnit: the front end's hand-off: instruction stream + literal pool
  MergedProgram:   the engine's result, ready for an output sink

RULES:
- Lines are opaque strings; nothing here inspects their content
- TranslationUnit is produced once per run and consumed once by the engine
- MergedProgram.lines is a fresh list, never an alias of the unit's lists
- literal_count records how many pool entries sit at the splice point
"""

from __future__ import annotations

from dataclasses import dataclass, field

from program_assembler.config import SPLICE_POINT


@dataclass
class TranslationUnit:
    """The two output sequences of one front-end translation run.

    RULES:
    - instructions: length >= 3, splice point at index 2 (checked by the engine)
    - literals: possibly empty, first-discovery order, no duplicates
    - source_filename: used for output naming and log messages only
    """

    instructions: list[str]
    literals: list[str] = field(default_factory=list)
    source_filename: str = "<memory>"


@dataclass
class MergedProgram:
    """The final program image: instructions with the literal pool spliced in.

    WHY: Emitters need the merged lines and, for structured outputs, the
    position of the literal block. Carrying literal_count avoids having
    to rediscover the block by scanning line content.
    """

    lines: list[str]
    source_filename: str
    literal_count: int

    @property
    def separator_index(self) -> int:
        """Index of the blank separator that closes the literal block."""
        return SPLICE_POINT + self.literal_count

    def literal_block(self) -> list[str]:
        return self.lines[SPLICE_POINT:self.separator_index]

    def text(self) -> str:
        """Serialize as one record per line, each terminated by a newline."""
        return "".join(line + "\n" for line in self.lines)
