"""Literal-pool splicing: merge an instruction stream and a literal pool.

WHY: During syntax-directed translation the front end emits instructions
as it walks the program, but string-literal declarations are only known
once each literal has been seen. The two sequences are collected
separately, and the declarations have to land in the program header,
ahead of any code that references them. This module performs that
final merge.

HOW: The instruction stream reserves a fixed splice point (index 2,
right after the two header lines). The merged program is built as one
explicit concatenation:

    instructions[:2] + literals + [""] + instructions[2:]

so the literal pool keeps its forward order without any in-place
shifting, and a single blank separator isolates the pool from the code
that follows it (even when the pool is empty).

RULES:
- Fewer than 3 instruction lines → PreconditionViolation, nothing produced
- Literal order and instruction order are both preserved exactly
- Exactly one blank separator is inserted, after the literal block
- len(result) == len(instructions) + len(literals) + 1
- Inputs are never mutated; the result is always a new list
- Line content is never inspected or validated
"""

from __future__ import annotations

import logging
from typing import Sequence

from program_assembler.config import (
    BLANK_SEPARATOR,
    MIN_INSTRUCTION_LINES,
    SPLICE_POINT,
)
from program_assembler.core.ir import MergedProgram, TranslationUnit

__all__ = [
    "BLANK_SEPARATOR",
    "MIN_INSTRUCTION_LINES",
    "SPLICE_POINT",
    "PreconditionViolation",
    "assemble",
    "assemble_unit",
    "validate_instruction_stream",
]

logger = logging.getLogger(__name__)


class PreconditionViolation(ValueError):
    """The instruction stream is too short to contain the splice point.

    This is a contract breach by the front end, not a transient failure,
    so callers should report it and stop rather than retry.
    """

    def __init__(self, line_count: int, required: int = MIN_INSTRUCTION_LINES) -> None:
        self.line_count = line_count
        self.required = required
        super().__init__(
            "Instruction stream has {} line(s); at least {} are required "
            "to hold the literal splice point at index {}.".format(
                line_count, required, SPLICE_POINT,
            )
        )


def validate_instruction_stream(instructions: Sequence[str]) -> None:
    """Raise PreconditionViolation if the splice point does not exist."""
    if len(instructions) < MIN_INSTRUCTION_LINES:
        raise PreconditionViolation(len(instructions))


def assemble(instructions: Sequence[str], literals: Sequence[str]) -> list[str]:
    """Splice the literal pool into the instruction stream.

    Args:
        instructions: Ordered instruction lines from the front end. Index 2
            is the splice point; the first two lines are the header.
        literals: Ordered string-literal declarations, first-discovery
            order. May be empty.

    Returns:
        A new list: header, literal declarations, one blank separator,
        then the rest of the instruction stream.

    Raises:
        PreconditionViolation: If instructions has fewer than 3 lines.
    """
    validate_instruction_stream(instructions)

    prefix = list(instructions[:SPLICE_POINT])
    suffix = list(instructions[SPLICE_POINT:])
    return prefix + list(literals) + [BLANK_SEPARATOR] + suffix


def assemble_unit(unit: TranslationUnit) -> MergedProgram:
    """Assemble a whole translation unit into a MergedProgram."""
    lines = assemble(unit.instructions, unit.literals)
    logger.debug(
        "Assembled %s: %d instruction line(s), %d literal(s) -> %d line(s)",
        unit.source_filename, len(unit.instructions), len(unit.literals), len(lines),
    )
    return MergedProgram(
        lines=lines,
        source_filename=unit.source_filename,
        literal_count=len(unit.literals),
    )
