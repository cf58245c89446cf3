"""Front-end builder values: the literal pool and the instruction stream.

WHY: A syntax-directed front end appends instructions and string
declarations from inside its semantic actions. Keeping those in
process-wide lists couples every compilation run to shared state. These
two small builders are owned by one translation run and handed to the
engine by value when translation finishes.

HOW: LiteralPool interns each distinct string once and renders an
LLVM-style private constant declaration for it. InstructionStreamBuilder
fixes the two-line program header up front, so the splice point always
exists once any code has been emitted.

RULES:
- A repeated literal reuses its first symbol; no duplicate declarations
- Symbols are @.str, @.str.1, @.str.2, ... in first-discovery order
- Declarations: printable ASCII kept, '"' and '\\' and everything else as \\XX
- Every declaration carries a trailing NUL (\\00) counted in the array size
- The header must have exactly SPLICE_POINT lines
- build() with an empty body raises PreconditionViolation
"""

from __future__ import annotations

from typing import Iterable, Sequence

from program_assembler.config import SPLICE_POINT
from program_assembler.core.assembler import PreconditionViolation
from program_assembler.core.ir import TranslationUnit

DEFAULT_HEADER: tuple[str, ...] = (
    "; === prologue ===",
    "declare dso_local i32 @printf(i8*, ...)",
)


def _symbol_name(index: int) -> str:
    if index == 0:
        return "@.str"
    return "@.str.{}".format(index)


def encode_c_string(value: str) -> tuple[str, int]:
    """Encode a string as the body of an LLVM ``c"..."`` constant.

    Returns:
        tuple of (escaped body including the trailing \\00, byte length
        including the terminator).
    """
    raw = value.encode("utf-8") + b"\x00"
    parts: list[str] = []
    for byte in raw:
        # 0x20-0x7e minus '"' (0x22) and '\' (0x5c)
        if 0x20 <= byte <= 0x7E and byte not in (0x22, 0x5C):
            parts.append(chr(byte))
        else:
            parts.append("\\{:02X}".format(byte))
    return "".join(parts), len(raw)


class LiteralPool:
    """Ordered, de-duplicated collection of string-literal declarations."""

    def __init__(self) -> None:
        self._symbols: dict[str, str] = {}
        self._declarations: list[str] = []

    def intern(self, value: str) -> str:
        """Return the symbol for ``value``, declaring it on first sight."""
        if value in self._symbols:
            return self._symbols[value]
        symbol = _symbol_name(len(self._declarations))
        body, size = encode_c_string(value)
        self._declarations.append(
            '{} = private unnamed_addr constant [{} x i8] c"{}", align 1'.format(
                symbol, size, body,
            )
        )
        self._symbols[value] = symbol
        return symbol

    def symbol_for(self, value: str) -> str:
        """Look up an already-interned literal. Raises KeyError if unseen."""
        return self._symbols[value]

    def declarations(self) -> list[str]:
        return list(self._declarations)

    def __len__(self) -> int:
        return len(self._declarations)

    def __contains__(self, value: object) -> bool:
        return value in self._symbols


class InstructionStreamBuilder:
    """Accumulates instruction lines behind a fixed program header.

    WHY: The engine splices the literal pool in right after the header.
    Building the header here, with its length checked against
    SPLICE_POINT, turns the engine's precondition into a structural
    property of every stream this builder produces.

    RULES:
    - header must contain exactly SPLICE_POINT lines (ValueError otherwise)
    - emit() appends lines in order; blank() appends an empty line
    - build() returns header + body as a new list
    """

    def __init__(self, header: Sequence[str] = DEFAULT_HEADER) -> None:
        if len(header) != SPLICE_POINT:
            raise ValueError(
                "Program header must have exactly {} lines, got {}.".format(
                    SPLICE_POINT, len(header),
                )
            )
        self._header: list[str] = list(header)
        self._body: list[str] = []

    def emit(self, *lines: str) -> None:
        self._body.extend(lines)

    def extend(self, lines: Iterable[str]) -> None:
        self._body.extend(lines)

    def blank(self) -> None:
        self._body.append("")

    def __len__(self) -> int:
        return len(self._header) + len(self._body)

    def build(self) -> list[str]:
        if not self._body:
            raise PreconditionViolation(len(self._header))
        return self._header + list(self._body)


def build_translation_unit(
    stream: InstructionStreamBuilder,
    pool: LiteralPool,
    source_filename: str = "<memory>",
) -> TranslationUnit:
    """Freeze a finished translation run into a TranslationUnit."""
    return TranslationUnit(
        instructions=stream.build(),
        literals=pool.declarations(),
        source_filename=source_filename,
    )
