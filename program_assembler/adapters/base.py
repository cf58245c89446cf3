"""Abstract front-end adapter and translation error.

WHY: The assembly engine only ever sees two ordered line sequences. Where
they come from (an in-process parser, a JSON hand-off document written by
another tool, a pair of listing files) is the front end's business. This
base class pins down that hand-off contract so the CLI and the HTTP API
can work with any front end generically.

HOW: FrontEndAdapter is an ABC with a ``name`` property and the two
contract methods ``instruction_stream()`` and ``literal_pool()``. The
concrete ``translation_unit()`` calls both and bundles the result into a
TranslationUnit after a shape check on the literal pool.

RULES:
- Subclasses MUST implement ``name``, ``instruction_stream()`` and ``literal_pool()``
- A failing translation raises TranslationError before either sequence is returned
- Every line must be a str; the literal pool must not contain duplicates
- The splice-point length check is left to the engine (PreconditionViolation)

To add a new front end:
1. Create a new module in adapters/
2. Subclass FrontEndAdapter
3. Implement name, instruction_stream() and literal_pool()
4. Register in the ADAPTERS dict in adapters/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from program_assembler.core.ir import TranslationUnit


class TranslationError(ValueError):
    """The front end could not produce a well-formed hand-off."""


class FrontEndAdapter(ABC):
    """Abstract base for everything that feeds the assembly engine."""

    source_filename: str = "<memory>"

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable adapter name, e.g. 'JSON hand-off'."""

    @abstractmethod
    def instruction_stream(self) -> list[str]:
        """Ordered instruction lines with the splice point at index 2."""

    @abstractmethod
    def literal_pool(self) -> list[str]:
        """Ordered string-literal declarations, first-discovery order."""

    def translation_unit(self) -> TranslationUnit:
        """Collect both sequences into a TranslationUnit.

        Raises:
            TranslationError: If the adapter fails, or if either sequence
                breaks the shape contract (non-string lines, duplicate
                literal declarations).
        """
        instructions = self.instruction_stream()
        literals = self.literal_pool()

        _check_lines("instruction stream", instructions)
        _check_lines("literal pool", literals)

        seen = set()
        for line in literals:
            if line in seen:
                raise TranslationError(
                    "Duplicate literal declaration in {}: {!r}".format(
                        self.source_filename, line,
                    )
                )
            seen.add(line)

        return TranslationUnit(
            instructions=list(instructions),
            literals=list(literals),
            source_filename=self.source_filename,
        )


def _check_lines(label: str, lines: list[str]) -> None:
    for index, line in enumerate(lines):
        if not isinstance(line, str):
            raise TranslationError(
                "{} line {} is {}, expected str".format(
                    label.capitalize(), index, type(line).__name__,
                )
            )
