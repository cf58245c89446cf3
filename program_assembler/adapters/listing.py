"""Adapter: companion listing files to TranslationUnit.

WHY: The simplest hand-off a front end can write is two plain text
files: the instruction stream and the literal pool, one line per record.
This mirrors how a compiler driver dumps its two output lists before
the final merge.

HOW: Given a path, derive the stem and look for its companions:
  {stem}.text     → instruction stream (required)
  {stem}.strings  → literal pool (optional)

RULES:
- A name ending in .text or .strings loses only that one suffix
  ("prog.v2.text" → "prog.v2"); any other name is used as the stem as is
- Records are separated by "\\n" (or "\\r\\n") only; other characters that
  str.splitlines() treats as breaks (\\x0c, \\x85, \\u2028, ...) stay inside the line
- Instruction lines are kept verbatim, including blank lines and indentation
- Literal lines are kept verbatim; blank lines in the pool file are skipped
- A missing .strings companion means an empty literal pool
- A missing .text file raises TranslationError
- Files must be UTF-8 encoded
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from program_assembler.adapters.base import FrontEndAdapter, TranslationError
from program_assembler.config import INSTRUCTION_LISTING_SUFFIX, LITERAL_LISTING_SUFFIX

logger = logging.getLogger(__name__)


@dataclass
class ListingFiles:
    """Resolved paths to a unit's listing files.

    RULES:
    - text_path: path to {stem}.text, or None if not found
    - strings_path: path to {stem}.strings, or None if not found
    """

    stem: str
    text_path: Path | None = None
    strings_path: Path | None = None


def resolve_listing_files(path: str | Path) -> ListingFiles:
    """Discover the .text/.strings pair that belongs to ``path``.

    ``path`` may name either companion, or the bare stem.
    """
    given = Path(path)
    directory = given.parent

    stem = given.name
    for suffix in (INSTRUCTION_LISTING_SUFFIX, LITERAL_LISTING_SUFFIX):
        if stem.lower().endswith(suffix) and len(stem) > len(suffix):
            stem = stem[:-len(suffix)]
            break

    result = ListingFiles(stem=stem)

    text_path = directory / (stem + INSTRUCTION_LISTING_SUFFIX)
    if text_path.is_file():
        result.text_path = text_path

    strings_path = directory / (stem + LITERAL_LISTING_SUFFIX)
    if strings_path.is_file():
        result.strings_path = strings_path

    return result


def _read_records(path: str | Path) -> list[str]:
    # newline="" leaves line endings untranslated; only \n and \r\n end a record
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    text = text.replace("\r\n", "\n")
    if not text:
        return []
    if text.endswith("\n"):
        text = text[:-1]
    return text.split("\n")


def load_instruction_listing(path: str | Path) -> list[str]:
    return _read_records(path)


def load_literal_listing(path: str | Path) -> list[str]:
    return [line for line in _read_records(path) if line.strip()]


class ListingAdapter(FrontEndAdapter):
    """Front-end adapter reading a {stem}.text / {stem}.strings pair."""

    def __init__(self, path: str | Path) -> None:
        self.files = resolve_listing_files(path)
        self.source_filename = self.files.stem + INSTRUCTION_LISTING_SUFFIX
        self._instructions: Optional[list[str]] = None
        self._literals: Optional[list[str]] = None

    @property
    def name(self) -> str:
        return "Listing files"

    def _load(self) -> None:
        if self._instructions is not None:
            return
        if self.files.text_path is None:
            raise TranslationError(
                "Instruction listing not found: {}{}".format(
                    self.files.stem, INSTRUCTION_LISTING_SUFFIX,
                )
            )
        try:
            instructions = load_instruction_listing(self.files.text_path)
            literals: list[str] = []
            if self.files.strings_path is not None:
                literals = load_literal_listing(self.files.strings_path)
        except (OSError, UnicodeDecodeError) as exc:
            raise TranslationError("Cannot read listing {}: {}".format(self.files.stem, exc)) from exc

        logger.info(
            "Loaded listing %s (%d instruction line(s), %d literal(s))",
            self.files.stem, len(instructions), len(literals),
        )
        self._instructions = instructions
        self._literals = literals

    def instruction_stream(self) -> list[str]:
        self._load()
        return list(self._instructions)

    def literal_pool(self) -> list[str]:
        self._load()
        return list(self._literals)
