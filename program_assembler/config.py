"""Configuration constants, splice-point layout, and .env loading.

WHY: Centralizes every configurable value so it is easy to find and
override. The splice-point layout is a domain invariant shared by the
front-end builders and the assembly engine, so it lives here once
instead of being re-derived as a magic number in each module.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values. Operational defaults (log level, API host/port,
request size cap) can be overridden through environment variables.

RULES:
- SPLICE_POINT is fixed at 2: the first two lines of every instruction
  stream are the program header (prologue comment + runtime declaration)
- MIN_INSTRUCTION_LINES is SPLICE_POINT + 1 (the splice point must exist)
- BLANK_SEPARATOR is the empty line that closes the literal block
- Layout constants are NOT overridable from the environment
- Operational defaults can be overridden via PROGRAM_ASSEMBLER_* variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the tool is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Splice-point layout
# ---------------------------------------------------------------------------

SPLICE_POINT = 2
"""Index where the literal pool is spliced into the instruction stream."""

MIN_INSTRUCTION_LINES = SPLICE_POINT + 1
"""Shortest instruction stream that still contains the splice point."""

BLANK_SEPARATOR = ""
"""Separator line inserted after the literal block."""

# ---------------------------------------------------------------------------
# Input discovery
# ---------------------------------------------------------------------------

INSTRUCTION_LISTING_SUFFIX = ".text"
LITERAL_LISTING_SUFFIX = ".strings"
JSON_UNIT_SUFFIX = ".json"

SUPPORTED_INPUT_SUFFIXES: set[str] = {JSON_UNIT_SUFFIX, INSTRUCTION_LISTING_SUFFIX}
"""Input file extensions accepted by the CLI (lowercase, with dot)."""

# ---------------------------------------------------------------------------
# Operational defaults
# ---------------------------------------------------------------------------

DEFAULT_EMITTER = os.getenv("PROGRAM_ASSEMBLER_DEFAULT_EMITTER", "plain_text")
LOG_LEVEL = os.getenv("PROGRAM_ASSEMBLER_LOG_LEVEL", "WARNING").upper()
API_HOST = os.getenv("PROGRAM_ASSEMBLER_HOST", "127.0.0.1")
API_PORT = int(os.getenv("PROGRAM_ASSEMBLER_PORT", "8000"))
MAX_UNIT_LINES = int(os.getenv("PROGRAM_ASSEMBLER_MAX_UNIT_LINES", "100000"))
