"""FastAPI application exposing the assembly engine over HTTP.

WHY: Build services and editor tooling that run a front end remotely need
to merge its hand-off without shelling out to the CLI. FastAPI provides
request validation and automatic OpenAPI documentation.

HOW: POST /assemble takes the two sequences as JSON and returns the
merged lines with their splice layout. POST /assemble/{emitter} returns
one emitter's rendering directly as a file download. GET /emitters and
GET /health support discovery and liveness checks.

RULES:
- Every request is assembled independently; the app holds no per-unit state
- PreconditionViolation and TranslationError map to 422 with ErrorResponse
- Units larger than MAX_UNIT_LINES are rejected with 413 before assembly
- Unknown emitter keys are 404
- Download names are sent as an ASCII filename plus a UTF-8 filename*
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List
from urllib.parse import quote

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from program_assembler import __version__
from program_assembler.adapters import SequenceAdapter
from program_assembler.config import API_HOST, API_PORT, MAX_UNIT_LINES
from program_assembler.core.assembler import assemble_unit
from program_assembler.core.ir import MergedProgram
from program_assembler.formatters import EMITTERS
from program_assembler.server.models import (
    AssembleRequest,
    AssembleResponse,
    EmitterInfo,
    ErrorResponse,
    HealthResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Program Assembler API",
    description=(
        "Merge a compiler front end's string-literal pool into its "
        "instruction stream. Submit both sequences and receive the merged "
        "program, either as JSON lines or rendered by an emitter."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _assemble_request(request: AssembleRequest) -> MergedProgram:
    """Run one request through the adapter contract and the engine.

    Raises:
        HTTPException: 413 for oversized units, 422 for contract violations.
    """
    total = len(request.instructions) + len(request.literals)
    if total > MAX_UNIT_LINES:
        raise HTTPException(
            status_code=413,
            detail="Unit has {} lines; the limit is {}.".format(total, MAX_UNIT_LINES),
        )

    adapter = SequenceAdapter(
        request.instructions,
        request.literals,
        source_filename=request.source_filename,
    )
    try:
        return assemble_unit(adapter.translation_unit())
    except ValueError as exc:
        # TranslationError or PreconditionViolation
        logger.info("Rejected unit %s: %s", request.source_filename, exc)
        raise HTTPException(status_code=422, detail=str(exc))


def _content_disposition(filename: str) -> str:
    """Build an attachment header that is safe for any source filename.

    RULES:
    - filename= carries a printable-ASCII fallback; quotes, backslashes,
      control and non-ASCII characters become "_"
    - filename*= carries the exact name, UTF-8 percent-encoded (RFC 6266)
    """
    fallback = "".join(
        ch if " " <= ch <= "~" and ch not in '"\\' else "_"
        for ch in filename
    )
    return "attachment; filename=\"{}\"; filename*=UTF-8''{}".format(
        fallback, quote(filename, safe=""),
    )


# ---------------------------------------------------------------------------
# Endpoints: Assembly
# ---------------------------------------------------------------------------


@app.post(
    "/assemble",
    response_model=AssembleResponse,
    tags=["assembly"],
    summary="Assemble a translation unit",
    description=(
        "Splice the literal pool into the instruction stream at the splice "
        "point (index 2), followed by one blank separator line."
    ),
    responses={
        413: {"model": ErrorResponse, "description": "Unit too large"},
        422: {"model": ErrorResponse, "description": "Hand-off contract violated"},
    },
)
async def assemble_endpoint(request: AssembleRequest) -> AssembleResponse:
    program = _assemble_request(request)
    return AssembleResponse(
        source_filename=program.source_filename,
        lines=program.lines,
        literal_count=program.literal_count,
        separator_index=program.separator_index,
    )


@app.post(
    "/assemble/{emitter}",
    tags=["assembly"],
    summary="Assemble and render with an emitter",
    description=(
        "Assemble the unit and return the named emitter's output as a file "
        "download. See GET /emitters for the available keys."
    ),
    responses={
        404: {"model": ErrorResponse, "description": "Unknown emitter"},
        413: {"model": ErrorResponse, "description": "Unit too large"},
        422: {"model": ErrorResponse, "description": "Hand-off contract violated"},
    },
)
async def assemble_and_emit(emitter: str, request: AssembleRequest) -> Response:
    if emitter not in EMITTERS:
        raise HTTPException(
            status_code=404,
            detail="Unknown emitter '{}'. Available emitters: {}".format(
                emitter, ", ".join(sorted(EMITTERS)),
            ),
        )

    program = _assemble_request(request)
    output = EMITTERS[emitter]().format(program)[0]
    stem = Path(program.source_filename).stem
    if not stem or stem.startswith("<"):
        stem = "program"
    filename = "{}{}".format(stem, output.suffix)

    return Response(
        content=output.content,
        media_type=output.media_type,
        headers={"Content-Disposition": _content_disposition(filename)},
    )


# ---------------------------------------------------------------------------
# Endpoints: Emitters
# ---------------------------------------------------------------------------


@app.get(
    "/emitters",
    response_model=List[EmitterInfo],
    tags=["emitters"],
    summary="List available emitters",
)
async def list_emitters() -> List[EmitterInfo]:
    # Smallest valid program, used only to read each emitter's suffix
    sample = assemble_unit(SequenceAdapter(["", "", ""]).translation_unit())
    result = []
    for key, emitter_cls in sorted(EMITTERS.items()):
        emitter = emitter_cls()
        outputs = emitter.format(sample)
        result.append(EmitterInfo(
            key=key,
            name=emitter.name,
            suffix=outputs[0].suffix if outputs else "",
        ))
    return result


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the program-assembler-api console script."""
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    logger.info("Starting program assembler API on %s:%d", API_HOST, API_PORT)
    uvicorn.run(app, host=API_HOST, port=API_PORT)
