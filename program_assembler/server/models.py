"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: One request model (the translation unit hand-off) and one model per
response shape. All fields carry descriptions for the /docs UI.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Request lines are plain strings; content is never inspected
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class AssembleRequest(BaseModel):
    """A front end's hand-off: instruction stream and literal pool.

    RULES:
    - instructions must have at least 3 lines (checked by the engine, 422 otherwise)
    - literals defaults to [] and must not contain duplicates
    """

    instructions: List[str] = Field(
        description="Ordered instruction lines. Index 2 is the splice point.",
    )
    literals: List[str] = Field(
        default_factory=list,
        description="Ordered string-literal declarations, first-discovery order.",
    )
    source_filename: str = Field(
        default="<request>",
        description="Name of the translated source, used for output naming.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "instructions": [
                    "; === prologue ===",
                    "declare dso_local i32 @printf(i8*, ...)",
                    "define dso_local i32 @main()",
                    "{",
                    "  ret i32 0",
                    "}",
                ],
                "literals": [
                    '@.str = private unnamed_addr constant [4 x i8] c"%d\\0A\\00", align 1',
                ],
                "source_filename": "hello.c",
            }
        ]
    }}


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class AssembleResponse(BaseModel):
    """The merged program with its splice layout."""

    source_filename: str = Field(description="Name of the translated source.")
    lines: List[str] = Field(description="Merged program lines, in output order.")
    literal_count: int = Field(description="Number of literal declarations spliced in.")
    separator_index: int = Field(description="Index of the blank line closing the literal block.")


class EmitterInfo(BaseModel):
    """Metadata about an available emitter."""

    key: str = Field(description="Emitter identifier used in URLs.")
    name: str = Field(description="Human-readable emitter name.")
    suffix: str = Field(description="File suffix of the emitter's output.")


class HealthResponse(BaseModel):
    status: str = Field(description="Service status, 'ok' when healthy.")
    version: str = Field(description="Package version.")


class ErrorResponse(BaseModel):
    detail: str = Field(description="Human-readable error message.")
