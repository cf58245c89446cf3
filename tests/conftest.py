"""Shared test fixtures for the program_assembler test suite.

WHY: Several test modules need the same small hand-offs: the reference
scenarios for the splice, a realistic front-end output, and the same
unit written to disk in each supported hand-off format.

HOW: Pytest fixtures return fresh lists (never shared module objects) so
a test that mutates its input cannot affect another test.

RULES:
- HELLO_INSTRUCTIONS / HELLO_LITERALS model a two-printf program
- File fixtures write into tmp_path and return the path to pass to adapters
"""

import json

import pytest

from program_assembler.core.ir import TranslationUnit

HELLO_INSTRUCTIONS: list[str] = [
    "; === prologue ===",
    "declare dso_local i32 @printf(i8*, ...)",
    "define dso_local i32 @main()",
    "{",
    "  %t0 = call i32 (i8*, ...) @printf(i8* getelementptr inbounds ([7 x i8], [7 x i8]* @.str, i64 0, i64 0))",
    "  %t1 = call i32 (i8*, ...) @printf(i8* getelementptr inbounds ([4 x i8], [4 x i8]* @.str.1, i64 0, i64 0), i32 42)",
    "",
    "  ret i32 0",
    "}",
]

HELLO_LITERALS: list[str] = [
    '@.str = private unnamed_addr constant [7 x i8] c"hello\\0A\\00", align 1',
    '@.str.1 = private unnamed_addr constant [4 x i8] c"%d\\0A\\00", align 1',
]


@pytest.fixture
def abcd_instructions():
    return ["A", "B", "C", "D"]


@pytest.fixture
def hello_instructions():
    return list(HELLO_INSTRUCTIONS)


@pytest.fixture
def hello_literals():
    return list(HELLO_LITERALS)


@pytest.fixture
def hello_unit():
    return TranslationUnit(
        instructions=list(HELLO_INSTRUCTIONS),
        literals=list(HELLO_LITERALS),
        source_filename="hello.c",
    )


@pytest.fixture
def hello_json(tmp_path):
    """The hello unit written as a JSON hand-off document."""
    path = tmp_path / "hello.json"
    path.write_text(json.dumps({
        "source": "hello.c",
        "instructions": HELLO_INSTRUCTIONS,
        "literals": HELLO_LITERALS,
    }), encoding="utf-8")
    return path


@pytest.fixture
def hello_listing(tmp_path):
    """The hello unit written as a hello.text / hello.strings pair."""
    text_path = tmp_path / "hello.text"
    text_path.write_text("\n".join(HELLO_INSTRUCTIONS) + "\n", encoding="utf-8")
    (tmp_path / "hello.strings").write_text("\n".join(HELLO_LITERALS) + "\n", encoding="utf-8")
    return text_path
