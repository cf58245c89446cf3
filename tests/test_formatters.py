"""Tests for the output emitters.

WHY: Emitters are the last stage before the merged program leaves the
process. The plain-text output must reproduce the merged lines verbatim,
one record per line; the JSON listing must agree with the engine about
where the literal block is.

HOW: Each emitter runs on a MergedProgram assembled from the shared hello
unit. The JSON listing is re-validated against its schema here as well.
"""

import json

import jsonschema
import pytest

from program_assembler.core.assembler import assemble_unit
from program_assembler.core.ir import MergedProgram, TranslationUnit
from program_assembler.formatters import EMITTERS
from program_assembler.formatters.base import BaseEmitter
from program_assembler.formatters.json_listing import LISTING_SCHEMA, JsonListingEmitter
from program_assembler.formatters.plain_text import PlainTextEmitter


@pytest.fixture
def hello_program(hello_unit):
    return assemble_unit(hello_unit)


class TestRegistry:

    def test_keys(self):
        assert set(EMITTERS) == {"plain_text", "json_listing"}

    def test_all_are_emitters(self):
        for emitter_cls in EMITTERS.values():
            assert issubclass(emitter_cls, BaseEmitter)
            assert emitter_cls().name


class TestPlainTextEmitter:

    def test_single_output(self, hello_program):
        outputs = PlainTextEmitter().format(hello_program)
        assert len(outputs) == 1
        assert outputs[0].suffix == ".ll"
        assert outputs[0].media_type == "text/plain"

    def test_lines_written_verbatim(self, hello_program):
        content = PlainTextEmitter().format(hello_program)[0].content
        assert content.split("\n")[:-1] == hello_program.lines
        assert content.endswith("\n")

    def test_reference_scenario(self):
        program = assemble_unit(TranslationUnit(["A", "B", "C", "D"], ["s1", "s2"]))
        content = PlainTextEmitter().format(program)[0].content
        assert content == "A\nB\ns1\ns2\n\nC\nD\n"


class TestJsonListingEmitter:

    def test_output_metadata(self, hello_program):
        output = JsonListingEmitter().format(hello_program)[0]
        assert output.suffix == "-listing.json"
        assert output.media_type == "application/json"

    def test_splice_layout(self, hello_program):
        data = json.loads(JsonListingEmitter().format(hello_program)[0].content)
        assert data["source"] == "hello.c"
        assert data["lines"] == hello_program.lines
        assert data["splice"] == {"start": 2, "literal_count": 2, "separator_index": 4}
        assert data["lines"][data["splice"]["separator_index"]] == ""

    def test_conforms_to_schema(self, hello_program):
        data = json.loads(JsonListingEmitter().format(hello_program)[0].content)
        jsonschema.validate(instance=data, schema=LISTING_SCHEMA)

    def test_empty_pool(self):
        program = assemble_unit(TranslationUnit(["A", "B", "C"]))
        data = json.loads(JsonListingEmitter().format(program)[0].content)
        assert data["splice"]["literal_count"] == 0
        assert data["lines"] == ["A", "B", "", "C"]

    def test_inconsistent_program_rejected(self):
        # Too short to be the output of the engine
        program = MergedProgram(lines=["A", "B"], source_filename="x", literal_count=0)
        with pytest.raises(jsonschema.ValidationError):
            JsonListingEmitter().format(program)
