"""Tests for the FastAPI assembly API.

WHY: Validates every endpoint's happy path and error mapping: contract
violations must surface as 422 with a readable detail, never as a 500 or
a partially merged program.

HOW: Uses the FastAPI TestClient for synchronous in-process requests.
The app holds no per-unit state, so tests need no reset fixture.
"""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from program_assembler import __version__
from program_assembler.server import app as app_module
from program_assembler.server.app import app


@pytest.fixture
def client():
    return TestClient(app)


def _hello_body(hello_instructions, hello_literals):
    return {
        "instructions": hello_instructions,
        "literals": hello_literals,
        "source_filename": "hello.c",
    }


class TestAssemble:

    def test_reference_scenario(self, client):
        resp = client.post("/assemble", json={
            "instructions": ["A", "B", "C", "D"],
            "literals": ["s1", "s2"],
        })
        assert resp.status_code == 200
        body = resp.json()
        assert body["lines"] == ["A", "B", "s1", "s2", "", "C", "D"]
        assert body["literal_count"] == 2
        assert body["separator_index"] == 4
        assert body["source_filename"] == "<request>"

    def test_literals_optional(self, client):
        resp = client.post("/assemble", json={"instructions": ["A", "B", "C"]})
        assert resp.status_code == 200
        assert resp.json()["lines"] == ["A", "B", "", "C"]

    def test_short_stream_is_422(self, client):
        resp = client.post("/assemble", json={"instructions": ["A", "B"], "literals": ["s"]})
        assert resp.status_code == 422
        assert "at least 3" in resp.json()["detail"]

    def test_duplicate_literals_is_422(self, client):
        resp = client.post("/assemble", json={"instructions": ["A", "B", "C"], "literals": ["s", "s"]})
        assert resp.status_code == 422
        assert "Duplicate literal" in resp.json()["detail"]

    def test_missing_instructions_is_422(self, client):
        resp = client.post("/assemble", json={"literals": []})
        assert resp.status_code == 422

    def test_oversized_unit_is_413(self, client, monkeypatch):
        monkeypatch.setattr(app_module, "MAX_UNIT_LINES", 4)
        resp = client.post("/assemble", json={"instructions": ["A", "B", "C"], "literals": ["s1", "s2"]})
        assert resp.status_code == 413


class TestAssembleWithEmitter:

    def test_plain_text(self, client, hello_instructions, hello_literals):
        resp = client.post("/assemble/plain_text", json=_hello_body(hello_instructions, hello_literals))
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/plain")
        assert 'filename="hello.ll"' in resp.headers["content-disposition"]
        lines = resp.text.split("\n")[:-1]
        assert lines[2:4] == hello_literals
        assert lines[4] == ""

    def test_json_listing(self, client, hello_instructions, hello_literals):
        resp = client.post("/assemble/json_listing", json=_hello_body(hello_instructions, hello_literals))
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("application/json")
        data = json.loads(resp.text)
        assert data["splice"]["separator_index"] == 4

    def test_default_download_name(self, client):
        resp = client.post("/assemble/plain_text", json={"instructions": ["A", "B", "C"]})
        assert 'filename="program.ll"' in resp.headers["content-disposition"]

    def test_non_ascii_download_name(self, client):
        body = {"instructions": ["A", "B", "C"], "source_filename": "程序.c"}
        resp = client.post("/assemble/plain_text", json=body)
        assert resp.status_code == 200
        disposition = resp.headers["content-disposition"]
        assert 'filename="__.ll"' in disposition
        assert "filename*=UTF-8''%E7%A8%8B%E5%BA%8F.ll" in disposition

    def test_quote_and_newline_in_download_name(self, client):
        body = {"instructions": ["A", "B", "C"], "source_filename": 'a"b\nc.c'}
        resp = client.post("/assemble/plain_text", json=body)
        assert resp.status_code == 200
        disposition = resp.headers["content-disposition"]
        assert 'filename="a_b_c.ll"' in disposition
        assert "filename*=UTF-8''a%22b%0Ac.ll" in disposition

    def test_content_disposition_helper(self):
        header = app_module._content_disposition("x\\y.ll")
        assert header == "attachment; filename=\"x_y.ll\"; filename*=UTF-8''x%5Cy.ll"

    def test_unknown_emitter_is_404(self, client):
        resp = client.post("/assemble/pdf", json={"instructions": ["A", "B", "C"]})
        assert resp.status_code == 404
        assert "plain_text" in resp.json()["detail"]

    def test_contract_violation_is_422(self, client):
        resp = client.post("/assemble/plain_text", json={"instructions": []})
        assert resp.status_code == 422


class TestDiscovery:

    def test_list_emitters(self, client):
        resp = client.get("/emitters")
        assert resp.status_code == 200
        by_key = {item["key"]: item for item in resp.json()}
        assert by_key["plain_text"]["suffix"] == ".ll"
        assert by_key["json_listing"]["suffix"] == "-listing.json"

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "version": __version__}
