"""
Tests for wire serialization of transactions.
"""

import json

import pytest

from thumber_client.runtime.errors import MalformedPayloadError
from thumber_client.tx.request import Request
from thumber_client.tx.response import Response
from thumber_client.tx.transaction import Transaction


class TestSerialize:
    """Tests for to_wire / to_json."""

    def test_unset_fields_omitted(self):
        req = Request(uid="u1", nonce="n")
        assert req.to_wire() == {"nonce": "n", "uid": "u1"}

    def test_wire_names(self):
        req = Request(mime_type="application/pdf", pg=1)
        assert req.to_wire() == {"mime_type": "application/pdf", "pg": 1}

    def test_checksum_is_hex(self):
        req = Request(uid="u1", nonce="n", timestamp=1).sign("s3cret")
        wire = req.to_wire()
        assert wire["checksum"] == req.checksum.hex()
        assert len(wire["checksum"]) == 64

    def test_flat_json(self):
        resp = Response(nonce="n", timestamp=1, success=False, error="e")
        parsed = json.loads(resp.to_json())
        assert parsed == {"nonce": "n", "timestamp": 1, "success": False, "error": "e"}
        assert all(not isinstance(v, (dict, list)) for v in parsed.values())

    def test_base_class_not_instantiable(self):
        with pytest.raises(TypeError):
            Transaction()


class TestDeserialize:
    """Tests for from_wire / from_json."""

    def test_round_trip_request(self):
        req = Request(
            uid="u1",
            callback="https://app.example.com/cb",
            url="https://ex.com/doc.pdf",
            mime_type="application/pdf",
            geometry="150x150",
            pg=3,
            nonce="n1",
            timestamp=1700000000,
        )
        req.decoded_data = b"raw"
        req.sign("s3cret")

        parsed = Request.from_json(req.to_json())
        assert parsed == req
        assert parsed.to_wire() == req.to_wire()

    def test_round_trip_keeps_absent_fields_absent(self):
        req = Request(uid="u1")
        parsed = Request.from_json(req.to_json())
        assert parsed.nonce is None
        assert parsed.timestamp is None
        assert parsed.checksum is None
        assert parsed.data is None
        assert parsed.to_wire() == {"uid": "u1"}

    def test_round_trip_response(self, signed_success_response):
        parsed = Response.from_json(signed_success_response.to_json())
        assert parsed == signed_success_response
        assert parsed.decoded_data == b"\x89PNG\r\n\x1a\n"

    def test_unknown_keys_ignored(self):
        resp = Response.from_json('{"nonce":"n","success":true,"server_version":"2.1"}')
        assert resp.nonce == "n"
        assert resp.success is True
        assert "server_version" not in resp.to_wire()

    def test_request_keys_ignored_by_response(self):
        resp = Response.from_wire({"nonce": "n", "uid": "u1"})
        assert resp.to_wire() == {"nonce": "n"}

    def test_bytes_input(self):
        resp = Response.from_json(b'{"nonce":"n"}')
        assert resp.nonce == "n"

    @pytest.mark.parametrize("raw", [
        "",
        "not json",
        "{\"nonce\": ",
        "[1, 2, 3]",
        "null",
        "\"text\"",
    ])
    def test_malformed(self, raw):
        with pytest.raises(MalformedPayloadError) as exc_info:
            Response.from_json(raw)
        assert "payload" in exc_info.value.details

    @pytest.mark.parametrize("wire", [
        {"timestamp": "1000"},
        {"timestamp": 10.5},
        {"success": "yes"},
        {"nonce": {"nested": True}},
        {"checksum": "zz-not-hex"},
        {"data": 12},
        {"data": "not base64!!"},
    ])
    def test_wrong_types_are_malformed(self, wire):
        with pytest.raises(MalformedPayloadError):
            Response.from_wire(wire)
