"""Tests for issuer normalization."""

import json

import pytest

from verifiable.core.exceptions import IssuerFormatError
from verifiable.credential import decode_issuer, encode_issuer
from verifiable.models.credential import Issuer

from credential_samples import to_bytes


class TestDecodeIssuer:
    """Tests for decode_issuer."""

    def test_bare_string(self):
        """A bare identifier becomes an Issuer with an empty name."""
        issuer = decode_issuer(to_bytes({"issuer": "did:example:123"}))
        assert issuer == Issuer(id="did:example:123", name="")

    def test_object_with_name(self):
        """The object form keeps id and name."""
        issuer = decode_issuer(
            to_bytes({"issuer": {"id": "did:example:123", "name": "Example Corp"}})
        )
        assert issuer == Issuer(id="did:example:123", name="Example Corp")

    def test_object_without_name(self):
        """A missing name decodes as empty."""
        issuer = decode_issuer(to_bytes({"issuer": {"id": "did:example:123"}}))
        assert issuer == Issuer(id="did:example:123")

    def test_object_null_name(self):
        """A null name decodes as empty."""
        issuer = decode_issuer(to_bytes({"issuer": {"id": "did:example:123", "name": None}}))
        assert issuer.name == ""

    def test_object_extra_members_ignored(self):
        """Members beyond id and name are dropped."""
        issuer = decode_issuer(
            to_bytes({"issuer": {"id": "did:example:123", "image": "https://example.org/logo.png"}})
        )
        assert issuer == Issuer(id="did:example:123")

    def test_independent_of_other_fields(self):
        """Only the issuer field is read."""
        document = {"type": 5, "issuanceDate": [], "issuer": "did:example:123"}
        assert decode_issuer(to_bytes(document)).id == "did:example:123"

    def test_accepts_str(self):
        """A JSON string is accepted as well as bytes."""
        assert decode_issuer(json.dumps({"issuer": "did:example:123"})).id == "did:example:123"

    @pytest.mark.parametrize(
        "document",
        [
            {},
            {"issuer": None},
            {"issuer": ""},
            {"issuer": {}},
            {"issuer": {"id": ""}},
            {"issuer": {"name": "Example Corp"}},
            {"issuer": 42},
            {"issuer": ["did:example:123"]},
            {"issuer": {"id": 42}},
            {"issuer": {"id": "did:example:123", "name": 7}},
        ],
        ids=[
            "missing",
            "null",
            "empty-string",
            "empty-object",
            "empty-id",
            "name-only",
            "number",
            "array",
            "numeric-id",
            "numeric-name",
        ],
    )
    def test_invalid_forms(self, document):
        """Anything but a non-empty string or an object with an id is rejected."""
        with pytest.raises(IssuerFormatError, match="verifiable credential issuer is not valid"):
            decode_issuer(to_bytes(document))

    def test_invalid_json(self):
        """Unparseable documents are an issuer error."""
        with pytest.raises(IssuerFormatError):
            decode_issuer(b"{")


class TestEncodeIssuer:
    """Tests for encode_issuer."""

    def test_without_name_is_bare_string(self):
        """No name gives the bare identifier."""
        assert encode_issuer(Issuer(id="did:example:123")) == "did:example:123"

    def test_with_name_is_object(self):
        """A name gives the object form."""
        assert encode_issuer(Issuer(id="did:example:123", name="Example Corp")) == {
            "id": "did:example:123",
            "name": "Example Corp",
        }

    def test_object_member_order(self):
        """The object form writes id before name."""
        wire = encode_issuer(Issuer(id="X", name="Y"))
        assert json.dumps(wire, separators=(",", ":")) == '{"id":"X","name":"Y"}'

    @pytest.mark.parametrize(
        "issuer",
        [Issuer(id="did:example:123"), Issuer(id="did:example:123", name="Example Corp")],
    )
    def test_round_trip(self, issuer):
        """Encoding then decoding gives back the same issuer."""
        assert decode_issuer(to_bytes({"issuer": encode_issuer(issuer)})) == issuer
