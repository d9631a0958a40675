"""Unit tests for SOAP response parsing."""

import pytest

from card_gateway.core.errors import MalformedResponseError
from card_gateway.soap.parser import find_fault, parse_document, strip_prefix
from tests.utils.soap_responses import card_list_response, soap_fault


class TestStripPrefix:
    """Test strip_prefix function."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("a:CardNumber", "CardNumber"),
            ("s:Envelope", "Envelope"),
            ("CardNumber", "CardNumber"),
            ("soap:Envelope", "soap:Envelope"),
            ("A:CardNumber", "A:CardNumber"),
        ],
    )
    def test_strip_prefix(self, name, expected):
        """Test only single lowercase-letter prefixes are removed."""
        assert strip_prefix(name) == expected


class TestParseDocument:
    """Test parse_document function."""

    def test_prefixed_and_unprefixed_tags_read_identically(self):
        """Test a:CardNumber parses the same as CardNumber."""
        prefixed = parse_document(
            '<r xmlns:a="urn:x"><a:CardNumber>4111</a:CardNumber></r>'
        )
        plain = parse_document("<r><CardNumber>4111</CardNumber></r>")
        assert prefixed == plain == {"r": {"CardNumber": "4111"}}

    def test_leaf_elements_become_text(self):
        """Test elements without children become scalar strings."""
        doc = parse_document("<r><a>1</a><b/><c></c></r>")
        assert doc == {"r": {"a": "1", "b": "", "c": ""}}

    def test_repeated_siblings_become_list_in_order(self):
        """Test repeated tags collapse into a list preserving order."""
        doc = parse_document("<r><x>1</x><y>a</y><x>2</x><x>3</x></r>")
        assert doc == {"r": {"x": ["1", "2", "3"], "y": "a"}}

    def test_attributes_are_ignored(self):
        """Test attributes do not appear in the parsed value."""
        doc = parse_document('<r><x id="7" i:nil="true" xmlns:i="urn:i">v</x></r>')
        assert doc == {"r": {"x": "v"}}

    def test_multi_letter_prefix_is_kept(self):
        """Test prefixes longer than one letter are not stripped."""
        doc = parse_document('<soap:Envelope xmlns:soap="urn:s"><soap:Body/></soap:Envelope>')
        assert doc == {"soap:Envelope": {"soap:Body": ""}}

    def test_nested_prefix_declaration_does_not_leak_to_siblings(self):
        """Test a prefix declared inside one record does not rename later records."""
        doc = parse_document(
            '<Result xmlns="http://tempuri.org/">'
            "<Card><CardNumber>1</CardNumber>"
            '<Extra xmlns:tns="http://tempuri.org/"/></Card>'
            "<Card><CardNumber>2</CardNumber></Card>"
            "</Result>"
        )
        cards = doc["Result"]["Card"]
        assert [card["CardNumber"] for card in cards] == ["1", "2"]
        assert cards[0]["Extra"] == ""
        assert "tns:Card" not in doc["Result"]

    def test_prefix_rebinding_is_scoped(self):
        """Test a prefix rebound in a child reverts when the child closes."""
        doc = parse_document(
            '<r xmlns:a="urn:one">'
            '<x xmlns:a="urn:two"><a:In>1</a:In></x>'
            "<a:After>2</a:After>"
            "</r>"
        )
        assert doc == {"r": {"x": {"In": "1"}, "After": "2"}}

    def test_full_card_list_response(self):
        """Test a realistic backend response parses into nested mappings."""
        doc = parse_document(card_list_response({"CardNumber": "4111", "BrandName": "VISA"}))
        result = doc["Envelope"]["Body"]["F4_GetCardListResponse"]["F4_GetCardListResult"]
        assert result == {"Card": {"CardNumber": "4111", "BrandName": "VISA"}}

    def test_accepts_bytes(self):
        """Test payload may be bytes."""
        assert parse_document(b"<r><x>1</x></r>") == {"r": {"x": "1"}}

    def test_text_entities_are_decoded(self):
        """Test escaped characters come back as plain text."""
        doc = parse_document("<r><x>A &amp; B &lt;C&gt;</x></r>")
        assert doc["r"]["x"] == "A & B <C>"

    @pytest.mark.parametrize("payload", ["", "not xml", "<r><x></r>", "<r>"])
    def test_malformed_xml_raises(self, payload):
        """Test malformed XML raises MalformedResponseError."""
        with pytest.raises(MalformedResponseError) as exc_info:
            parse_document(payload)
        assert "parse_error" in exc_info.value.details


class TestFindFault:
    """Test find_fault function."""

    def test_soap11_fault(self):
        """Test faultstring is extracted from a SOAP 1.1 fault."""
        doc = parse_document(soap_fault("Object reference not set"))
        assert find_fault(doc) == "Object reference not set"

    def test_no_fault(self):
        """Test a normal response has no fault."""
        doc = parse_document(card_list_response())
        assert find_fault(doc) is None

    def test_soap12_reason_text(self):
        """Test SOAP 1.2 style Reason/Text is extracted."""
        doc = {"Envelope": {"Body": {"Fault": {"Reason": {"Text": "Sender fault"}}}}}
        assert find_fault(doc) == "Sender fault"

    def test_non_mapping_body(self):
        """Test an empty body yields no fault."""
        assert find_fault({"Envelope": {"Body": ""}}) is None
