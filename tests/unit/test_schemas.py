"""Unit tests for response schemas."""

from card_gateway.schemas.card import Card, StatementTransaction
from card_gateway.soap.operations import CARD_FIELDS, STATEMENT_FIELDS


class TestCard:
    """Test Card schema."""

    def test_aliases_match_allow_list(self):
        """Test JSON field names are exactly the card allow-list, in order."""
        aliases = tuple(field.alias for field in Card.model_fields.values())
        assert aliases == CARD_FIELDS

    def test_defaults_are_empty_strings(self):
        """Test every field defaults to ""."""
        assert Card().model_dump(by_alias=True) == {name: "" for name in CARD_FIELDS}

    def test_validate_from_backend_names(self):
        """Test records keyed by backend names validate."""
        card = Card.model_validate({"CprId": "12345", "MainSupp": "M"})
        assert card.cpr_id == "12345"
        assert card.main_supp == "M"

    def test_extra_fields_ignored(self):
        """Test fields outside the schema are dropped."""
        card = Card.model_validate({"CardNumber": "1", "CurrentBalance": "100"})
        assert "CurrentBalance" not in card.model_dump(by_alias=True)

    def test_values_are_opaque_strings(self):
        """Test values are not parsed as dates or numbers."""
        card = Card.model_validate({"ExpiryDate": "2027-12-31T00:00:00", "CardType": "01"})
        assert card.expiry_date == "2027-12-31T00:00:00"
        assert card.card_type == "01"


class TestStatementTransaction:
    """Test StatementTransaction schema."""

    def test_aliases_match_allow_list(self):
        """Test JSON field names are exactly the statement allow-list, in order."""
        aliases = tuple(field.alias for field in StatementTransaction.model_fields.values())
        assert aliases == STATEMENT_FIELDS

    def test_dump_by_alias(self):
        """Test serialization uses backend names."""
        row = StatementTransaction(posting_date="2024-03-02", billing_currency="BHD")
        dumped = row.model_dump(by_alias=True)
        assert dumped["PostingDate"] == "2024-03-02"
        assert dumped["BillingCurrency"] == "BHD"
        assert dumped["Wording"] == ""
