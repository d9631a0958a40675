"""Card and statement schemas returned by the gateway.

Field values are relayed from the backend as opaque strings. JSON keys use
the backend's own PascalCase names.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal


class BackendRecord(BaseModel):
    """Base for records relayed from the card-management backend."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="ignore",
    )


class Card(BackendRecord):
    """A payment card held by a customer."""

    brand_name: str = Field(default="", description="Card brand, e.g. VISA")
    card_number: str = Field(default="", description="Card number as stored by the backend")
    card_type: str = Field(default="")
    client_code: str = Field(default="")
    cpr_id: str = Field(default="", description="Customer identifier (CPR)")
    embossing_name: str = Field(default="", description="Name embossed on the card")
    expiry_date: str = Field(default="")
    main_supp: str = Field(default="", description="Main/supplementary card indicator")


class StatementTransaction(BackendRecord):
    """A posted transaction on a card statement."""

    billing_amount: str = Field(default="")
    billing_currency: str = Field(default="")
    card_number: str = Field(default="")
    description: str = Field(default="")
    posting_date: str = Field(default="")
    running_balance: str = Field(default="", description="Statement balance after this transaction")
    transaction_amount: str = Field(default="")
    transaction_currency: str = Field(default="")
    transaction_date: str = Field(default="")
    value_date: str = Field(default="")
    wording: str = Field(default="")
