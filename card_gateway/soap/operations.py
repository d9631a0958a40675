"""SOAP operation descriptors.

Each backend operation is described once here: its action name, how
logical parameters map onto request elements, where the result records
live in the response, and which record fields are exposed to clients.

The field allow-lists are a data-minimization policy. Adding a field to
the response means adding it to the relevant tuple (and schema) below.
"""

from dataclasses import dataclass, field

# Every field the card-management backend can return for a Card record.
CARD_BACKEND_FIELDS: tuple[str, ...] = (
    "Account_Status",
    "Activation_flag",
    "Agreement_date",
    "BrandName",
    "CardNumber",
    "CardType",
    "Card_status_reason",
    "ClientCode",
    "CprId",
    "CurrentBalance",
    "Delivery_card_flag",
    "Direct_debit",
    "EmbossingName",
    "ExpiryDate",
    "Limit_Index",
    "MainSupp",
    "Plastic_Code",
    "ProfileCode",
    "Shadow_Acoount_NBR",
    "Shadow_account_reason",
    "Single_Multi",
    "Stop_list_ind",
    "Stop_list_reason",
    "Total_unpaid_amount",
    "Unpaid_status",
    "pBasicCardNumber",
    "status_code",
)

CARD_FIELDS: tuple[str, ...] = (
    "BrandName",
    "CardNumber",
    "CardType",
    "ClientCode",
    "CprId",
    "EmbossingName",
    "ExpiryDate",
    "MainSupp",
)

STATEMENT_FIELDS: tuple[str, ...] = (
    "BillingAmount",
    "BillingCurrency",
    "CardNumber",
    "Description",
    "PostingDate",
    "RunningBalance",
    "TransactionAmount",
    "TransactionCurrency",
    "TransactionDate",
    "ValueDate",
    "Wording",
)


@dataclass(frozen=True)
class SoapOperation:
    """Configuration for a SOAP operation.

    Attributes:
        name: Backend operation name (e.g., "F4_GetCardList"). Also the
            request body element name.
        params: Ordered (logical name, request element) pairs.
        record_element: Name of each record element in the result.
        fields: Record fields copied into the output, in output order.
    """

    name: str
    params: tuple[tuple[str, str], ...]
    record_element: str
    fields: tuple[str, ...] = field(default_factory=tuple)

    @property
    def response_element(self) -> str:
        return f"{self.name}Response"

    @property
    def result_element(self) -> str:
        return f"{self.name}Result"

    @property
    def result_path(self) -> tuple[str, ...]:
        """Path from the document root to the result collection node."""
        return ("Envelope", "Body", self.response_element, self.result_element)

    def soap_action(self, namespace: str, contract: str) -> str:
        """Build the quoted SOAPAction header value."""
        return f'"{namespace}{contract}/{self.name}"'

    def build_params(self, **kwargs: str) -> dict[str, str]:
        """Map logical parameters onto request element names.

        Raises:
            KeyError: If a declared parameter is not supplied.
        """
        return {element: kwargs[name] for name, element in self.params}


GET_CARD_LIST = SoapOperation(
    name="F4_GetCardList",
    params=(("cpr", "pCpr"),),
    record_element="Card",
    fields=CARD_FIELDS,
)

GET_STATEMENT_TRANSACTIONS = SoapOperation(
    name="F4_GetStatementTransactions",
    params=(
        ("cpr", "pCpr"),
        ("card_number", "pCardNumber"),
        ("statement_flag", "pStatementFlag"),
    ),
    record_element="Statement",
    fields=STATEMENT_FIELDS,
)
