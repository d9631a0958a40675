"""Card service: validates gateway requests and relays them to the backend."""

from card_gateway.core.errors import BackendError, ValidationError
from card_gateway.core.logging import get_logger
from card_gateway.core.security.pan_masking import mask_pan
from card_gateway.schemas.card import Card, StatementTransaction
from card_gateway.soap.client import SoapClient
from card_gateway.soap.operations import GET_CARD_LIST, GET_STATEMENT_TRANSACTIONS

logger = get_logger(__name__)


def _require(value: str | None, message: str, parameter: str) -> str:
    if not value:
        raise ValidationError(message, details={"parameter": parameter})
    return value


class CardService:
    """Service for card and statement lookups."""

    def __init__(self, client: SoapClient, statement_flag_default: str):
        self.client = client
        self.statement_flag_default = statement_flag_default

    async def list_cards(self, cpr: str | None) -> list[Card]:
        """List the cards held by a customer."""
        cpr = _require(cpr, "CPR parameter is required", "cpr")

        logger.info("fetching_card_list", cpr=cpr)
        try:
            records = await self.client.call(GET_CARD_LIST, cpr=cpr)
        except BackendError as e:
            logger.error("card_list_failed", cpr=cpr, error=e.message)
            raise

        logger.info("card_list_fetched", cpr=cpr, count=len(records))
        return [Card.model_validate(record) for record in records]

    async def list_statement_transactions(
        self,
        cpr: str | None,
        card_number: str | None,
        statement_flag: str | None = None,
    ) -> list[StatementTransaction]:
        """List the transactions on a card statement.

        An absent statement flag falls back to the configured default;
        any other value is sent to the backend unchanged.
        """
        cpr = _require(cpr, "CPR parameter is required", "cpr")
        card_number = _require(card_number, "Card number parameter is required", "cardNumber")
        statement_flag = statement_flag or self.statement_flag_default

        masked = mask_pan(card_number)
        logger.info(
            "fetching_statement_transactions",
            cpr=cpr,
            card_number=masked,
            statement_flag=statement_flag,
        )
        try:
            records = await self.client.call(
                GET_STATEMENT_TRANSACTIONS,
                cpr=cpr,
                card_number=card_number,
                statement_flag=statement_flag,
            )
        except BackendError as e:
            logger.error(
                "statement_transactions_failed", cpr=cpr, card_number=masked, error=e.message
            )
            raise

        logger.info(
            "statement_transactions_fetched", cpr=cpr, card_number=masked, count=len(records)
        )
        return [StatementTransaction.model_validate(record) for record in records]
