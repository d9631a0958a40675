"""API routes for card and statement lookups."""

from fastapi import APIRouter, Query

from card_gateway.core.dependencies import CardServiceDep
from card_gateway.schemas.card import Card, StatementTransaction

router = APIRouter(tags=["Cards"])


@router.get(
    "/card-list",
    response_model=list[Card],
    summary="List cards",
    description="List the cards held by a customer.",
)
async def get_card_list(
    card_service: CardServiceDep,
    cpr: str | None = Query(None, description="Customer identifier (CPR)"),
) -> list[Card]:
    """Return the customer's cards, or an empty list when the backend has none."""
    return await card_service.list_cards(cpr)


@router.get(
    "/statement-transactions",
    response_model=list[StatementTransaction],
    summary="List statement transactions",
    description="List the posted transactions on a card statement.",
)
async def get_statement_transactions(
    card_service: CardServiceDep,
    cpr: str | None = Query(None, description="Customer identifier (CPR)"),
    card_number: str | None = Query(None, alias="cardNumber", description="Card number"),
    statement_flag: str | None = Query(
        None,
        alias="statementFlag",
        description="Statement selector; the backend default applies when omitted",
    ),
) -> list[StatementTransaction]:
    """Return the statement transactions for a card."""
    return await card_service.list_statement_transactions(cpr, card_number, statement_flag)
