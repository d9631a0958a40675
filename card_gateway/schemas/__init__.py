"""Pydantic schemas for API responses."""

from card_gateway.schemas.card import Card, StatementTransaction

__all__ = [
    "Card",
    "StatementTransaction",
]
