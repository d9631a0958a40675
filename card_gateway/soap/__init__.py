"""SOAP translation layer for the card-management backend."""

from card_gateway.soap.client import SoapClient
from card_gateway.soap.operations import GET_CARD_LIST, GET_STATEMENT_TRANSACTIONS, SoapOperation

__all__ = [
    "GET_CARD_LIST",
    "GET_STATEMENT_TRANSACTIONS",
    "SoapClient",
    "SoapOperation",
]
