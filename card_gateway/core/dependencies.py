"""
FastAPI dependency injection utilities.

Provides the SOAP client and card service to route handlers.
"""

from typing import Annotated

from fastapi import Depends

from card_gateway.core.config import Settings, get_settings
from card_gateway.services.card_service import CardService
from card_gateway.soap.client import SoapClient


def get_soap_client(settings: Settings = Depends(get_settings)) -> SoapClient:
    """Build a SOAP client from backend settings."""
    return SoapClient(settings.soap)


def get_card_service(
    client: SoapClient = Depends(get_soap_client),
    settings: Settings = Depends(get_settings),
) -> CardService:
    """Get card service instance."""
    return CardService(client, statement_flag_default=settings.soap.statement_flag_default)


CardServiceDep = Annotated[CardService, Depends(get_card_service)]
