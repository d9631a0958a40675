"""Card-management backend SOAP client.

Async client for the legacy ServicesGps SOAP service.

Components:
- build_envelope: builds SOAP envelopes
- parse_document: parses SOAP responses
- extract_records: locates and projects result records

Each call opens its own HTTP connection; nothing is shared between calls.
"""

import asyncio
import logging
import ssl
from typing import Any

import httpx

from card_gateway.core.config import SoapBackendConfig
from card_gateway.core.errors import BackendError, MalformedResponseError
from card_gateway.soap.envelope import build_envelope
from card_gateway.soap.extraction import extract_records
from card_gateway.soap.operations import SoapOperation
from card_gateway.soap.parser import find_fault, parse_document

logger = logging.getLogger(__name__)

CONTENT_TYPE = "text/xml; charset=utf-8"


class SoapClient:
    """Async SOAP client for the card-management backend."""

    def __init__(
        self,
        config: SoapBackendConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize SOAP client.

        Args:
            config: Backend endpoint, namespace, timeout and TLS settings.
            transport: Optional custom transport (used by tests).
        """
        self.config = config
        self._transport = transport

    def _verify(self) -> ssl.SSLContext | bool:
        if not self.config.verify_tls:
            return False
        if self.config.ca_bundle:
            return ssl.create_default_context(cafile=self.config.ca_bundle)
        return True

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.config.timeout_seconds),
            verify=self._verify(),
            transport=self._transport,
        )

    async def call(self, operation: SoapOperation, **params: str) -> list[dict[str, str]]:
        """Invoke an operation and return its projected records.

        Args:
            operation: Operation to invoke.
            **params: Logical operation parameters.

        Returns:
            Projected records in backend order (possibly empty).

        Raises:
            BackendError: On connection errors, timeouts or non-2xx statuses.
            MalformedResponseError: If a 2xx body is not well-formed XML.
        """
        request_params = operation.build_params(**params)
        envelope = build_envelope(operation, request_params, self.config.namespace)
        payload = await self._post(operation, envelope)
        document = parse_document(payload)
        return extract_records(document, operation)

    async def _post(self, operation: SoapOperation, envelope: bytes) -> bytes:
        headers = {
            "Content-Type": CONTENT_TYPE,
            "SOAPAction": operation.soap_action(self.config.namespace, self.config.contract),
        }

        async with self._client() as client:
            try:
                # httpx limits each phase separately; this bounds the whole exchange.
                async with asyncio.timeout(self.config.timeout_seconds):
                    response = await client.post(
                        self.config.endpoint_url, content=envelope, headers=headers
                    )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                status_code = e.response.status_code
                logger.error(f"HTTP error calling {operation.name}: {status_code}")
                raise BackendError(
                    f"SOAP API Error: Request failed with status code {status_code}",
                    details=self._status_details(e.response),
                ) from e
            except httpx.HTTPError as e:
                message = str(e) or type(e).__name__
                logger.error(f"Request error calling {operation.name}: {message}")
                raise BackendError(
                    f"SOAP API Error: {message}",
                    details={"error_type": type(e).__name__},
                ) from e
            except TimeoutError as e:
                logger.error(f"Timed out calling {operation.name}")
                raise BackendError(
                    "SOAP API Error: Request timed out",
                    details={"error_type": "TimeoutError"},
                ) from e

        return response.content

    @staticmethod
    def _status_details(response: httpx.Response) -> dict[str, Any]:
        details: dict[str, Any] = {"status_code": response.status_code}
        try:
            fault = find_fault(parse_document(response.content))
        except MalformedResponseError:
            fault = None
        if fault:
            details["fault"] = fault
        return details
