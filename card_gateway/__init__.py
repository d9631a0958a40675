"""Card SOAP Gateway.

This service exposes a small REST/JSON surface for:
- Listing the cards held by a customer
- Listing the transactions on a card statement

Each request is relayed to the legacy card-management SOAP backend.
"""

__version__ = "0.1.0"
