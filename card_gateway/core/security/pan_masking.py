"""PCI compliance: PAN masking for logs.

Card numbers travel through this gateway in clear text (query parameters
and backend payloads). They must never reach log output unmasked.

Patterns detected:
- 13-19 digit numbers matching the Luhn algorithm
- Optional spaces or dashes for formatting

Usage:
    logger.info("statement_fetched", card_number=mask_pan(card_number))
"""

from __future__ import annotations

from typing import Any

MIN_PAN_LENGTH = 13
MAX_PAN_LENGTH = 19

VISIBLE_PREFIX = 6
VISIBLE_SUFFIX = 4


def _clean(value: str) -> str:
    return value.replace(" ", "").replace("-", "")


def passes_luhn(number: str) -> bool:
    """Validate using Luhn algorithm.

    The Luhn algorithm is used to validate credit card numbers.
    """
    if not number.isdigit():
        return False

    digits = [int(d) for d in number]
    odd_digits = digits[-1::-2]
    even_digits = digits[-2::-2]

    checksum = sum(odd_digits)
    for d in even_digits:
        doubled = d * 2
        checksum += doubled - 9 if doubled > 9 else doubled

    return checksum % 10 == 0


def looks_like_pan(value: Any) -> bool:
    """Check if a value looks like a PAN.

    A value is considered a PAN if:
    1. It's a string
    2. It is 13-19 digits once spaces and dashes are removed
    3. It passes the Luhn check
    """
    if not isinstance(value, str):
        return False

    cleaned = _clean(value)
    if not cleaned.isdigit():
        return False

    if not (MIN_PAN_LENGTH <= len(cleaned) <= MAX_PAN_LENGTH):
        return False

    return passes_luhn(cleaned)


def mask_pan(value: str | None) -> str:
    """Mask a card number, keeping the BIN and the last four digits.

    Values too short to carry a BIN are fully masked. The mask is applied
    regardless of the Luhn check, since callers use it on fields known to
    hold card numbers.
    """
    if not value:
        return ""

    cleaned = _clean(value)
    if len(cleaned) <= VISIBLE_PREFIX + VISIBLE_SUFFIX:
        return "*" * len(cleaned)

    hidden = len(cleaned) - VISIBLE_PREFIX - VISIBLE_SUFFIX
    return cleaned[:VISIBLE_PREFIX] + "*" * hidden + cleaned[-VISIBLE_SUFFIX:]


def redact_pans(_logger: Any, _method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor that masks PAN-looking values in an event."""
    for key, value in event_dict.items():
        if looks_like_pan(value):
            event_dict[key] = mask_pan(value)
    return event_dict
