"""Result extraction and field projection.

Extraction is best-effort: the backend signals "no rows" by omitting
nodes, so a missing node anywhere on the result path is a normal empty
result. Structural anomalies inside records also degrade to an empty
result instead of failing the request.
"""

import logging
from typing import Any

from card_gateway.soap.operations import SoapOperation

logger = logging.getLogger(__name__)


class MalformedRecordError(Exception):
    """Raised when a record field holds nested elements instead of text."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Field '{field_name}' is not a text value")


def find_records(document: dict[str, Any], operation: SoapOperation) -> list[Any]:
    """Locate the record elements for an operation.

    Returns:
        Raw records in document order; empty if any path segment is absent.
    """
    node: Any = document
    for segment in operation.result_path:
        if not isinstance(node, dict):
            return []
        node = node.get(segment)

    if not isinstance(node, dict):
        return []

    records = node.get(operation.record_element)
    if not records:
        return []

    # A single record parses to a mapping, several to a list.
    return records if isinstance(records, list) else [records]


def project_record(record: Any, fields: tuple[str, ...]) -> dict[str, str]:
    """Copy allow-listed fields from a raw record, defaulting to "".

    Raises:
        MalformedRecordError: If an allow-listed field is not text.
    """
    if not isinstance(record, dict):
        record = {}

    projected: dict[str, str] = {}
    for name in fields:
        value = record.get(name) or ""
        if not isinstance(value, str):
            raise MalformedRecordError(name)
        projected[name] = value
    return projected


def extract_records(document: dict[str, Any], operation: SoapOperation) -> list[dict[str, str]]:
    """Extract and project all records of an operation's response."""
    try:
        records = find_records(document, operation)
        return [project_record(record, operation.fields) for record in records]
    except (MalformedRecordError, AttributeError, TypeError) as e:
        logger.warning(
            "Discarding malformed backend records",
            extra={"operation": operation.name, "error": str(e)},
        )
        return []
