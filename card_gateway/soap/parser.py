"""SOAP response parsing.

Converts a SOAP XML document into plain Python values:

- an element with child elements becomes a dict keyed by child tag name
- an element without child elements becomes its text ("" when empty)
- repeated sibling tags collapse into a list, in document order
- attributes are ignored

Tag names keep the prefix they were written with, except that a single
lowercase-letter prefix (``s:Envelope``, ``a:CardNumber``) is stripped.
"""

import io
import re
from typing import Any
from xml.etree import ElementTree

from card_gateway.core.errors import MalformedResponseError

PREFIX_PATTERN = re.compile(r"^[a-z]:")


def strip_prefix(name: str) -> str:
    """Remove a single lowercase-letter namespace prefix from a tag name."""
    return PREFIX_PATTERN.sub("", name)


def _qualified_name(tag: str, bindings: dict[str, str]) -> str:
    """Rebuild the prefixed tag name ElementTree resolved into {uri}local.

    Args:
        tag: Resolved tag name.
        bindings: Prefix to URI bindings in scope for the element.
    """
    if not tag.startswith("{"):
        return tag
    uri, local = tag[1:].split("}", 1)
    if bindings.get("") == uri:
        return local
    # Several prefixes can share a URI; the latest declared one is used.
    for prefix, bound in reversed(bindings.items()):
        if bound == uri:
            return f"{prefix}:{local}"
    return local


def _add_child(container: dict[str, Any], name: str, value: Any) -> None:
    if name not in container:
        container[name] = value
        return
    existing = container[name]
    if isinstance(existing, list):
        existing.append(value)
    else:
        container[name] = [existing, value]


def parse_document(payload: bytes | str) -> dict[str, Any]:
    """Parse a SOAP response body.

    Args:
        payload: Raw XML response body.

    Returns:
        Single-key dict mapping the root tag name to its converted value.

    Raises:
        MalformedResponseError: If the payload is not well-formed XML.
    """
    if isinstance(payload, str):
        payload = payload.encode("utf-8")

    # Namespace bindings in scope, one entry per open element
    scopes: list[dict[str, str]] = [{}]
    declared: dict[str, str] = {}
    # Each frame: (tag name, child mapping)
    stack: list[tuple[str, dict[str, Any]]] = []
    root: dict[str, Any] = {}

    try:
        for event, item in ElementTree.iterparse(
            io.BytesIO(payload), events=("start-ns", "start", "end")
        ):
            if event == "start-ns":
                prefix, uri = item
                declared[prefix] = uri
            elif event == "start":
                bindings = scopes[-1]
                if declared:
                    # Redeclared prefixes move to the end, keeping declaration order.
                    bindings = {p: u for p, u in bindings.items() if p not in declared}
                    bindings.update(declared)
                    declared = {}
                scopes.append(bindings)
                stack.append((strip_prefix(_qualified_name(item.tag, bindings)), {}))
            else:
                scopes.pop()
                name, children = stack.pop()
                value: Any = children if children else (item.text or "")
                parent = stack[-1][1] if stack else root
                _add_child(parent, name, value)
                item.clear()
    except ElementTree.ParseError as e:
        raise MalformedResponseError(
            "Backend returned a response that is not well-formed XML",
            details={"parse_error": str(e)},
        ) from e

    return root


def find_fault(document: dict[str, Any]) -> str | None:
    """Extract the SOAP fault string from a parsed document, if any."""
    node: Any = document
    for segment in ("Envelope", "Body", "Fault"):
        if not isinstance(node, dict):
            return None
        node = node.get(segment)
    if not isinstance(node, dict):
        return None

    fault = node.get("faultstring")
    if fault is None:
        # SOAP 1.2 style: Fault/Reason/Text
        reason = node.get("Reason")
        fault = reason.get("Text") if isinstance(reason, dict) else None
    if isinstance(fault, list):
        fault = fault[0]
    return fault if isinstance(fault, str) else None
