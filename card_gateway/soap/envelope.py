"""SOAP request envelope construction.

Envelopes are built as element trees and serialized by ElementTree, so
parameter values are always escaped as text content.
"""

from xml.etree import ElementTree

from card_gateway.soap.operations import SoapOperation

SOAP_ENV_NS = "http://schemas.xmlsoap.org/soap/envelope/"


def build_envelope(operation: SoapOperation, params: dict[str, str], namespace: str) -> bytes:
    """Build a SOAP 1.1 envelope for an operation call.

    Args:
        operation: Operation being invoked.
        params: Request element name to text value, in document order.
        namespace: Target namespace of the operation element.

    Returns:
        UTF-8 encoded XML document, including the XML declaration.
    """
    envelope = ElementTree.Element("soap:Envelope", {"xmlns:soap": SOAP_ENV_NS})
    ElementTree.SubElement(envelope, "soap:Header")
    body = ElementTree.SubElement(envelope, "soap:Body")

    call = ElementTree.SubElement(body, operation.name, {"xmlns": namespace})
    for element, value in params.items():
        child = ElementTree.SubElement(call, element)
        child.text = "" if value is None else str(value)

    return ElementTree.tostring(envelope, encoding="utf-8", xml_declaration=True)
