"""Decode the ``<lfm>`` envelope wrapping every Last.fm XML response.

Successful responses look like::

    <lfm status="ok"><user>...</user></lfm>

and failures like::

    <lfm status="failed"><error code="6">Invalid parameters</error></lfm>

The envelope keeps its inner XML as raw bytes so the payload can be decoded
later into whatever result type the caller asked for.
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Any, Optional
from xml.sax.saxutils import escape

from .exceptions import (
    InvalidXMLResponseError,
    LastFMError,
    MissingErrorCodeError,
    ResponseDecodeError,
    error_from_code,
)
from .transform import unmarshal

ENVELOPE_TAG = "lfm"
STATUS_OK = "ok"
STATUS_FAILED = "failed"

# expat: XML_ERROR_NO_ELEMENTS ("no element found")
_EXPAT_NO_ELEMENTS = 3


def _parse(data: bytes) -> ET.Element:
    """Parse an XML document, separating end-of-input from malformed XML."""
    if b"<" not in data:
        raise InvalidXMLResponseError("invalid XML response: EOF")
    try:
        return ET.fromstring(data)
    except ET.ParseError as e:
        if e.code == _EXPAT_NO_ELEMENTS:
            raise InvalidXMLResponseError(f"invalid XML response: {e}") from e
        raise ResponseDecodeError(f"malformed XML response: {e}") from e


def _first_element(inner_xml: bytes) -> Optional[ET.Element]:
    container = ET.fromstring(b"<lfm>" + inner_xml + b"</lfm>")
    return next(iter(container), None)


@dataclass
class Envelope:
    """Decoded response envelope.

    Attributes:
        status: Value of the ``status`` attribute ("ok" or "failed")
        inner_xml: Raw XML inside ``<lfm>``
        error: API error carried by a failed envelope, None when ok
    """

    status: str
    inner_xml: bytes
    error: Optional[LastFMError] = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK

    @property
    def failed(self) -> bool:
        return self.status == STATUS_FAILED

    @property
    def empty(self) -> bool:
        return not self.inner_xml.strip()

    def unmarshal_inner(self, dest: Any) -> Any:
        """Decode the first element inside the envelope into ``dest``.

        Args:
            dest: Destination type accepted by ``transform.unmarshal``

        Returns:
            Decoded payload

        Raises:
            InvalidXMLResponseError: If the envelope holds no element
            ET.ParseError: If the inner XML is not well formed
            TypeError: If dest is not a supported destination type
            ValueError: If a field value cannot be parsed
        """
        element = _first_element(self.inner_xml)
        if element is None:
            raise InvalidXMLResponseError("invalid XML response: EOF")
        return unmarshal(element, dest)


def decode_envelope(body: bytes) -> Envelope:
    """Decode a raw response body into an Envelope.

    Args:
        body: Raw HTTP response body

    Returns:
        Envelope with ``error`` set when the status is not "ok"

    Raises:
        InvalidXMLResponseError: If the body contains no XML element
        ResponseDecodeError: If the XML is malformed, the root element is not
            ``<lfm>``, or a failed envelope's error body cannot be parsed
        MissingErrorCodeError: If a failed envelope has no error code
    """
    root = _parse(body)
    if root.tag != ENVELOPE_TAG:
        raise ResponseDecodeError(f"expected element type <{ENVELOPE_TAG}> but have <{root.tag}>")

    inner = escape(root.text or "") + "".join(ET.tostring(child, encoding="unicode") for child in root)
    envelope = Envelope(status=root.get("status", ""), inner_xml=inner.encode("utf-8"))

    if envelope.ok:
        return envelope

    envelope.error = _unwrap_error(envelope)
    return envelope


def _unwrap_error(envelope: Envelope) -> LastFMError:
    element = _first_element(envelope.inner_xml)
    if element is None:
        raise InvalidXMLResponseError("invalid XML response: EOF in error body")

    raw_code = (element.get("code") or "0").strip()
    try:
        code = int(raw_code)
    except ValueError as e:
        raise ResponseDecodeError(f"invalid error code in response: {raw_code!r}") from e

    if code == 0:
        raise MissingErrorCodeError("no error code in response")

    message = (element.text or "").strip()
    return error_from_code(code, message)
