"""Transform Last.fm XML elements into typed result dataclasses.

Result types are plain dataclasses whose fields are declared with
``xml_field``, naming where each value lives relative to the element being
decoded:

    ``xml_field("name")``                child element ``<name>``
    ``xml_field("toptags>tag")``         every ``<tag>`` inside ``<toptags>``
    ``xml_field("code", attr=True)``     attribute ``code="..."``
    ``xml_field(chardata=True)``         text directly inside the element
    ``xml_field(".")``                   the element itself (for nested views)

Elements missing from the response decode to zero values ("" / 0 / False /
None / [] / {}), so sparse responses never fail.
"""

import dataclasses
import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Optional, Union, get_args, get_origin, get_type_hints

_PATH = "xml_path"
_ATTR = "xml_attr"
_CHARDATA = "xml_chardata"


def xml_field(path: Optional[str] = None, *, attr: bool = False, chardata: bool = False):
    """Declare a dataclass field decoded from XML.

    Args:
        path: Element path (``a>b`` for nesting) or attribute name.
              Defaults to the field name.
        attr: Read an attribute of the current element instead of a child
        chardata: Read the character data of the current element

    Returns:
        A dataclasses.field carrying the XML mapping in its metadata
    """
    return dataclasses.field(metadata={_PATH: path, _ATTR: attr, _CHARDATA: chardata})


def chardata(element: ET.Element) -> str:
    """Return the text directly inside ``element``, excluding child elements."""
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts)


def parse_bool(text: str) -> bool:
    """Parse Last.fm's 0/1 booleans.

    Raises:
        ValueError: If text is neither empty, "0" nor "1"
    """
    value = text.strip()
    if value in ("", "0"):
        return False
    if value == "1":
        return True
    raise ValueError(f"invalid IntBool value: {value}")


def _optional_inner(tp: Any) -> Optional[Any]:
    if get_origin(tp) is Union:
        args = [arg for arg in get_args(tp) if arg is not type(None)]
        if len(args) == 1 and len(get_args(tp)) == 2:
            return args[0]
    return None


def _convert_scalar(tp: Any, text: str) -> Any:
    if tp is str:
        return text
    if tp is bool:
        return parse_bool(text)
    if tp is int:
        value = text.strip()
        return int(value) if value else 0
    if tp is float:
        value = text.strip()
        return float(value) if value else 0.0
    raise TypeError(f"cannot decode XML text into {tp!r}")


def zero_value(tp: Any) -> Any:
    """Return the value a field of type ``tp`` takes when absent."""
    if _optional_inner(tp) is not None:
        return None
    origin = get_origin(tp)
    if origin in (list, List):
        return []
    if origin in (dict, Dict):
        return {}
    if dataclasses.is_dataclass(tp):
        return unmarshal(ET.Element("_"), tp)
    if tp in (str, bool, int, float):
        return _convert_scalar(tp, "")
    raise TypeError(f"no zero value for {tp!r}")


def _find_all(element: ET.Element, path: str) -> List[ET.Element]:
    matches = [element]
    for step in path.split(">"):
        if step == ".":
            continue
        matches = [child for match in matches for child in match.findall(step)]
    return matches


def _decode_element(tp: Any, element: ET.Element) -> Any:
    inner = _optional_inner(tp)
    if inner is not None:
        return _decode_element(inner, element)
    if dataclasses.is_dataclass(tp) or hasattr(tp, "from_xml"):
        return unmarshal(element, tp)
    return _convert_scalar(tp, chardata(element))


def _decode_field(field: dataclasses.Field, tp: Any, element: ET.Element) -> Any:
    path = field.metadata.get(_PATH) or field.name

    if field.metadata.get(_CHARDATA):
        return _convert_scalar(_optional_inner(tp) or tp, chardata(element))

    if field.metadata.get(_ATTR):
        value = element.get(path)
        if value is None:
            return zero_value(tp)
        return _convert_scalar(_optional_inner(tp) or tp, value)

    matches = _find_all(element, path)
    origin = get_origin(tp)

    if origin in (list, List):
        (item_type,) = get_args(tp)
        return [_decode_element(item_type, match) for match in matches]

    if origin in (dict, Dict):
        # Image lists: <image size="small">url</image>, keyed by size
        images = {}
        for match in matches:
            url = chardata(match)
            if url:
                images[match.get("size") or "undefined"] = url
        return images

    if not matches:
        return zero_value(tp)
    return _decode_element(tp, matches[0])


def unmarshal(element: ET.Element, dest: Any) -> Any:
    """Decode ``element`` into an instance of ``dest``.

    Args:
        element: XML element to decode
        dest: ``str`` for the element text, a type with a ``from_xml``
              classmethod, or a dataclass declared with ``xml_field``

    Returns:
        The decoded value

    Raises:
        TypeError: If dest is not a supported destination type
        ValueError: If a numeric or boolean value cannot be parsed

    Example:
        >>> @dataclasses.dataclass
        ... class User:
        ...     name: str = xml_field("name")
        >>> unmarshal(ET.fromstring("<user><name>rj</name></user>"), User)
        User(name='rj')
    """
    if dest is str:
        return chardata(element)
    if hasattr(dest, "from_xml"):
        return dest.from_xml(element)
    if not (isinstance(dest, type) and dataclasses.is_dataclass(dest)):
        raise TypeError(f"cannot unmarshal XML into {dest!r}")

    hints = get_type_hints(dest)
    values = {}
    for field in dataclasses.fields(dest):
        if not field.init:
            continue
        values[field.name] = _decode_field(field, hints[field.name], element)
    return dest(**values)
