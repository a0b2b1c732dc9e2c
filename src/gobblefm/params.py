"""Encode request parameters into Last.fm query/body values.

Parameter types are dataclasses whose fields name their wire key with
``param``. Plain mappings work too, which is handy for one-off calls:

    >>> encode_params({"user": "rj", "limit": 10})
    {'user': 'rj', 'limit': '10'}
"""

import dataclasses
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping

_NAME = "param_name"
_OMITEMPTY = "param_omitempty"


def param(name: str, *, omitempty: bool = False, **kwargs):
    """Declare a dataclass field sent as request parameter ``name``.

    Args:
        name: Wire name of the parameter (e.g. "autocorrect")
        omitempty: Skip the parameter when the value is falsy
        **kwargs: Passed through to dataclasses.field (default, ...)
    """
    return dataclasses.field(metadata={_NAME: name, _OMITEMPTY: omitempty}, **kwargs)


def encode_value(value: Any) -> str:
    """Encode a single parameter value as Last.fm expects it.

    Booleans become 1/0, datetimes unix seconds, sequences comma-separated
    lists and enums their value.
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, Enum):
        return encode_value(value.value)
    if isinstance(value, datetime):
        return str(int(value.timestamp()))
    if isinstance(value, (list, tuple)):
        return ",".join(encode_value(item) for item in value)
    return str(value)


def encode_params(params: Any) -> Dict[str, str]:
    """Encode a parameter object into a flat ``{key: value}`` dictionary.

    Args:
        params: None, a mapping, a dataclass declared with ``param`` fields, or
                an object with a ``to_params()`` method returning a mapping

    Returns:
        Dictionary of string keys to string values. None values are dropped.

    Raises:
        TypeError: If params is of an unsupported type
    """
    if params is None:
        return {}

    if hasattr(params, "to_params"):
        return encode_params(params.to_params())

    if isinstance(params, Mapping):
        return {str(key): encode_value(value) for key, value in params.items() if value is not None}

    if dataclasses.is_dataclass(params) and not isinstance(params, type):
        values = {}
        for field in dataclasses.fields(params):
            value = getattr(params, field.name)
            if value is None:
                continue
            if field.metadata.get(_OMITEMPTY) and not value:
                continue
            values[field.metadata.get(_NAME, field.name)] = encode_value(value)
        return values

    raise TypeError(f"cannot encode request parameters from {type(params).__name__}")


def encode_indexed(params: Any, index: int) -> Dict[str, str]:
    """Encode params with every key suffixed by ``[index]``.

    Used for batch requests such as scrobbling several tracks at once.

    Example:
        >>> encode_indexed({"artist": "Cher"}, 2)
        {'artist[2]': 'Cher'}
    """
    return {f"{key}[{index}]": value for key, value in encode_params(params).items()}


def extend_params(params: Any, **extra: Any) -> Dict[str, str]:
    """Encode ``params`` and add fixed parameters on top.

    Routes use this for values the caller never chooses, such as the
    ``taggingtype`` of user.getPersonalTags.

    Example:
        >>> extend_params({"user": "rj"}, extended=True)
        {'user': 'rj', 'extended': '1'}
    """
    values = encode_params(params)
    values.update(encode_params(extra))
    return values
