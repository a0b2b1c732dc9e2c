"""Last.fm API request signing and authentication URLs.

This module implements the request signature described in the Last.fm
authentication documentation, and builds the URLs users are sent to when
authorizing an application.

Signature Algorithm:
    1. Sort all parameter keys by code point
    2. Skip ``format`` and ``callback`` (never part of the signature)
    3. Concatenate ``key + value`` for every remaining key
    4. Append the shared secret
    5. Return the lowercase hex MD5 digest of the UTF-8 bytes

Example:
    >>> from gobblefm.auth import signature
    >>> signature({}, "")
    'd41d8cd98f00b204e9800998ecf8427e'

Security Notes:
    - The secret itself is never transmitted, only the digest
    - MD5 is mandated by the Last.fm API, not chosen for its strength
    - Session keys obtained after authorization do not expire
"""

import hashlib
import hmac
from typing import Mapping, Optional
from urllib.parse import urlencode

from .models import AUTH_URL

SIGNATURE_EXCLUDED_PARAMS = frozenset({"format", "callback"})


def signature(params: Mapping[str, str], secret: str) -> str:
    """Compute the ``api_sig`` value for a set of request parameters.

    Args:
        params: Request parameters, including ``api_key`` and ``method``
        secret: Shared secret of the API account

    Returns:
        MD5 digest as 32 lowercase hexadecimal characters

    Notes:
        - Empty params and empty secret yield the MD5 of the empty string,
          d41d8cd98f00b204e9800998ecf8427e
        - Adding ``format`` or ``callback`` never changes the result
    """
    payload = "".join(
        f"{key}{params[key]}" for key in sorted(params) if key not in SIGNATURE_EXCLUDED_PARAMS
    )
    payload += secret
    return hashlib.md5(payload.encode("utf-8")).hexdigest()


def verify_signature(params: Mapping[str, str], secret: str, api_sig: str) -> bool:
    """Check that ``api_sig`` matches the signature of ``params``.

    This is primarily used for testing and validation. In production the
    server verifies signatures, not the client. Any ``api_sig`` key present
    in params is ignored.
    """
    unsigned = {key: value for key, value in params.items() if key != "api_sig"}
    return hmac.compare_digest(signature(unsigned, secret), api_sig)


def auth_url(api_key: str, callback: Optional[str] = None, token: Optional[str] = None) -> str:
    """Build the URL a user visits to authorize an application.

    Args:
        api_key: Last.fm API key
        callback: URL Last.fm redirects to with the authorized ``token``
                  (web authentication). Defaults to the account's callback.
        token: Token from auth.getToken to authorize (desktop authentication)

    Returns:
        Authorization URL with a sorted, URL-encoded query string

    Example:
        >>> auth_url("xxx", token="abc")
        'https://www.last.fm/api/auth?api_key=xxx&token=abc'
    """
    params = {"api_key": api_key}
    if callback:
        params["cb"] = callback
    if token:
        params["token"] = token

    return f"{AUTH_URL}?{urlencode(sorted(params.items()))}"
