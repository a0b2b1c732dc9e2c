"""Authentication routes used to obtain session keys."""

from .. import methods
from ..api import API
from ..models import AuthSession


class Auth:
    """Authentication routes. All of them are signed with the API secret.

    Desktop flow:
        >>> token = client.auth.token()
        >>> webbrowser.open(client.auth_token_url(token))
        >>> session = client.auth.session(token)  # after the user approved
    """

    def __init__(self, api: API):
        self.api = api

    def token(self) -> str:
        """Fetch an unauthorized request token, valid for 60 minutes."""
        return self.api.get_signed(methods.AUTH_GET_TOKEN, None, str)

    def session(self, token: str) -> AuthSession:
        """Exchange an authorized token for a session."""
        return self.api.post_signed(methods.AUTH_GET_SESSION, {"token": token}, AuthSession)

    def mobile_session(self, username: str, password: str) -> AuthSession:
        """Create a session from a username and password.

        Last.fm requires this call to go over HTTPS.
        """
        params = {"username": username, "password": password}
        return self.api.post_signed(methods.AUTH_GET_MOBILE_SESSION, params, AuthSession)
