"""Client entry points bundling the API core with its route groups."""

import logging
from typing import Optional

from .api import API, HTTPClient
from .models import AuthSession, LastFMConfig
from .routes import (
    Album,
    Artist,
    Auth,
    Chart,
    Geo,
    Library,
    SessionAlbum,
    SessionArtist,
    SessionTrack,
    SessionUser,
    Tag,
    Track,
    User,
)
from .session import Session

logger = logging.getLogger(__name__)


class Client(API):
    """Last.fm client for calls that need at most the API key and secret.

    Example:
        >>> with Client(LastFMConfig(api_key="xxx")) as client:
        ...     info = client.user.info("rj")
        ...     print(info.playcount)
    """

    def __init__(self, config: LastFMConfig, http_client: Optional[HTTPClient] = None):
        super().__init__(config, http_client)
        self.album = Album(self)
        self.artist = Artist(self)
        self.auth = Auth(self)
        self.chart = Chart(self)
        self.geo = Geo(self)
        self.library = Library(self)
        self.tag = Tag(self)
        self.track = Track(self)
        self.user = User(self)


class SessionClient(Session):
    """Last.fm client acting on behalf of an authenticated user.

    Routes expose both the public operations and the session-only ones
    (tagging, loving, scrobbling). Log in with ``login`` or ``token_login``,
    or pass a stored session key.

    Example:
        >>> client = SessionClient(LastFMConfig(api_key="xxx", secret="yyy"))
        >>> client.login("username", "password")
        >>> client.track.love("Cher", "Believe")
    """

    def __init__(
        self,
        config: LastFMConfig,
        http_client: Optional[HTTPClient] = None,
        session_key: str = "",
    ):
        super().__init__(API(config, http_client), session_key)
        self.album = SessionAlbum(self)
        self.artist = SessionArtist(self)
        self.auth = Auth(self.api)
        self.chart = Chart(self.api)
        self.geo = Geo(self.api)
        self.library = Library(self.api)
        self.tag = Tag(self.api)
        self.track = SessionTrack(self)
        self.user = SessionUser(self)

    def login(self, username: str, password: str) -> AuthSession:
        """Authenticate with username and password and keep the session key.

        Raises:
            LastFMAuthenticationError: If the credentials are rejected
        """
        session = self.auth.mobile_session(username, password)
        self._use(session)
        return session

    def token_login(self, token: str) -> AuthSession:
        """Authenticate with a token the user authorized and keep the session key.

        Raises:
            LastFMAuthenticationError: If the token is unauthorized or expired
        """
        session = self.auth.session(token)
        self._use(session)
        return session

    def _use(self, session: AuthSession) -> None:
        self.set_session_key(session.key)
        logger.info(f"Logged in to Last.fm as {session.name}")
