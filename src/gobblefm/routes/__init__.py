"""Route groups wrapping the Last.fm API methods, one module per API package."""

from .album import Album, SessionAlbum
from .artist import Artist, SessionArtist
from .auth import Auth
from .chart import Chart
from .geo import Geo
from .library import Library
from .tag import Tag
from .track import MAX_SCROBBLE_BATCH, ScrobbleMultiParams, ScrobbleParams, SessionTrack, Track
from .user import SessionUser, User

__all__ = [
    "Album",
    "Artist",
    "Auth",
    "Chart",
    "Geo",
    "Library",
    "Tag",
    "Track",
    "User",
    "SessionAlbum",
    "SessionArtist",
    "SessionTrack",
    "SessionUser",
    "ScrobbleParams",
    "ScrobbleMultiParams",
    "MAX_SCROBBLE_BATCH",
]
