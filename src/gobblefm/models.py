"""Configuration and shared data models for the Last.fm API client."""

import os
import warnings
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict

from .transform import xml_field

BASE_ENDPOINT = "https://ws.audioscrobbler.com"
API_VERSION = "2.0"
ENDPOINT = f"{BASE_ENDPOINT}/{API_VERSION}/"

AUTH_URL = "https://www.last.fm/api/auth"
OPENSEARCH_NS = "{http://a9.com/-/spec/opensearch/1.1/}"

DEFAULT_USER_AGENT = "LastFM (https://github.com/twoscott/gobble-fm)"
DEFAULT_RETRIES = 5
DEFAULT_TIMEOUT = 30.0


class RequestLevel(IntEnum):
    """Credentials a request needs. Each level implies the ones below it."""

    NONE = 0
    API_KEY = 1
    SECRET = 2
    SESSION = 3


@dataclass(frozen=True)
class LastFMConfig:
    """Configuration for connecting to the Last.fm API.

    Attributes:
        api_key: Last.fm API key (may be empty only for unauthenticated use)
        secret: Shared secret used to sign requests (optional)
        user_agent: User-Agent header sent with every request
        retries: Retries after the first attempt for transient failures
        timeout: HTTP timeout in seconds
        endpoint: API endpoint URL, including version and trailing slash
    """

    api_key: str = ""
    secret: str = ""
    user_agent: str = DEFAULT_USER_AGENT
    retries: int = DEFAULT_RETRIES
    timeout: float = DEFAULT_TIMEOUT
    endpoint: str = ENDPOINT

    def __post_init__(self):
        """Validate configuration on initialization."""
        if self.retries < 0:
            raise ValueError("retries must be zero or greater")
        if self.timeout <= 0:
            raise ValueError("timeout must be greater than zero")
        if not self.endpoint.startswith(("http://", "https://")):
            raise ValueError("endpoint must be a valid HTTP/HTTPS URL")
        if not self.endpoint.endswith("/"):
            raise ValueError("endpoint must end with '/'")

        if not self.endpoint.startswith("https://"):
            warnings.warn(
                "Using HTTP instead of HTTPS for Last.fm requests. "
                "API keys and session keys will be transmitted insecurely.",
                UserWarning,
                stacklevel=3,
            )

    @classmethod
    def from_env(cls, prefix: str = "LAST_FM_") -> "LastFMConfig":
        """Build a configuration from environment variables.

        Reads ``{prefix}API_KEY``, ``{prefix}API_SECRET``,
        ``{prefix}USER_AGENT``, ``{prefix}RETRIES`` and ``{prefix}TIMEOUT``.
        Unset variables fall back to the dataclass defaults.

        Raises:
            ValueError: If RETRIES or TIMEOUT are not numbers
        """
        return cls(
            api_key=os.getenv(f"{prefix}API_KEY", ""),
            secret=os.getenv(f"{prefix}API_SECRET", ""),
            user_agent=os.getenv(f"{prefix}USER_AGENT", DEFAULT_USER_AGENT),
            retries=int(os.getenv(f"{prefix}RETRIES", str(DEFAULT_RETRIES))),
            timeout=float(os.getenv(f"{prefix}TIMEOUT", str(DEFAULT_TIMEOUT))),
        )


class Period(str, Enum):
    """Time range for user top charts."""

    OVERALL = "overall"
    WEEK = "7day"
    MONTH = "1month"
    THREE_MONTHS = "3month"
    SIX_MONTHS = "6month"
    YEAR = "12month"


class TagType(str, Enum):
    """Kind of item a personal tag was applied to."""

    ARTIST = "artist"
    ALBUM = "album"
    TRACK = "track"


@dataclass
class ArtistRef:
    """Artist as embedded in album, track and chart results."""

    name: str = xml_field("name")
    url: str = xml_field("url")
    mbid: str = xml_field("mbid")


@dataclass
class TagRef:
    """Tag as listed in tag, top tag and similar tag results."""

    name: str = xml_field("name")
    url: str = xml_field("url")
    count: int = xml_field("count")
    reach: int = xml_field("reach")


@dataclass
class Page:
    """Pagination attributes carried on list elements."""

    page: int = xml_field("page", attr=True)
    per_page: int = xml_field("perPage", attr=True)
    total_pages: int = xml_field("totalPages", attr=True)
    total: int = xml_field("total", attr=True)


@dataclass
class AuthSession:
    """Session returned by auth.getSession and auth.getMobileSession.

    Session keys do not expire; store ``key`` and reuse it.
    """

    name: str = xml_field("name")
    key: str = xml_field("key")
    subscriber: bool = xml_field("subscriber")


@dataclass
class SearchQuery:
    """OpenSearch fields shared by every search result."""

    total_results: int = xml_field(OPENSEARCH_NS + "totalResults")
    start_index: int = xml_field(OPENSEARCH_NS + "startIndex")
    items_per_page: int = xml_field(OPENSEARCH_NS + "itemsPerPage")


@dataclass
class Streamable:
    """Streamable flags of a track (preview as text, full track as attribute)."""

    preview: bool = xml_field(chardata=True)
    full_track: bool = xml_field("fulltrack", attr=True)


@dataclass
class ArtistItem:
    """Artist entry in charts, searches and similarity lists."""

    name: str = xml_field("name")
    url: str = xml_field("url")
    mbid: str = xml_field("mbid")
    rank: int = xml_field("rank", attr=True)
    playcount: int = xml_field("playcount")
    listeners: int = xml_field("listeners")
    match: float = xml_field("match")
    streamable: bool = xml_field("streamable")
    image: Dict[str, str] = xml_field("image")


@dataclass
class AlbumItem:
    """Album entry in charts, searches and tag lists."""

    title: str = xml_field("name")
    url: str = xml_field("url")
    mbid: str = xml_field("mbid")
    rank: int = xml_field("rank", attr=True)
    playcount: int = xml_field("playcount")
    artist: ArtistRef = xml_field("artist")
    image: Dict[str, str] = xml_field("image")


@dataclass
class TrackItem:
    """Track entry in charts, searches and similarity lists.

    ``duration`` is in seconds as sent by Last.fm.
    """

    title: str = xml_field("name")
    url: str = xml_field("url")
    mbid: str = xml_field("mbid")
    rank: int = xml_field("rank", attr=True)
    playcount: int = xml_field("playcount")
    listeners: int = xml_field("listeners")
    match: float = xml_field("match")
    duration: int = xml_field("duration")
    streamable: Streamable = xml_field("streamable")
    artist: ArtistRef = xml_field("artist")
    image: Dict[str, str] = xml_field("image")


@dataclass
class Wiki:
    """Wiki/bio text attached to albums, artists, tracks and tags.

    ``published`` is kept as the raw string Last.fm sends.
    """

    summary: str = xml_field("summary")
    content: str = xml_field("content")
    published: str = xml_field("published")


@dataclass
class ChartRange:
    """Weekly chart boundaries as unix timestamps."""

    start: int = xml_field("from", attr=True)
    end: int = xml_field("to", attr=True)


@dataclass
class Date:
    """A Last.fm date element such as ``<date uts="1700000000">...</date>``.

    Registration dates carry ``unixtime`` instead of ``uts``.
    """

    text: str = xml_field(chardata=True)
    uts: int = xml_field("uts", attr=True)
    unixtime: int = xml_field("unixtime", attr=True)

    @property
    def timestamp(self) -> int:
        return self.uts or self.unixtime
