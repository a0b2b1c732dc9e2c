"""Album routes: album.getInfo, album.getTags, album.search and friends."""

from dataclasses import dataclass
from typing import Dict, List, Optional

from .. import methods
from ..api import API
from ..models import ArtistRef, SearchQuery, Streamable, TagRef, Wiki
from ..params import param
from ..session import Session
from ..transform import xml_field


@dataclass
class AlbumInfoParams:
    artist: str = param("artist")
    album: str = param("album")
    autocorrect: Optional[bool] = param("autocorrect", default=None)
    user: str = param("username", omitempty=True, default="")
    language: str = param("lang", omitempty=True, default="")


@dataclass
class AlbumInfoMBIDParams:
    mbid: str = param("mbid")
    autocorrect: Optional[bool] = param("autocorrect", default=None)
    user: str = param("username", omitempty=True, default="")
    language: str = param("lang", omitempty=True, default="")


@dataclass
class AlbumTagsParams:
    artist: str = param("artist")
    album: str = param("album")
    user: str = param("username")
    autocorrect: Optional[bool] = param("autocorrect", default=None)


@dataclass
class AlbumTagsMBIDParams:
    mbid: str = param("mbid")
    user: str = param("username")
    autocorrect: Optional[bool] = param("autocorrect", default=None)


@dataclass
class AlbumSelfTagsParams:
    artist: str = param("artist")
    album: str = param("album")
    autocorrect: Optional[bool] = param("autocorrect", default=None)


@dataclass
class AlbumSelfTagsMBIDParams:
    mbid: str = param("mbid")
    autocorrect: Optional[bool] = param("autocorrect", default=None)


@dataclass
class AlbumTopTagsParams:
    artist: str = param("artist")
    album: str = param("album")
    autocorrect: Optional[bool] = param("autocorrect", default=None)


@dataclass
class AlbumTopTagsMBIDParams:
    mbid: str = param("mbid")
    autocorrect: Optional[bool] = param("autocorrect", default=None)


@dataclass
class AlbumSearchParams:
    album: str = param("album")
    limit: int = param("limit", omitempty=True, default=0)
    page: int = param("page", omitempty=True, default=0)


@dataclass
class AlbumAddTagsParams:
    artist: str = param("artist")
    album: str = param("album")
    tags: List[str] = param("tags")


@dataclass
class AlbumRemoveTagParams:
    artist: str = param("artist")
    album: str = param("album")
    tag: str = param("tag")


@dataclass
class AlbumTrack:
    title: str = xml_field("name")
    number: int = xml_field("rank", attr=True)
    url: str = xml_field("url")
    duration: int = xml_field("duration")
    streamable: Streamable = xml_field("streamable")
    artist: ArtistRef = xml_field("artist")


@dataclass
class AlbumInfo:
    """Result of album.getInfo.

    ``user_playcount`` is None unless the request named a user.
    """

    title: str = xml_field("name")
    artist: str = xml_field("artist")
    url: str = xml_field("url")
    mbid: str = xml_field("mbid")
    listeners: int = xml_field("listeners")
    playcount: int = xml_field("playcount")
    user_playcount: Optional[int] = xml_field("userplaycount")
    image: Dict[str, str] = xml_field("image")
    tracks: List[AlbumTrack] = xml_field("tracks>track")
    tags: List[TagRef] = xml_field("tags>tag")
    wiki: Wiki = xml_field("wiki")


@dataclass
class AlbumTags:
    artist: str = xml_field("artist", attr=True)
    album: str = xml_field("album", attr=True)
    tags: List[TagRef] = xml_field("tag")


@dataclass
class AlbumSearchMatch:
    title: str = xml_field("name")
    artist: str = xml_field("artist")
    url: str = xml_field("url")
    mbid: str = xml_field("mbid")
    image: Dict[str, str] = xml_field("image")


@dataclass
class AlbumSearchResult:
    query: str = xml_field("for", attr=True)
    search: SearchQuery = xml_field(".")
    albums: List[AlbumSearchMatch] = xml_field("albummatches>album")


class Album:
    """Public album routes.

    Example:
        >>> client.album.info(AlbumInfoParams(artist="Cher", album="Believe"))
    """

    def __init__(self, api: API):
        self.api = api

    def info(self, params: AlbumInfoParams) -> AlbumInfo:
        return self.api.get(methods.ALBUM_GET_INFO, params, AlbumInfo)

    def info_by_mbid(self, params: AlbumInfoMBIDParams) -> AlbumInfo:
        return self.api.get(methods.ALBUM_GET_INFO, params, AlbumInfo)

    def user_tags(self, params: AlbumTagsParams) -> AlbumTags:
        """Tags a user applied to an album."""
        return self.api.get(methods.ALBUM_GET_TAGS, params, AlbumTags)

    def user_tags_by_mbid(self, params: AlbumTagsMBIDParams) -> AlbumTags:
        return self.api.get(methods.ALBUM_GET_TAGS, params, AlbumTags)

    def top_tags(self, params: AlbumTopTagsParams) -> AlbumTags:
        return self.api.get(methods.ALBUM_GET_TOP_TAGS, params, AlbumTags)

    def top_tags_by_mbid(self, params: AlbumTopTagsMBIDParams) -> AlbumTags:
        return self.api.get(methods.ALBUM_GET_TOP_TAGS, params, AlbumTags)

    def search(self, params: AlbumSearchParams) -> AlbumSearchResult:
        return self.api.get(methods.ALBUM_SEARCH, params, AlbumSearchResult)


class SessionAlbum(Album):
    """Album routes with operations on behalf of the session user."""

    def __init__(self, session: Session):
        super().__init__(session.api)
        self.session = session

    def add_tags(self, artist: str, album: str, tags: List[str]) -> None:
        """Tag an album. Last.fm accepts at most 10 tags per call."""
        params = AlbumAddTagsParams(artist=artist, album=album, tags=tags)
        self.session.post(methods.ALBUM_ADD_TAGS, params)

    def self_tags(self, params: AlbumSelfTagsParams) -> AlbumTags:
        """Tags the session user applied to an album."""
        return self.session.get(methods.ALBUM_GET_TAGS, params, AlbumTags)

    def self_tags_by_mbid(self, params: AlbumSelfTagsMBIDParams) -> AlbumTags:
        return self.session.get(methods.ALBUM_GET_TAGS, params, AlbumTags)

    def remove_tag(self, artist: str, album: str, tag: str) -> None:
        params = AlbumRemoveTagParams(artist=artist, album=album, tag=tag)
        self.session.post(methods.ALBUM_REMOVE_TAG, params)
