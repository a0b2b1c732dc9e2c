"""Artist routes."""

from dataclasses import dataclass
from typing import Dict, List, Optional

from .. import methods
from ..api import API
from ..models import AlbumItem, ArtistItem, ArtistRef, Page, SearchQuery, TagRef, TrackItem, Wiki
from ..params import param
from ..session import Session
from ..transform import xml_field


@dataclass
class ArtistInfoParams:
    artist: str = param("artist")
    autocorrect: Optional[bool] = param("autocorrect", default=None)
    user: str = param("username", omitempty=True, default="")
    language: str = param("lang", omitempty=True, default="")


@dataclass
class ArtistInfoMBIDParams:
    mbid: str = param("mbid")
    autocorrect: Optional[bool] = param("autocorrect", default=None)
    user: str = param("username", omitempty=True, default="")
    language: str = param("lang", omitempty=True, default="")


@dataclass
class ArtistSimilarParams:
    artist: str = param("artist")
    limit: int = param("limit", omitempty=True, default=0)
    autocorrect: Optional[bool] = param("autocorrect", default=None)


@dataclass
class ArtistSimilarMBIDParams:
    mbid: str = param("mbid")
    limit: int = param("limit", omitempty=True, default=0)
    autocorrect: Optional[bool] = param("autocorrect", default=None)


@dataclass
class ArtistTagsParams:
    artist: str = param("artist")
    user: str = param("username")
    autocorrect: Optional[bool] = param("autocorrect", default=None)


@dataclass
class ArtistTagsMBIDParams:
    mbid: str = param("mbid")
    user: str = param("username")
    autocorrect: Optional[bool] = param("autocorrect", default=None)


@dataclass
class ArtistSelfTagsParams:
    artist: str = param("artist")
    autocorrect: Optional[bool] = param("autocorrect", default=None)


@dataclass
class ArtistSelfTagsMBIDParams:
    mbid: str = param("mbid")
    autocorrect: Optional[bool] = param("autocorrect", default=None)


@dataclass
class ArtistTopParams:
    """Parameters shared by artist.getTopAlbums, getTopTags and getTopTracks."""

    artist: str = param("artist")
    autocorrect: Optional[bool] = param("autocorrect", default=None)
    limit: int = param("limit", omitempty=True, default=0)
    page: int = param("page", omitempty=True, default=0)


@dataclass
class ArtistTopMBIDParams:
    """ArtistTopParams naming the artist by MusicBrainz ID."""

    mbid: str = param("mbid")
    autocorrect: Optional[bool] = param("autocorrect", default=None)
    limit: int = param("limit", omitempty=True, default=0)
    page: int = param("page", omitempty=True, default=0)


@dataclass
class ArtistSearchParams:
    artist: str = param("artist")
    limit: int = param("limit", omitempty=True, default=0)
    page: int = param("page", omitempty=True, default=0)


@dataclass
class ArtistAddTagsParams:
    artist: str = param("artist")
    tags: List[str] = param("tags")


@dataclass
class ArtistRemoveTagParams:
    artist: str = param("artist")
    tag: str = param("tag")


@dataclass
class SimilarArtistRef:
    name: str = xml_field("name")
    url: str = xml_field("url")
    image: Dict[str, str] = xml_field("image")


@dataclass
class ArtistInfo:
    """Result of artist.getInfo.

    ``user_playcount`` is None unless the request named a user.
    """

    name: str = xml_field("name")
    url: str = xml_field("url")
    mbid: str = xml_field("mbid")
    image: Dict[str, str] = xml_field("image")
    listeners: int = xml_field("stats>listeners")
    playcount: int = xml_field("stats>playcount")
    user_playcount: Optional[int] = xml_field("stats>userplaycount")
    streamable: bool = xml_field("streamable")
    on_tour: bool = xml_field("ontour")
    similar: List[SimilarArtistRef] = xml_field("similar>artist")
    tags: List[TagRef] = xml_field("tags>tag")
    bio: Wiki = xml_field("bio")


@dataclass
class ArtistCorrectionEntry:
    index: int = xml_field("index", attr=True)
    artist: ArtistRef = xml_field("artist")


@dataclass
class ArtistCorrection:
    corrections: List[ArtistCorrectionEntry] = xml_field("correction")


@dataclass
class SimilarArtists:
    artist: str = xml_field("artist", attr=True)
    artists: List[ArtistItem] = xml_field("artist")


@dataclass
class ArtistTags:
    artist: str = xml_field("artist", attr=True)
    tags: List[TagRef] = xml_field("tag")


@dataclass
class ArtistTopAlbums:
    artist: str = xml_field("artist", attr=True)
    page: Page = xml_field(".")
    albums: List[AlbumItem] = xml_field("album")


@dataclass
class ArtistTopTracks:
    artist: str = xml_field("artist", attr=True)
    page: Page = xml_field(".")
    tracks: List[TrackItem] = xml_field("track")


@dataclass
class ArtistSearchResult:
    query: str = xml_field("for", attr=True)
    search: SearchQuery = xml_field(".")
    artists: List[ArtistItem] = xml_field("artistmatches>artist")


class Artist:
    """Public artist routes."""

    def __init__(self, api: API):
        self.api = api

    def correction(self, artist: str) -> ArtistCorrection:
        """Check an artist name against the Last.fm corrections database."""
        return self.api.get(methods.ARTIST_GET_CORRECTION, {"artist": artist}, ArtistCorrection)

    def info(self, params: ArtistInfoParams) -> ArtistInfo:
        return self.api.get(methods.ARTIST_GET_INFO, params, ArtistInfo)

    def info_by_mbid(self, params: ArtistInfoMBIDParams) -> ArtistInfo:
        return self.api.get(methods.ARTIST_GET_INFO, params, ArtistInfo)

    def similar(self, params: ArtistSimilarParams) -> SimilarArtists:
        return self.api.get(methods.ARTIST_GET_SIMILAR, params, SimilarArtists)

    def similar_by_mbid(self, params: ArtistSimilarMBIDParams) -> SimilarArtists:
        return self.api.get(methods.ARTIST_GET_SIMILAR, params, SimilarArtists)

    def user_tags(self, params: ArtistTagsParams) -> ArtistTags:
        return self.api.get(methods.ARTIST_GET_TAGS, params, ArtistTags)

    def user_tags_by_mbid(self, params: ArtistTagsMBIDParams) -> ArtistTags:
        return self.api.get(methods.ARTIST_GET_TAGS, params, ArtistTags)

    def top_albums(self, params: ArtistTopParams) -> ArtistTopAlbums:
        return self.api.get(methods.ARTIST_GET_TOP_ALBUMS, params, ArtistTopAlbums)

    def top_albums_by_mbid(self, params: ArtistTopMBIDParams) -> ArtistTopAlbums:
        return self.api.get(methods.ARTIST_GET_TOP_ALBUMS, params, ArtistTopAlbums)

    def top_tags(self, params: ArtistTopParams) -> ArtistTags:
        return self.api.get(methods.ARTIST_GET_TOP_TAGS, params, ArtistTags)

    def top_tags_by_mbid(self, params: ArtistTopMBIDParams) -> ArtistTags:
        return self.api.get(methods.ARTIST_GET_TOP_TAGS, params, ArtistTags)

    def top_tracks(self, params: ArtistTopParams) -> ArtistTopTracks:
        return self.api.get(methods.ARTIST_GET_TOP_TRACKS, params, ArtistTopTracks)

    def top_tracks_by_mbid(self, params: ArtistTopMBIDParams) -> ArtistTopTracks:
        return self.api.get(methods.ARTIST_GET_TOP_TRACKS, params, ArtistTopTracks)

    def search(self, params: ArtistSearchParams) -> ArtistSearchResult:
        return self.api.get(methods.ARTIST_SEARCH, params, ArtistSearchResult)


class SessionArtist(Artist):
    """Artist routes with operations on behalf of the session user."""

    def __init__(self, session: Session):
        super().__init__(session.api)
        self.session = session

    def add_tags(self, artist: str, tags: List[str]) -> None:
        """Tag an artist. Last.fm accepts at most 10 tags per call."""
        self.session.post(methods.ARTIST_ADD_TAGS, ArtistAddTagsParams(artist=artist, tags=tags))

    def self_tags(self, params: ArtistSelfTagsParams) -> ArtistTags:
        return self.session.get(methods.ARTIST_GET_TAGS, params, ArtistTags)

    def self_tags_by_mbid(self, params: ArtistSelfTagsMBIDParams) -> ArtistTags:
        return self.session.get(methods.ARTIST_GET_TAGS, params, ArtistTags)

    def remove_tag(self, artist: str, tag: str) -> None:
        self.session.post(methods.ARTIST_REMOVE_TAG, ArtistRemoveTagParams(artist=artist, tag=tag))
