"""User routes: profiles, friends, listening history and top charts."""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from .. import methods
from ..api import API
from ..models import (
    AlbumItem,
    ArtistItem,
    ArtistRef,
    ChartRange,
    Date,
    Page,
    Period,
    Streamable,
    TagRef,
    TagType,
    TrackItem,
)
from ..params import extend_params, param
from ..session import Session
from ..transform import xml_field


@dataclass
class UserPageParams:
    """Parameters shared by user.getFriends and user.getLovedTracks."""

    user: str = param("user")
    limit: int = param("limit", omitempty=True, default=0)
    page: int = param("page", omitempty=True, default=0)


@dataclass
class RecentTracksParams:
    user: str = param("user")
    limit: int = param("limit", omitempty=True, default=0)
    start: Optional[datetime] = param("from", default=None)
    end: Optional[datetime] = param("to", default=None)
    page: int = param("page", omitempty=True, default=0)


@dataclass
class UserTopParams:
    """Parameters shared by user.getTopAlbums, getTopArtists and getTopTracks."""

    user: str = param("user")
    period: Optional[Period] = param("period", default=None)
    limit: int = param("limit", omitempty=True, default=0)
    page: int = param("page", omitempty=True, default=0)


@dataclass
class UserTopTagsParams:
    user: str = param("user")
    limit: int = param("limit", omitempty=True, default=0)


@dataclass
class UserTagsParams:
    """Parameters of user.getPersonalTags, without the tagging type."""

    user: str = param("user")
    tag: str = param("tag")
    limit: int = param("limit", omitempty=True, default=0)
    page: int = param("page", omitempty=True, default=0)


@dataclass
class WeeklyChartParams:
    """Parameters shared by the weekly album, artist and track charts.

    Without ``start`` and ``end`` Last.fm returns the most recent week.
    """

    user: str = param("user")
    limit: int = param("limit", omitempty=True, default=0)
    start: Optional[datetime] = param("from", default=None)
    end: Optional[datetime] = param("to", default=None)


@dataclass
class UserInfo:
    """Result of user.getInfo."""

    name: str = xml_field("name")
    real_name: str = xml_field("realname")
    url: str = xml_field("url")
    country: str = xml_field("country")
    age: int = xml_field("age")
    gender: str = xml_field("gender")
    subscriber: bool = xml_field("subscriber")
    playcount: int = xml_field("playcount")
    playlists: int = xml_field("playlists")
    bootstrap: int = xml_field("bootstrap")
    avatar: Dict[str, str] = xml_field("image")
    registered: Date = xml_field("registered")
    type: str = xml_field("type")
    artist_count: int = xml_field("artist_count")
    album_count: int = xml_field("album_count")
    track_count: int = xml_field("track_count")


@dataclass
class Friends:
    user: str = xml_field("user", attr=True)
    page: Page = xml_field(".")
    users: List[UserInfo] = xml_field("user")


@dataclass
class LovedTrack:
    title: str = xml_field("name")
    url: str = xml_field("url")
    mbid: str = xml_field("mbid")
    artist: ArtistRef = xml_field("artist")
    image: Dict[str, str] = xml_field("image")
    streamable: Streamable = xml_field("streamable")
    loved_at: Date = xml_field("date")


@dataclass
class LovedTracks:
    user: str = xml_field("user", attr=True)
    page: Page = xml_field(".")
    tracks: List[LovedTrack] = xml_field("track")


@dataclass
class UserAlbumTags:
    user: str = xml_field("user", attr=True)
    tag: str = xml_field("tag", attr=True)
    page: Page = xml_field(".")
    albums: List[AlbumItem] = xml_field("albums>album")


@dataclass
class UserArtistTags:
    user: str = xml_field("user", attr=True)
    tag: str = xml_field("tag", attr=True)
    page: Page = xml_field(".")
    artists: List[ArtistItem] = xml_field("artists>artist")


@dataclass
class TaggedTrack:
    """Track entry of user.getPersonalTags. Last.fm sends a placeholder in ``duration``."""

    title: str = xml_field("name")
    duration: str = xml_field("duration")
    url: str = xml_field("url")
    mbid: str = xml_field("mbid")
    streamable: Streamable = xml_field("streamable")
    artist: ArtistRef = xml_field("artist")
    image: Dict[str, str] = xml_field("image")


@dataclass
class UserTrackTags:
    user: str = xml_field("user", attr=True)
    tag: str = xml_field("tag", attr=True)
    page: Page = xml_field(".")
    tracks: List[TaggedTrack] = xml_field("tracks>track")


@dataclass
class ArtistName:
    """Artist given as element text with an ``mbid`` attribute."""

    name: str = xml_field(chardata=True)
    mbid: str = xml_field("mbid", attr=True)


@dataclass
class RecentTrackAlbum:
    title: str = xml_field(chardata=True)
    mbid: str = xml_field("mbid", attr=True)


@dataclass
class RecentTrack:
    """A scrobbled track. The currently playing track has no ``scrobbled_at``."""

    title: str = xml_field("name")
    url: str = xml_field("url")
    mbid: str = xml_field("mbid")
    now_playing_attr: str = xml_field("nowplaying", attr=True)
    streamable: bool = xml_field("streamable")
    artist: ArtistName = xml_field("artist")
    album: RecentTrackAlbum = xml_field("album")
    image: Dict[str, str] = xml_field("image")
    scrobbled_at: Date = xml_field("date")

    @property
    def now_playing(self) -> bool:
        return self.now_playing_attr == "true"


@dataclass
class RecentTracks:
    user: str = xml_field("user", attr=True)
    page: Page = xml_field(".")
    tracks: List[RecentTrack] = xml_field("track")


@dataclass
class ExtendedArtist:
    name: str = xml_field("name")
    url: str = xml_field("url")
    mbid: str = xml_field("mbid")
    image: Dict[str, str] = xml_field("image")


@dataclass
class RecentTrackExtended:
    """Recent track as returned with ``extended=1``: full artist and loved flag."""

    title: str = xml_field("name")
    url: str = xml_field("url")
    mbid: str = xml_field("mbid")
    now_playing_attr: str = xml_field("nowplaying", attr=True)
    loved: bool = xml_field("loved")
    streamable: bool = xml_field("streamable")
    artist: ExtendedArtist = xml_field("artist")
    album: RecentTrackAlbum = xml_field("album")
    image: Dict[str, str] = xml_field("image")
    scrobbled_at: Date = xml_field("date")

    @property
    def now_playing(self) -> bool:
        return self.now_playing_attr == "true"


@dataclass
class RecentTracksExtended:
    user: str = xml_field("user", attr=True)
    page: Page = xml_field(".")
    tracks: List[RecentTrackExtended] = xml_field("track")


@dataclass
class UserTopAlbums:
    user: str = xml_field("user", attr=True)
    page: Page = xml_field(".")
    albums: List[AlbumItem] = xml_field("album")


@dataclass
class UserTopArtists:
    user: str = xml_field("user", attr=True)
    page: Page = xml_field(".")
    artists: List[ArtistItem] = xml_field("artist")


@dataclass
class UserTopTags:
    user: str = xml_field("user", attr=True)
    tags: List[TagRef] = xml_field("tag")


@dataclass
class UserTopTracks:
    user: str = xml_field("user", attr=True)
    page: Page = xml_field(".")
    tracks: List[TrackItem] = xml_field("track")


@dataclass
class WeeklyChartList:
    user: str = xml_field("user", attr=True)
    charts: List[ChartRange] = xml_field("chart")


@dataclass
class WeeklyChartAlbum:
    title: str = xml_field("name")
    rank: int = xml_field("rank", attr=True)
    playcount: int = xml_field("playcount")
    url: str = xml_field("url")
    mbid: str = xml_field("mbid")
    artist: ArtistName = xml_field("artist")


@dataclass
class WeeklyChartTrack:
    title: str = xml_field("name")
    rank: int = xml_field("rank", attr=True)
    playcount: int = xml_field("playcount")
    url: str = xml_field("url")
    mbid: str = xml_field("mbid")
    artist: ArtistName = xml_field("artist")
    image: Dict[str, str] = xml_field("image")


@dataclass
class WeeklyAlbumChart:
    user: str = xml_field("user", attr=True)
    week: ChartRange = xml_field(".")
    albums: List[WeeklyChartAlbum] = xml_field("album")


@dataclass
class WeeklyArtistChart:
    user: str = xml_field("user", attr=True)
    week: ChartRange = xml_field(".")
    artists: List[ArtistItem] = xml_field("artist")


@dataclass
class WeeklyTrackChart:
    user: str = xml_field("user", attr=True)
    week: ChartRange = xml_field(".")
    tracks: List[WeeklyChartTrack] = xml_field("track")


class User:
    """Public user routes.

    Example:
        >>> recent = client.user.recent_tracks(RecentTracksParams(user="rj", limit=10))
        >>> [track.title for track in recent.tracks]
    """

    def __init__(self, api: API):
        self.api = api

    def friends(self, params: UserPageParams) -> Friends:
        return self.api.get(methods.USER_GET_FRIENDS, params, Friends)

    def info(self, user: str) -> UserInfo:
        return self.api.get(methods.USER_GET_INFO, {"user": user}, UserInfo)

    def loved_tracks(self, params: UserPageParams) -> LovedTracks:
        return self.api.get(methods.USER_GET_LOVED_TRACKS, params, LovedTracks)

    def tagged_albums(self, params: UserTagsParams) -> UserAlbumTags:
        """Albums the user tagged with ``params.tag``."""
        values = extend_params(params, taggingtype=TagType.ALBUM)
        return self.api.get(methods.USER_GET_PERSONAL_TAGS, values, UserAlbumTags)

    def tagged_artists(self, params: UserTagsParams) -> UserArtistTags:
        values = extend_params(params, taggingtype=TagType.ARTIST)
        return self.api.get(methods.USER_GET_PERSONAL_TAGS, values, UserArtistTags)

    def tagged_tracks(self, params: UserTagsParams) -> UserTrackTags:
        values = extend_params(params, taggingtype=TagType.TRACK)
        return self.api.get(methods.USER_GET_PERSONAL_TAGS, values, UserTrackTags)

    def recent_tracks(self, params: RecentTracksParams) -> RecentTracks:
        """Recently scrobbled tracks, newest first, led by any now playing track."""
        return self.api.get(methods.USER_GET_RECENT_TRACKS, params, RecentTracks)

    def recent_tracks_extended(self, params: RecentTracksParams) -> RecentTracksExtended:
        """Recent tracks with full artist details and whether each track is loved."""
        values = extend_params(params, extended=True)
        return self.api.get(methods.USER_GET_RECENT_TRACKS, values, RecentTracksExtended)

    def top_albums(self, params: UserTopParams) -> UserTopAlbums:
        return self.api.get(methods.USER_GET_TOP_ALBUMS, params, UserTopAlbums)

    def top_artists(self, params: UserTopParams) -> UserTopArtists:
        return self.api.get(methods.USER_GET_TOP_ARTISTS, params, UserTopArtists)

    def top_tags(self, params: UserTopTagsParams) -> UserTopTags:
        return self.api.get(methods.USER_GET_TOP_TAGS, params, UserTopTags)

    def top_tracks(self, params: UserTopParams) -> UserTopTracks:
        return self.api.get(methods.USER_GET_TOP_TRACKS, params, UserTopTracks)

    def weekly_album_chart(self, params: WeeklyChartParams) -> WeeklyAlbumChart:
        return self.api.get(methods.USER_GET_WEEKLY_ALBUM_CHART, params, WeeklyAlbumChart)

    def weekly_artist_chart(self, params: WeeklyChartParams) -> WeeklyArtistChart:
        return self.api.get(methods.USER_GET_WEEKLY_ARTIST_CHART, params, WeeklyArtistChart)

    def weekly_chart_list(self, user: str) -> WeeklyChartList:
        """Date ranges usable with the weekly chart routes."""
        return self.api.get(methods.USER_GET_WEEKLY_CHART_LIST, {"user": user}, WeeklyChartList)

    def weekly_track_chart(self, params: WeeklyChartParams) -> WeeklyTrackChart:
        return self.api.get(methods.USER_GET_WEEKLY_TRACK_CHART, params, WeeklyTrackChart)


class SessionUser(User):
    def __init__(self, session: Session):
        super().__init__(session.api)
        self.session = session

    def self_info(self) -> UserInfo:
        """Profile of the session user."""
        return self.session.get(methods.USER_GET_INFO, None, UserInfo)
