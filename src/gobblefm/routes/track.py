"""Track routes, including scrobbling and now-playing updates."""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Dict, Iterable, List, Optional

from .. import methods
from ..api import API
from ..models import ArtistRef, SearchQuery, Streamable, TagRef, TrackItem, Wiki
from ..params import encode_indexed, param
from ..session import Session
from ..transform import xml_field

logger = logging.getLogger(__name__)

# Most scrobbles Last.fm accepts in one track.scrobble call
MAX_SCROBBLE_BATCH = 50


class ScrobbleIgnoredCode(IntEnum):
    NOT_IGNORED = 0
    ARTIST_IGNORED = 1
    TRACK_IGNORED = 2
    TIMESTAMP_TOO_OLD = 3
    TIMESTAMP_TOO_NEW = 4
    DAILY_SCROBBLE_LIMIT_EXCEEDED = 5

    @property
    def message(self) -> str:
        return _IGNORED_MESSAGES[self]


_IGNORED_MESSAGES = {
    ScrobbleIgnoredCode.NOT_IGNORED: "Not ignored",
    ScrobbleIgnoredCode.ARTIST_IGNORED: "Artist was ignored",
    ScrobbleIgnoredCode.TRACK_IGNORED: "Track was ignored",
    ScrobbleIgnoredCode.TIMESTAMP_TOO_OLD: "Timestamp was too old",
    ScrobbleIgnoredCode.TIMESTAMP_TOO_NEW: "Timestamp was too new",
    ScrobbleIgnoredCode.DAILY_SCROBBLE_LIMIT_EXCEEDED: "Daily scrobbled limit exceeded",
}


@dataclass
class TrackInfoParams:
    artist: str = param("artist")
    track: str = param("track")
    autocorrect: Optional[bool] = param("autocorrect", default=None)
    user: str = param("username", omitempty=True, default="")


@dataclass
class TrackInfoMBIDParams:
    mbid: str = param("mbid")
    autocorrect: Optional[bool] = param("autocorrect", default=None)
    user: str = param("username", omitempty=True, default="")


@dataclass
class TrackUserInfoParams:
    """track.getInfo for a named user, so user playcount and loved are filled in."""

    artist: str = param("artist")
    track: str = param("track")
    user: str = param("username")
    autocorrect: Optional[bool] = param("autocorrect", default=None)


@dataclass
class TrackUserInfoMBIDParams:
    mbid: str = param("mbid")
    user: str = param("username")
    autocorrect: Optional[bool] = param("autocorrect", default=None)


@dataclass
class TrackSimilarParams:
    artist: str = param("artist")
    track: str = param("track")
    autocorrect: Optional[bool] = param("autocorrect", default=None)
    limit: int = param("limit", omitempty=True, default=0)


@dataclass
class TrackSimilarMBIDParams:
    mbid: str = param("mbid")
    autocorrect: Optional[bool] = param("autocorrect", default=None)
    limit: int = param("limit", omitempty=True, default=0)


@dataclass
class TrackTagsParams:
    artist: str = param("artist")
    track: str = param("track")
    user: str = param("username")
    autocorrect: Optional[bool] = param("autocorrect", default=None)


@dataclass
class TrackTagsMBIDParams:
    mbid: str = param("mbid")
    user: str = param("username")
    autocorrect: Optional[bool] = param("autocorrect", default=None)


@dataclass
class TrackSelfTagsParams:
    artist: str = param("artist")
    track: str = param("track")
    autocorrect: Optional[bool] = param("autocorrect", default=None)


@dataclass
class TrackSelfTagsMBIDParams:
    mbid: str = param("mbid")
    autocorrect: Optional[bool] = param("autocorrect", default=None)


@dataclass
class TrackTopTagsParams:
    artist: str = param("artist")
    track: str = param("track")
    autocorrect: Optional[bool] = param("autocorrect", default=None)


@dataclass
class TrackTopTagsMBIDParams:
    mbid: str = param("mbid")
    autocorrect: Optional[bool] = param("autocorrect", default=None)


@dataclass
class TrackSearchParams:
    track: str = param("track")
    artist: str = param("artist", omitempty=True, default="")
    limit: int = param("limit", omitempty=True, default=0)
    page: int = param("page", omitempty=True, default=0)


@dataclass
class TrackAddTagsParams:
    artist: str = param("artist")
    track: str = param("track")
    tags: List[str] = param("tags")


@dataclass
class TrackRemoveTagParams:
    artist: str = param("artist")
    track: str = param("track")
    tag: str = param("tag")


@dataclass
class ScrobbleParams:
    """A single scrobble.

    ``time`` is when the track started playing. ``duration`` is in seconds.
    ``chosen`` tells Last.fm whether the user picked the track themselves.
    """

    artist: str = param("artist")
    track: str = param("track")
    time: datetime = param("timestamp")
    album: str = param("album", omitempty=True, default="")
    album_artist: str = param("albumArtist", omitempty=True, default="")
    track_number: int = param("trackNumber", omitempty=True, default=0)
    duration: int = param("duration", omitempty=True, default=0)
    mbid: str = param("mbid", omitempty=True, default="")
    chosen: Optional[bool] = param("chosenByUser", default=None)
    context: str = param("context", omitempty=True, default="")
    stream_id: str = param("streamId", omitempty=True, default="")


class ScrobbleMultiParams(list):
    """A batch of ScrobbleParams sent as ``key[index]`` parameters."""

    def to_params(self) -> Dict[str, str]:
        values: Dict[str, str] = {}
        for index, scrobble in enumerate(self):
            values.update(encode_indexed(scrobble, index))
        return values


@dataclass
class UpdateNowPlayingParams:
    artist: str = param("artist")
    track: str = param("track")
    album: str = param("album", omitempty=True, default="")
    album_artist: str = param("albumArtist", omitempty=True, default="")
    track_number: int = param("trackNumber", omitempty=True, default=0)
    duration: int = param("duration", omitempty=True, default=0)
    mbid: str = param("mbid", omitempty=True, default="")
    context: str = param("context", omitempty=True, default="")


@dataclass
class TrackAlbum:
    artist: str = xml_field("artist")
    title: str = xml_field("title")
    url: str = xml_field("url")
    mbid: str = xml_field("mbid")
    position: int = xml_field("position", attr=True)
    image: Dict[str, str] = xml_field("image")


@dataclass
class TrackInfo:
    """Result of track.getInfo.

    ``duration`` is in milliseconds. ``user_playcount`` and ``user_loved``
    are None unless the request named a user.
    """

    title: str = xml_field("name")
    url: str = xml_field("url")
    mbid: str = xml_field("mbid")
    duration: int = xml_field("duration")
    streamable: Streamable = xml_field("streamable")
    listeners: int = xml_field("listeners")
    playcount: int = xml_field("playcount")
    artist: ArtistRef = xml_field("artist")
    album: TrackAlbum = xml_field("album")
    user_playcount: Optional[int] = xml_field("userplaycount")
    user_loved: Optional[bool] = xml_field("userloved")
    top_tags: List[TagRef] = xml_field("toptags>tag")
    wiki: Wiki = xml_field("wiki")


@dataclass
class CorrectedTrack:
    title: str = xml_field("name")
    url: str = xml_field("url")
    mbid: str = xml_field("mbid")
    artist: ArtistRef = xml_field("artist")


@dataclass
class TrackCorrectionEntry:
    index: int = xml_field("index", attr=True)
    artist_corrected: bool = xml_field("artistcorrected", attr=True)
    track_corrected: bool = xml_field("trackcorrected", attr=True)
    track: CorrectedTrack = xml_field("track")


@dataclass
class TrackCorrection:
    corrections: List[TrackCorrectionEntry] = xml_field("correction")


@dataclass
class SimilarTracks:
    artist: str = xml_field("artist", attr=True)
    track: str = xml_field("track", attr=True)
    tracks: List[TrackItem] = xml_field("track")


@dataclass
class TrackTags:
    artist: str = xml_field("artist", attr=True)
    track: str = xml_field("track", attr=True)
    tags: List[TagRef] = xml_field("tag")


@dataclass
class TrackSearchMatch:
    """Track search hit. Last.fm sends a placeholder in ``streamable``."""

    title: str = xml_field("name")
    artist: str = xml_field("artist")
    url: str = xml_field("url")
    mbid: str = xml_field("mbid")
    listeners: int = xml_field("listeners")
    streamable: str = xml_field("streamable")
    image: Dict[str, str] = xml_field("image")


@dataclass
class TrackSearchResult:
    search: SearchQuery = xml_field(".")
    tracks: List[TrackSearchMatch] = xml_field("trackmatches>track")


@dataclass
class CorrectedValue:
    """A value echoed back by Last.fm, flagged when it was autocorrected."""

    value: str = xml_field(chardata=True)
    corrected: bool = xml_field("corrected", attr=True)


@dataclass
class IgnoredMessage:
    text: str = xml_field(chardata=True)
    code: int = xml_field("code", attr=True)

    @property
    def ignored(self) -> bool:
        return self.code != ScrobbleIgnoredCode.NOT_IGNORED

    @property
    def message(self) -> str:
        """Raw message from Last.fm, or the description of ``code``."""
        if self.text:
            return self.text
        try:
            return ScrobbleIgnoredCode(self.code).message
        except ValueError:
            return "Scrobble ignored"


@dataclass
class Scrobble:
    track: CorrectedValue = xml_field("track")
    artist: CorrectedValue = xml_field("artist")
    album: CorrectedValue = xml_field("album")
    album_artist: CorrectedValue = xml_field("albumArtist")
    timestamp: int = xml_field("timestamp")
    ignored_message: IgnoredMessage = xml_field("ignoredMessage")


@dataclass
class ScrobbleResult:
    """Result of track.scrobble, for single scrobbles and batches alike."""

    accepted: int = xml_field("accepted", attr=True)
    ignored: int = xml_field("ignored", attr=True)
    scrobbles: List[Scrobble] = xml_field("scrobble")


@dataclass
class NowPlayingUpdate:
    track: CorrectedValue = xml_field("track")
    artist: CorrectedValue = xml_field("artist")
    album: CorrectedValue = xml_field("album")
    album_artist: CorrectedValue = xml_field("albumArtist")
    ignored_message: IgnoredMessage = xml_field("ignoredMessage")


class Track:
    """Public track routes."""

    def __init__(self, api: API):
        self.api = api

    def correction(self, artist: str, track: str) -> TrackCorrection:
        params = {"artist": artist, "track": track}
        return self.api.get(methods.TRACK_GET_CORRECTION, params, TrackCorrection)

    def info(self, params: TrackInfoParams) -> TrackInfo:
        return self.api.get(methods.TRACK_GET_INFO, params, TrackInfo)

    def info_by_mbid(self, params: TrackInfoMBIDParams) -> TrackInfo:
        return self.api.get(methods.TRACK_GET_INFO, params, TrackInfo)

    def user_info(self, params: TrackUserInfoParams) -> TrackInfo:
        """Track information including the user's playcount and loved flag."""
        return self.api.get(methods.TRACK_GET_INFO, params, TrackInfo)

    def user_info_by_mbid(self, params: TrackUserInfoMBIDParams) -> TrackInfo:
        return self.api.get(methods.TRACK_GET_INFO, params, TrackInfo)

    def similar(self, params: TrackSimilarParams) -> SimilarTracks:
        return self.api.get(methods.TRACK_GET_SIMILAR, params, SimilarTracks)

    def similar_by_mbid(self, params: TrackSimilarMBIDParams) -> SimilarTracks:
        return self.api.get(methods.TRACK_GET_SIMILAR, params, SimilarTracks)

    def user_tags(self, params: TrackTagsParams) -> TrackTags:
        return self.api.get(methods.TRACK_GET_TAGS, params, TrackTags)

    def user_tags_by_mbid(self, params: TrackTagsMBIDParams) -> TrackTags:
        return self.api.get(methods.TRACK_GET_TAGS, params, TrackTags)

    def top_tags(self, params: TrackTopTagsParams) -> TrackTags:
        return self.api.get(methods.TRACK_GET_TOP_TAGS, params, TrackTags)

    def top_tags_by_mbid(self, params: TrackTopTagsMBIDParams) -> TrackTags:
        return self.api.get(methods.TRACK_GET_TOP_TAGS, params, TrackTags)

    def search(self, params: TrackSearchParams) -> TrackSearchResult:
        return self.api.get(methods.TRACK_SEARCH, params, TrackSearchResult)


class SessionTrack(Track):
    """Track routes acting as the session user: tagging, loving and scrobbling.

    Example:
        >>> client.track.scrobble(ScrobbleParams(
        ...     artist="Aphex Twin", track="Xtal", time=datetime.now()))
    """

    def __init__(self, session: Session):
        super().__init__(session.api)
        self.session = session

    def add_tags(self, artist: str, track: str, tags: List[str]) -> None:
        """Tag a track. Last.fm accepts at most 10 tags per call."""
        params = TrackAddTagsParams(artist=artist, track=track, tags=tags)
        self.session.post(methods.TRACK_ADD_TAGS, params)

    def self_tags(self, params: TrackSelfTagsParams) -> TrackTags:
        return self.session.get(methods.TRACK_GET_TAGS, params, TrackTags)

    def self_tags_by_mbid(self, params: TrackSelfTagsMBIDParams) -> TrackTags:
        return self.session.get(methods.TRACK_GET_TAGS, params, TrackTags)

    def love(self, artist: str, track: str) -> None:
        self.session.post(methods.TRACK_LOVE, {"artist": artist, "track": track})

    def unlove(self, artist: str, track: str) -> None:
        self.session.post(methods.TRACK_UNLOVE, {"artist": artist, "track": track})

    def remove_tag(self, artist: str, track: str, tag: str) -> None:
        params = TrackRemoveTagParams(artist=artist, track=track, tag=tag)
        self.session.post(methods.TRACK_REMOVE_TAG, params)

    def scrobble(self, params: ScrobbleParams) -> ScrobbleResult:
        return self.session.post(methods.TRACK_SCROBBLE, params, ScrobbleResult)

    def scrobble_multi(self, scrobbles: Iterable[ScrobbleParams]) -> ScrobbleResult:
        """Scrobble several tracks in one request.

        Args:
            scrobbles: Up to MAX_SCROBBLE_BATCH scrobbles

        Returns:
            ScrobbleResult with one entry per scrobble, in request order

        Raises:
            ValueError: If the batch holds more than MAX_SCROBBLE_BATCH scrobbles
        """
        batch = ScrobbleMultiParams(scrobbles)
        if len(batch) > MAX_SCROBBLE_BATCH:
            raise ValueError(
                f"cannot scrobble {len(batch)} tracks at once, the maximum is {MAX_SCROBBLE_BATCH}"
            )

        logger.debug(f"Scrobbling batch of {len(batch)} tracks")
        return self.session.post(methods.TRACK_SCROBBLE, batch, ScrobbleResult)

    def update_now_playing(self, params: UpdateNowPlayingParams) -> NowPlayingUpdate:
        return self.session.post(methods.TRACK_UPDATE_NOW_PLAYING, params, NowPlayingUpdate)
