"""Tag routes."""

from dataclasses import dataclass
from typing import List, Optional

from .. import methods
from ..api import API
from ..models import AlbumItem, ArtistItem, ChartRange, Page, TrackItem, Wiki
from ..params import param
from ..transform import xml_field


@dataclass
class TagInfoParams:
    tag: str = param("tag")
    language: str = param("lang", omitempty=True, default="")


@dataclass
class TagTopParams:
    """Parameters shared by tag.getTopAlbums, getTopArtists and getTopTracks."""

    tag: str = param("tag")
    limit: int = param("limit", omitempty=True, default=0)
    page: int = param("page", omitempty=True, default=0)


@dataclass
class TagTopTagsParams:
    limit: int = param("num_res", omitempty=True, default=0)
    offset: int = param("offset", omitempty=True, default=0)


@dataclass
class TagInfo:
    name: str = xml_field("name")
    total: int = xml_field("total")
    reach: int = xml_field("reach")
    wiki: Wiki = xml_field("wiki")


@dataclass
class SimilarTag:
    name: str = xml_field("name")
    url: str = xml_field("url")
    streamable: bool = xml_field("streamable")


@dataclass
class SimilarTags:
    tag: str = xml_field("tag", attr=True)
    tags: List[SimilarTag] = xml_field("tag")


@dataclass
class TagTopAlbums:
    tag: str = xml_field("tag", attr=True)
    page: Page = xml_field(".")
    albums: List[AlbumItem] = xml_field("album")


@dataclass
class TagTopArtists:
    tag: str = xml_field("tag", attr=True)
    page: Page = xml_field(".")
    artists: List[ArtistItem] = xml_field("artist")


@dataclass
class TagTopTracks:
    tag: str = xml_field("tag", attr=True)
    page: Page = xml_field(".")
    tracks: List[TrackItem] = xml_field("track")


@dataclass
class TopTag:
    name: str = xml_field("name")
    count: int = xml_field("count")
    reach: int = xml_field("reach")


@dataclass
class TagTopTags:
    """Result of tag.getTopTags, paginated by offset rather than page."""

    offset: int = xml_field("offset", attr=True)
    results: int = xml_field("num_res", attr=True)
    total: int = xml_field("total", attr=True)
    tags: List[TopTag] = xml_field("tag")


@dataclass
class TagWeeklyChartList:
    tag: str = xml_field("tag", attr=True)
    charts: List[ChartRange] = xml_field("chart")


class Tag:
    def __init__(self, api: API):
        self.api = api

    def info(self, params: TagInfoParams) -> TagInfo:
        return self.api.get(methods.TAG_GET_INFO, params, TagInfo)

    def similar(self, tag: str) -> SimilarTags:
        return self.api.get(methods.TAG_GET_SIMILAR, {"tag": tag}, SimilarTags)

    def top_albums(self, params: TagTopParams) -> TagTopAlbums:
        return self.api.get(methods.TAG_GET_TOP_ALBUMS, params, TagTopAlbums)

    def top_artists(self, params: TagTopParams) -> TagTopArtists:
        return self.api.get(methods.TAG_GET_TOP_ARTISTS, params, TagTopArtists)

    def top_tags(self, params: Optional[TagTopTagsParams] = None) -> TagTopTags:
        """Most used tags on Last.fm, ranked by usage."""
        return self.api.get(methods.TAG_GET_TOP_TAGS, params, TagTopTags)

    def top_tracks(self, params: TagTopParams) -> TagTopTracks:
        return self.api.get(methods.TAG_GET_TOP_TRACKS, params, TagTopTracks)

    def weekly_chart_list(self, tag: str) -> TagWeeklyChartList:
        return self.api.get(methods.TAG_GET_WEEKLY_CHART_LIST, {"tag": tag}, TagWeeklyChartList)
