"""Global chart routes."""

from dataclasses import dataclass
from typing import List, Optional

from .. import methods
from ..api import API
from ..models import ArtistItem, Page, TrackItem
from ..params import param
from ..transform import xml_field


@dataclass
class ChartParams:
    limit: int = param("limit", omitempty=True, default=0)
    page: int = param("page", omitempty=True, default=0)


@dataclass
class ChartTag:
    name: str = xml_field("name")
    url: str = xml_field("url")
    reach: int = xml_field("reach")
    taggings: int = xml_field("taggings")
    streamable: bool = xml_field("streamable")


@dataclass
class ChartTopArtists:
    page: Page = xml_field(".")
    artists: List[ArtistItem] = xml_field("artist")


@dataclass
class ChartTopTags:
    page: Page = xml_field(".")
    tags: List[ChartTag] = xml_field("tag")


@dataclass
class ChartTopTracks:
    page: Page = xml_field(".")
    tracks: List[TrackItem] = xml_field("track")


class Chart:
    """Global Last.fm charts. Params may be omitted to use Last.fm's defaults."""

    def __init__(self, api: API):
        self.api = api

    def top_artists(self, params: Optional[ChartParams] = None) -> ChartTopArtists:
        return self.api.get(methods.CHART_GET_TOP_ARTISTS, params, ChartTopArtists)

    def top_tags(self, params: Optional[ChartParams] = None) -> ChartTopTags:
        return self.api.get(methods.CHART_GET_TOP_TAGS, params, ChartTopTags)

    def top_tracks(self, params: Optional[ChartParams] = None) -> ChartTopTracks:
        return self.api.get(methods.CHART_GET_TOP_TRACKS, params, ChartTopTracks)
