"""Country chart routes."""

from dataclasses import dataclass
from typing import List

from .. import methods
from ..api import API
from ..models import ArtistItem, Page, TrackItem
from ..params import param
from ..transform import xml_field


@dataclass
class GeoTopArtistsParams:
    """``country`` is an ISO 3166-1 country name, e.g. "Spain"."""

    country: str = param("country")
    limit: int = param("limit", omitempty=True, default=0)
    page: int = param("page", omitempty=True, default=0)


@dataclass
class GeoTopTracksParams:
    """``location`` narrows the chart to a metro within ``country``."""

    country: str = param("country")
    location: str = param("location", omitempty=True, default="")
    limit: int = param("limit", omitempty=True, default=0)
    page: int = param("page", omitempty=True, default=0)


@dataclass
class GeoTopArtists:
    country: str = xml_field("country", attr=True)
    page: Page = xml_field(".")
    artists: List[ArtistItem] = xml_field("artist")


@dataclass
class GeoTopTracks:
    country: str = xml_field("country", attr=True)
    page: Page = xml_field(".")
    tracks: List[TrackItem] = xml_field("track")


class Geo:
    def __init__(self, api: API):
        self.api = api

    def top_artists(self, params: GeoTopArtistsParams) -> GeoTopArtists:
        return self.api.get(methods.GEO_GET_TOP_ARTISTS, params, GeoTopArtists)

    def top_tracks(self, params: GeoTopTracksParams) -> GeoTopTracks:
        return self.api.get(methods.GEO_GET_TOP_TRACKS, params, GeoTopTracks)
