"""User library routes."""

from dataclasses import dataclass
from typing import Dict, List

from .. import methods
from ..api import API
from ..models import Page
from ..params import param
from ..transform import xml_field


@dataclass
class LibraryArtistsParams:
    user: str = param("user")
    limit: int = param("limit", omitempty=True, default=0)
    page: int = param("page", omitempty=True, default=0)


@dataclass
class LibraryArtist:
    name: str = xml_field("name")
    url: str = xml_field("url")
    mbid: str = xml_field("mbid")
    playcount: int = xml_field("playcount")
    tagcount: int = xml_field("tagcount")
    streamable: bool = xml_field("streamable")
    image: Dict[str, str] = xml_field("image")


@dataclass
class LibraryArtists:
    user: str = xml_field("user", attr=True)
    page: Page = xml_field(".")
    artists: List[LibraryArtist] = xml_field("artist")


class Library:
    def __init__(self, api: API):
        self.api = api

    def artists(self, params: LibraryArtistsParams) -> LibraryArtists:
        """All artists in a user's library, with play and tag counts."""
        return self.api.get(methods.LIBRARY_GET_ARTISTS, params, LibraryArtists)
