"""Last.fm API method names, as sent in the ``method`` parameter."""

ALBUM_ADD_TAGS = "album.addTags"
ALBUM_GET_INFO = "album.getInfo"
ALBUM_GET_TAGS = "album.getTags"
ALBUM_GET_TOP_TAGS = "album.getTopTags"
ALBUM_REMOVE_TAG = "album.removeTag"
ALBUM_SEARCH = "album.search"

ARTIST_ADD_TAGS = "artist.addTags"
ARTIST_GET_CORRECTION = "artist.getCorrection"
ARTIST_GET_INFO = "artist.getInfo"
ARTIST_GET_SIMILAR = "artist.getSimilar"
ARTIST_GET_TAGS = "artist.getTags"
ARTIST_GET_TOP_ALBUMS = "artist.getTopAlbums"
ARTIST_GET_TOP_TAGS = "artist.getTopTags"
ARTIST_GET_TOP_TRACKS = "artist.getTopTracks"
ARTIST_REMOVE_TAG = "artist.removeTag"
ARTIST_SEARCH = "artist.search"

AUTH_GET_MOBILE_SESSION = "auth.getMobileSession"
AUTH_GET_SESSION = "auth.getSession"
AUTH_GET_TOKEN = "auth.getToken"

CHART_GET_TOP_ARTISTS = "chart.getTopArtists"
CHART_GET_TOP_TAGS = "chart.getTopTags"
CHART_GET_TOP_TRACKS = "chart.getTopTracks"

GEO_GET_TOP_ARTISTS = "geo.getTopArtists"
GEO_GET_TOP_TRACKS = "geo.getTopTracks"

LIBRARY_GET_ARTISTS = "library.getArtists"

TAG_GET_INFO = "tag.getInfo"
TAG_GET_SIMILAR = "tag.getSimilar"
TAG_GET_TOP_ALBUMS = "tag.getTopAlbums"
TAG_GET_TOP_ARTISTS = "tag.getTopArtists"
TAG_GET_TOP_TAGS = "tag.getTopTags"
TAG_GET_TOP_TRACKS = "tag.getTopTracks"
TAG_GET_WEEKLY_CHART_LIST = "tag.getWeeklyChartList"

TRACK_ADD_TAGS = "track.addTags"
TRACK_GET_CORRECTION = "track.getCorrection"
TRACK_GET_INFO = "track.getInfo"
TRACK_GET_SIMILAR = "track.getSimilar"
TRACK_GET_TAGS = "track.getTags"
TRACK_GET_TOP_TAGS = "track.getTopTags"
TRACK_LOVE = "track.love"
TRACK_REMOVE_TAG = "track.removeTag"
TRACK_SCROBBLE = "track.scrobble"
TRACK_SEARCH = "track.search"
TRACK_UNLOVE = "track.unlove"
TRACK_UPDATE_NOW_PLAYING = "track.updateNowPlaying"

USER_GET_FRIENDS = "user.getFriends"
USER_GET_INFO = "user.getInfo"
USER_GET_LOVED_TRACKS = "user.getLovedTracks"
USER_GET_PERSONAL_TAGS = "user.getPersonalTags"
USER_GET_RECENT_TRACKS = "user.getRecentTracks"
USER_GET_TOP_ALBUMS = "user.getTopAlbums"
USER_GET_TOP_ARTISTS = "user.getTopArtists"
USER_GET_TOP_TAGS = "user.getTopTags"
USER_GET_TOP_TRACKS = "user.getTopTracks"
USER_GET_WEEKLY_ALBUM_CHART = "user.getWeeklyAlbumChart"
USER_GET_WEEKLY_ARTIST_CHART = "user.getWeeklyArtistChart"
USER_GET_WEEKLY_CHART_LIST = "user.getWeeklyChartList"
USER_GET_WEEKLY_TRACK_CHART = "user.getWeeklyTrackChart"
