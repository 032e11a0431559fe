"""mbsearch: a MusicBrainz WS2 search client.

Typical use::

    from mbsearch import WS2Client

    client = WS2Client("https://musicbrainz.org/ws/2", "myapp", "1.0", "me@example.com")
    response = client.search_artist("Nirvana", limit=5)
    for artist in response.entities:
        print(response.scores[artist], artist.name)
"""

from mbsearch.domain import (
    Annotation,
    Area,
    Artist,
    CDStub,
    Label,
    Place,
    Release,
    ReleaseGroup,
    SearchResponse,
    Tag,
)
from mbsearch.platform.musicbrainz import (
    DecodeError,
    HTTPStatusError,
    InvalidRootAddressError,
    MusicBrainzError,
    SearchNotImplementedError,
    TransportError,
    WS2Client,
)

__version__ = "0.1.0"

__all__ = [
    "Annotation",
    "Area",
    "Artist",
    "CDStub",
    "DecodeError",
    "HTTPStatusError",
    "InvalidRootAddressError",
    "Label",
    "MusicBrainzError",
    "Place",
    "Release",
    "ReleaseGroup",
    "SearchNotImplementedError",
    "SearchResponse",
    "Tag",
    "TransportError",
    "WS2Client",
    "__version__",
]
