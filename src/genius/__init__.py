"""Typed client for the Genius music-annotation API."""

from .client import GeniusClient
from .config import ClientConfig
from .errors import ApplicationError, GeniusError, TextFormatError, TransportError
from .types import (
    Album,
    Annotation,
    Artist,
    ArtistSongsPayload,
    Hit,
    Song,
    TextFormat,
    User,
    WebPage,
    flatten_text,
    normalize,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "GeniusClient",
    "ClientConfig",
    "GeniusError",
    "TransportError",
    "ApplicationError",
    "TextFormatError",
    "Album",
    "ArtistSongsPayload",
    "Annotation",
    "Artist",
    "Hit",
    "Song",
    "TextFormat",
    "User",
    "WebPage",
    "flatten_text",
    "normalize",
]
