from __future__ import annotations

import time
from typing import Any, TypeVar

import httpx
from httpx._client import UseClientDefault
from httpx._types import TimeoutTypes
from pydantic import BaseModel

from .config import ClientConfig
from .errors import ApplicationError, TransportError
from .types import (
    SONG_SORTS,
    TEXT_FORMATS,
    AccountPayload,
    Annotation,
    AnnotationPayload,
    Artist,
    ArtistPayload,
    ArtistSongsPayload,
    Envelope,
    Hit,
    SearchPayload,
    Song,
    SongPayload,
    SongSort,
    TextFormat,
    User,
    normalize,
)
from .util.log import Log

log = Log.create({"service": "genius.client"})

PayloadT = TypeVar("PayloadT", bound=BaseModel)

Timeout = TimeoutTypes | UseClientDefault


class GeniusClient:
    """Typed synchronous client for the Genius API.

    Each method issues exactly one authenticated GET request and returns the
    decoded object. Non-200 HTTP responses raise ``TransportError`` with the
    raw body; a 200 response whose ``meta.status`` is not 200 raises
    ``ApplicationError``.

    Pass either ``client`` (an already configured ``httpx.Client``) or
    ``transport``, not both. Every operation takes a keyword-only ``timeout``
    forwarded to httpx for that request alone.

    Example::

        with GeniusClient("token") as genius:
            artist = genius.get_artist_html(16775)
            print(artist.description)
    """

    def __init__(
        self,
        access_token: str,
        *,
        client: httpx.Client | None = None,
        transport: httpx.BaseTransport | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        if client is not None and transport is not None:
            raise ValueError("pass either client or transport, not both")
        self._access_token = access_token
        self._config = config or ClientConfig()
        self._owns_client = client is None
        self._client = client or httpx.Client(
            transport=transport,
            timeout=self._config.timeout,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    def close(self) -> None:
        """Close the underlying ``httpx.Client`` if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> GeniusClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _headers(self) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._access_token}",
            "Content-Type": "application/json",
        }
        if self._config.user_agent:
            headers["User-Agent"] = self._config.user_agent
        return headers

    def _request(
        self,
        path: str,
        payload_type: type[PayloadT],
        *,
        params: dict[str, Any] | None = None,
        timeout: Timeout = httpx.USE_CLIENT_DEFAULT,
    ) -> PayloadT:
        url = self._config.base_url + path
        log.debug("request", {"method": "GET", "path": path, "params": params})
        started = time.monotonic()
        response = self._client.get(url, params=params, headers=self._headers(), timeout=timeout)
        log.debug(
            "response",
            {
                "path": path,
                "status": response.status_code,
                "duration": int((time.monotonic() - started) * 1000),
            },
        )

        if response.status_code != 200:
            raise TransportError(response.status_code, response.text, path=path)

        envelope = Envelope.model_validate(response.json())
        if envelope.meta.status != 200:
            raise ApplicationError(envelope.meta.status, envelope.meta.message, path=path)
        return payload_type.model_validate(envelope.response)

    @staticmethod
    def _check_text_format(text_format: str) -> None:
        if text_format not in TEXT_FORMATS:
            raise ValueError(f"text_format must be one of {TEXT_FORMATS}, got {text_format!r}")

    def get_account(self, *, timeout: Timeout = httpx.USE_CLIENT_DEFAULT) -> User:
        """Return the account that owns the access token."""
        return self._request("/account/", AccountPayload, timeout=timeout).user

    def get_artist(self, artist_id: int, *, timeout: Timeout = httpx.USE_CLIENT_DEFAULT) -> Artist:
        """Return an artist with its description in ``dom`` format."""
        return self.get_artist_dom(artist_id, timeout=timeout)

    def get_artist_dom(self, artist_id: int, *, timeout: Timeout = httpx.USE_CLIENT_DEFAULT) -> Artist:
        return self._get_artist(artist_id, "dom", timeout)

    def get_artist_plain(self, artist_id: int, *, timeout: Timeout = httpx.USE_CLIENT_DEFAULT) -> Artist:
        return self._get_artist(artist_id, "plain", timeout)

    def get_artist_html(self, artist_id: int, *, timeout: Timeout = httpx.USE_CLIENT_DEFAULT) -> Artist:
        return self._get_artist(artist_id, "html", timeout)

    def _get_artist(self, artist_id: int, text_format: TextFormat, timeout: Timeout) -> Artist:
        self._check_text_format(text_format)
        payload = self._request(
            f"/artists/{int(artist_id)}",
            ArtistPayload,
            params={"text_format": text_format},
            timeout=timeout,
        )
        return normalize(payload.artist, text_format)

    def get_artist_songs(
        self,
        artist_id: int,
        sort: SongSort = "title",
        per_page: int = 20,
        page: int = 1,
        *,
        timeout: Timeout = httpx.USE_CLIENT_DEFAULT,
    ) -> list[Song]:
        """Return one page of an artist's songs."""
        return self.get_artist_songs_page(artist_id, sort, per_page, page, timeout=timeout).songs

    def get_artist_songs_page(
        self,
        artist_id: int,
        sort: SongSort = "title",
        per_page: int = 20,
        page: int = 1,
        *,
        timeout: Timeout = httpx.USE_CLIENT_DEFAULT,
    ) -> ArtistSongsPayload:
        """Return one page of an artist's songs with ``next_page``.

        ``next_page`` is ``None`` on the last page.
        """
        if sort not in SONG_SORTS:
            raise ValueError(f"sort must be one of {SONG_SORTS}, got {sort!r}")
        return self._request(
            f"/artists/{int(artist_id)}/songs",
            ArtistSongsPayload,
            params={"sort": sort, "per_page": int(per_page), "page": int(page)},
            timeout=timeout,
        )

    def get_song(
        self,
        song_id: int,
        text_format: TextFormat = "dom",
        *,
        timeout: Timeout = httpx.USE_CLIENT_DEFAULT,
    ) -> Song:
        self._check_text_format(text_format)
        payload = self._request(
            f"/songs/{int(song_id)}",
            SongPayload,
            params={"text_format": text_format},
            timeout=timeout,
        )
        return normalize(payload.song, text_format)

    def get_annotation(
        self,
        annotation_id: int,
        text_format: TextFormat = "dom",
        *,
        timeout: Timeout = httpx.USE_CLIENT_DEFAULT,
    ) -> Annotation:
        self._check_text_format(text_format)
        payload = self._request(
            f"/annotations/{int(annotation_id)}",
            AnnotationPayload,
            params={"text_format": text_format},
            timeout=timeout,
        )
        return normalize(payload.annotation, text_format)

    def search(self, q: str, *, timeout: Timeout = httpx.USE_CLIENT_DEFAULT) -> list[Hit]:
        """Search songs. Hits keep the order the API returned them in."""
        return self._request("/search", SearchPayload, params={"q": q}, timeout=timeout).hits
