"""Shared test helpers: canned Genius payloads and a mock-backed client."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx

from genius import GeniusClient

Handler = Callable[[httpx.Request], httpx.Response]


def envelope(status: int = 200, message: str = "", **response: Any) -> dict[str, Any]:
    body: dict[str, Any] = {"meta": {"status": status}}
    if message:
        body["meta"]["message"] = message
    if response:
        body["response"] = response
    return body


def fake_client(handler: Handler, token: str = "test-token") -> GeniusClient:
    return GeniusClient(token, transport=httpx.MockTransport(handler))


def recording_handler(
    routes: dict[str, dict[str, Any]],
    calls: list[httpx.Request],
) -> Handler:
    """Serve each path's JSON body with status 200 and record every request."""

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        body = routes.get(request.url.path)
        if body is None:
            return httpx.Response(404, text="unexpected route")
        return httpx.Response(200, json=body)

    return handler


def user_payload(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": 42,
        "api_path": "/users/42",
        "login": "lyricist",
        "name": "Lyricist",
        "iq": 1500,
        "iq_for_display": "1,500",
        "roles_for_display": ["editor"],
        "avatar": {
            "tiny": {"url": "https://images.genius.com/tiny.png", "bounding_box": {"width": 16, "height": 16}},
            "medium": None,
        },
        "identities": [{"id": 7, "name": "lyricist", "provider": "twitter"}],
        "preferences": {"message_notifications": True},
        "current_user_metadata": {
            "permissions": ["follow"],
            "interactions": {"following": False},
            "iq_by_action": {"accept": {"primary": {"multiplier": 1, "base": 1.5, "applicable": True}}},
        },
    }
    data.update(overrides)
    return data


def artist_payload(description: Any = None, **overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": 16775,
        "api_path": "/artists/16775",
        "name": "Kendrick Lamar",
        "alternate_names": ["K-Dot"],
        "is_verified": True,
        "followers_count": 1000,
        "url": "https://genius.com/artists/Kendrick-lamar",
        "description": description if description is not None else {"dom": {"tag": "root", "children": []}},
        "user": user_payload(),
    }
    data.update(overrides)
    return data


def song_payload(song_id: int = 378195, title: str = "Alright", description: Any = None) -> dict[str, Any]:
    return {
        "id": song_id,
        "api_path": f"/songs/{song_id}",
        "title": title,
        "full_title": f"{title} by Kendrick Lamar",
        "release_date": None,
        "pyongs_count": 12,
        "stats": {"pageviews": 5000, "hot": False},
        "album": {"id": 1, "name": "To Pimp a Butterfly", "artist": artist_payload()},
        "primary_artist": artist_payload(),
        "media": [{"provider": "youtube", "type": "video", "url": "https://youtu.be/x"}],
        "song_relationships": [{"type": "samples", "songs": [{"id": 1, "title": "Sampled"}]}],
        "description": description if description is not None else {"dom": {"tag": "root"}},
    }


def annotation_payload(body: Any = None) -> dict[str, Any]:
    return {
        "id": 9000,
        "api_path": "/annotations/9000",
        "state": "accepted",
        "votes_total": 3,
        "verified": False,
        "body": body if body is not None else {"dom": {"tag": "root"}},
        "authors": [{"attribution": 1.0, "pinned_role": None, "user": user_payload()}],
    }


def hit_payload(song_id: int, title: str) -> dict[str, Any]:
    return {"highlights": [], "index": "song", "type": "song", "result": song_payload(song_id, title)}
