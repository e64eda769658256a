"""Shared fixtures: sample API documents and a fake HTTP transport."""

from __future__ import annotations

import copy
import json

import httpx
import pytest

OP = {
    "no": 921167,
    "resto": 0,
    "sticky": 0,
    "closed": 0,
    "now": "12/20/15(Sun)10:11:12",
    "time": 1450624272,
    "name": "Anonymous",
    "sub": "Cats",
    "com": "Post your cats",
    "filename": "photo",
    "ext": ".jpg",
    "w": 1280,
    "h": 720,
    "tn_w": 250,
    "tn_h": 140,
    "tim": 1450624272123,
    "md5": "bGVnaXRpbWF0ZQ==",
    "fsize": 483920,
    "semantic_url": "cats",
    "replies": 2,
    "images": 1,
    "bumplimit": 0,
    "imagelimit": 0,
}

REPLIES = [
    {
        "no": 921170,
        "resto": 921167,
        "now": "12/20/15(Sun)10:15:00",
        "time": 1450624500,
        "name": "Anonymous",
        "com": "nice",
        "country": "US",
        "country_name": "United States",
    },
    {
        "no": 921175,
        "resto": 921167,
        "now": "12/20/15(Sun)10:20:00",
        "time": 1450624800,
        "name": "mod",
        "trip": "!Ep8pui8Vw2",
        "capcode": "mod",
        "com": "[spoiler]dog[/spoiler]",
        "filename": "dog",
        "ext": ".png",
        "tim": 12345,
        "spoiler": 1,
        "filedeleted": 0,
    },
]


@pytest.fixture
def thread_doc() -> dict:
    return {"posts": [copy.deepcopy(OP)] + copy.deepcopy(REPLIES)}


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_transport(requests_seen):
    """Build a MockTransport that records requests and answers with ``status``/``body``."""

    def factory(body: object = None, status: int = 200) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            if isinstance(body, (bytes, str)):
                return httpx.Response(status, content=body)
            return httpx.Response(status, content=json.dumps(body).encode())

        return httpx.MockTransport(handler)

    return factory
