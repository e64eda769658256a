"""Thread URL parsing and API / media URL construction."""

from __future__ import annotations

import re

from .config import FourChanConfig
from .errors import URLMatchError
from .models import Post

_DEFAULTS = FourChanConfig()

# boards.4chan.org, boards.4channel.org, a.4cdn.org, ...
THREAD_URL_RE = re.compile(r"https?://[^./]*\.4[^./]*\.org/([^/]*)/thread/([0-9]+)(?:(?:/|#).*)?")


def extract_board_and_thread_id(url: str) -> tuple[str, str]:
    """Extract ``(board, thread_id)`` from a thread URL.

    A trailing slug (``/cats``) or fragment (``#p51971506``) is ignored.
    The whole string must be one thread URL: surrounding text, a non-digit
    suffix on the thread number (``123abc``, ``123.json``) or a second
    thread reference raise ``URLMatchError``.
    """
    if not isinstance(url, str):
        raise URLMatchError(url)
    matches = THREAD_URL_RE.findall(url)
    if len(matches) != 1 or THREAD_URL_RE.fullmatch(url) is None:
        raise URLMatchError(url)
    board, thread_id = matches[0]
    return board, thread_id


def thread_api_url(board: str, thread_id: str | int, api_base: str = _DEFAULTS.api_base) -> str:
    return f"{api_base}/{board}/thread/{thread_id}.json"


def thread_page_url(board: str, thread_id: str | int, board_base: str = _DEFAULTS.board_base) -> str:
    return f"{board_base}/{board}/thread/{thread_id}"


def file_url(board: str, post: Post, image_base: str = _DEFAULTS.image_base) -> str | None:
    """Full-size attachment URL on i.4cdn.org, or None when the post has no file."""
    if not post.has_file:
        return None
    return f"{image_base}/{board}/{post.full_new_file_name}"


def thumbnail_url(board: str, post: Post, thumb_base: str = _DEFAULTS.thumb_base) -> str | None:
    if not post.has_file:
        return None
    return f"{thumb_base}/{board}/{post.renamed_file_name}s.jpg"
