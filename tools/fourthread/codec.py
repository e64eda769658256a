"""Wire format adapter for posts and threads.

The API encodes seven boolean flags as integers (0 / nonzero).  This module
is the only place that knows about it: decoding turns them into ``bool`` and
encoding writes them back as ``0`` / ``1``.  Every other field is copied
through after a type check.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from .errors import ThreadDecodeError
from .models import Meta, Post, Thread

logger = logging.getLogger("fourthread.codec")

# Field kinds
UINT = "uint"
INT = "int"
STR = "str"
UINT_LIST = "uint_list"

# (attribute, wire key, kind) for every plain Meta field.
META_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("post_number", "no", UINT),
    ("reply_to", "resto", UINT),
    ("unix_time", "time", UINT),
    ("last_modified", "last_modified", UINT),
    ("time", "now", STR),
    ("admin_id", "id", STR),
    ("admin_type", "capcode", STR),
    ("admin_replies", "admin", UINT_LIST),
    ("name", "name", STR),
    ("trip_code", "trip", STR),
    ("country_code", "country", STR),
    ("country", "country_name", STR),
    ("orig_file_name", "filename", STR),
    ("file_ext", "ext", STR),
    ("renamed_file_name", "tim", UINT),
    ("file_md5", "md5", STR),
    ("file_size", "fsize", INT),
    ("file_height", "h", INT),
    ("file_width", "w", INT),
    ("thumbnail_height", "tn_h", INT),
    ("thumbnail_width", "tn_w", INT),
    ("custom_spoiler", "custom_spoiler", INT),
    ("omitted_posts", "omitted_posts", INT),
    ("omitted_images", "omitted_images", INT),
    ("reply_count", "replies", INT),
    ("image_count", "images", INT),
    ("tag", "tag", STR),
    ("semantic_url", "semantic_url", STR),
)

# (attribute, wire key) for the integer-encoded flags.
FLAG_FIELDS: tuple[tuple[str, str], ...] = (
    ("archived", "archived"),
    ("bump_limit", "bumplimit"),
    ("closed", "closed"),
    ("file_deleted", "filedeleted"),
    ("image_limit", "imagelimit"),
    ("spoiler", "spoiler"),
    ("sticky", "sticky"),
)

POST_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("subject", "sub", STR),
    ("comment", "com", STR),
)


def int_to_bool(i: int) -> bool:
    """0 is False, every other value is True."""
    return i != 0


def bool_to_int(b: bool) -> int:
    return 1 if b else 0


# ── field checks ─────────────────────────────────────────────────

def _is_int(value: Any) -> bool:
    # JSON true/false arrive as bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def _check(value: Any, kind: str, path: str) -> Any:
    if kind == STR:
        if not isinstance(value, str):
            raise ThreadDecodeError(f"expected a string, got {type(value).__name__}", field=path)
        return value
    if kind == UINT_LIST:
        if not isinstance(value, list):
            raise ThreadDecodeError(f"expected an array, got {type(value).__name__}", field=path)
        return tuple(_check(item, UINT, f"{path}[{i}]") for i, item in enumerate(value))
    if not _is_int(value):
        raise ThreadDecodeError(f"expected an integer, got {type(value).__name__}", field=path)
    if kind == UINT and value < 0:
        raise ThreadDecodeError(f"expected a non-negative integer, got {value}", field=path)
    return value


# ── posts ────────────────────────────────────────────────────────

def decode_post(data: Any, path: str = "post") -> Post:
    """Decode one element of a thread's ``posts`` array.

    Absent or null keys keep their default, unknown keys are ignored.  Every
    present key must have the right JSON type and ``no`` must be a positive
    integer, otherwise ``ThreadDecodeError`` is raised.
    """
    if not isinstance(data, dict):
        raise ThreadDecodeError(f"expected an object, got {type(data).__name__}", field=path)

    meta_kwargs: dict[str, Any] = {}
    for attr, key, kind in META_FIELDS:
        value = data.get(key)
        if value is not None:
            meta_kwargs[attr] = _check(value, kind, f"{path}.{key}")

    for attr, key in FLAG_FIELDS:
        value = data.get(key)
        if value is not None:
            meta_kwargs[attr] = int_to_bool(_check(value, INT, f"{path}.{key}"))

    if not meta_kwargs.get("post_number"):
        raise ThreadDecodeError("missing post number", field=f"{path}.no")

    post_kwargs: dict[str, Any] = {}
    for attr, key, kind in POST_FIELDS:
        value = data.get(key)
        if value is not None:
            post_kwargs[attr] = _check(value, kind, f"{path}.{key}")

    return Post(meta=Meta(**meta_kwargs), **post_kwargs)


def encode_post(post: Post) -> dict[str, Any]:
    """Encode a post to its wire dict.

    Flags are written as 0/1.  The derived filename fields and ``has_file``
    are not written; they are recomputed from ``tim`` and ``ext`` on decode.
    """
    meta = post.meta
    out: dict[str, Any] = {key: getattr(post, attr) for attr, key, _ in POST_FIELDS}
    for attr, key, kind in META_FIELDS:
        value = getattr(meta, attr)
        out[key] = list(value) if kind == UINT_LIST else value
    for attr, key in FLAG_FIELDS:
        out[key] = bool_to_int(getattr(meta, attr))
    return out


# ── threads ──────────────────────────────────────────────────────

def decode_thread(data: Any, board: str = "") -> Thread:
    if not isinstance(data, dict):
        raise ThreadDecodeError(f"expected an object, got {type(data).__name__}")
    posts = data.get("posts")
    if not isinstance(posts, list):
        raise ThreadDecodeError("expected an array of posts", field="posts")
    decoded = tuple(decode_post(p, path=f"posts[{i}]") for i, p in enumerate(posts))
    logger.debug("Decoded %d posts for /%s/", len(decoded), board)
    return Thread(posts=decoded, board=board)


def encode_thread(thread: Thread) -> dict[str, Any]:
    """The board is not part of the document and is dropped."""
    return {"posts": [encode_post(p) for p in thread.posts]}


def loads_thread(data: bytes | str, board: str = "") -> Thread:
    """Parse a thread JSON document."""
    try:
        obj = json.loads(data)
    except ValueError as exc:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise ThreadDecodeError(f"invalid JSON: {exc}") from exc
    return decode_thread(obj, board=board)


def dumps_thread(thread: Thread, **kwargs: Any) -> str:
    return json.dumps(encode_thread(thread), **kwargs)
