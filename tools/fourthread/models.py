"""Typed thread / post structures decoded from the 4chan JSON API.

Field meanings follow https://github.com/4chan/4chan-API.  Most fields are
optional upstream and keep their zero value when absent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass(frozen=True)
class Meta:
    """Metadata of a single post.

    The seven flags are plain booleans here; the API sends them as 0/1
    integers and ``fourthread.codec`` does the conversion.
    """

    # ── state flags ──────────────────────────────────────────────
    archived: bool = False
    bump_limit: bool = False
    closed: bool = False
    file_deleted: bool = False
    image_limit: bool = False
    spoiler: bool = False
    sticky: bool = False

    # ── identity ─────────────────────────────────────────────────
    post_number: int = 0
    reply_to: int = 0  # 0 for the opening post

    # ── timing ───────────────────────────────────────────────────
    unix_time: int = 0
    last_modified: int = 0
    time: str = ""

    # ── authorship ───────────────────────────────────────────────
    admin_id: str = ""
    admin_type: str = ""
    admin_replies: tuple[int, ...] = ()
    name: str = ""
    trip_code: str = ""
    country_code: str = ""
    country: str = ""

    # ── attachment ───────────────────────────────────────────────
    orig_file_name: str = ""
    file_ext: str = ""  # includes the leading dot
    renamed_file_name: int = 0
    file_md5: str = ""
    file_size: int = 0
    file_height: int = 0
    file_width: int = 0
    thumbnail_height: int = 0
    thumbnail_width: int = 0
    custom_spoiler: int = 0

    # ── thread summary (OP only) ─────────────────────────────────
    omitted_posts: int = 0
    omitted_images: int = 0
    reply_count: int = 0
    image_count: int = 0
    tag: str = ""
    semantic_url: str = ""


@dataclass(frozen=True)
class Post:
    """A single post in a thread.

    Meta attributes are reachable directly on the post, so ``post.name`` is
    ``post.meta.name``.  ``full_orig_file_name``, ``full_new_file_name`` and
    ``has_file`` are derived from the meta fields and cannot be passed in.
    """

    subject: str = ""
    comment: str = ""
    meta: Meta = field(default_factory=Meta)

    full_orig_file_name: str = field(init=False, compare=False, default="")
    full_new_file_name: str = field(init=False, compare=False, default="")
    has_file: bool = field(init=False, compare=False, default=False)

    def __post_init__(self) -> None:
        meta = self.meta
        object.__setattr__(self, "full_orig_file_name", meta.orig_file_name + meta.file_ext)
        if meta.renamed_file_name != 0:
            object.__setattr__(self, "full_new_file_name", f"{meta.renamed_file_name}{meta.file_ext}")
            object.__setattr__(self, "has_file", True)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        if name == "meta" or name.startswith("__"):
            raise AttributeError(name)
        return getattr(self.meta, name)

    @property
    def is_op(self) -> bool:
        return self.meta.reply_to == 0

    @classmethod
    def from_dict(cls, data: Any) -> Post:
        """Decode a post from its wire dict (see ``fourthread.codec.decode_post``)."""
        from .codec import decode_post

        return decode_post(data)

    def to_dict(self) -> dict[str, Any]:
        """Encode to the wire dict, flags as 0/1 integers."""
        from .codec import encode_post

        return encode_post(self)


@dataclass(frozen=True)
class Thread:
    """An ordered list of posts; ``posts[0]`` is the opener.

    ``board`` is not part of the API document, it is attached after decoding.
    A thread is always truthy, even with no posts; use ``len()`` to test for
    an empty one.
    """

    posts: tuple[Post, ...] = ()
    board: str = ""

    def __len__(self) -> int:
        return len(self.posts)

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[Post]:
        return iter(self.posts)

    @property
    def op(self) -> Post | None:
        return self.posts[0] if self.posts else None

    @property
    def thread_no(self) -> int | None:
        op = self.op
        return op.post_number if op is not None else None

    def replies_index(self) -> dict[int, list[int]]:
        """Map each post number to the numbers of the posts replying to it.

        Built on demand from ``reply_to``; posts keep no back references.
        """
        index: dict[int, list[int]] = {}
        for post in self.posts:
            if post.reply_to:
                index.setdefault(post.reply_to, []).append(post.post_number)
        return index

    @classmethod
    def from_dict(cls, data: Any, board: str = "") -> Thread:
        from .codec import decode_thread

        return decode_thread(data, board=board)

    def to_dict(self) -> dict[str, Any]:
        from .codec import encode_thread

        return encode_thread(self)
