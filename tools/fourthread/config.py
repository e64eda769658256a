"""Configuration for the 4chan endpoints."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class FourChanConfig:
    """Base URLs of the read-only JSON API, the media CDN and the board pages.

    No timeout or retry settings: every fetch is one plain GET, and callers
    that need a deadline wrap the call themselves.
    """
    api_base: str = "https://a.4cdn.org"
    image_base: str = "https://i.4cdn.org"
    thumb_base: str = "https://i.4cdn.org"
    board_base: str = "https://boards.4chan.org"

    @classmethod
    def from_env(cls) -> FourChanConfig:
        return cls(
            api_base=os.getenv("FOURTHREAD_API_BASE", "https://a.4cdn.org"),
            image_base=os.getenv("FOURTHREAD_IMAGE_BASE", "https://i.4cdn.org"),
            thumb_base=os.getenv("FOURTHREAD_THUMB_BASE", "https://i.4cdn.org"),
            board_base=os.getenv("FOURTHREAD_BOARD_BASE", "https://boards.4chan.org"),
        )
