"""Exception types raised by the thread client."""

from __future__ import annotations


class FourThreadError(Exception):
    """Base class for every error raised by fourthread itself.

    Network failures are not wrapped: httpx's own exceptions reach the caller.
    """


class URLMatchError(FourThreadError, ValueError):
    """The given string is not a recognized 4chan thread URL."""

    def __init__(self, url: object) -> None:
        self.url = url
        super().__init__(f"Could not extract thread info from {url}")


class ThreadDecodeError(FourThreadError, ValueError):
    """The API response is not valid JSON or does not have the thread shape."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        if field:
            message = f"{field}: {message}"
        super().__init__(message)
