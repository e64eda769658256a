"""4chan thread fetcher: one plain GET per call, decoded into a Thread."""

from __future__ import annotations

import logging

import httpx

from .codec import loads_thread
from .config import FourChanConfig
from .models import Thread
from .urls import extract_board_and_thread_id, thread_api_url

logger = logging.getLogger("fourthread.api")


class FourChanAPI:
    """Thin wrapper around the 4chan thread endpoint.

    No retries, no caching and no throttling: every call is an independent
    request.  Transport, read and HTTP status errors are httpx's own
    exceptions and reach the caller unchanged; a body that is not a thread
    document raises ``ThreadDecodeError``.  Read failures are
    ``httpx.ReadError``, a ``TransportError`` subclass that httpx also raises
    when the response headers cannot be read.

    A client passed in stays owned by the caller and is not closed here.
    """

    def __init__(self, cfg: FourChanConfig | None = None, client: httpx.Client | None = None) -> None:
        self.cfg = cfg or FourChanConfig()
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=None, follow_redirects=True)

    def _get_bytes(self, url: str) -> bytes:
        logger.debug("GET %s", url)
        # the response is released on every path out of this block
        with self._client.stream("GET", url) as resp:
            resp.raise_for_status()
            return resp.read()

    # ── public API ───────────────────────────────────────────────

    def get_thread(self, board: str, thread_id: str | int) -> Thread:
        """Fetch a full thread (OP + all replies) by board and thread number."""
        body = self._get_bytes(thread_api_url(board, thread_id, api_base=self.cfg.api_base))
        return loads_thread(body, board=board)

    def get_thread_from_url(self, url: str) -> Thread:
        """Fetch the thread a board URL points at.

        ``URLMatchError`` is raised before any request when the URL is not a
        thread URL.
        """
        board, thread_id = extract_board_and_thread_id(url)
        return self.get_thread(board, thread_id)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> FourChanAPI:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def load_thread_by_id(board: str, thread_id: str | int, cfg: FourChanConfig | None = None) -> Thread:
    """Fetch a thread on a fresh connection that is closed before returning."""
    with FourChanAPI(cfg) as api:
        return api.get_thread(board, thread_id)


def load_thread_from_url(url: str, cfg: FourChanConfig | None = None) -> Thread:
    board, thread_id = extract_board_and_thread_id(url)
    return load_thread_by_id(board, thread_id, cfg)
