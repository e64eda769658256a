"""
fourthread – fetch a 4chan thread from its board URL as typed data.

Supports:
  • Resolving thread URLs (with slug or #fragment) to board + thread number
  • Fetching /<board>/thread/<no>.json from the read-only API
  • Decoding posts with the integer flags turned into real booleans
  • Encoding threads back to the API's JSON shape
"""

from .api import FourChanAPI, load_thread_by_id, load_thread_from_url
from .codec import decode_post, decode_thread, dumps_thread, encode_post, encode_thread, loads_thread
from .config import FourChanConfig
from .errors import FourThreadError, ThreadDecodeError, URLMatchError
from .models import Meta, Post, Thread
from .urls import extract_board_and_thread_id, file_url, thread_api_url, thread_page_url, thumbnail_url

__all__ = [
    "FourChanAPI",
    "FourChanConfig",
    "FourThreadError",
    "Meta",
    "Post",
    "Thread",
    "ThreadDecodeError",
    "URLMatchError",
    "decode_post",
    "decode_thread",
    "dumps_thread",
    "encode_post",
    "encode_thread",
    "extract_board_and_thread_id",
    "file_url",
    "load_thread_by_id",
    "load_thread_from_url",
    "loads_thread",
    "thread_api_url",
    "thread_page_url",
    "thumbnail_url",
]
