"""Tests for FourChanConfig."""

import dataclasses

import pytest

from fourthread.config import FourChanConfig


def test_defaults():
    cfg = FourChanConfig()
    assert cfg.api_base == "https://a.4cdn.org"
    assert cfg.image_base == "https://i.4cdn.org"
    assert cfg.thumb_base == "https://i.4cdn.org"
    assert cfg.board_base == "https://boards.4chan.org"


def test_from_env(monkeypatch):
    monkeypatch.setenv("FOURTHREAD_API_BASE", "http://api.test")
    monkeypatch.setenv("FOURTHREAD_IMAGE_BASE", "http://img.test")
    monkeypatch.delenv("FOURTHREAD_THUMB_BASE", raising=False)
    monkeypatch.delenv("FOURTHREAD_BOARD_BASE", raising=False)
    cfg = FourChanConfig.from_env()
    assert cfg.api_base == "http://api.test"
    assert cfg.image_base == "http://img.test"
    assert cfg.thumb_base == "https://i.4cdn.org"
    assert cfg.board_base == "https://boards.4chan.org"


def test_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        FourChanConfig().api_base = "x"  # type: ignore[misc]
