"""Tests for pending voice clip requests."""

from clipbot.bot.voice_requests import clear_request, pending_name, request_clip


def test_request_then_clear():
    request_clip(1, "hello")

    assert pending_name(1) == "hello"
    assert clear_request(1) == "hello"
    assert pending_name(1) is None


def test_newer_request_replaces_older():
    request_clip(1, "first")
    request_clip(1, "second")

    assert pending_name(1) == "second"


def test_requests_are_per_user():
    request_clip(1, "mine")

    assert pending_name(2) is None
    assert clear_request(2) is None
    assert pending_name(1) == "mine"
