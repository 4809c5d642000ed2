"""Tests for requester address resolution."""

from agentboard.services.requester import UNKNOWN_REQUESTER, resolve_requester_id


def test_prefers_first_forwarded_address() -> None:
    headers = {"x-forwarded-for": "198.51.100.7, 10.0.0.1", "x-real-ip": "10.0.0.1"}
    assert resolve_requester_id(headers, "127.0.0.1") == "198.51.100.7"


def test_real_ip_when_no_forwarded_for() -> None:
    assert resolve_requester_id({"x-real-ip": " 10.9.8.7 "}, "127.0.0.1") == "10.9.8.7"


def test_blank_headers_are_skipped() -> None:
    headers = {"x-forwarded-for": " , ", "x-real-ip": ""}
    assert resolve_requester_id(headers, "127.0.0.1") == "127.0.0.1"


def test_untrusted_headers_ignored() -> None:
    headers = {"x-forwarded-for": "198.51.100.7"}
    assert (
        resolve_requester_id(headers, "127.0.0.1", trust_forwarded_headers=False)
        == "127.0.0.1"
    )


def test_unknown_when_nothing_available() -> None:
    assert resolve_requester_id({}, None) == UNKNOWN_REQUESTER
