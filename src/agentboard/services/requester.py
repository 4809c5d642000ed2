"""Resolve the requester identifier used as the upvote uniqueness key."""

from __future__ import annotations

from collections.abc import Mapping

UNKNOWN_REQUESTER = "unknown"


def _first_address(value: str | None) -> str | None:
    if not value:
        return None
    # X-Forwarded-For is "client, proxy1, proxy2"; the originating client comes first.
    first = value.split(",", 1)[0].strip()
    return first or None


def resolve_requester_id(
    headers: Mapping[str, str],
    client_host: str | None,
    *,
    trust_forwarded_headers: bool = True,
) -> str:
    """Return the network address identifying the requester.

    Order: first X-Forwarded-For entry, X-Real-IP, the socket peer address,
    then the literal "unknown". Proxy headers are ignored when
    `trust_forwarded_headers` is False.
    """
    if trust_forwarded_headers:
        forwarded = _first_address(headers.get("x-forwarded-for"))
        if forwarded:
            return forwarded
        real_ip = (headers.get("x-real-ip") or "").strip()
        if real_ip:
            return real_ip

    if client_host:
        return client_host
    return UNKNOWN_REQUESTER
