"""Per client address request limits."""

from __future__ import annotations

import re

from rest_framework.throttling import SimpleRateThrottle

_RATE_RE = re.compile(r"^\s*(\d+)\s*/\s*(\d*)\s*([smhd])[a-z]*\s*$", re.IGNORECASE)
_UNIT_SECONDS = {"s": 1, "m": 60, "h": 3600, "d": 86400}

THROTTLE_MESSAGE = "Too many requests from this IP, please try again later."


def parse_window_rate(rate: str) -> tuple[int, int]:
    """Parse ``"<count>/<multiplier><unit>"`` such as ``100/15m`` or ``5/hour``.

    Returns ``(num_requests, window_seconds)``.
    """

    match = _RATE_RE.match(rate)
    if match is None:
        raise ValueError(f"Invalid rate limit {rate!r}")
    count, multiplier, unit = match.groups()
    window = int(multiplier or 1) * _UNIT_SECONDS[unit.lower()]
    if window <= 0:
        raise ValueError(f"Invalid rate limit {rate!r}")
    return int(count), window


class ClientAddressRateThrottle(SimpleRateThrottle):
    """Limit every client IP to a number of requests in a sliding window.

    The window length accepts a multiplier (``15m``) which DRF's built-in
    rate syntax does not.
    """

    scope = "client_address"

    def parse_rate(self, rate):
        if rate is None:
            return (None, None)
        return parse_window_rate(rate)

    def get_cache_key(self, request, view):
        return self.cache_format % {"scope": self.scope, "ident": self.get_ident(request)}


__all__ = ["ClientAddressRateThrottle", "THROTTLE_MESSAGE", "parse_window_rate"]
