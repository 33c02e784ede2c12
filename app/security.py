"""
In-memory rate limiting for public endpoints.
"""
from __future__ import annotations

import time
from typing import Dict

_rate_state: Dict[str, list[float]] = {}


def allow_request(key: str, limit: int = 5, window_seconds: int = 60) -> bool:
    """
    Simple sliding-window rate limit stored in memory.
    Returns True if under limit, False otherwise.
    """
    now = time.time()
    window_start = now - window_seconds
    history = [t for t in _rate_state.get(key, []) if t > window_start]
    if len(history) >= limit:
        _rate_state[key] = history
        return False
    history.append(now)
    _rate_state[key] = history
    return True


def reset_rate_limits() -> None:
    _rate_state.clear()


__all__ = [
    "allow_request",
    "reset_rate_limits",
]
