"""Helpers for enforcing per-move time limits."""

import time


def deadline_after(seconds):
    """Absolute deadline `seconds` from now; None means no limit."""
    if seconds is None:
        return None
    return time.time() + seconds


def time_remaining(deadline):
    if deadline is None:
        return float("inf")
    return deadline - time.time()
