"""Timestamp-derived identifiers for courses, lessons and challenges."""

import threading
import time

_lock = threading.Lock()
_last_id = 0


def mint_id() -> str:
    """
    Return the current time in epoch milliseconds as a string.

    IDs minted by one process are strictly increasing: a second call within
    the same millisecond gets the previous value plus one.
    """
    global _last_id
    with _lock:
        candidate = int(time.time() * 1000)
        if candidate <= _last_id:
            candidate = _last_id + 1
        _last_id = candidate
        return str(candidate)
