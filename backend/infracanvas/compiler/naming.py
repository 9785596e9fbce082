import itertools
import re
import threading
import time

_WHITESPACE = re.compile(r"\s+")

_counter_lock = threading.Lock()
_counter = itertools.count(int(time.time() * 1000))


def _fallback_token() -> int:
    # monotonic within the process, seeded from wall-clock milliseconds
    with _counter_lock:
        return next(_counter)


def sanitize_name(raw_name: str) -> str:
    """
    Convert a display name into a resource identifier.
    "  Images Bucket " -> "images-bucket". Blank input -> "res-<token>".
    """
    base = _WHITESPACE.sub("-", (raw_name or "").strip().lower())
    return base or f"res-{_fallback_token()}"
