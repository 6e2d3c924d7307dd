import threading
from typing import Any, Optional

import diskcache

from betcheck.config import CACHE_DIR

DAY_SECONDS = 24 * 60 * 60

_lock = threading.Lock()
_store: Optional[diskcache.Cache] = None


def _cache() -> diskcache.Cache:
    # Opened on first use so importing betcheck does not touch the disk
    global _store
    if _store is None:
        _store = diskcache.Cache(CACHE_DIR)
    return _store


def get_cache(key: str) -> Optional[Any]:
    with _lock:
        return _cache().get(key)


def set_cache(key: str, value: Any, expire: int = 300) -> None:
    """Store ``value`` under ``key`` for ``expire`` seconds."""
    with _lock:
        _cache().set(key, value, expire=expire)
