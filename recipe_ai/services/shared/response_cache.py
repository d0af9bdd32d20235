# response_cache.py
"""
File-backed cache for AI responses. Each entry is one JSON file
{"data": ..., "timestamp": epoch_seconds} under the cache directory.
"""

import os
import json
import time
import hashlib
import logging
from typing import Any, Iterable, Optional

logger = logging.getLogger(__name__)

CACHE_PREFIX = "ai_cache_"


def hash_payload(payload: Any) -> str:
    canonical = json.dumps(payload, sort_keys=True, ensure_ascii=False, default=str)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def hash_files(paths: Iterable[str]) -> str:
    """SHA-256 over the bytes of every file, in order."""
    h = hashlib.sha256()
    for p in paths:
        with open(p, "rb") as f:
            for chunk in iter(lambda: f.read(65536), b""):
                h.update(chunk)
    return h.hexdigest()


class ResponseCache:

    def __init__(self, cache_dir: str, ttl_seconds: int = 86400, enabled: bool = True):
        self.cache_dir = cache_dir
        self.ttl_seconds = ttl_seconds
        self.enabled = enabled

    @classmethod
    def from_config(cls, config) -> "ResponseCache":
        return cls(config.cache_dir, config.cache_ttl_seconds, config.cache_enabled)

    def key(self, kind: str, payload: Any) -> str:
        return f"{CACHE_PREFIX}{kind}_{hash_payload(payload)}"

    def _path(self, key: str) -> str:
        return os.path.join(self.cache_dir, f"{key}.json")

    def get(self, key: str) -> Optional[Any]:
        if not self.enabled:
            return None
        p = self._path(key)
        if not os.path.exists(p):
            return None
        try:
            with open(p, "r", encoding="utf-8") as f:
                entry = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("cache read failed for %s: %s", key, e)
            return None
        if time.time() - float(entry.get("timestamp", 0)) >= self.ttl_seconds:
            return None
        return entry.get("data")

    def set(self, key: str, data: Any) -> None:
        if not self.enabled:
            return
        try:
            os.makedirs(self.cache_dir, exist_ok=True)
            tmp = self._path(key) + ".tmp"
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump({"data": data, "timestamp": time.time()}, f, ensure_ascii=False)
            os.replace(tmp, self._path(key))
        except (OSError, TypeError, ValueError) as e:
            logger.warning("cache write failed for %s: %s", key, e)

    def clear(self) -> int:
        """Remove every AI cache entry; returns how many were removed."""
        if not os.path.isdir(self.cache_dir):
            return 0
        removed = 0
        for name in os.listdir(self.cache_dir):
            if not name.startswith(CACHE_PREFIX):
                continue
            try:
                os.remove(os.path.join(self.cache_dir, name))
                removed += 1
            except OSError as e:
                logger.warning("cache clear failed for %s: %s", name, e)
        return removed
