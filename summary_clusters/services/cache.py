import hashlib
import json
import time

from summary_clusters.config import CLUSTER_CACHE_MAX_ENTRIES, CLUSTER_CACHE_TTL


class ResultCache:
    """Clustering results keyed by request hash, dropped after ttl_seconds."""

    def __init__(self, ttl_seconds: int = 120, max_entries: int = 256):
        self.ttl = ttl_seconds
        self.max_entries = max(1, max_entries)
        self._store = {}  # request key -> (expires_at, result)

    def __len__(self):
        return len(self._store)

    def get(self, key):
        hit = self._store.get(key)
        if hit is None:
            return None
        expires, result = hit
        if time.monotonic() >= expires:
            del self._store[key]
            return None
        return result

    def _evict(self, now: float):
        self._store = {k: v for k, v in self._store.items() if v[0] > now}
        # still full: oldest expiry goes first
        while len(self._store) >= self.max_entries:
            oldest = min(self._store, key=lambda k: self._store[k][0])
            del self._store[oldest]

    def set(self, key, result):
        now = time.monotonic()
        self._store.pop(key, None)
        self._evict(now)
        self._store[key] = (now + self.ttl, result)

    def clear(self):
        self._store.clear()


def request_key(documents, iterations, metric, seed) -> str:
    payload = json.dumps([list(documents), iterations, metric, seed], ensure_ascii=False)
    return "clusters:" + hashlib.sha1(payload.encode("utf-8")).hexdigest()


clusters_cache = ResultCache(ttl_seconds=CLUSTER_CACHE_TTL, max_entries=CLUSTER_CACHE_MAX_ENTRIES)  # seeded results only
