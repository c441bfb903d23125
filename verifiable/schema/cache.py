"""Credential schema cache with LRU eviction and TTL expiration.

Caches custom credential schemas downloaded by URL so that repeated
decodes of credentials declaring the same schema skip the network.

INVARIANT: Only schemas from successful (HTTP 200) downloads are stored.
Nothing is cached by default; callers opt in by passing a SchemaCache
through CredentialOptions.
"""

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Optional

from verifiable.core.config import SCHEMA_CACHE_MAX_ENTRIES, SCHEMA_CACHE_TTL_SECONDS

log = logging.getLogger(__name__)


@dataclass
class CachedSchema:
    """Cached schema entry with metadata.

    Attributes:
        schema_bytes: The downloaded schema document, as served.
        url: The URL the schema was downloaded from (cache key).
        cached_at: Unix timestamp when the entry was cached.
        expires_at: Unix timestamp when this entry expires.
        last_access: Unix timestamp of last access.
    """

    schema_bytes: bytes
    url: str
    cached_at: float = field(default_factory=time.time)
    expires_at: float = 0.0
    last_access: float = field(default_factory=time.time)


@dataclass
class SchemaCacheConfig:
    """Configuration for schema cache.

    Attributes:
        ttl_seconds: Time-to-live for cache entries.
        max_entries: Maximum entries before LRU eviction.
    """

    ttl_seconds: int = SCHEMA_CACHE_TTL_SECONDS
    max_entries: int = SCHEMA_CACHE_MAX_ENTRIES


@dataclass
class SchemaCacheMetrics:
    """Counters of cache lookups; misses include expired entries."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0
    expirations: int = 0

    def hit_rate(self) -> float:
        """Share of lookups served from the cache, 0.0 before any lookup."""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


class SchemaCache:
    """Thread-safe LRU cache of downloaded credential schemas.

    Safe to share between threads decoding concurrently; every operation
    holds a threading.Lock for its whole duration.
    """

    def __init__(self, config: Optional[SchemaCacheConfig] = None):
        self._config = config or SchemaCacheConfig()
        # url -> entry, least recently used first
        self._entries: "OrderedDict[str, CachedSchema]" = OrderedDict()
        self._lock = threading.Lock()
        self._metrics = SchemaCacheMetrics()

    @property
    def config(self) -> SchemaCacheConfig:
        return self._config

    @property
    def metrics(self) -> SchemaCacheMetrics:
        return self._metrics

    def get(self, url: str) -> Optional[bytes]:
        """Retrieve a schema by URL.

        Args:
            url: The URL the schema was downloaded from.

        Returns:
            The cached schema bytes if found and not expired, None otherwise.
        """
        with self._lock:
            entry = self._entries.get(url)

            if entry is None:
                self._metrics.misses += 1
                return None

            now = time.time()
            if now >= entry.expires_at:
                del self._entries[url]
                self._metrics.expirations += 1
                self._metrics.misses += 1
                log.debug(f"Schema {url} expired in cache")
                return None

            entry.last_access = now
            self._entries.move_to_end(url)

            self._metrics.hits += 1
            log.debug(f"Schema cache hit for {url}")
            return entry.schema_bytes

    def put(self, url: str, schema_bytes: bytes) -> None:
        """Store a downloaded schema, evicting the least recently used entries if full.

        Args:
            url: The URL the schema was downloaded from (cache key).
            schema_bytes: The schema document as served.
        """
        with self._lock:
            now = time.time()

            if url in self._entries:
                del self._entries[url]

            while self._entries and len(self._entries) >= self._config.max_entries:
                lru_url, _ = self._entries.popitem(last=False)
                self._metrics.evictions += 1
                log.debug(f"Evicted LRU schema {lru_url}")

            self._entries[url] = CachedSchema(
                schema_bytes=schema_bytes,
                url=url,
                cached_at=now,
                expires_at=now + self._config.ttl_seconds,
                last_access=now,
            )
            log.debug(f"Cached schema from {url}")

    def invalidate(self, url: str) -> bool:
        """Remove a schema from the cache.

        Returns:
            True if the schema was in cache, False otherwise.
        """
        with self._lock:
            if url in self._entries:
                del self._entries[url]
                log.debug(f"Invalidated schema {url}")
                return True
            return False

    def clear(self) -> int:
        """Clear all entries from the cache.

        Returns:
            Number of entries cleared.
        """
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            log.debug(f"Cleared {count} entries from schema cache")
            return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
