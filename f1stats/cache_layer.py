"""
Redis/Local Caching Layer for the F1 Stats API
Caches driver portraits and upstream F1 API payloads with graceful fallback to local memory
"""

import logging
import pickle
from datetime import datetime, timedelta
from threading import Lock
from typing import Any, Optional
import redis

logger = logging.getLogger(__name__)


class CacheLayer:
    """
    Hybrid caching layer: Redis for production, local memory for development.
    A ttl of None stores the value for the lifetime of the backend (no expiry).
    """

    def __init__(self, redis_url: Optional[str] = None):
        self.redis_client = None
        self.local_cache = {}
        self.cache_timestamps = {}
        self.lock = Lock()

        # Try to connect to Redis if configured
        if redis_url:
            try:
                self.redis_client = redis.from_url(
                    redis_url,
                    decode_responses=False,
                    socket_connect_timeout=5,
                    socket_timeout=5,
                    socket_keepalive=True
                )
                # Test connection
                self.redis_client.ping()
                logger.info("✓ Redis cache connected")
            except redis.RedisError as e:
                logger.warning(f"⚠️ Redis connection failed: {e}. Using local cache.")
                self.redis_client = None
        else:
            logger.info("ℹ️ Redis not configured. Using local memory cache.")

    def get(self, key: str) -> Optional[Any]:
        """Get value from cache (Redis → Local)"""
        if self.redis_client:
            try:
                value = self.redis_client.get(key)
                if value:
                    logger.debug(f"✓ Cache HIT (Redis): {key}")
                    return pickle.loads(value)
            except (redis.RedisError, pickle.UnpicklingError) as e:
                logger.debug(f"Redis get failed: {e}")

        with self.lock:
            if key in self.local_cache:
                expires_at = self.cache_timestamps.get(key)
                if expires_at is not None and expires_at < datetime.now():
                    logger.debug(f"✗ Cache EXPIRED (Local): {key}")
                    self._drop_local(key)
                    return None
                logger.debug(f"✓ Cache HIT (Local): {key}")
                return self.local_cache[key]

        logger.debug(f"✗ Cache MISS: {key}")
        return None

    def set(self, key: str, value: Any, ttl_seconds: Optional[int] = 3600) -> bool:
        """Set value in cache, ttl_seconds=None keeps it until deleted"""
        if value is None:
            return False

        if self.redis_client:
            try:
                if ttl_seconds is None:
                    self.redis_client.set(key, pickle.dumps(value))
                else:
                    self.redis_client.setex(key, ttl_seconds, pickle.dumps(value))
                logger.debug(f"✓ Cached to Redis: {key} (TTL: {ttl_seconds}s)")
                return True
            except redis.RedisError as e:
                logger.debug(f"Redis set failed: {e}")

        # Fallback to local cache
        with self.lock:
            self.local_cache[key] = value
            if ttl_seconds is None:
                self.cache_timestamps.pop(key, None)
            else:
                self.cache_timestamps[key] = datetime.now() + timedelta(seconds=ttl_seconds)
        logger.debug(f"✓ Cached to Local: {key} (TTL: {ttl_seconds}s)")
        return True

    def delete(self, key: str) -> bool:
        """Delete value from cache"""
        try:
            if self.redis_client:
                self.redis_client.delete(key)
        except redis.RedisError as e:
            logger.error(f"Cache delete error: {e}")
            return False

        with self.lock:
            self._drop_local(key)
        return True

    def _drop_local(self, key: str):
        self.local_cache.pop(key, None)
        self.cache_timestamps.pop(key, None)

    def clear_expired_local(self) -> int:
        """Remove expired items from local cache"""
        now = datetime.now()
        with self.lock:
            expired_keys = [
                k for k, exp_time in self.cache_timestamps.items()
                if exp_time < now
            ]
            for key in expired_keys:
                self._drop_local(key)
        return len(expired_keys)

    def health_check(self) -> dict:
        """Health check for cache layer"""
        return {
            "redis_connected": bool(self.redis_client),
            "local_cache_items": len(self.local_cache),
            "cache_mode": "redis" if self.redis_client else "local"
        }


# Global cache instance
_cache_instance: Optional[CacheLayer] = None


def get_cache(redis_url: Optional[str] = None) -> CacheLayer:
    """Get or create global cache instance"""
    global _cache_instance
    if _cache_instance is None:
        _cache_instance = CacheLayer(redis_url)
    return _cache_instance


def cache_key_for(prefix: str, *args) -> str:
    """Build a cache key from prefix and arguments"""
    parts = [prefix]
    for arg in args:
        if arg is not None:
            parts.append(str(arg)[:30])
    return ":".join(parts)


# Cache key constants
CACHE_KEYS = {
    "DRIVER_IMAGE": "driver_image",
    "DRIVER_STANDINGS": "driver_standings",
    "CONSTRUCTOR_STANDINGS": "constructor_standings",
    "NEXT_RACE": "next_race",
    "DRIVERS": "drivers",
    "CURRENT_SEASON": "current_season",
    "SEASONS": "seasons",
    "TEAMS": "teams",
    "TEAM_DRIVERS": "team_drivers",
    "RESULTS": "results",
    "CIRCUITS": "circuits",
}

# Default TTL values (in seconds), None = never expires
CACHE_TTL = {
    "DRIVER_IMAGE": None,
    "DRIVER_STANDINGS": 600,           # 10 minutes
    "CONSTRUCTOR_STANDINGS": 600,      # 10 minutes
    "NEXT_RACE": 300,                  # 5 minutes
    "DRIVERS": 3600,                   # 1 hour
    "CURRENT_SEASON": 1800,            # 30 minutes
    "SEASONS": 86400,                  # 24 hours
    "TEAMS": 3600,                     # 1 hour
    "TEAM_DRIVERS": 3600,              # 1 hour
    "RESULTS": 900,                    # 15 minutes
    "CIRCUITS": 86400,                 # 24 hours
}
