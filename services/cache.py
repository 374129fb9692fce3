import json
import logging
import redis
from config import config

logger = logging.getLogger(__name__)

# --- Valkey/Redis Backend Implementations ---

class _MockValkeyBackend:
    """Simulates the low-level Valkey/Redis client (in-memory)."""
    def __init__(self):
        self._cache = {}

    def get(self, key: str) -> str | None:
        logger.debug("cache mock get: %s", key)
        return self._cache.get(key)

    def set(self, key: str, value: str, ex: int):
        # Expiry is ignored in memory
        logger.debug("cache mock set: %s", key)
        self._cache[key] = value


class RealValkeyBackend:
    """Real implementation using redis-py client (compatible with Valkey)."""
    def __init__(self, host: str, port: int, db: int = 0, password: str | None = None):
        self.client = redis.Redis(
            host=host,
            port=port,
            db=db,
            password=password,
            decode_responses=True,
            socket_timeout=2.0
        )
        self.client.ping()

    def get(self, key: str) -> str | None:
        try:
            logger.debug("cache valkey get: %s", key)
            return self.client.get(key)
        except redis.RedisError as e:
            logger.error("Valkey GET error for key %s: %s", key, e)
            return None

    def set(self, key: str, value: str, ex: int):
        try:
            logger.debug("cache valkey set: %s", key)
            self.client.set(key, value, ex=ex)
        except redis.RedisError as e:
            logger.error("Valkey SET error for key %s: %s", key, e)


# --- Dedicated Cache Client Class ---

class CacheClient:
    """High-level client for caching image search results."""

    def __init__(self, backend, ttl: int = 300):
        self.backend = backend
        self.ttl = ttl
        logger.debug("CacheClient backend: %s", self.backend)

    @staticmethod
    def search_key(query: str, per_page: int) -> str:
        return f"img:search:{query.strip().lower()}:{per_page}"

    def get_search(self, query: str, per_page: int) -> list[dict] | None:
        key = self.search_key(query, per_page)
        json_str = self.backend.get(key)
        if json_str:
            logger.debug("cache hit for %s", key)
            return json.loads(json_str)
        return None

    def set_search(self, query: str, per_page: int, images: list[dict]):
        key = self.search_key(query, per_page)
        self.backend.set(key, json.dumps(images), ex=self.ttl)
        logger.debug("%d images cached under %s", len(images), key)


# --- Initialize Backend and Default Client ---

def _build_backend():
    if not config.valkey_host:
        logger.info("VALKEY_HOST not set. Using Mock Valkey Backend.")
        return _MockValkeyBackend()

    logger.info("valkey_host: %s, port: %d", config.valkey_host, config.valkey_port)
    try:
        return RealValkeyBackend(host=config.valkey_host, port=config.valkey_port)
    except redis.RedisError as e:
        logger.warning("Failed to connect to Valkey/Redis (%s). Falling back to Mock Valkey Backend.", e)
        return _MockValkeyBackend()


# Initialize a default client (singleton)
_DEFAULT_CACHE_CLIENT = CacheClient(backend=_build_backend(), ttl=config.image_cache_ttl)

def get_cache_client():
    return _DEFAULT_CACHE_CLIENT

def get_mock_cache_client():
    return CacheClient(backend=_MockValkeyBackend(), ttl=config.image_cache_ttl)
