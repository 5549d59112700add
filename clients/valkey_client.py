"""
Valkey (Redis-compatible) connection for view invalidation.

Only the two writes invalidation needs: drop a key, bump a counter.
The connection is checked at construction; failures surface as
redis.RedisError for the caller to wrap.
"""

import logging

import redis

logger = logging.getLogger(__name__)


class ValkeyClient:
    """
    Valkey connection used by ValkeyViewCache.

    Usage:
        client = ValkeyClient("redis://localhost:6379/0")
        client.delete("view:/dashboard/invoices")
        client.incr("view:/dashboard/invoices:generation")
    """

    def __init__(self, url: str):
        """
        Args:
            url: Redis-compatible connection URL from Vault

        Raises:
            redis.ConnectionError: If Valkey does not answer a PING
        """
        self._client = redis.from_url(url, decode_responses=True)
        self._client.ping()
        logger.info("ValkeyClient connected")

    def delete(self, key: str) -> bool:
        """Remove key; False if there was nothing to remove."""
        return bool(self._client.delete(key))

    def incr(self, key: str) -> int:
        """Add one to a counter key (missing counts as 0) and return it."""
        return int(self._client.incr(key))

    def close(self) -> None:
        self._client.close()
        logger.info("ValkeyClient closed")
