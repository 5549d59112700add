"""
Rendered-view invalidation in Valkey.

Each view path has two keys:
    {prefix}{path}             cached render of the view
    {prefix}{path}:generation  counter bumped on every invalidation

mark_stale() drops the cached render and bumps the generation, so a
renderer holding an older generation knows its result is out of date.
"""

import logging

import redis

from clients.valkey_client import ValkeyClient
from core.errors import CacheInvalidationError

logger = logging.getLogger(__name__)


class ValkeyViewCache:
    """CacheInvalidator backed by Valkey."""

    def __init__(self, valkey: ValkeyClient, key_prefix: str = "view:"):
        self.valkey = valkey
        self.key_prefix = key_prefix

    def mark_stale(self, view: str) -> None:
        """
        Invalidate the cached render of a view.

        Raises:
            CacheInvalidationError: If Valkey is unreachable or rejects the write
        """
        payload_key = f"{self.key_prefix}{view}"
        try:
            self.valkey.delete(payload_key)
            generation = self.valkey.incr(f"{payload_key}:generation")
        except redis.RedisError as e:
            raise CacheInvalidationError(f"Could not invalidate view {view}") from e

        logger.debug("View %s marked stale (generation %d)", view, generation)
