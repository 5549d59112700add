"""
PostgreSQL client with connection pooling.

Uses psycopg2 with ThreadedConnectionPool. Each call borrows one connection,
runs one statement, commits, and hands the connection back. A failed
statement is rolled back before the connection returns to the pool so the
next borrower never inherits an aborted transaction.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Any, Dict, List, Tuple

import psycopg2
import psycopg2.extras
import psycopg2.pool

logger = logging.getLogger(__name__)


class PostgresClient:
    """
    PostgreSQL client returning rows as dicts.

    Usage:
        db = PostgresClient(database_url)

        new_row = db.execute_returning(
            "INSERT INTO invoices (...) VALUES (...) RETURNING id", params
        )[0]
        affected = db.execute_rowcount("DELETE FROM invoices WHERE id = %s", (invoice_id,))
    """

    # Class-level connection pools shared across instances
    _connection_pools: Dict[str, psycopg2.pool.ThreadedConnectionPool] = {}
    _pools_lock = threading.RLock()

    def __init__(
        self,
        database_url: str,
        min_connections: int = 2,
        max_connections: int = 20,
        connect_timeout: int = 30,
    ):
        self._database_url = database_url
        self._min_connections = min_connections
        self._max_connections = max_connections
        self._connect_timeout = connect_timeout
        self._ensure_connection_pool()

    def _ensure_connection_pool(self) -> None:
        """Create connection pool if it doesn't exist."""
        with self._pools_lock:
            if self._database_url not in self._connection_pools:
                pool = psycopg2.pool.ThreadedConnectionPool(
                    minconn=self._min_connections,
                    maxconn=self._max_connections,
                    dsn=self._database_url,
                    connect_timeout=self._connect_timeout,
                )
                self._connection_pools[self._database_url] = pool
                logger.info(
                    "Connection pool created (min=%d, max=%d)",
                    self._min_connections,
                    self._max_connections,
                )

    @contextmanager
    def get_connection(self):
        """Borrow a pooled connection; roll back on error, always return it."""
        if self._database_url not in self._connection_pools:
            self._ensure_connection_pool()

        pool = self._connection_pools[self._database_url]
        conn = None

        try:
            conn = pool.getconn()
            if conn is None:
                raise psycopg2.pool.PoolError("Could not get connection from pool")

            yield conn

        except Exception:
            if conn is not None and not conn.closed:
                conn.rollback()
            raise

        finally:
            if conn is not None:
                pool.putconn(conn)

    def execute_returning(self, query: str, params: Tuple | Dict | None = None) -> List[Dict[str, Any]]:
        """Execute INSERT/UPDATE with RETURNING, return results."""
        with self.get_connection() as conn:
            with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                cur.execute(query, params)
                conn.commit()
                return [dict(row) for row in cur.fetchall()]

    def execute_rowcount(self, query: str, params: Tuple | Dict | None = None) -> int:
        """Execute UPDATE/DELETE without RETURNING, return affected row count."""
        with self.get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(query, params)
                conn.commit()
                return cur.rowcount

    def close(self) -> None:
        """Close connection pool."""
        with self._pools_lock:
            if self._database_url in self._connection_pools:
                self._connection_pools[self._database_url].closeall()
                del self._connection_pools[self._database_url]
