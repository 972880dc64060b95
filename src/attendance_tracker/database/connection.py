from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

import mysql.connector
from mysql.connector import pooling

from ..core.constants import DEFAULT_DB_POOL_SIZE, DEFAULT_DB_POOL_TIMEOUT
from ..core.exceptions import DependencyError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_DB_POOL_SIZE
    pool_timeout: float = DEFAULT_DB_POOL_TIMEOUT
    pool_name: str = "attendance_tracker"


class _Lease:
    """Pooled connection whose ``close()`` also frees its pool slot (once)."""

    def __init__(self, conn, release: Callable[[], None]):
        self._conn = conn
        self._release: Optional[Callable[[], None]] = release

    def __getattr__(self, name):
        return getattr(self._conn, name)

    def close(self) -> None:
        if self._release is None:
            return
        release, self._release = self._release, None
        try:
            self._conn.close()
        finally:
            release()


class DatabaseConnection:
    """Pooled DB connection factory.

    The pool is created on first use so the app can start (and report an
    unhealthy database) while MySQL is still down. ``connect()`` waits up to
    ``pool_timeout`` seconds for a free slot when all ``pool_size``
    connections are in use; closing the returned connection hands the slot
    back.
    """

    def __init__(self, config: DBConfig, *, pool_factory: Callable[..., object] = pooling.MySQLConnectionPool):
        self._config = config
        self._pool_factory = pool_factory
        self._pool = None
        self._lock = threading.Lock()
        self._slots = threading.BoundedSemaphore(int(config.pool_size))

    @property
    def config(self) -> DBConfig:
        return self._config

    def _get_pool(self):
        with self._lock:
            if self._pool is None:
                self._pool = self._pool_factory(
                    pool_name=self._config.pool_name,
                    pool_size=int(self._config.pool_size),
                    pool_reset_session=True,
                    host=self._config.host,
                    port=int(self._config.port),
                    user=self._config.user,
                    password=self._config.password,
                    database=self._config.database,
                    autocommit=False,
                )
                logger.info(
                    "MySQL pool ready: %s@%s:%s/%s (size=%s)",
                    self._config.user,
                    self._config.host,
                    self._config.port,
                    self._config.database,
                    self._config.pool_size,
                )
            return self._pool

    def connect(self):
        if not self._slots.acquire(timeout=self._config.pool_timeout):
            logger.error(
                "No database connection freed up within %ss (pool size %s)",
                self._config.pool_timeout,
                self._config.pool_size,
            )
            raise DependencyError("Database unavailable")
        try:
            conn = self._get_pool().get_connection()
        except mysql.connector.Error as e:
            self._slots.release()
            logger.error("Cannot obtain database connection: %s", e)
            raise DependencyError("Database unavailable") from e
        return _Lease(conn, self._slots.release)

    def ping(self) -> bool:
        """True when a pooled connection answers a ping. Never raises."""
        try:
            conn = self.connect()
        except DependencyError:
            return False
        try:
            conn.ping(reconnect=False)
            return True
        except mysql.connector.Error as e:
            logger.warning("Database ping failed: %s", e)
            return False
        finally:
            conn.close()
