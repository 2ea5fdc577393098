"""
aiosqlite-backed storage adapter.

One connection per adapter, opened lazily on first use and kept for the life
of the process. Pointing the adapter at ":memory:" gives the zero-setup
in-memory backend: same interface, nothing written to disk.

Client errors are logged and re-raised as StorageFailure.
"""

import asyncio
import logging
import sqlite3
from typing import Any, Optional, Sequence

import aiosqlite

from errors import StorageFailure
from storage.base import ExecuteResult

logger = logging.getLogger(__name__)

MEMORY = ":memory:"


class SQLiteStorage:
    def __init__(self, path: str = MEMORY):
        self.path = path
        self._conn: Optional[aiosqlite.Connection] = None
        self._lock = asyncio.Lock()

    @property
    def in_memory(self) -> bool:
        return self.path == MEMORY

    async def connect(self) -> aiosqlite.Connection:
        async with self._lock:
            if self._conn is None:
                logger.info("Opening SQLite database at %s", self.path)
                try:
                    conn = await aiosqlite.connect(self.path)
                except sqlite3.Error as exc:
                    logger.exception("SQLite connect failed")
                    raise StorageFailure(f"Could not open database: {exc}") from exc
                conn.row_factory = aiosqlite.Row
                self._conn = conn
        return self._conn

    async def query(self, sql: str, params: Sequence[Any] = ()) -> list[dict]:
        conn = await self.connect()
        try:
            async with conn.execute(sql, tuple(params)) as cursor:
                rows = await cursor.fetchall()
        except sqlite3.Error as exc:
            logger.exception("SQLite query failed: %s", sql)
            raise StorageFailure(str(exc)) from exc
        return [dict(row) for row in rows]

    async def execute(self, sql: str, params: Sequence[Any] = ()) -> ExecuteResult:
        conn = await self.connect()
        try:
            cursor = await conn.execute(sql, tuple(params))
            await conn.commit()
        except sqlite3.Error as exc:
            logger.exception("SQLite execute failed: %s", sql)
            raise StorageFailure(str(exc)) from exc
        result = ExecuteResult(rowcount=cursor.rowcount, lastrowid=cursor.lastrowid)
        await cursor.close()
        return result

    async def first(self, sql: str, params: Sequence[Any] = ()) -> Optional[dict]:
        rows = await self.query(sql, params)
        return rows[0] if rows else None

    async def close(self) -> None:
        if self._conn is not None:
            await self._conn.close()
            self._conn = None
