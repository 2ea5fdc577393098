"""
Storage adapter interface.

Every read and write in the app goes through these three calls, so the
services never touch a database client directly:

  query(sql, params)   -> list of row dicts
  execute(sql, params) -> ExecuteResult (rowcount, lastrowid)
  first(sql, params)   -> first row dict or None

Statements use qmark ("?") placeholders.
"""

from dataclasses import dataclass
from typing import Any, Optional, Protocol, Sequence


@dataclass
class ExecuteResult:
    rowcount: int
    lastrowid: Optional[int] = None

    @property
    def success(self) -> bool:
        return self.rowcount > 0


class Storage(Protocol):
    async def query(self, sql: str, params: Sequence[Any] = ()) -> list[dict]:
        ...

    async def execute(self, sql: str, params: Sequence[Any] = ()) -> ExecuteResult:
        ...

    async def first(self, sql: str, params: Sequence[Any] = ()) -> Optional[dict]:
        ...

    async def close(self) -> None:
        ...
