from storage.base import ExecuteResult, Storage
from storage.sqlite import MEMORY, SQLiteStorage
from storage.schema import initialize

__all__ = ["ExecuteResult", "Storage", "MEMORY", "SQLiteStorage", "initialize"]
