"""
File catalog service: CRUD over the `files` table plus the download counter.

Reads are public; create/update/delete are gated by the routers. Every
operation is a single statement: incrementing the counter is one
`UPDATE ... SET downloads = downloads + 1`, so concurrent downloads never lose
a count.
"""

import logging
from typing import Optional

from errors import MissingField, NotFound
from models.file_record import FileInput, FileRecord
from storage.base import Storage
from storage.schema import utc_timestamp

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "uncategorized"


def _escape_like(term: str) -> str:
    """Make %, _ and \\ match literally in a LIKE pattern using ESCAPE '\\'."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _validated(data: FileInput) -> tuple:
    """Column values for name, description, url, category, size, type with defaults applied."""
    if not data.name or not data.url:
        raise MissingField("Name and URL are required")
    return (
        data.name,
        data.description or "",
        data.url,
        data.category or DEFAULT_CATEGORY,
        data.size or 0,
        data.type or "",
    )


async def list_files(
    storage: Storage,
    search: Optional[str] = None,
    category: Optional[str] = None,
) -> list[FileRecord]:
    """
    All files, newest first.

    search:   case-insensitive substring match on name or description
    category: exact category match
    """
    sql = "SELECT * FROM files"
    clauses: list[str] = []
    params: list = []

    if search:
        clauses.append(
            "(LOWER(name) LIKE ? ESCAPE '\\' "
            "OR LOWER(COALESCE(description, '')) LIKE ? ESCAPE '\\')"
        )
        pattern = f"%{_escape_like(search.lower())}%"
        params += [pattern, pattern]
    if category:
        clauses.append("category = ?")
        params.append(category)

    if clauses:
        sql += " WHERE " + " AND ".join(clauses)
    sql += " ORDER BY created_at DESC, id DESC"

    rows = await storage.query(sql, params)
    return [FileRecord(**row) for row in rows]


async def get_file(storage: Storage, file_id: int) -> FileRecord:
    row = await storage.first("SELECT * FROM files WHERE id = ?", (file_id,))
    if row is None:
        raise NotFound()
    return FileRecord(**row)


async def create_file(storage: Storage, data: FileInput) -> FileRecord:
    values = _validated(data)
    result = await storage.execute(
        "INSERT INTO files (name, description, url, category, size, type, downloads, created_at) "
        "VALUES (?, ?, ?, ?, ?, ?, 0, ?)",
        (*values, utc_timestamp()),
    )
    logger.info("Added file %r (id=%s)", data.name, result.lastrowid)
    return await get_file(storage, result.lastrowid)


async def update_file(storage: Storage, file_id: int, data: FileInput) -> FileRecord:
    values = _validated(data)
    result = await storage.execute(
        "UPDATE files SET name = ?, description = ?, url = ?, category = ?, size = ?, type = ? WHERE id = ?",
        (*values, file_id),
    )
    if not result.success:
        raise NotFound()
    return await get_file(storage, file_id)


async def delete_file(storage: Storage, file_id: int) -> None:
    result = await storage.execute("DELETE FROM files WHERE id = ?", (file_id,))
    if not result.success:
        raise NotFound()
    logger.info("Deleted file id=%s", file_id)


async def increment_download(storage: Storage, file_id: int) -> None:
    result = await storage.execute(
        "UPDATE files SET downloads = downloads + 1 WHERE id = ?", (file_id,)
    )
    if not result.success:
        raise NotFound()


async def list_categories(storage: Storage) -> list[str]:
    rows = await storage.query(
        "SELECT DISTINCT category FROM files WHERE category IS NOT NULL"
    )
    return [row["category"] for row in rows]
