"""
Table definitions and idempotent database initialisation.

initialize() can run on every startup and from GET /api/init: each insert is
guarded by a COUNT(*) check, so existing data is never duplicated.
"""

import logging
from datetime import datetime, timezone

import config
from errors import StorageFailure
from storage.base import Storage

logger = logging.getLogger(__name__)

CREATE_FILES_TABLE = """
CREATE TABLE IF NOT EXISTS files (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    description TEXT,
    url TEXT NOT NULL,
    category TEXT,
    size INTEGER,
    type TEXT,
    downloads INTEGER DEFAULT 0,
    created_at TEXT
)
"""

CREATE_ADMIN_CONFIG_TABLE = """
CREATE TABLE IF NOT EXISTS admin_config (
    id INTEGER PRIMARY KEY,
    password TEXT NOT NULL,
    updated_at TEXT
)
"""

SAMPLE_FILES = [
    {
        "name": "Node.js 开发指南",
        "description": "Node.js 完整开发教程",
        "url": "https://example.com/nodejs-guide.pdf",
        "category": "编程教程",
        "size": 5242880,
        "type": "pdf",
    },
    {
        "name": "React 实战项目",
        "description": "React 前端框架实战案例",
        "url": "https://example.com/react-project.zip",
        "category": "前端开发",
        "size": 10485760,
        "type": "zip",
    },
    {
        "name": "Python 数据分析",
        "description": "使用 pandas 和 numpy 进行数据分析",
        "url": "https://example.com/python-data.pdf",
        "category": "数据科学",
        "size": 7340032,
        "type": "pdf",
    },
]


def utc_timestamp() -> str:
    """Current UTC time in SQLite's datetime('now') format."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


async def _count(storage: Storage, sql: str) -> int:
    row = await storage.first(sql)
    return int(row["count"]) if row else 0


async def initialize(storage: Storage, seed_samples: bool = True) -> dict:
    """Create tables, seed the admin password and (optionally) sample files."""
    await storage.execute(CREATE_FILES_TABLE)
    await storage.execute(CREATE_ADMIN_CONFIG_TABLE)

    if await _count(storage, "SELECT COUNT(*) AS count FROM admin_config WHERE id = 1") == 0:
        await storage.execute(
            "INSERT INTO admin_config (id, password, updated_at) VALUES (1, ?, ?)",
            (config.DEFAULT_ADMIN_PASSWORD, utc_timestamp()),
        )
        logger.info("Seeded default admin password")

    seeded = 0
    if seed_samples and await _count(storage, "SELECT COUNT(*) AS count FROM files") == 0:
        for sample in SAMPLE_FILES:
            try:
                await storage.execute(
                    "INSERT INTO files (name, description, url, category, size, type, downloads, created_at) "
                    "VALUES (?, ?, ?, ?, ?, ?, 0, ?)",
                    (
                        sample["name"],
                        sample["description"],
                        sample["url"],
                        sample["category"],
                        sample["size"],
                        sample["type"],
                        utc_timestamp(),
                    ),
                )
                seeded += 1
            except StorageFailure:
                # One bad sample must not abort initialisation
                logger.exception("Failed to insert sample file %r", sample["name"])

    if seeded:
        logger.info("Inserted %d sample files", seeded)

    message = "Database initialized successfully"
    if seeded:
        message += " with sample data"
    return {"success": True, "message": message}
