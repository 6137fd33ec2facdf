"""SQLite schema for the HTTP log table."""

from __future__ import annotations

import logging

import aiosqlite

from netlog.errors import SchemaError

logger = logging.getLogger(__name__)

HTTP_LOG_TABLE = "net_log_data"

# Columns checked by free-text search, in match order.
SEARCHABLE_COLUMNS = (
    "query_id",
    "method",
    "time",
    "code",
    "message",
    "full_status",
    "full_ip_address",
    "request_content_type",
    "port",
    "ip",
    "url",
    "body_size",
    "duration",
    "body",
    "error_message",
    "headers",
)

CREATE_HTTP_LOG_TABLE = f"""
CREATE TABLE {HTTP_LOG_TABLE} (
    _id INTEGER PRIMARY KEY AUTOINCREMENT,
    query_id TEXT,
    method TEXT,
    code INTEGER,
    message TEXT,
    full_status TEXT,
    full_ip_address TEXT,
    query_type TEXT NOT NULL,
    time TEXT,
    duration TEXT,
    request_content_type TEXT,
    body_size TEXT,
    port TEXT,
    ip TEXT,
    url TEXT,
    body TEXT,
    error_message TEXT,
    headers TEXT
)
"""


async def create_http_log_table(conn: aiosqlite.Connection) -> None:
    """Create the log table; fails if it already exists."""
    try:
        await conn.execute(CREATE_HTTP_LOG_TABLE)
        await conn.commit()
    except aiosqlite.Error as exc:
        logger.error("failed to create %s: %s", HTTP_LOG_TABLE, exc)
        msg = f"cannot create table {HTTP_LOG_TABLE}: {exc}"
        raise SchemaError(msg) from exc
    logger.info("created table %s", HTTP_LOG_TABLE)


async def http_log_table_exists(conn: aiosqlite.Connection) -> bool:
    cursor = await conn.execute(
        "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = ?",
        (HTTP_LOG_TABLE,),
    )
    row = await cursor.fetchone()
    await cursor.close()
    return row is not None
