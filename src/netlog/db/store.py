"""Async SQLite persistence for HTTP log records."""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import aiosqlite
from pydantic import TypeAdapter, ValidationError

from netlog.db.query import NO_OFFSET, build_select
from netlog.db.schema import HTTP_LOG_TABLE, create_http_log_table, http_log_table_exists
from netlog.errors import RecordCorruptionError, StorageError
from netlog.models.http_log import HttpLogRecord, QueryType, StatusCodeFilter

logger = logging.getLogger(__name__)

_HEADERS = TypeAdapter(list[str])


@asynccontextmanager
async def open_connection(db_path: Path | str) -> AsyncIterator[aiosqlite.Connection]:
    """Open a connection with name-addressable rows and close it on exit."""
    conn = await aiosqlite.connect(db_path)
    conn.row_factory = aiosqlite.Row
    try:
        yield conn
    finally:
        await conn.close()


class HttpLogStore:
    """Data access layer for the HTTP log table.

    The connection is owned by the caller; the store never opens or closes it.
    """

    def __init__(self, conn: aiosqlite.Connection) -> None:
        self._conn = conn

    async def create_schema(self) -> None:
        await create_http_log_table(self._conn)

    async def schema_exists(self) -> bool:
        return await http_log_table_exists(self._conn)

    async def add(self, record: HttpLogRecord) -> int:
        """Insert ``record`` and return the identifier assigned to it."""
        try:
            async with self._conn.execute(
                f"""
                INSERT INTO {HTTP_LOG_TABLE}(
                    query_id,
                    query_type,
                    method,
                    code,
                    message,
                    full_status,
                    ip,
                    full_ip_address,
                    time,
                    duration,
                    request_content_type,
                    body_size,
                    port,
                    url,
                    body,
                    error_message,
                    headers
                )
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    record.query_id,
                    record.query_type.value,
                    record.method,
                    record.code,
                    record.message,
                    record.full_status,
                    record.ip,
                    record.full_ip_address,
                    record.time,
                    record.duration,
                    record.request_content_type,
                    record.body_size,
                    record.port,
                    record.url,
                    record.body,
                    record.error_message,
                    json.dumps(record.headers, ensure_ascii=False),
                ),
            ) as cursor:
                record_id = cursor.lastrowid
            await self._conn.commit()
        except aiosqlite.Error as exc:
            logger.error("insert into %s failed: %s", HTTP_LOG_TABLE, exc)
            msg = f"cannot store http log {record.query_id!r}: {exc}"
            raise StorageError(msg) from exc

        if record_id is None:
            msg = f"no identifier assigned to http log {record.query_id!r}"
            raise StorageError(msg)
        logger.debug("stored http log %s as %d", record.query_id, record_id)
        return record_id

    async def clear_all(self) -> None:
        try:
            await self._conn.execute(f"DELETE FROM {HTTP_LOG_TABLE}")
            await self._conn.commit()
        except aiosqlite.Error as exc:
            logger.error("clearing %s failed: %s", HTTP_LOG_TABLE, exc)
            msg = f"cannot clear http logs: {exc}"
            raise StorageError(msg) from exc
        logger.info("cleared all http logs")

    async def query(
        self,
        *,
        limit: int,
        offset: int = NO_OFFSET,
        status_filter: StatusCodeFilter | None = None,
        only_errors: bool = False,
        search: str | None = None,
    ) -> list[HttpLogRecord]:
        """Return matching records ordered by identifier.

        ``only_errors`` takes precedence over ``status_filter``. A malformed
        row aborts the whole read with :class:`RecordCorruptionError`.
        """
        sql, params = build_select(
            limit=limit,
            offset=offset,
            status_filter=status_filter,
            only_errors=only_errors,
            search=search,
        )
        logger.debug("http log query: %s %s", sql, params)
        try:
            async with self._conn.execute(sql, tuple(params)) as cursor:
                rows = await cursor.fetchall()
                columns = [description[0] for description in cursor.description]
        except aiosqlite.Error as exc:
            logger.error("reading %s failed: %s", HTTP_LOG_TABLE, exc)
            msg = f"cannot read http logs: {exc}"
            raise StorageError(msg) from exc
        return [self._record_from_row(dict(zip(columns, row, strict=True))) for row in rows]

    @staticmethod
    def _record_from_row(row: Mapping[str, Any]) -> HttpLogRecord:
        record_id = int(row["_id"])
        try:
            query_type = QueryType(row["query_type"])
        except ValueError as exc:
            msg = f"row {record_id} has unknown query type {row['query_type']!r}"
            raise RecordCorruptionError(msg, record_id=record_id) from exc

        raw_headers = row["headers"]
        code = row["code"]
        try:
            headers = _HEADERS.validate_json(raw_headers) if raw_headers is not None else []
            return HttpLogRecord(
                id=record_id,
                query_id=row["query_id"],
                query_type=query_type,
                method=row["method"],
                # Older rows used 0 for "no response yet".
                code=code or None,
                message=row["message"],
                full_status=row["full_status"],
                ip=row["ip"],
                full_ip_address=row["full_ip_address"],
                time=row["time"],
                duration=row["duration"],
                request_content_type=row["request_content_type"],
                body_size=row["body_size"],
                port=row["port"],
                url=row["url"],
                body=row["body"],
                error_message=row["error_message"],
                headers=headers,
            )
        except ValidationError as exc:
            msg = f"row {record_id} cannot be mapped to an http log: {exc.error_count()} errors"
            raise RecordCorruptionError(msg, record_id=record_id) from exc
