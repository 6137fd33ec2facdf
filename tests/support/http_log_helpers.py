from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from netlog.db.store import HttpLogStore, open_connection
from netlog.models.http_log import HttpLogRecord, QueryType


def make_record(**overrides: Any) -> HttpLogRecord:
    fields: dict[str, Any] = {
        "query_id": "q-1",
        "query_type": QueryType.RESPONSE,
        "method": "GET",
        "code": 200,
        "message": "OK",
        "full_status": "HTTP/1.1 200 OK",
        "ip": "10.0.0.5",
        "full_ip_address": "10.0.0.5:443",
        "time": "12:00:01.250",
        "duration": "125 ms",
        "request_content_type": "application/json",
        "body_size": "17 B",
        "port": "443",
        "url": "https://api.example.com/v1/items",
        "body": '{"items": [1, 2]}',
        "error_message": None,
        "headers": ["Content-Type: application/json", "X-Trace: abc"],
    }
    fields.update(overrides)
    return HttpLogRecord(**fields)


@asynccontextmanager
async def store_at(tmp_path: Path) -> AsyncIterator[HttpLogStore]:
    async with open_connection(tmp_path / "netlog.db") as conn:
        store = HttpLogStore(conn)
        await store.create_schema()
        yield store
