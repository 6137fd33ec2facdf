"""Shared API dependency providers."""

from __future__ import annotations

import os
from collections.abc import AsyncIterator
from pathlib import Path

from fastapi import Depends

from netlog.db.store import HttpLogStore, open_connection
from netlog.errors import SchemaError


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ValueError(msg) from exc


APP_DB_PATH = Path(os.environ.get("NETLOG_DB_PATH", ".netlog/netlog.db"))
DEFAULT_PAGE_SIZE = env_int("NETLOG_DEFAULT_PAGE_SIZE", 50)


def get_db_path() -> Path:
    return APP_DB_PATH


async def ensure_schema(db_path: Path) -> None:
    """Create the log table unless another connection already did."""
    db_path.parent.mkdir(parents=True, exist_ok=True)
    async with open_connection(db_path) as conn:
        store = HttpLogStore(conn)
        if await store.schema_exists():
            return
        try:
            await store.create_schema()
        except SchemaError:
            if not await store.schema_exists():
                raise


async def get_store(db_path: Path = Depends(get_db_path)) -> AsyncIterator[HttpLogStore]:
    await ensure_schema(db_path)
    async with open_connection(db_path) as conn:
        yield HttpLogStore(conn)
