import asyncio
from pathlib import Path

import pytest

from netlog.api.deps import ensure_schema, env_int, get_store
from netlog.models.http_log import HttpLogRecord


@pytest.mark.asyncio
async def test_get_store_handles_concurrent_first_requests(tmp_path: Path) -> None:
    db_path = tmp_path / "fresh" / "netlog.db"

    async def first_query() -> list[HttpLogRecord]:
        provider = get_store(db_path)
        store = await provider.__anext__()
        try:
            return await store.query(limit=1)
        finally:
            await provider.aclose()

    results = await asyncio.gather(*(first_query() for _ in range(8)), return_exceptions=True)

    assert results == [[] for _ in range(8)]


@pytest.mark.asyncio
async def test_ensure_schema_is_repeatable(tmp_path: Path) -> None:
    db_path = tmp_path / "netlog.db"
    await ensure_schema(db_path)
    await ensure_schema(db_path)
    assert db_path.exists()


def test_env_int_reads_and_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NETLOG_DEFAULT_PAGE_SIZE", raising=False)
    assert env_int("NETLOG_DEFAULT_PAGE_SIZE", 50) == 50

    monkeypatch.setenv("NETLOG_DEFAULT_PAGE_SIZE", "25")
    assert env_int("NETLOG_DEFAULT_PAGE_SIZE", 50) == 25


def test_env_int_names_malformed_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NETLOG_DEFAULT_PAGE_SIZE", "fifty")
    with pytest.raises(ValueError, match="NETLOG_DEFAULT_PAGE_SIZE"):
        env_int("NETLOG_DEFAULT_PAGE_SIZE", 50)
