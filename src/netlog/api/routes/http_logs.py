"""HTTP log routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from netlog.api.deps import DEFAULT_PAGE_SIZE, get_store
from netlog.api.schemas.http_logs import CreateHttpLogRequest, HttpLogsResponse
from netlog.db.query import NO_OFFSET
from netlog.db.store import HttpLogStore
from netlog.errors import RecordCorruptionError, StorageError
from netlog.models.http_log import MAX_SQL_INTEGER, StatusCodeFilter

router = APIRouter(prefix="/api/v1/http-logs", tags=["http-logs"])


@router.get("", response_model=HttpLogsResponse)
async def list_http_logs(
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=0, le=MAX_SQL_INTEGER),
    offset: int = Query(NO_OFFSET, ge=NO_OFFSET, le=MAX_SQL_INTEGER),
    min_status: int | None = None,
    max_status: int | None = None,
    only_errors: bool = False,
    search: str | None = None,
    store: HttpLogStore = Depends(get_store),
) -> HttpLogsResponse:
    try:
        status_filter = StatusCodeFilter(min_status_code=min_status, max_status_code=max_status)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc

    try:
        items = await store.query(
            limit=limit,
            offset=offset,
            status_filter=status_filter,
            only_errors=only_errors,
            search=search,
        )
    except RecordCorruptionError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
        ) from exc
    except StorageError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return HttpLogsResponse(items=items)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_http_log(
    request: CreateHttpLogRequest,
    store: HttpLogStore = Depends(get_store),
) -> dict[str, int]:
    try:
        record_id = await store.add(request.to_record())
    except StorageError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return {"id": record_id}


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_http_logs(store: HttpLogStore = Depends(get_store)) -> None:
    try:
        await store.clear_all()
    except StorageError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
