"""HTTP log API schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from netlog.models.http_log import MAX_SQL_INTEGER, HttpLogRecord, QueryType


class CreateHttpLogRequest(BaseModel):
    """Payload for recording one observed exchange."""

    query_id: str
    query_type: QueryType
    method: str | None = None
    code: int | None = Field(default=None, gt=0, le=MAX_SQL_INTEGER)
    message: str | None = None
    full_status: str | None = None
    ip: str | None = None
    full_ip_address: str | None = None
    time: str | None = None
    duration: str | None = None
    request_content_type: str | None = None
    body_size: str | None = None
    port: str | None = None
    url: str | None = None
    body: str | None = None
    error_message: str | None = None
    headers: list[str] = Field(default_factory=list)

    def to_record(self) -> HttpLogRecord:
        return HttpLogRecord(**self.model_dump())


class HttpLogsResponse(BaseModel):
    """Collection response for HTTP logs."""

    items: list[HttpLogRecord]
