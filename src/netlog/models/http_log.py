"""HTTP log domain models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Largest value an SQLite INTEGER parameter can carry.
MAX_SQL_INTEGER = 2**63 - 1


class QueryType(str, Enum):
    """Direction of an observed HTTP exchange."""

    REQUEST = "request"
    RESPONSE = "response"


class HttpLogRecord(BaseModel):
    """One observed HTTP request or response."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
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

    @property
    def is_error(self) -> bool:
        if self.error_message:
            return True
        return self.code is not None and 400 <= self.code <= 599


class StatusCodeFilter(BaseModel):
    """Inclusive status code range; either bound may be omitted."""

    min_status_code: int | None = Field(default=None, ge=0, le=MAX_SQL_INTEGER)
    max_status_code: int | None = Field(default=None, ge=0, le=MAX_SQL_INTEGER)

    @model_validator(mode="after")
    def _check_bounds(self) -> StatusCodeFilter:
        if (
            self.min_status_code is not None
            and self.max_status_code is not None
            and self.min_status_code > self.max_status_code
        ):
            msg = "min_status_code must not exceed max_status_code"
            raise ValueError(msg)
        return self

    def has_condition(self) -> bool:
        return self.min_status_code is not None or self.max_status_code is not None
