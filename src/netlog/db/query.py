"""SELECT construction for filtered, paginated log reads."""

from __future__ import annotations

from netlog.db.schema import HTTP_LOG_TABLE, SEARCHABLE_COLUMNS
from netlog.models.http_log import MAX_SQL_INTEGER, StatusCodeFilter

NO_OFFSET = -1

ERROR_CODE_MIN = 400
ERROR_CODE_MAX = 599

SqlParam = str | int


def _status_condition(
    status_filter: StatusCodeFilter | None,
    only_errors: bool,
) -> tuple[str | None, list[SqlParam]]:
    if only_errors:
        return (
            "((error_message IS NOT NULL AND error_message != '')"
            " OR (code >= ? AND code <= ?))",
            [ERROR_CODE_MIN, ERROR_CODE_MAX],
        )

    if status_filter is None or not status_filter.has_condition():
        return None, []

    bounds: list[str] = []
    params: list[SqlParam] = []
    if status_filter.min_status_code is not None:
        bounds.append("code >= ?")
        params.append(status_filter.min_status_code)
    if status_filter.max_status_code is not None:
        bounds.append("code <= ?")
        params.append(status_filter.max_status_code)
    return f"({' AND '.join(bounds)})", params


def _search_condition(search: str | None) -> tuple[str | None, list[SqlParam]]:
    if not search:
        return None, []
    # instr() is case-sensitive and treats % and _ literally, unlike LIKE.
    clauses = [f"instr({column}, ?) > 0" for column in SEARCHABLE_COLUMNS]
    return " OR ".join(clauses), [search] * len(SEARCHABLE_COLUMNS)


def build_select(
    *,
    limit: int,
    offset: int = NO_OFFSET,
    status_filter: StatusCodeFilter | None = None,
    only_errors: bool = False,
    search: str | None = None,
) -> tuple[str, list[SqlParam]]:
    """Return the SELECT statement and its bound parameters."""
    if limit > MAX_SQL_INTEGER or offset > MAX_SQL_INTEGER:
        msg = f"limit and offset must not exceed {MAX_SQL_INTEGER}"
        raise ValueError(msg)
    if limit < 0:
        msg = f"limit must be non-negative, got {limit}"
        raise ValueError(msg)
    if offset < 0 and offset != NO_OFFSET:
        msg = f"offset must be non-negative or NO_OFFSET, got {offset}"
        raise ValueError(msg)

    status_sql, params = _status_condition(status_filter, only_errors)
    search_sql, search_params = _search_condition(search)

    if status_sql and search_sql:
        where = f"{status_sql} AND ({search_sql})"
    else:
        where = status_sql or search_sql
    params = params + search_params

    query = f"SELECT * FROM {HTTP_LOG_TABLE}"
    if where:
        query += f" WHERE {where}"
    query += " ORDER BY _id ASC LIMIT ?"
    params.append(limit)
    if offset != NO_OFFSET:
        query += " OFFSET ?"
        params.append(offset)
    return query, params
