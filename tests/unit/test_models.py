import pytest
from pydantic import ValidationError

from netlog.models.http_log import HttpLogRecord, QueryType, StatusCodeFilter


def test_record_defaults() -> None:
    record = HttpLogRecord(query_id="q1", query_type=QueryType.REQUEST)
    assert record.id is None
    assert record.code is None
    assert record.headers == []
    assert not record.is_error


def test_record_rejects_non_positive_code() -> None:
    with pytest.raises(ValidationError):
        HttpLogRecord(query_id="q1", query_type=QueryType.RESPONSE, code=0)


def test_record_is_frozen() -> None:
    record = HttpLogRecord(query_id="q1", query_type=QueryType.RESPONSE, code=200)
    with pytest.raises(ValidationError):
        record.code = 500


def test_record_error_classification() -> None:
    base = {"query_id": "q1", "query_type": QueryType.RESPONSE}
    assert HttpLogRecord(**base, code=404).is_error
    assert HttpLogRecord(**base, code=599).is_error
    assert not HttpLogRecord(**base, code=399).is_error
    assert not HttpLogRecord(**base, code=600).is_error
    assert HttpLogRecord(**base, error_message="timeout").is_error
    assert not HttpLogRecord(**base, error_message="").is_error


def test_status_filter_condition() -> None:
    assert not StatusCodeFilter().has_condition()
    assert StatusCodeFilter(min_status_code=200).has_condition()
    assert StatusCodeFilter(min_status_code=200, max_status_code=299).has_condition()


def test_status_filter_rejects_inverted_range() -> None:
    with pytest.raises(ValidationError):
        StatusCodeFilter(min_status_code=500, max_status_code=400)


def test_integer_fields_stay_within_sql_range() -> None:
    with pytest.raises(ValidationError):
        StatusCodeFilter(max_status_code=2**63)
    with pytest.raises(ValidationError):
        StatusCodeFilter(min_status_code=-1)
    with pytest.raises(ValidationError):
        HttpLogRecord(query_id="q1", query_type=QueryType.RESPONSE, code=2**63)
