import pytest

from bqinsert.config import settings
from bqinsert.models.table_data_insert_all_request import TableDataInsertAllRequest


@pytest.fixture
def insert_request():
    """Request with two rows, one with an insert id and one without"""
    req = TableDataInsertAllRequest()
    req.add_row("id-1", {"name": "a"})
    req.add_row(None, {"name": "b"})
    return req


@pytest.fixture
def gzip_disabled(monkeypatch):
    monkeypatch.setattr(settings, "gzip_enabled", False)
