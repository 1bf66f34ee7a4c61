"""Shared pytest fixtures for tsqlstring tests."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from tsqlstring.schema.options import FormatOptions
from tsqlstring.template.formatter import SqlFormatter


@pytest.fixture(scope="session")
def utc_instant() -> datetime:
    """2012-05-07T11:42:03.002Z as an aware datetime."""
    return datetime(2012, 5, 7, 11, 42, 3, 2000, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def naive_wall_clock() -> datetime:
    """2012-05-07 11:42:03.002 with no zone attached."""
    return datetime(2012, 5, 7, 11, 42, 3, 2000)


@pytest.fixture
def utc_formatter() -> SqlFormatter:
    return SqlFormatter(FormatOptions(time_zone="Z"))
