"""Tests for HTTP session creation."""

import pytest

from dtop import __version__
from dtop.core.http_session import create_http_session


@pytest.mark.asyncio
async def test_create_http_session_applies_total_timeout():
    async with create_http_session(5) as session:
        assert session.timeout.total == 5
        assert session.timeout.sock_connect == 5
        assert session.headers["User-Agent"] == f"dtop/{__version__}"

    assert session.closed
