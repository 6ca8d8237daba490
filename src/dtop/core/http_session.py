"""HTTP session utilities for dtop.

This module provides a configured aiohttp session for registry lookups.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from dtop import __version__
from dtop.constants import PACKAGE_NAME


@asynccontextmanager
async def create_http_session(
    timeout_seconds: float,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Create configured HTTP session.

    Args:
        timeout_seconds: Total time budget for each request, connection
            included.

    Yields:
        Configured aiohttp.ClientSession

    """
    timeout = aiohttp.ClientTimeout(
        total=timeout_seconds,
        sock_connect=timeout_seconds,
    )
    headers = {
        "Accept": "application/json",
        "User-Agent": f"{PACKAGE_NAME}/{__version__}",
    }

    async with aiohttp.ClientSession(
        timeout=timeout,
        headers=headers,
    ) as session:
        yield session
