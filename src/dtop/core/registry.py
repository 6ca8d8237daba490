"""Package registry client.

Looks up the latest published version of a package from the PyPI JSON
API. A single GET is made per lookup; there is no retry.
"""

from typing import Any

import aiohttp
import orjson

from dtop.exceptions import RegistryError
from dtop.logger import get_logger

logger = get_logger(__name__)


class RegistryClient:
    """Fetches package metadata from the registry."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        url: str,
        package: str,
    ) -> None:
        """Initialize the registry client.

        Args:
            session: aiohttp session for making requests
            url: URL of the package metadata document
            package: Package name, used in error messages

        """
        self.session = session
        self.url = url
        self.package = package

    async def _fetch_metadata(self) -> dict[str, Any]:
        """Fetch and decode the package metadata document.

        Raises:
            RegistryError: On network failure, timeout, HTTP error status or
                undecodable payload.

        """
        logger.debug("Fetching package metadata from %s", self.url)
        try:
            async with self.session.get(self.url) as response:
                response.raise_for_status()
                body = await response.read()
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.debug("Registry request for %s failed: %s", self.url, e)
            reason = str(e) or type(e).__name__
            msg = f"request to {self.url} failed: {reason}"
            raise RegistryError(msg, target=self.package) from e

        try:
            data = orjson.loads(body)
        except orjson.JSONDecodeError as e:
            msg = f"invalid JSON from {self.url}: {e}"
            raise RegistryError(msg, target=self.package) from e

        if not isinstance(data, dict):
            msg = f"unexpected payload from {self.url}"
            raise RegistryError(msg, target=self.package)

        return data

    async def fetch_latest_version(self) -> str:
        """Return the version string the registry marks as latest.

        Returns:
            Latest version, e.g. ``"2.0.0"``.

        Raises:
            RegistryError: If the lookup fails or the payload has no version.

        """
        data = await self._fetch_metadata()
        info = data.get("info")
        latest = info.get("version") if isinstance(info, dict) else None

        if not isinstance(latest, str) or not latest.strip():
            msg = "registry response has no latest version"
            raise RegistryError(msg, target=self.package)

        logger.debug("Latest %s version is %s", self.package, latest)
        return latest.strip()
