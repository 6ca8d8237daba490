"""Version command: print the local version and check the registry.

Exit status is 0 when the latest published version could be fetched and
1 when the lookup failed. The lookup is not retried.

The registry lookup is the only asynchronous step of dtop, so this
command owns the event loop: it is started with uvloop for the fetch and
closed as soon as the fetch resolves or times out.
"""

import sys
from argparse import Namespace

import uvloop

from dtop import __version__
from dtop.cli.commands.base import BaseCommandHandler
from dtop.constants import GNU_NOTICE, PACKAGE_NAME, REGISTRY_NAME
from dtop.core.http_session import create_http_session
from dtop.core.registry import RegistryClient
from dtop.core.version import is_newer
from dtop.exceptions import RegistryError
from dtop.logger import get_logger

logger = get_logger(__name__)


class VersionHandler(BaseCommandHandler):
    """Report the installed version and the latest published one."""

    def execute(self, args: Namespace) -> None:
        """Execute the version command."""
        style = self.style
        print(style.yellow(GNU_NOTICE))
        print()
        print(
            style.green(f"Local installation is {PACKAGE_NAME}@{__version__}")
        )
        print(
            style.cyan(
                f"Fetching package info from {REGISTRY_NAME}, stand by for "
                f"up to {self.config.registry_timeout:g} seconds..."
            ),
            flush=True,
        )

        try:
            latest = uvloop.run(self.fetch_latest_version())
        except RegistryError as e:
            logger.debug("Version lookup failed: %s", e)
            print(f"Failed to fetch version info from {REGISTRY_NAME}")
            sys.exit(1)

        print(
            style.blue(
                f"{PACKAGE_NAME}@latest version published on "
                f"{REGISTRY_NAME}: "
            )
            + style.magenta(latest)
        )
        self._print_comparison(latest)

    async def fetch_latest_version(self) -> str:
        """Fetch the latest published version of dtop.

        Raises:
            RegistryError: If the lookup fails or times out.

        """
        timeout = self.config.registry_timeout
        async with create_http_session(timeout) as session:
            client = RegistryClient(
                session, self.config.registry_url, PACKAGE_NAME
            )
            return await client.fetch_latest_version()

    def _print_comparison(self, latest: str) -> None:
        """Tell the user whether an update is available.

        Nothing is printed when either version cannot be compared, e.g. on
        a development checkout.
        """
        newer = is_newer(__version__, latest)
        if newer is None:
            logger.debug(
                "Cannot compare versions %s and %s", __version__, latest
            )
        elif newer:
            print(
                self.style.yellow(
                    "A newer version is available. Upgrade with: "
                    f"pip install --upgrade {PACKAGE_NAME}"
                )
            )
        else:
            print(self.style.green("You are running the latest version."))
