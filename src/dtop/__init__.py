"""Top-level package for dtop.

Author: 2023 - 2025 Akhil Pillai
License: GPL-3.0
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("dtop")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
