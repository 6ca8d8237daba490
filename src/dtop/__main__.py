"""Allow ``python -m dtop``."""

from dtop.main import main

main()
