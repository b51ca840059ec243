"""Allow ``python -m realm_clone``."""

from realm_clone.cli.app import main

main()
