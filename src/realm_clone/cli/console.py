"""Rich console singletons."""

import os
import sys

from rich.console import Console

# Force UTF-8 encoding on Windows to avoid cp1252 issues with Unicode chars
if sys.platform == "win32":
    os.environ.setdefault("PYTHONIOENCODING", "utf-8")

console = Console(force_terminal=False, legacy_windows=False)
err_console = Console(stderr=True, force_terminal=False, legacy_windows=False)
