"""Centralized path definitions for linecli.

All application paths hang off a single base directory, which can be
relocated with the ``LINECLI_HOME`` environment variable.
"""

import os
from pathlib import Path

# Base application directory
LINECLI_DIR = Path(os.environ.get("LINECLI_HOME", Path.home() / ".linecli"))

# Subdirectories
LOGS_DIR = LINECLI_DIR / "logs"

# Specific files
CONFIG_PATH = LINECLI_DIR / "config.json"
