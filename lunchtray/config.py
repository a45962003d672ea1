"""Runtime configuration defaults for pricing and logging."""

from __future__ import annotations

import os

from lunchtray.models import to_decimal

TAX_RATE = to_decimal(os.getenv("LUNCHTRAY_TAX_RATE", "0.08"))
CURRENCY_SYMBOL = "$"

# Textual owns the terminal, so debug output goes to a file.
LOG_PATH = os.getenv("LUNCHTRAY_LOG_PATH", "/tmp/lunchtray-debug.log")
LOG_LEVEL = os.getenv("LUNCHTRAY_LOG_LEVEL", "DEBUG")
