"""Example wiring logrender into the standard logging module.

Run with:
    python examples/logging_example.py          # colored when on a terminal
    python examples/logging_example.py --json   # one JSON object per line
"""

import logging
import sys

from logrender import (
    FIELD_KEY_MSG,
    JSONFormatterOptions,
    LogRenderHandler,
    TextFormatterOptions,
)

if "--json" in sys.argv:
    options = JSONFormatterOptions(field_map={FIELD_KEY_MSG: "message"})
else:
    options = TextFormatterOptions(full_timestamp=True)

handler = LogRenderHandler.from_options(options, sys.stderr, include_attrs=[])
logger = logging.getLogger("example")
logger.addHandler(handler)
logger.setLevel(logging.DEBUG)

logger.debug("cache warmed", extra={"entries": 128})
logger.info("server started", extra={"port": 8080, "host": "0.0.0.0"})
logger.warning("slow request", extra={"path": "/search", "elapsed": 2.31})
try:
    open("/nonexistent/config.toml")
except OSError as exc:
    logger.error("config unreadable", extra={"err": exc})
