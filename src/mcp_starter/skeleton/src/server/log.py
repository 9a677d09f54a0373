"""Logging setup for the server.

MCP servers talking over stdio must keep stdout free for protocol messages, so
all log records go to stderr.
"""

import logging
import os
import sys


def configure_logging() -> logging.Logger:
    level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return logging.getLogger(os.environ.get("APP_NAME", "${PROJECT_NAME}"))
