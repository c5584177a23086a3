"""Logging formatting and functions for debugging."""

import logging
import os
from typing import Any, Mapping

import ujson

FORMAT = "[{asctime}][{name}][{process} {processName:<12}] [{levelname:8s}](L:{lineno}) {funcName}: {message}"
logging.basicConfig(format=FORMAT, datefmt="%Y-%m-%d %H:%M:%S", style="{")

LOG = logging.getLogger("archive_folder")
LOG.setLevel(os.getenv("LOG_LEVEL", "INFO"))


def log_debug_json(content: Mapping[str, Any]) -> None:
    """
    Log a JSON-formatted mapping at the debug level with pretty-printing.

    :param content: A mapping representing JSON data to be logged.
    :type content: Mapping[str, Any]
    """
    LOG.debug(ujson.dumps(content, indent=4, escape_forward_slashes=False))
