"""Shared constants for vocabtrie."""

LOGGER_NAME = "vocabtrie"

DEFAULT_ENCODING = "utf-8"

LOG_FORMAT = "[%(levelname)s] %(message)s"
