"""Application-wide constants."""

import enum

APP_NAME = "rb-scrobbler"


class DispositionMode(enum.StrEnum):
    """What to do with the log file once submission is over."""

    ASK = "ask"
    KEEP = "keep"
    DELETE = "delete"
    DELETE_ON_SUCCESS = "delete-on-success"


# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
