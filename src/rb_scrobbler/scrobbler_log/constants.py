"""Constants describing the .scrobbler.log text format."""

from datetime import timedelta

# Header marker that line 0 must contain
AUDIOSCROBBLER_HEADER = "#AUDIOSCROBBLER/"
TZ_HEADER = "#TZ/"
CLIENT_HEADER = "#CLIENT/"
COMMENT_PREFIX = "#"

# Record layout
SEPARATOR = "\t"
NEWLINE = "\n"
ARTIST_INDEX = 0
ALBUM_INDEX = 1
TITLE_INDEX = 2
RATING_INDEX = 5
TIMESTAMP_INDEX = 6
MIN_FIELD_COUNT = TIMESTAMP_INDEX + 1

# Rating value for a track that was played to completion
LISTENED = "L"

# Epoch seconds as written to TrackRecords
TIMESTAMP_PATTERN = r"^[0-9]+$"

# Timestamp written by players without a real-time clock
TIMESTAMP_NO_RTC = "0"

ZERO_OFFSET = timedelta(0)
DEFAULT_OFFSET = "0h"
