"""Submit Rockbox .scrobbler.log listening history to Last.fm."""

__version__ = "0.1.0"
