"""openclaw-workspace — agent workspace bootstrap and session document loading."""

__version__ = "0.1.0"
