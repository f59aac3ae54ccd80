"""simfind: find verbatim runs of words shared by two texts."""

__version__ = "0.1.0"
