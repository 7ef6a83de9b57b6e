class TrackerError(Exception):
    """Base class for follower tracker errors."""


class DecodeError(TrackerError):
    """A stored baseline blob could not be parsed as a follower collection."""


class EncodeError(TrackerError):
    """A follower collection could not be serialized."""
