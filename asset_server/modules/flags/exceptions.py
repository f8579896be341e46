"""Flag source exceptions."""


class FlagSourceError(Exception):
    """Raised when the flag document cannot be read or holds invalid values."""
