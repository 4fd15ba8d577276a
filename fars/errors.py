"""Exception and warning types raised by the FARS helpers."""


class InvalidStateError(ValueError):
    """The requested STATE code does not occur in the loaded year."""


class FarsWarning(UserWarning):
    """Non-fatal problem while reading one year of a multi-year request."""
