"""Library-wide error type and numeric helpers."""


class RGSSError(Exception):
    """Raised when an engine object is used in a way it does not support."""


def clamp(value, low, high):
    """Return ``value`` limited to the inclusive range ``[low, high]``."""
    if value < low:
        return low
    if value > high:
        return high
    return value