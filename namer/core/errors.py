"""
Exception types for name generation.
"""


class NameLengthError(ValueError):
    """Raised when a maximum length cannot hold a composed name."""
    pass
