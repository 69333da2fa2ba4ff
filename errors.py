"""
Exceptions raised by the weighting layer.
"""


class WeightingError(Exception):
    """Base exception for the weighting layer."""
    pass


class UnsupportedInputKind(WeightingError, TypeError):
    """Populate data is neither a row sequence nor a vertex -> neighbours mapping."""
    pass


class InvalidArgument(WeightingError, ValueError):
    """A required vertex or edge reference was not supplied."""
    pass
