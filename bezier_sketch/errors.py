"""
Exception types raised by the sketching core.
"""


class BezierSketchError(Exception):
    """Base class for all errors raised by this package."""


class DegenerateGeometryError(BezierSketchError, ZeroDivisionError):
    """Raised when a vector operation would divide by a zero length or scalar."""


class InvalidPointReferenceError(BezierSketchError, IndexError):
    """Raised when a curve refers to a point index that does not exist."""


class ConfigError(BezierSketchError, ValueError):
    """Raised for invalid configuration values."""
