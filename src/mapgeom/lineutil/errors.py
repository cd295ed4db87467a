"""Exception types raised by the line utilities."""


class GeometryError(ValueError):
    """Raised for impossible geometry operations."""


class InvalidInputError(GeometryError):
    """Raised when required geometry is empty, absent or not a number."""
