"""Exceptions raised by shapes2d."""


class ShapeConfigurationError(ValueError):
    """A shape was requested with parameters outside its geometric domain."""
