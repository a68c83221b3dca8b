"""Exceptions raised by sunpass."""


class SolarError(Exception):
    """Base class for sunpass errors."""


class InvalidInputError(SolarError, ValueError):
    """Programmer misuse: wrong time scale, unknown altitude name, bad option."""
