"""
sunpass.options — Reference Altitudes & Option Resolution
=========================================================

The sun's reference altitude (the effective horizon) can be given either
by name or numerically:

- ``zenith``   — degrees from the zenith, or a named altitude
- ``altitude`` — degrees above the horizon, or a named altitude

Named altitudes, deepening with twilight::

    official (−50′)  >  civil (−6°)  >  nautical (−12°)  >  astronomical (−18°)

A name given as ``zenith`` denotes the named *altitude*, not a zenith
distance.  Options are resolved once, on entry to each public call,
into a plain altitude in degrees.
"""

from enum import Enum
from numbers import Real
from types import MappingProxyType

from .exceptions import InvalidInputError


class ReferenceAltitude(str, Enum):
    """Named effective horizons."""
    OFFICIAL = "official"
    CIVIL = "civil"
    NAUTICAL = "nautical"
    ASTRONOMICAL = "astronomical"


ALTITUDES = MappingProxyType({
    ReferenceAltitude.OFFICIAL: -50 / 60.0,
    ReferenceAltitude.CIVIL: -6.0,
    ReferenceAltitude.NAUTICAL: -12.0,
    ReferenceAltitude.ASTRONOMICAL: -18.0,
})


def named_altitude(name) -> float:
    """Altitude [deg] of a named reference (enum member or its name)."""
    try:
        return ALTITUDES[ReferenceAltitude(name)]
    except ValueError:
        valid = ", ".join(a.value for a in ReferenceAltitude)
        raise InvalidInputError(
            f"Unknown reference altitude {name!r}; expected one of: {valid}"
        ) from None


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def altitude_from_options(zenith=None, altitude=None) -> float:
    """Resolve ``zenith`` / ``altitude`` options to an altitude [deg].

    ``zenith`` takes precedence.  With neither given the official
    altitude is used.
    """
    if zenith is not None:
        if _is_number(zenith):
            return 90.0 - float(zenith)
        if isinstance(zenith, str):
            return named_altitude(zenith)
        raise InvalidInputError(f"Invalid zenith option: {zenith!r}")
    if altitude is None:
        altitude = ReferenceAltitude.OFFICIAL
    if _is_number(altitude):
        return float(altitude)
    if isinstance(altitude, str):
        return named_altitude(altitude)
    raise InvalidInputError(f"Invalid altitude option: {altitude!r}")


def resolve_altitude(value) -> float:
    """Resolve a threshold given like ``zenith``: name → altitude,
    number → 90 − number."""
    return altitude_from_options(zenith=value)
