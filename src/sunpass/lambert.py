"""
sunpass.lambert — Illumination of Tilted Surfaces
=================================================

Lambertian illumination factor of a sloped plane relative to a
horizontal one: the ratio of the Sun vector's components along the
plane normal and along the vertical.

Local frame: X horizontal towards North, Y horizontal towards East,
Z vertical upwards.  Slopes are in degrees (0 horizontal, 90 vertical),
aspects and azimuths in degrees clockwise from North.
"""

from datetime import date, datetime, timedelta
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from .passages import passages
from .sun import position
from .utils import normalize, to_rad

VERTICAL = np.array([0.0, 0.0, 1.0])


def normal_from_slope_aspect(slope: float, aspect: float) -> NDArray:
    """Unit normal of a plane with the given slope and aspect."""
    a = to_rad(aspect)
    b = to_rad(slope)
    return normalize([np.sin(b) * np.sin(a), np.sin(b) * np.cos(a), np.cos(b)])


def sun_vector(sun_azimuth: float, sun_elevation: float) -> NDArray:
    """Unit vector towards the Sun."""
    a = to_rad(sun_azimuth)
    b = to_rad(sun_elevation)
    return np.array([np.cos(b) * np.sin(a), np.cos(b) * np.cos(a), np.sin(b)])


def illumination_factor(sun_azimuth: float, sun_elevation: float,
                        slope: float, aspect: float) -> float:
    """Illumination of the plane relative to a horizontal plane.

    Returns 0 when the plane faces away from the Sun or the Sun is not
    above the horizon.  Grows without bound as the Sun nears the horizon
    for planes facing it.
    """
    s = sun_vector(sun_azimuth, sun_elevation)
    vertical = float(np.dot(s, VERTICAL))
    if vertical <= 0.0:
        return 0.0
    f = float(np.dot(s, normal_from_slope_aspect(slope, aspect))) / vertical
    return f if f > 0.0 else 0.0


def illumination_factor_at(t: datetime, longitude: float, latitude: float,
                           slope: float, aspect: float) -> float:
    """:func:`illumination_factor` with the Sun position at ``t``."""
    sun_elevation, sun_azimuth = position(t, longitude, latitude)
    if sun_elevation < 0:
        return 0.0
    return illumination_factor(sun_azimuth, sun_elevation, slope, aspect)


def mean_illumination_factor_on(d: date, latitude: float,
                                slope: float, aspect: float, *,
                                noon: bool = False,
                                n: Optional[int] = None,
                                dt: float = 1800.0,
                                altitude=None) -> float:
    """Mean illumination factor between sunrise and sunset of a day.

    Parameters
    ----------
    d : date — calendar date (UTC), evaluated at longitude 0
    latitude : float — [deg]
    slope, aspect : float — plane orientation [deg]
    noon : bool — return the factor at solar transit instead
    n : int or None — number of samples (overrides ``dt``)
    dt : float — sampling step [s]
    altitude : float or str — reference altitude delimiting the day
        (default 'official')

    Returns
    -------
    factor : float — 0.0 if the Sun doesn't rise that day
    """
    result = passages(d, 0.0, latitude, altitude=altitude)
    if noon:
        return illumination_factor_at(result.transit, 0.0, latitude, slope, aspect)
    if result.never_rises:
        return 0.0

    span = (result.set - result.rise).total_seconds()
    if n:
        dt = span / n
    offsets = np.arange(0.0, span + 0.5 * dt, dt)
    offsets = offsets[offsets <= span]
    factors = [
        illumination_factor_at(result.rise + timedelta(seconds=float(s)),
                               0.0, latitude, slope, aspect)
        for s in offsets
    ]
    return float(np.mean(factors))
