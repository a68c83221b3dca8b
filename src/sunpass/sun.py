"""
sunpass.sun — Solar Ephemeris & Horizontal Position
===================================================

Low-accuracy analytical solar position (Meeus 1998, Ch. 25, accurate to
~0.01°) and its conversion to local horizontal coordinates for an
observer on Earth.

Capabilities
------------
- Sun apparent equatorial coordinates (declination, right ascension)
- Sun elevation and azimuth for a given instant and observer

Angles are reduced modulo 360° before conversion to radians, and every
trigonometric step works in radians.  The instant is given in civil
time (UTC); the dynamical-time correction happens inside
:func:`equatorial_position`.

Reference
---------
Meeus, J. (1998). *Astronomical Algorithms*, 2nd ed., Willmann-Bell,
Ch. 12 (sidereal time), Ch. 13 (horizontal coordinates), Ch. 25.
"""

from datetime import datetime

import numpy as np

from .timescales import dynamical_julian_day
from .utils import (
    to_rad, to_deg, julian_day, julian_centuries, apparent_sidereal_time,
)


# ════════════════════════════════════════════════════════════════════════════
#  Solar Ephemeris
# ════════════════════════════════════════════════════════════════════════════

def equatorial_position(t: datetime) -> tuple[float, float]:
    """Apparent equatorial coordinates of the Sun.

    Parameters
    ----------
    t : datetime — instant (UTC; naive values are taken as UTC)

    Returns
    -------
    dec : float — declination [rad, -π/2..π/2]
    ra : float — right ascension [rad, -π..π]
    """
    # Julian centuries of 36525 ephemeris days from J2000.0
    T = julian_centuries(dynamical_julian_day(t))

    # Geometric mean longitude, mean equinox of the date [deg]
    L0 = 280.46645 + (36000.76983 + 0.0003032 * T) * T

    # Mean anomaly [deg]
    M = 357.52910 + (35999.05030 - (0.0001559 + 0.00000048 * T) * T) * T
    M = to_rad(M)

    # Equation of center [deg]
    C = (1.914600 - (0.004817 + 0.000014 * T) * T) * np.sin(M) \
        + (0.019993 - 0.000101 * T) * np.sin(2 * M) \
        + 0.000290 * np.sin(3 * M)

    # True longitude [deg]
    sun_lon = (L0 + C) % 360.0

    # Apparent longitude [deg]
    omega = to_rad(125.04 - 1934.136 * T)
    lam = (sun_lon - 0.00569 - 0.00478 * np.sin(omega)) % 360.0
    lam = to_rad(lam)

    # Obliquity of the ecliptic, corrected for nutation [deg]
    eps = 23.4392966666667 \
        - (0.012777777777777778 + (0.00059 / 60 - 0.00059 / 60 * T) * T) * T \
        + 0.00256 * np.cos(omega)
    eps = to_rad(eps)

    dec = float(np.arcsin(np.sin(eps) * np.sin(lam)))
    ra = float(np.arctan2(np.cos(eps) * np.sin(lam), np.cos(lam)))
    return dec, ra


# ════════════════════════════════════════════════════════════════════════════
#  Horizontal Position
# ════════════════════════════════════════════════════════════════════════════

def hour_angle(t: datetime, longitude: float, ra_deg: float) -> float:
    """Local hour angle [deg, 0..360) of a body with right ascension
    ``ra_deg`` for an observer at ``longitude`` (deg, +East)."""
    theta = apparent_sidereal_time(julian_day(t))
    return (theta + longitude - ra_deg) % 360.0


def position(t: datetime, longitude: float,
             latitude: float) -> tuple[float, float]:
    """Sun horizontal coordinates for an observer.

    Parameters
    ----------
    t : datetime — instant (UTC; naive values are taken as UTC)
    longitude : float — observer longitude [deg, +East], any real value
    latitude : float — observer latitude [deg, +North]

    Returns
    -------
    elevation : float — altitude over the horizon [deg], positive upwards
    azimuth : float — [deg, 0..360) clockwise from North
    """
    dec, ra = equatorial_position(t)
    h = to_rad(hour_angle(t, longitude, to_deg(ra)))
    lat = to_rad(latitude)

    elevation = np.arcsin(np.sin(lat) * np.sin(dec)
                          + np.cos(lat) * np.cos(dec) * np.cos(h))
    # Meeus measures azimuth westward from South; shift to North-clockwise
    azimuth = np.arctan2(np.sin(h),
                         np.cos(h) * np.sin(lat) - np.tan(dec) * np.cos(lat))
    return to_deg(elevation), (180.0 + to_deg(azimuth)) % 360.0
