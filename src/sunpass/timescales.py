"""
sunpass.timescales — Civil (UT) ↔ Dynamical Time
=================================================

ΔT = TT − UT from the polynomial expressions of Espenak & Meeus
(NASA Five Millennium Canon of Solar Eclipses), good from −1999 to
+3000.  Each branch is evaluated only inside its own year range;
adjacent branches agree closely but not exactly at the boundaries.

Dynamical-time instants are represented as UTC-tagged datetimes shifted
by ΔT, the same way civil instants are.

Reference
---------
https://eclipse.gsfc.nasa.gov/SEcat5/deltatpoly.html
"""

from datetime import datetime, timedelta, timezone
from fractions import Fraction

from .exceptions import InvalidInputError
from .utils import DAILY_SECONDS, as_utc, is_utc, julian_day, polynomial


def delta_t(date) -> float:
    """ΔT = TT − UT [s] for the year and month of a date or datetime."""
    year = float(date.year)
    y = year + (date.month - 0.5) / 12.0

    if year < -500.0:
        u = (year - 1820.0) / 100.0
        return -20.0 + 32.0 * u * u
    elif year < 500.0:
        u = y / 100.0
        return polynomial([0.0090316521, 0.022174192, -0.1798452, -5.952053,
                           33.78311, -1014.41, 10583.6], u)
    elif year < 1600.0:
        u = (y - 1000.0) / 100.0
        return polynomial([0.0083572073, -0.005050998, -0.8503463, 0.319781,
                           71.23472, -556.01, 1574.2], u)
    elif year < 1700.0:
        t = y - 1600.0
        return polynomial([1.0 / 7129.0, -0.01532, -0.9808, 120.0], t)
    elif year < 1800.0:
        t = y - 1700.0
        return polynomial([-1.0 / 1174000.0, 0.00013336, -0.0059285,
                           0.1603, 8.83], t)
    elif year < 1860.0:
        t = y - 1800.0
        return polynomial([0.000000000875, -0.0000001699, 0.0000121272,
                           -0.00037436, 0.0041116, 0.0068612, -0.332447,
                           13.72], t)
    elif year < 1900.0:
        t = y - 1860.0
        return polynomial([1.0 / 233174.0, -0.0004473624, 0.01680668,
                           -0.251754, 0.5737, 7.62], t)
    elif year < 1920.0:
        t = y - 1900.0
        return polynomial([-0.000197, 0.0061966, -0.0598939, 1.494119,
                           -2.79], t)
    elif year < 1941.0:
        t = y - 1920.0
        return polynomial([0.0020936, -0.076100, 0.84493, 21.20], t)
    elif year < 1961.0:
        t = y - 1950.0
        return polynomial([1.0 / 2547.0, -1.0 / 233.0, 0.407, 29.07], t)
    elif year < 1986.0:
        t = y - 1975.0
        return polynomial([-1.0 / 718.0, -1.0 / 260.0, 1.067, 45.45], t)
    elif year < 2005.0:
        t = y - 2000.0
        return polynomial([0.00002373599, 0.000651814, 0.0017275, -0.060374,
                           0.3345, 63.86], t)
    elif year < 2050.0:
        t = y - 2000.0
        return polynomial([0.005589, 0.32217, 62.92], t)
    elif year < 2150.0:
        return -20.0 + 32.0 * ((y - 1820.0) / 100.0) ** 2 - 0.5628 * (2150.0 - y)
    else:
        u = (year - 1820.0) / 100.0
        return -20.0 + 32.0 * u * u


def dynamical_julian_day(t: datetime) -> Fraction:
    """Julian Ephemeris Day (TT) of a civil instant, exact."""
    t = as_utc(t)
    return julian_day(t) + Fraction(delta_t(t)) / DAILY_SECONDS


def to_dynamical(t: datetime) -> datetime:
    """Civil instant → dynamical time (UTC-tagged)."""
    t = as_utc(t)
    return t + timedelta(seconds=delta_t(t))


def to_civil(td: datetime) -> datetime:
    """Dynamical time → civil instant.

    Raises
    ------
    InvalidInputError — ``td`` is naive or not tagged as UTC; a zone
        that merely has a zero offset (e.g. London in winter) is rejected.
    """
    if not is_utc(td):
        raise InvalidInputError(
            f"Invalid dynamical time {td!r} (should be UTC-tagged)")
    td = td.astimezone(timezone.utc)
    return td - timedelta(seconds=delta_t(td))
