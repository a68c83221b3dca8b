"""
sunpass.utils — Foundational Utilities
======================================

Angle helpers, polynomial evaluation, exact Julian Day arithmetic and
sidereal time.

Julian Days are returned as :class:`fractions.Fraction` so that a
year-scale JD keeps the full resolution of the instant it came from;
differences against J2000.0 are formed exactly and only then converted
to float for the trigonometric series.
"""

from datetime import date, datetime, time, timedelta, timezone
from fractions import Fraction

import numpy as np
from numpy.typing import NDArray

# ── Time Constants ──────────────────────────────────────────────────────────
JD_J2000 = Fraction(2_451_545)          # Julian Day of J2000.0
DAYS_PER_CENTURY = 36_525
DAILY_SECONDS = 86_400
DAILY_MICROSECONDS = 86_400_000_000

_J2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


# ── Angles ──────────────────────────────────────────────────────────────────

def to_rad(deg: float) -> float:
    return float(np.deg2rad(float(deg)))


def to_deg(rad: float) -> float:
    return float(np.rad2deg(float(rad)))


def polynomial(coefficients, x: float) -> float:
    """Evaluate a polynomial by Horner's rule.

    ``coefficients`` run from the highest power down to the constant term.
    """
    p = 0.0
    for a in coefficients:
        p = p * x + a
    return p


# ── Vector Helpers ──────────────────────────────────────────────────────────

def normalize(v: NDArray) -> NDArray:
    """Return unit vector.  Works on single vectors or (N,3) arrays."""
    v = np.asarray(v, dtype=np.float64)
    if v.ndim == 1:
        mag = np.linalg.norm(v)
        if mag < 1e-15:
            raise ValueError("Cannot normalize a near-zero vector.")
        return v / mag
    elif v.ndim == 2:
        mag = np.linalg.norm(v, axis=1, keepdims=True)
        if np.any(mag < 1e-15):
            raise ValueError("Cannot normalize a near-zero vector.")
        return v / mag
    else:
        raise ValueError(f"Expected 1-D or 2-D array, got {v.ndim}-D.")


# ── Instants & Dates ────────────────────────────────────────────────────────

def as_utc(t: datetime) -> datetime:
    """Aware UTC datetime for ``t``; naive datetimes are taken as UTC."""
    if t.tzinfo is None:
        return t.replace(tzinfo=timezone.utc)
    return t.astimezone(timezone.utc)


_UTC_KEYS = frozenset({"UTC", "Etc/UTC", "Etc/UCT", "UCT", "Etc/Universal",
                       "Universal", "Etc/Zulu", "Zulu"})


def is_utc(t: datetime) -> bool:
    """Whether ``t`` is explicitly tagged as UTC (not merely zero offset)."""
    tz = t.tzinfo
    return tz is timezone.utc or getattr(tz, "key", None) in _UTC_KEYS


def as_date(d: date) -> date:
    """Calendar date (UTC) of a date or datetime."""
    if isinstance(d, datetime):
        return as_utc(d).date()
    return d


def start_of_day(d: date) -> datetime:
    """00:00 UTC on the given calendar date."""
    return datetime.combine(as_date(d), time(0), tzinfo=timezone.utc)


def add_days(t: datetime, days) -> datetime:
    """Shift an instant by a (fractional) number of days."""
    return t + timedelta(days=float(days))


# ── Julian Day ──────────────────────────────────────────────────────────────

def julian_date(year: int, month: int, day: int,
                hour: int = 0, minute: int = 0,
                second=0) -> Fraction:
    """Julian Date from a Gregorian calendar date (UTC), exact.

    ``second`` may be an int, a float or a Fraction; floats are taken at
    their exact binary value.
    """
    if month <= 2:
        year -= 1
        month += 12
    A = year // 100
    B = 2 - A + A // 4
    JD = (Fraction((1461 * (year + 4716)) // 4)
          + (306 * (month + 1)) // 10
          + day + B - Fraction(3049, 2))
    JD += (hour * 3600 + minute * 60 + Fraction(second)) / DAILY_SECONDS
    return JD


def julian_day(t: datetime) -> Fraction:
    """Julian Day (UT) of an instant, exact to the microsecond."""
    t = as_utc(t)
    return julian_date(t.year, t.month, t.day, t.hour, t.minute,
                       t.second + Fraction(t.microsecond, 1_000_000))


def from_julian_day(jd) -> datetime:
    """Instant (aware UTC) for a Julian Day, rounded to the microsecond."""
    us = round((Fraction(jd) - JD_J2000) * DAILY_MICROSECONDS)
    return _J2000 + timedelta(microseconds=us)


def julian_centuries(jd) -> float:
    """Julian centuries since J2000.0."""
    return float((Fraction(jd) - JD_J2000) / DAYS_PER_CENTURY)


# ── Sidereal Time ───────────────────────────────────────────────────────────

def apparent_sidereal_time(jd) -> float:
    """Sidereal time at Greenwich [deg, 0..360) for a Julian Day (UT)."""
    d = float(Fraction(jd) - JD_J2000)
    t = julian_centuries(jd)
    theta = 280.46061837 + 360.98564736629 * d \
        + (0.000387933 - t / 38_710_000) * t * t
    return theta % 360.0


def sidereal_time_0h(t: float) -> float:
    """Sidereal time at Greenwich [deg, 0..360) at 0h UT.

    ``t`` is the Julian centuries of the 0h instant.
    """
    return (100.46061837
            + (36000.770053608 + (0.000387933 - t / 38_710_000) * t) * t) % 360.0
