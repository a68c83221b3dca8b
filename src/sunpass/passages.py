"""
sunpass.passages — Sunrise, Transit & Sunset
============================================

Times of rising, transit and setting of the Sun for a calendar date
(UTC) and an observer, following Meeus (1998, Ch. 15):

1. Apparent equatorial coordinates are sampled at 0h of the day before,
   the day itself and the day after, and interpolated quadratically.
2. An approximate hour angle H₀ at the reference altitude h₀ classifies
   the circumpolar cases and seeds the three events as fractions of the
   day.
3. The three estimates are refined together by Newton-like corrections
   on the hour angle (transit) and altitude (rise, set) residuals until
   every correction is smaller than the tolerance.  Rise and set are held
   within half a day before and after the transit, so steps that
   overshoot near the circumpolar boundary are damped.
4. A transit refined across midnight is replaced by the date's other
   transit, so the transit falls on the requested date whenever the
   date has one.

Circumpolar results are encoded in the instants themselves:

- Sun never rises:  rise = transit = set = 00:00 of the date
- Sun never sets:   rise = 00:00, transit = 12:00, set = 24:00

Reference
---------
Meeus, J. (1998). *Astronomical Algorithms*, 2nd ed., Willmann-Bell, Ch. 15.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

import numpy as np

from .options import altitude_from_options
from .sun import equatorial_position
from .timescales import delta_t
from .utils import (
    DAILY_SECONDS, to_rad, to_deg, julian_day, julian_centuries,
    sidereal_time_0h, start_of_day, add_days,
)

log = logging.getLogger(__name__)

# ── Solver Settings ─────────────────────────────────────────────────────────
TOLERANCE = 0.01            # Correction below which an event has converged [day]
MAX_ITERATIONS = 50         # Safety cap on refinement passes

SIDEREAL_RATE = 360.985647  # Sidereal degrees per solar day


@dataclass(frozen=True)
class PassageResult:
    """Rise, transit and set instants (aware UTC) for one date and place.

    Iterating yields ``(rise, transit, set)``.
    """
    rise: datetime
    transit: datetime
    set: datetime
    iterations: int = 0
    converged: bool = True

    def __iter__(self):
        return iter((self.rise, self.transit, self.set))

    @property
    def never_rises(self) -> bool:
        return self.rise == self.set

    @property
    def never_sets(self) -> bool:
        return self.set - self.rise == timedelta(days=1)

    @property
    def has_rise_and_set(self) -> bool:
        return not (self.never_rises or self.never_sets)


# ════════════════════════════════════════════════════════════════════════════
#  Interpolation & Refinement
# ════════════════════════════════════════════════════════════════════════════

def _interpolate(values: list[float], n: float) -> float:
    """Three-point interpolation (Meeus eq. 3.3) about the middle value."""
    a = values[1] - values[0]
    b = values[2] - values[1]
    c = b - a
    return values[1] + n / 2 * (a + b + n * c)


def _daily_coordinates(d: date) -> tuple[list[float], list[float]]:
    """Right ascension and declination [deg] at 0h of d−1, d and d+1."""
    ra, dec = [], []
    for i in (-1, 0, 1):
        dec_rad, ra_rad = equatorial_position(start_of_day(d + timedelta(days=i)))
        ra.append(to_deg(ra_rad))
        dec.append(to_deg(dec_rad))

    # Right ascension wraps at 0°/360°
    if ra[0] > ra[1]:
        ra[0] -= 360.0
    if ra[2] < ra[1]:
        ra[2] += 360.0
    return ra, dec


def _reduce_angle(h: float) -> float:
    """Reduce an angle [deg] into [-180, 180)."""
    return (h + 180.0) % 360.0 - 180.0


def _refine(m: list[float], ra: list[float], decl: list[float],
            theta0: float, longitude: float, latitude: float, ho: float,
            dt_days: float, max_iterations: int,
            tolerance: float) -> tuple[list[float], int, bool]:
    """Refine ``[transit, rise, set]`` day fractions together.

    Rise is kept within half a day before the transit and set within
    half a day after it: a Newton step leaving that window is replaced by
    half the distance to its edge.

    Returns the refined fractions, the passes made and whether every
    correction fell below ``tolerance``.
    """
    m = list(m)
    lat_rad = to_rad(latitude)
    cos_lat, sin_lat = np.cos(lat_rad), np.sin(lat_rad)

    iterations = 0
    while iterations < max_iterations:
        iterations += 1
        delta_m = [0.0] * 3
        for i in range(3):
            theta = theta0 + SIDEREAL_RATE * m[i]
            n = m[i] + dt_days
            ra_i = _interpolate(ra, n)
            dec_i = to_rad(_interpolate(decl, n))
            h = _reduce_angle(theta + longitude - ra_i)

            if i == 0:
                delta_m[0] = -h / 360
                continue

            h_rad = to_rad(h)
            alt = to_deg(np.arcsin(np.clip(
                sin_lat * np.sin(dec_i) + cos_lat * np.cos(dec_i) * np.cos(h_rad),
                -1.0, 1.0)))
            denom = 360 * np.cos(dec_i) * cos_lat * np.sin(h_rad)
            if denom != 0:
                step = (alt - ho) / denom
            else:
                # flat altitude at H = 0 or ±180: head for the window edge
                step = np.copysign(np.inf, ho - alt if i == 1 else alt - ho)

            lo, hi = (m[0] - 0.5, m[0]) if i == 1 else (m[0], m[0] + 0.5)
            target = m[i] + step
            if not lo < target < hi:
                base = min(max(m[i], lo), hi)
                target = (base + (lo if target <= lo else hi)) / 2
            delta_m[i] = target - m[i]

        for i in range(3):
            m[i] += delta_m[i]

        if all(abs(dm) < tolerance for dm in delta_m):
            return m, iterations, True
    return m, iterations, False


# ════════════════════════════════════════════════════════════════════════════
#  Passages
# ════════════════════════════════════════════════════════════════════════════

def passages(d: date, longitude: float, latitude: float, *,
             zenith=None, altitude=None,
             max_iterations: int = MAX_ITERATIONS,
             tolerance: float = TOLERANCE) -> PassageResult:
    """Solar rise, transit and set for a date (UTC) and position.

    The transit is the one falling on the date; rise and set are the
    ones surrounding it, so either may fall on the day before or after.

    Parameters
    ----------
    d : date — calendar date (a datetime is reduced to its UTC date)
    longitude : float — [deg, +East], any real value
    latitude : float — [deg, +North]
    zenith, altitude : float or str — reference altitude, numeric
        (degrees) or named: 'official', 'civil', 'nautical',
        'astronomical'.  Default: 'official'.
    max_iterations : int — cap on refinement passes; reaching it returns
        the current estimate with ``converged=False``
    tolerance : float — convergence threshold on the corrections [day]

    Returns
    -------
    PassageResult — see module docstring for the circumpolar encoding.
    """
    ho = altitude_from_options(zenith=zenith, altitude=altitude)
    start = start_of_day(d)
    d = start.date()

    t = julian_centuries(julian_day(start))
    theta0 = sidereal_time_0h(t)

    ra, decl = _daily_coordinates(d)

    ho_rad = to_rad(ho)
    lat_rad = to_rad(latitude)
    decl_rad = to_rad(decl[1])

    # Approximate hour angle (Meeus eq. 15.1)
    cos_H0 = (np.sin(ho_rad) - np.sin(lat_rad) * np.sin(decl_rad)) \
        / (np.cos(lat_rad) * np.cos(decl_rad))
    if cos_H0 > 1:
        log.debug("Sun never rises above %.4f° on %s at lat %.4f°",
                  ho, d, latitude)
        return PassageResult(start, start, start)
    if cos_H0 < -1:
        log.debug("Sun never sets below %.4f° on %s at lat %.4f°",
                  ho, d, latitude)
        return PassageResult(start, add_days(start, 0.5), add_days(start, 1))
    H0 = to_deg(np.arccos(cos_H0))

    dt_days = delta_t(d) / DAILY_SECONDS

    def seeds(transit):
        return [transit, transit - H0 / 360, transit + H0 / 360]

    # Approximate transit as a fraction of the date, whole days dropped
    m, iterations, converged = _refine(
        seeds(((ra[1] - longitude - theta0) / 360) % 1.0), ra, decl,
        theta0, longitude, latitude, ho, dt_days, max_iterations, tolerance)

    # A transit refined across midnight is swapped for the date's other one
    if not 0 <= m[0] < 1:
        shift = 1 if m[0] < 0 else -1
        m2, extra, converged2 = _refine(
            seeds(m[0] + shift), ra, decl, theta0, longitude, latitude, ho,
            dt_days, max_iterations, tolerance)
        iterations += extra
        if 0 <= m2[0] < 1:
            m, converged = m2, converged2

    if converged:
        log.debug("Passages for %s at (%.4f°, %.4f°) converged in %d iterations",
                  d, longitude, latitude, iterations)
    else:
        log.warning("Passages for %s at (%.4f°, %.4f°) did not converge in %d "
                    "iterations; returning current estimate",
                    d, longitude, latitude, iterations)

    return PassageResult(
        rise=add_days(start, m[1]),
        transit=add_days(start, m[0]),
        set=add_days(start, m[2]),
        iterations=iterations,
        converged=converged,
    )


def rise(d: date, longitude: float, latitude: float,
         **options) -> Optional[datetime]:
    """Sunrise instant, or None if the Sun doesn't rise and set that day.

    Accepts the same keyword options as :func:`passages`.
    """
    result = passages(d, longitude, latitude, **options)
    return result.rise if result.has_rise_and_set else None


def set(d: date, longitude: float, latitude: float,
        **options) -> Optional[datetime]:
    """Sunset instant, or None if the Sun doesn't rise and set that day.

    Accepts the same keyword options as :func:`passages`.
    """
    result = passages(d, longitude, latitude, **options)
    return result.set if result.has_rise_and_set else None


def rise_and_set(d: date, longitude: float, latitude: float,
                 **options) -> Optional[tuple[datetime, datetime]]:
    """``(rise, set)`` as given by :func:`rise` and :func:`set`, or None."""
    result = passages(d, longitude, latitude, **options)
    if not result.has_rise_and_set:
        return None
    return result.rise, result.set
