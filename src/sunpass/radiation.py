"""
sunpass.radiation — Solar Radiation on Sloped Terrain
=====================================================

Global radiation [W/m²] on a plane of arbitrary slope and aspect, from
either a measured global (and optionally diffuse) radiation on the
horizontal, or a clearness index.

Model
-----
- Extraterrestrial normal radiation from the solar constant and day of
  year (Duffie & Beckman eq. 1.4.1)
- Declination after Cooper, equation of time after Spencer
- Diffuse fraction from the clearness index (Erbs, Klein & Duffie 1982)
- Tilted-surface radiation by the HDKR anisotropic sky model
  (Duffie & Beckman eq. 2.16.7): beam + circumsolar, isotropic diffuse
  with horizon brightening, and ground-reflected terms

Intermediate terms are logged at DEBUG level.

Reference
---------
Duffie, J.A. & Beckman, W.A. (1991). *Solar Engineering of Thermal
Processes*, 2nd ed., Wiley.
Erbs, D.G., Klein, S.A. & Duffie, J.A. (1982). Estimation of the diffuse
radiation fraction for hourly, daily and monthly-average global
radiation. *Solar Energy* 28(4).
"""

import logging
import math
from datetime import datetime
from typing import Optional

import numpy as np

from .exceptions import InvalidInputError
from .utils import as_utc, to_rad, to_deg

log = logging.getLogger(__name__)

# ── Constants ───────────────────────────────────────────────────────────────
G_SC = 1367.0                   # Solar constant [W/m²]
DEFAULT_ALBEDO = 0.2            # Ground reflectance


def day_of_year(t: datetime) -> int:
    return as_utc(t).timetuple().tm_yday


def extraterrestrial_radiation(t: datetime) -> float:
    """Extraterrestrial radiation on a plane normal to the Sun [W/m²]."""
    n = day_of_year(t)
    return G_SC * (1.0 + 0.033 * float(np.cos(to_rad(360.0 * n / 365.0))))


def solar_declination(day: int) -> float:
    """Approximate solar declination [rad] for a day of the year (Cooper)."""
    return to_rad(23.45) * float(np.sin(to_rad(360.0 * (284.0 + day) / 365.0)))


def equation_of_time(day: int) -> float:
    """Equation of time [h] for a day of the year (Spencer)."""
    b = to_rad(360.0 * (day - 1) / 365.0)
    return 3.82 * (0.000075 + 0.001868 * np.cos(b) - 0.032077 * np.sin(b)
                   - 0.014615 * np.cos(2 * b) - 0.04089 * np.sin(2 * b))


def diffuse_fraction(k_t: float) -> float:
    """Diffuse fraction of global horizontal radiation (Erbs model)."""
    if k_t <= 0.22:
        return 1.0 - 0.09 * k_t
    elif k_t <= 0.80:
        return 0.9511 - 0.1604 * k_t + 4.388 * k_t**2 \
            - 16.638 * k_t**3 + 12.336 * k_t**4
    return 0.165


def radiation(t: datetime, longitude: float, latitude: float, *,
              slope: float = 0.0, aspect: float = 0.0,
              global_radiation: Optional[float] = None,
              diffuse_radiation: Optional[float] = None,
              clearness_index: Optional[float] = None,
              albedo: float = DEFAULT_ALBEDO) -> float:
    """Global radiation on a sloped plane [W/m²].

    Parameters
    ----------
    t : datetime — instant (UTC); measured values are taken as means
        over a short period centred at ``t``
    longitude, latitude : float — [deg]
    slope : float — [deg] 0 horizontal to 90 vertical
    aspect : float — [deg] clockwise from North
    global_radiation : float — measured global radiation on the
        horizontal [W/m²]
    diffuse_radiation : float — measured diffuse radiation on the
        horizontal [W/m²]; estimated from the clearness index if omitted
    clearness_index : float — used when no global radiation is given
    albedo : float — ground reflectance

    Raises
    ------
    InvalidInputError — neither ``global_radiation`` nor
        ``clearness_index`` is given.
    """
    if global_radiation is None and clearness_index is None:
        raise InvalidInputError(
            "radiation requires global_radiation or clearness_index")

    t_utc = as_utc(t)
    n = day_of_year(t_utc)
    phi = to_rad(latitude)
    d = solar_declination(n)

    # Solar time [h] and hour angle [rad]
    tu = t_utc.hour + t_utc.minute / 60.0 + t_utc.second / 3600.0
    ts = tu + longitude / 15.0 + equation_of_time(n)
    w = to_rad((ts - 12.0) * 15.0)
    cos_w, sin_w = math.cos(w), math.sin(w)

    cos_phi, sin_phi = math.cos(phi), math.sin(phi)
    cos_d, sin_d = math.cos(d), math.sin(d)

    # Zenith angle, eq. 1.6.5
    cos_phi_z = cos_phi * cos_d * cos_w + sin_phi * sin_d

    # Extraterrestrial radiation on the horizontal
    # TODO: average over the measurement period (eq. 1.10.1) for long steps
    g_o = extraterrestrial_radiation(t_utc) * cos_phi_z
    if g_o < 0:
        g_o = 0.0

    if clearness_index is None:
        k_t = global_radiation / g_o if g_o > 0 else math.inf
    else:
        k_t = clearness_index
    g = global_radiation
    if g is None:
        g = 0.0 if g_o == 0 else k_t * g_o

    if math.isinf(k_t):
        df = 1.0
    else:
        df = diffuse_fraction(k_t)

    g_d = diffuse_radiation if diffuse_radiation is not None else df * g
    g_b = g - g_d

    beta = to_rad(slope)
    gamma = to_rad(aspect - 180.0)
    cos_beta, sin_beta = math.cos(beta), math.sin(beta)
    cos_gamma, sin_gamma = math.cos(gamma), math.sin(gamma)

    # Angle of incidence on the plane, eq. 1.6.2
    cos_theta = sin_d * sin_phi * cos_beta \
        - sin_d * cos_phi * sin_beta * cos_gamma \
        + cos_d * cos_phi * cos_beta * cos_w \
        + cos_d * sin_phi * sin_beta * cos_gamma * cos_w \
        + cos_d * sin_beta * sin_gamma * sin_w

    # Beam ratio tilted/horizontal, eq. 1.8.1
    rb = cos_theta / cos_phi_z if cos_phi_z > 0 else 0.0
    if rb < 0.0:
        rb = 0.0

    # Anisotropy index and horizon brightening factor
    ai = 0.0 if (math.isinf(k_t) or g_o == 0) else g_b / g_o
    f = math.sqrt(max(g_b / g, 0.0)) if g != 0 else 1.0

    beam = (g_b + g_d * ai) * rb
    diffuse = g_d * (1 - ai) * ((1 + cos_beta) / 2) \
        * (1 + f * math.sin(beta / 2) ** 3)
    reflected = g * albedo * (1 - cos_beta) / 2

    log.debug("radiation @%s zenith=%.3f kt=%s df=%.4f g=%.2f g_o=%.2f",
              t_utc.isoformat(), to_deg(math.acos(max(-1.0, min(1.0, cos_phi_z)))),
              k_t, df, g, g_o)
    log.debug("  rb=%.4f g_b=%.2f g_d=%.2f -> beam=%.2f diffuse=%.2f reflected=%.2f",
              rb, g_b, g_d, beam, diffuse, reflected)

    return beam + diffuse + reflected
