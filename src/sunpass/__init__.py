"""
sunpass — Solar Position, Passages & Day/Night Library
======================================================

Apparent position of the Sun and the times of solar events for any
point on Earth, built on the low-accuracy solar theory of Meeus'
*Astronomical Algorithms*.

Everything is computed from civil instants (UTC) through exact Julian
Days::

    civil instant (UTC) ──ΔT──→ dynamical time ──→ (δ, α)   equatorial
          │                                          │
          └──── sidereal time ──→ hour angle ────────┴──→ (h, A) horizontal
                                                     │
                           3-day interpolation ──────┴──→ rise / transit / set

Conventions
-----------
- Longitude in degrees, positive East, any real value (not normalized)
- Latitude in degrees, positive North
- Elevation in degrees above the horizon; azimuth in degrees clockwise
  from North
- Instants are ``datetime`` objects; naive values are taken as UTC and
  all returned instants are aware UTC
- Dates are ``datetime.date`` objects denoting a UTC calendar day

Reference altitudes (effective horizons)
----------------------------------------
``official`` −50′, ``civil`` −6°, ``nautical`` −12°, ``astronomical`` −18°
"""

from .exceptions import SolarError, InvalidInputError

from .options import (
    ReferenceAltitude,
    ALTITUDES,
    altitude_from_options,
)

from .utils import (
    julian_date,
    julian_day,
    from_julian_day,
    julian_centuries,
    apparent_sidereal_time,
)

from .timescales import (
    delta_t,
    dynamical_julian_day,
    to_dynamical,
    to_civil,
)

from .sun import (
    equatorial_position,
    position,
)

from .passages import (
    PassageResult,
    passages,
    rise,
    set,
    rise_and_set,
    MAX_ITERATIONS,
    TOLERANCE,
)

from .day_night import Situation, day_or_night

from .lambert import (
    illumination_factor,
    illumination_factor_at,
    mean_illumination_factor_on,
)

from .radiation import (
    radiation,
    extraterrestrial_radiation,
    diffuse_fraction,
    solar_declination,
    G_SC,
)

__version__ = "1.0.0"
__all__ = [
    # ── Errors ──
    "SolarError", "InvalidInputError",
    # ── Reference altitudes / options ──
    "ReferenceAltitude", "ALTITUDES", "altitude_from_options",
    # ── Time ──
    "julian_date", "julian_day", "from_julian_day", "julian_centuries",
    "apparent_sidereal_time",
    "delta_t", "dynamical_julian_day", "to_dynamical", "to_civil",
    # ── Position ──
    "equatorial_position", "position",
    # ── Passages ──
    "PassageResult", "passages", "rise", "set", "rise_and_set",
    "MAX_ITERATIONS", "TOLERANCE",
    # ── Day / night ──
    "Situation", "day_or_night",
    # ── Illumination & radiation ──
    "illumination_factor", "illumination_factor_at",
    "mean_illumination_factor_on",
    "radiation", "extraterrestrial_radiation", "diffuse_fraction",
    "solar_declination", "G_SC",
]
