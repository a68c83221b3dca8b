"""
sunpass.day_night — Day / Twilight / Night Classification
=========================================================

Classifies the Sun's elevation at an instant and place against the
reference altitudes of :mod:`sunpass.options`.
"""

from datetime import datetime
from enum import Enum

from .options import (
    ALTITUDES, ReferenceAltitude, altitude_from_options, named_altitude,
    resolve_altitude,
)
from .sun import position


class Situation(str, Enum):
    NIGHT = "night"
    TWILIGHT = "twilight"
    DAY = "day"
    # detailed classification only
    ASTRONOMICAL_TWILIGHT = "astronomical_twilight"
    NAUTICAL_TWILIGHT = "nautical_twilight"
    CIVIL_TWILIGHT = "civil_twilight"


def classify_detailed(elevation: float) -> Situation:
    """Five-way classification of a solar elevation [deg]."""
    if elevation < ALTITUDES[ReferenceAltitude.ASTRONOMICAL]:
        return Situation.NIGHT
    elif elevation < ALTITUDES[ReferenceAltitude.NAUTICAL]:
        return Situation.ASTRONOMICAL_TWILIGHT
    elif elevation < ALTITUDES[ReferenceAltitude.CIVIL]:
        return Situation.NAUTICAL_TWILIGHT
    elif elevation < ALTITUDES[ReferenceAltitude.OFFICIAL]:
        return Situation.CIVIL_TWILIGHT
    return Situation.DAY


def classify(elevation: float, day_altitude: float,
             twilight_altitude: float) -> Situation:
    """Day above ``day_altitude``, night at or below ``twilight_altitude``,
    twilight in between."""
    if elevation > day_altitude:
        return Situation.DAY
    return Situation.NIGHT if elevation <= twilight_altitude else Situation.TWILIGHT


def day_or_night(t: datetime, longitude: float, latitude: float, *,
                 zenith=None, altitude=None,
                 day_zenith=None, twilight_zenith=None,
                 simple: bool = False, detailed: bool = False) -> Situation:
    """Day-night (or twilight) status at a given position and time.

    Parameters
    ----------
    t : datetime — instant (UTC; naive values are taken as UTC)
    longitude, latitude : float — observer position [deg]
    zenith, altitude : float or str — single threshold; only day and
        night are distinguished
    day_zenith : float or str — threshold at sunrise/sunset
        (default 'official')
    twilight_zenith : float or str — threshold at dawn/dusk
        (default 'civil')
    simple : bool — day/night only, with the official threshold;
        replaces every other option, ``detailed`` included
    detailed : bool — one of night, astronomical_twilight,
        nautical_twilight, civil_twilight, day; ignores every threshold
        option

    Zenith values are degrees from the zenith or the names 'official',
    'civil', 'nautical', 'astronomical'.

    Returns
    -------
    Situation
    """
    elevation, _ = position(t, longitude, latitude)

    if simple:
        limit = named_altitude(ReferenceAltitude.OFFICIAL)
        return classify(elevation, limit, limit)

    if detailed:
        return classify_detailed(elevation)

    if zenith is not None or altitude is not None:
        day_altitude = twilight_altitude = altitude_from_options(
            zenith=zenith, altitude=altitude)
    else:
        if twilight_zenith is None:
            twilight_zenith = ReferenceAltitude.CIVIL
        if day_zenith is None:
            day_zenith = ReferenceAltitude.OFFICIAL
        twilight_altitude = resolve_altitude(twilight_zenith)
        day_altitude = resolve_altitude(day_zenith)
    return classify(elevation, day_altitude, twilight_altitude)
