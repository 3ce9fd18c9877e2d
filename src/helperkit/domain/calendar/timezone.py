"""IANA time zone names, backed by the ``pytz`` database."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

import pytz


def check(name: str | None, country_code: str | None = None) -> bool:
    """True when ``name`` is a known zone, or a zone of ``country_code`` if given."""
    if not name:
        return False
    if country_code is None:
        return name in pytz.all_timezones_set
    return name in get_list_time_zones_of_country(country_code)


def get_list_time_zones_of_country(country_code: str | None) -> list[str]:
    """``"FR"`` -> ``["Europe/Paris"]``; unknown countries give ``[]``."""
    if not country_code or len(country_code) != 2:
        return []
    try:
        return list(pytz.country_timezones[country_code.upper()])
    except KeyError:
        return []


def get_time_zone_of_country(country_code: str | None) -> str | None:
    zones = get_list_time_zones_of_country(country_code)
    return zones[0] if zones else None


def get_country_of_time_zone(name: str) -> str | None:
    for country_code, zones in pytz.country_timezones.items():
        if name in zones:
            return country_code
    return None


def get_utc_offset(name: str, at: datetime | None = None) -> str:
    """``"Europe/Paris"`` -> ``"UTC+01:00"`` (or ``+02:00`` in summer)."""
    moment = at or datetime.now(pytz.utc)
    if moment.tzinfo is None:
        moment = pytz.utc.localize(moment)
    offset = moment.astimezone(pytz.timezone(name)).utcoffset()
    total_minutes = int(offset.total_seconds() // 60)
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"UTC{sign}{hours:02d}:{minutes:02d}"


def format_with_data(
    name: str,
    utc: str,
    country_code: str | None = None,
    cities: Iterable[str] = (),
    with_country: bool = True,
    with_cities: bool = True,
) -> str:
    """``"UTC+01:00 - Europe/Paris (France : Paris)"``."""
    cities = list(cities)
    with_cities = with_cities and bool(cities)
    with_country = with_country and bool(country_code)

    label = f"{utc} - {name}"
    if not (with_country or with_cities):
        return label

    details = []
    if with_country:
        details.append(pytz.country_names.get(country_code.upper(), country_code))
    if with_cities:
        details.append(", ".join(cities))
    return f"{label} ({' : '.join(details)})"


def format(  # pylint: disable=redefined-builtin
    name: str, with_country: bool = True, with_cities: bool = True
) -> str:
    """Label a zone for a select box; unknown zones give ``""``."""
    matches = [zone for zone in pytz.all_timezones if zone.lower() == name.lower()]
    if not matches:
        return ""
    zone = matches[0]
    city = zone.rsplit("/", 1)[-1].replace("_", " ")
    return format_with_data(
        zone,
        get_utc_offset(zone),
        get_country_of_time_zone(zone),
        [city] if "/" in zone else [],
        with_country,
        with_cities,
    )
