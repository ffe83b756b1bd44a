"""NMEA data types for decoded sentences.

This module defines the records produced by the parser and the closed set
of sentence kinds it recognizes.

Design Decisions:
    1. Closed union: ``Sentence`` is exactly one of ``Unrecognized``,
       ``DataGGA``, ``DataVTG``, ``DataRMC`` or ``DataZDA``. Each record
       names its ``kind`` as a class attribute, so consumers can dispatch
       on either the type or ``sentence.kind``.

    2. Immutable records (frozen dataclasses): decoders read every field
       into locals and construct the record last. A record therefore
       either exists fully decoded or not at all.

    3. Optional fields (float | None): NMEA fields may be empty, indicated
       by consecutive commas. None distinguishes "no data received" from
       "measured zero".

    4. Wire values are kept as sent (e.g. latitude in DDMM.MMMM). Derived
       values such as decimal degrees are exposed as properties.
"""

import datetime
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from nmeasense.nmea.coordinates import to_decimal_degrees

__all__ = [
    "DataGGA",
    "DataRMC",
    "DataVTG",
    "DataZDA",
    "Sentence",
    "SentenceKind",
    "Unrecognized",
]

# 1 km/h = 1000 m / 3600 s
_KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND = 3.6


class SentenceKind(Enum):
    """Sentence kinds recognized from the identifier field."""

    UNRECOGNIZED = "UNRECOGNIZED"
    GGA = "GGA"
    VTG = "VTG"
    RMC = "RMC"
    ZDA = "ZDA"

    @classmethod
    def from_identifier(cls, identifier: str) -> "SentenceKind":
        """Classify an identifier field by its trailing three characters.

        The talker prefix is ignored, so "GPGGA", "GNGGA" and "GGA" all
        classify as GGA.

        Example:
            >>> SentenceKind.from_identifier("GNVTG")
            <SentenceKind.VTG: 'VTG'>
            >>> SentenceKind.from_identifier("GPGSV")
            <SentenceKind.UNRECOGNIZED: 'UNRECOGNIZED'>
        """
        for kind in _RECOGNIZED_KINDS:
            if identifier.endswith(kind.value):
                return kind
        return cls.UNRECOGNIZED


_RECOGNIZED_KINDS = (
    SentenceKind.GGA,
    SentenceKind.VTG,
    SentenceKind.RMC,
    SentenceKind.ZDA,
)


@dataclass(frozen=True)
class Unrecognized:
    """Sentence whose identifier matched no supported kind."""

    kind: ClassVar[SentenceKind] = SentenceKind.UNRECOGNIZED

    identifier: str = ""


@dataclass(frozen=True)
class DataGGA:
    """Decoded GGA (Global Positioning System Fix Data) sentence.

    Attributes:
        utc_time: UTC time as HHMMSS.ss (e.g. 202530.0), None if empty.
        lat: Latitude in DDMM.MMMM form, None if empty.
        ns: Latitude hemisphere, "N" or "S".
        lon: Longitude in DDDMM.MMMM form, None if empty.
        ew: Longitude hemisphere, "E" or "W".
        validity: Fix quality indicator, always present:
            0 = Invalid (no fix)
            1 = GPS fix (SPS)
            2 = DGPS fix
            4 = RTK Fixed
            5 = RTK Float
            6 = Dead reckoning
        sat: Number of satellites in use.
        hdop: Horizontal dilution of precision.
        alt: Altitude above mean sea level.
        units: Altitude units, normally "M".
        gsep: Geoid separation. Not decoded from the wire.
        gsep_units: Geoid separation units. Not decoded from the wire.
        dgps_age: Age of differential corrections. Not decoded from the wire.
        dgps_id: Differential reference station. Not decoded from the wire.

    Example:
        >>> gga = DataGGA(lat=5109.0262, ns="N", lon=11401.8407, ew="W", validity=5)
        >>> gga.valid
        True
        >>> round(gga.latitude_degrees, 6)
        51.150437
        >>> round(gga.longitude_degrees, 6)
        -114.030678
    """

    kind: ClassVar[SentenceKind] = SentenceKind.GGA

    utc_time: float | None = None
    lat: float | None = None
    ns: str | None = None
    lon: float | None = None
    ew: str | None = None
    validity: int = 0
    sat: int | None = None
    hdop: float | None = None
    alt: float | None = None
    units: str | None = None
    gsep: float | None = None
    gsep_units: str | None = None
    dgps_age: float | None = None
    dgps_id: int | None = None

    @property
    def latitude_degrees(self) -> float | None:
        """Latitude in signed decimal degrees (positive=North)."""
        return to_decimal_degrees(self.lat, self.ns)

    @property
    def longitude_degrees(self) -> float | None:
        """Longitude in signed decimal degrees (positive=East)."""
        return to_decimal_degrees(self.lon, self.ew)

    @property
    def valid(self) -> bool:
        """Navigation validity: True only with a fix (validity > 0)."""
        return self.validity > 0


@dataclass(frozen=True)
class DataVTG:
    """Decoded VTG (Course over Ground and Ground Speed) sentence.

    Attributes:
        cog_true: Course over ground relative to true north, degrees.
            None when stationary (no heading without movement).
        cog_magnetic: Course over ground relative to magnetic north.
        sog_knots: Speed over ground in knots.
        sog_kph: Speed over ground in km/h.
        mode: FAA mode indicator (NMEA 2.3+): A=Autonomous,
            D=Differential, E=Estimated, N=Not valid. None on older
            receivers.
    """

    kind: ClassVar[SentenceKind] = SentenceKind.VTG

    cog_true: float | None = None
    cog_magnetic: float | None = None
    sog_knots: float | None = None
    sog_kph: float | None = None
    mode: str | None = None

    @property
    def speed_meters_per_second(self) -> float | None:
        """Speed over ground in m/s, derived from ``sog_kph``."""
        if self.sog_kph is None:
            return None
        return self.sog_kph / _KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND

    @property
    def valid(self) -> bool:
        """Navigation validity: mode present and not 'N'."""
        return self.mode is not None and self.mode != "N"


@dataclass(frozen=True)
class DataRMC:
    """RMC (Recommended Minimum Navigation Information) placeholder.

    The sentence is recognized and checksummed but none of its fields are
    decoded.
    """

    kind: ClassVar[SentenceKind] = SentenceKind.RMC


@dataclass(frozen=True)
class DataZDA:
    """Decoded ZDA (Time and Date) sentence.

    Attributes:
        utc: UTC time as HHMMSS.ss.
        day: Day of month, 1 to 31.
        month: Month, 1 to 12.
        year: Four-digit year.
    """

    kind: ClassVar[SentenceKind] = SentenceKind.ZDA

    utc: float | None = None
    day: int | None = None
    month: int | None = None
    year: int | None = None

    @property
    def date(self) -> datetime.date | None:
        """Calendar date, or None if incomplete or not a real date."""
        if self.day is None or self.month is None or self.year is None:
            return None
        try:
            return datetime.date(self.year, self.month, self.day)
        except ValueError:
            return None


Sentence = Unrecognized | DataGGA | DataVTG | DataRMC | DataZDA
