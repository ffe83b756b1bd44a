"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) carries the position fix: time,
coordinates, fix quality, satellite count, HDOP and altitude.

GGA data section (everything between "GPGGA," and '*'):
    202530.00,5109.0262,N,11401.8407,W,5,40,0.5,1097.36,M,-17.00,M,18,TSTR
    |         |         | |          | | |  |   |       | |      | |  |
    |         |         | |          | | |  |   |       | |      | |  +-- DGPS station (not decoded)
    |         |         | |          | | |  |   |       | |      | +-- DGPS age (not decoded)
    |         |         | |          | | |  |   |       | +------+-- Geoid separation (not decoded)
    |         |         | |          | | |  |   +-------+-- Altitude + units
    |         |         | |          | | |  +-- HDOP
    |         |         | |          | | +-- Number of satellites
    |         |         | |          | +-- Fix quality (mandatory)
    |         |         | +----------+-- Longitude + E/W
    |         +---------+-- Latitude + N/S
    +-- UTC time (HHMMSS.ss)
"""

from nmeasense.nmea.field_reader import FieldReader, uint8
from nmeasense.nmea.types import DataGGA

__all__ = ["decode_gga"]

_LATITUDE_HEMISPHERES = ("N", "S")
_LONGITUDE_HEMISPHERES = ("E", "W")


def _hemisphere(allowed: tuple[str, ...]):
    """Build a field parser accepting only the given hemisphere letters."""

    def parse(text: str) -> str:
        if text not in allowed:
            raise ValueError(f"hemisphere must be one of {allowed}, got {text!r}")
        return text

    return parse


_latitude_hemisphere = _hemisphere(_LATITUDE_HEMISPHERES)
_longitude_hemisphere = _hemisphere(_LONGITUDE_HEMISPHERES)


def decode_gga(data: str) -> DataGGA:
    """Decode the data section of a GGA sentence.

    Only the fix quality is mandatory; every other field may be empty.

    Raises:
        FieldReadError: On the first field that is missing (when
            mandatory) or malformed.
    """
    reader = FieldReader(data)

    utc_time = reader.read_optional(float, "utc_time")
    lat = reader.read_optional(float, "lat")
    ns = reader.read_optional(_latitude_hemisphere, "ns")
    lon = reader.read_optional(float, "lon")
    ew = reader.read_optional(_longitude_hemisphere, "ew")
    validity = reader.read(uint8, "validity")
    sat = reader.read_optional(uint8, "sat")
    hdop = reader.read_optional(float, "hdop")
    alt = reader.read_optional(float, "alt")
    units = reader.read_optional(str, "units")

    return DataGGA(
        utc_time=utc_time,
        lat=lat,
        ns=ns,
        lon=lon,
        ew=ew,
        validity=validity,
        sat=sat,
        hdop=hdop,
        alt=alt,
        units=units,
    )
