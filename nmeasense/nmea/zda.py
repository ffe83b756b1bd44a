"""ZDA sentence decoder.

ZDA (Time and Date) data section:
    201530.00,04,07,2002,00,00
    |         |  |  |    |  |
    |         |  |  |    +--+-- Local zone hours/minutes (not decoded)
    |         |  |  +-- Year
    |         |  +-- Month
    |         +-- Day
    +-- UTC time (HHMMSS.ss)
"""

from nmeasense.nmea.field_reader import FieldReader, uint8, uint16
from nmeasense.nmea.types import DataZDA

__all__ = ["decode_zda"]


def decode_zda(data: str) -> DataZDA:
    """Decode the data section of a ZDA sentence; every field is optional."""
    reader = FieldReader(data)

    utc = reader.read_optional(float, "utc")
    day = reader.read_optional(uint8, "day")
    month = reader.read_optional(uint8, "month")
    year = reader.read_optional(uint16, "year")

    return DataZDA(utc=utc, day=day, month=month, year=year)
