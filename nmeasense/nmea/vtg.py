"""VTG sentence decoder.

VTG (Course over Ground and Ground Speed) provides velocity information.

VTG data section (everything between "GNVTG," and '*'):
    054.7,T,034.4,M,005.5,N,010.2,K,A
    |     | |     | |     | |     | |
    |     | |     | |     | |     | +-- Mode indicator (A/D/E/N, optional)
    |     | |     | |     | +-----+-- Speed in km/h + 'K'
    |     | |     | +-----+-- Speed in knots + 'N'
    |     | +-----+-- Course (magnetic north) + 'M'
    +-----+-- Course (true north) + 'T'

Note: When stationary, the course fields may be empty. The single-letter
unit markers must still be present.
"""

from nmeasense.nmea.errors import EmptyFieldError
from nmeasense.nmea.field_reader import FieldReader
from nmeasense.nmea.types import DataVTG

__all__ = ["decode_vtg"]


def _skip_marker(reader: FieldReader, name: str) -> None:
    """Consume a fixed unit marker field, failing if it is missing."""
    if not reader.skip():
        raise EmptyFieldError("missing unit marker", reader.index, name)


def decode_vtg(data: str) -> DataVTG:
    """Decode the data section of a VTG sentence.

    All values are optional, but each is followed by its unit marker.

    Raises:
        FieldReadError: On the first malformed value or missing marker.
    """
    reader = FieldReader(data)

    cog_true = reader.read_optional(float, "cog_true")
    _skip_marker(reader, "cog_true_marker")
    cog_magnetic = reader.read_optional(float, "cog_magnetic")
    _skip_marker(reader, "cog_magnetic_marker")
    sog_knots = reader.read_optional(float, "sog_knots")
    _skip_marker(reader, "sog_knots_marker")
    sog_kph = reader.read_optional(float, "sog_kph")
    _skip_marker(reader, "sog_kph_marker")
    mode = reader.read_optional(str, "mode")

    return DataVTG(
        cog_true=cog_true,
        cog_magnetic=cog_magnetic,
        sog_knots=sog_knots,
        sog_kph=sog_kph,
        mode=mode,
    )
