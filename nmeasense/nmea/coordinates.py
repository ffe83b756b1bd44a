"""Conversion of NMEA coordinates to decimal degrees.

NMEA encodes latitude as DDMM.MMMM and longitude as DDDMM.MMMM, with a
separate hemisphere letter. Decoders keep the value as read from the wire;
this module converts it on demand.
"""

__all__ = ["to_decimal_degrees"]

# Hemispheres with negative sign in decimal degrees
_NEGATIVE_HEMISPHERES = ("S", "W")


def _split_degrees_minutes(value: float) -> tuple[int, float]:
    """Split a DDDMM.MMMM value into whole degrees and decimal minutes.

    The two digits left of the decimal point are always minutes, so the
    split is a division by 100.

    Example:
        >>> degrees, minutes = _split_degrees_minutes(4807.038)
        >>> degrees, round(minutes, 3)
        (48, 7.038)
    """
    degrees = int(value // 100)
    minutes = value - degrees * 100
    return degrees, minutes


def to_decimal_degrees(
    value: float | None,
    hemisphere: str | None,
) -> float | None:
    """Convert an NMEA coordinate to signed decimal degrees.

    North and East are positive, South and West negative:
        decimal_degrees = degrees + minutes / 60

    Args:
        value: Coordinate in DDDMM.MMMM form (e.g. ``5109.0262``).
        hemisphere: One of "N", "S", "E", "W".

    Returns:
        Signed decimal degrees, or None if either argument is None.

    Example:
        >>> round(to_decimal_degrees(11401.8407, "W"), 6)
        -114.030678
    """
    if value is None or not hemisphere:
        return None

    degrees, minutes = _split_degrees_minutes(abs(value))
    decimal_degrees = degrees + minutes / 60.0

    if hemisphere in _NEGATIVE_HEMISPHERES:
        return -decimal_degrees

    return decimal_degrees
