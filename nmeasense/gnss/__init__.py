"""GNSS module for reading NMEA 0183 sentences relayed by gpsd."""

from nmeasense.gnss.reader import NMEAReader

__all__ = ["NMEAReader"]
