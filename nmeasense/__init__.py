"""Nmeasense package for incremental NMEA 0183 parsing."""

from nmeasense.gnss import NMEAReader
from nmeasense.nmea import (
    DataGGA,
    DataRMC,
    DataVTG,
    DataZDA,
    NMEAError,
    NMEAStream,
    Parser,
    Sentence,
    SentenceKind,
    parse_sentence,
    validate_checksum,
)

__all__ = [
    "DataGGA",
    "DataRMC",
    "DataVTG",
    "DataZDA",
    "NMEAError",
    "NMEAReader",
    "NMEAStream",
    "Parser",
    "Sentence",
    "SentenceKind",
    "parse_sentence",
    "validate_checksum",
]
