"""Incremental NMEA 0183 parser for GGA, VTG, RMC and ZDA sentences."""

from nmeasense.nmea.checksum import calculate_checksum, validate_checksum
from nmeasense.nmea.errors import (
    ChecksumMismatchError,
    EmptyFieldError,
    FieldDecodeError,
    FieldReadError,
    InvalidChecksumError,
    InvalidFieldsError,
    InvalidFormatError,
    InvalidIdError,
    InvalidSyncError,
    NMEAError,
    TruncatedSentenceError,
)
from nmeasense.nmea.field_reader import FieldReader, uint8, uint16
from nmeasense.nmea.parser import Parser, ParserState, parse_sentence
from nmeasense.nmea.stream import NMEAStream, StreamStatistics
from nmeasense.nmea.types import (
    DataGGA,
    DataRMC,
    DataVTG,
    DataZDA,
    Sentence,
    SentenceKind,
    Unrecognized,
)

__all__ = [
    "ChecksumMismatchError",
    "DataGGA",
    "DataRMC",
    "DataVTG",
    "DataZDA",
    "EmptyFieldError",
    "FieldDecodeError",
    "FieldReadError",
    "FieldReader",
    "InvalidChecksumError",
    "InvalidFieldsError",
    "InvalidFormatError",
    "InvalidIdError",
    "InvalidSyncError",
    "NMEAError",
    "NMEAStream",
    "Parser",
    "ParserState",
    "Sentence",
    "SentenceKind",
    "StreamStatistics",
    "TruncatedSentenceError",
    "Unrecognized",
    "calculate_checksum",
    "parse_sentence",
    "uint16",
    "uint8",
    "validate_checksum",
]
