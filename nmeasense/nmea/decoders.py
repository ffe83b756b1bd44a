"""Dispatch from sentence kind to its field decoder."""

import logging
from collections.abc import Callable

from nmeasense.nmea.errors import FieldReadError
from nmeasense.nmea.gga import decode_gga
from nmeasense.nmea.rmc import decode_rmc
from nmeasense.nmea.types import Sentence, SentenceKind
from nmeasense.nmea.vtg import decode_vtg
from nmeasense.nmea.zda import decode_zda

__all__ = ["decode_fields"]

logger = logging.getLogger(__name__)

_DECODERS: dict[SentenceKind, Callable[[str], Sentence]] = {
    SentenceKind.GGA: decode_gga,
    SentenceKind.VTG: decode_vtg,
    SentenceKind.RMC: decode_rmc,
    SentenceKind.ZDA: decode_zda,
}


def decode_fields(kind: SentenceKind, data: str) -> Sentence:
    """Decode a sentence data section for the given kind.

    Args:
        kind: A recognized kind (anything but ``UNRECOGNIZED``).
        data: Text between the identifier's comma and '*'.

    Raises:
        ValueError: If ``kind`` has no decoder.
        FieldReadError: If a field is missing or malformed.
    """
    decoder = _DECODERS.get(kind)
    if decoder is None:
        raise ValueError(f"no decoder for {kind.value} sentences")

    try:
        return decoder(data)
    except FieldReadError as e:
        logger.debug("%s: failed decoding fields: %s", kind.value, e)
        raise
