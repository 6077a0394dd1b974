"""
ADSB Extended Squitter Encoder

Renders an aircraft record as a 112-bit DF17 frame in hex:

    8D 4840D6 202CC371C32CE0
    |  |      +-- ME field + parity (random placeholder, 14 hex digits)
    |  +--------- ICAO address (24 bits)
    +------------ DF17, CA=5

Only the downlink format and the address are meaningful. Type code,
CPR position and parity are not encoded.
"""

from ..schema import AdsbRecord
from ..shared.random_source import RandomValueService

DF17_MARKER = "8D"
FILLER_DIGITS = 14


def encode_adsb(record: AdsbRecord, rng: RandomValueService) -> str:
    """22-character hex frame for the record's ICAO address"""
    return f"{DF17_MARKER}{record.icao}{rng.hex_string(FILLER_DIGITS, upper=True)}"
