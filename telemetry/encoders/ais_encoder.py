"""
AIS AIVDM Encoder

Wraps AIS records in AIVDM sentences. Payloads are plain decimal field
concatenations, not 6-bit armored bit fields:

    !AIVDM,1,1,,A,1823456789051.5000-0.120012.345.04430,0*XX
    |      | | || |                                     | +-- Checksum (XOR)
    |      | | || |                                     +---- Fill bits (always 0)
    |      | | || +------------------------------------------ Payload (decimal)
    |      | | |+-------------------------------------------- Radio channel
    |      | | +--------------------------------------------- Sequential message ID (empty)
    |      | +----------------------------------------------- Sentence number
    |      +------------------------------------------------- Total sentences
    +-------------------------------------------------------- Talker ID

The checksum covers the text after '!' and before the trailing ',0*'.

Supports:
- Message Type 1/2/3: Class A Position Report
- Message Type 5: Static and Voyage Related Data (two-part)
- Message Type 18: Class B Position Report
- Message Type 24: Static Data Report (parts A and B as two separate
  single-sentence messages, not a continuation pair)

Any other message type is encoded as a position report.
"""

from typing import List

from ..schema import AisRecord
from ..shared.nmea import nmea_checksum, pad_right

CALL_SIGN_WIDTH = 7
NAME_WIDTH = 20

POSITION_REPORT_TYPES = (1, 2, 3)
STATIC_VOYAGE_TYPE = 5
CLASS_B_POSITION_TYPE = 18
STATIC_DATA_REPORT_TYPE = 24


def sentence_body(total: int, number: int, payload: str) -> str:
    """Checksummed part of an AIVDM sentence"""
    return f"AIVDM,{total},{number},,A,{payload}"


def build_sentence(payload: str, total: int = 1, number: int = 1) -> str:
    body = sentence_body(total, number, payload)
    return f"!{body},0*{nmea_checksum(body)}"


def _dimensions(record: AisRecord) -> str:
    return (
        f"{record.dimension_to_bow:.1f}"
        f"{record.dimension_to_stern:.1f}"
        f"{record.dimension_to_port:.1f}"
        f"{record.dimension_to_starboard:.1f}"
    )


def encode_position_report(record: AisRecord) -> str:
    """Type 1/2/3 Class A position report"""
    payload = (
        f"{record.message_type}"
        f"{record.mmsi:09d}"
        f"{record.navigational_status:02d}"
        f"{record.latitude:.4f}"
        f"{record.longitude:.4f}"
        f"{record.speed_over_ground:.1f}"
        f"{record.course_over_ground:.1f}"
        f"{record.time_stamp}"
    )
    return build_sentence(payload)


def encode_static_voyage_data(record: AisRecord) -> List[str]:
    """Type 5 static and voyage data, two sentences"""
    part1 = (
        f"{record.message_type}"
        f"{record.mmsi:09d}"
        f"{record.imo}"
        f"{pad_right(record.call_sign, CALL_SIGN_WIDTH)}"
        f"{record.ship_type}"
        f"{pad_right(record.vessel_name, NAME_WIDTH)}"
    )
    part2 = (
        f"{record.draught:.1f}"
        f"{record.eta}"
        f"{_dimensions(record)}"
        f"{pad_right(record.destination, NAME_WIDTH)}"
    )
    return [
        build_sentence(part1, total=2, number=1),
        build_sentence(part2, total=2, number=2),
    ]


def encode_class_b_position_report(record: AisRecord) -> str:
    """Type 18 Class B position report"""
    payload = (
        f"{record.message_type}"
        f"{record.mmsi:09d}"
        f"{record.latitude:.4f}"
        f"{record.longitude:.4f}"
        f"{record.speed_over_ground:.1f}"
        f"{record.course_over_ground:.1f}"
        f"{int(record.heading)}"
        f"{record.time_stamp}"
    )
    return build_sentence(payload)


def encode_static_data_report(record: AisRecord) -> List[str]:
    """Type 24 static data report, part A (name) and part B (call sign, type, size)"""
    part_a = (
        f"{record.message_type}"
        f"{record.mmsi:09d}"
        f"0"
        f"{pad_right(record.vessel_name, NAME_WIDTH)}"
    )
    part_b = (
        f"{record.message_type}"
        f"{record.mmsi:09d}"
        f"1"
        f"{pad_right(record.call_sign, CALL_SIGN_WIDTH)}"
        f"{record.ship_type}"
        f"{_dimensions(record)}"
    )
    return [build_sentence(part_a), build_sentence(part_b)]


def ais_sentences(record: AisRecord) -> List[str]:
    """Sentences for the record's message type"""
    message_type = record.message_type

    if message_type in POSITION_REPORT_TYPES:
        return [encode_position_report(record)]
    elif message_type == STATIC_VOYAGE_TYPE:
        return encode_static_voyage_data(record)
    elif message_type == CLASS_B_POSITION_TYPE:
        return [encode_class_b_position_report(record)]
    elif message_type == STATIC_DATA_REPORT_TYPE:
        return encode_static_data_report(record)
    else:
        return [encode_position_report(record)]


def encode_ais(record: AisRecord) -> str:
    """AIVDM text, multi-sentence messages joined by newlines"""
    return "\n".join(ais_sentences(record))
