"""
Wire Encoders
Render sensor records in their native wire formats
"""

from ..schema import DataType
from ..shared.random_source import RandomValueService
from .adsb_encoder import encode_adsb
from .ais_encoder import encode_ais, ais_sentences
from .gps_encoder import encode_gps, gps_sentences
from .lorawan_codec import decode_lorawan_payload, encode_lorawan_raw, build_payload


def encode_record(record, rng: RandomValueService) -> str:
    """Encode any sensor record according to its data type"""
    if record.data_type == DataType.ADSB:
        return encode_adsb(record, rng)
    elif record.data_type == DataType.AIS:
        return encode_ais(record)
    elif record.data_type == DataType.GPS:
        return encode_gps(record)
    elif record.data_type == DataType.LORAWAN:
        return encode_lorawan_raw(record, rng)
    raise ValueError(f"Unknown data type: {record.data_type}")


__all__ = [
    'encode_record', 'encode_adsb', 'encode_ais', 'ais_sentences', 'encode_gps',
    'gps_sentences', 'decode_lorawan_payload', 'encode_lorawan_raw', 'build_payload',
]
