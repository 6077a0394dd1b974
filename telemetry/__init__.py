"""
Sensor Telemetry Simulator

Randomised records for ADSB, AIS, GPS and LoRaWAN sensors, plus the
wire encoders that render them as NMEA sentences, hex frames and JSON.
"""

from .schema import (
    DataType,
    AdsbRecord,
    AisRecord,
    GpsRecord,
    LorawanRecord,
    SensorRecord,
)
from .shared.random_source import RandomValueService
from .generators import generate_record
from .encoders import encode_record

__all__ = [
    'DataType', 'AdsbRecord', 'AisRecord', 'GpsRecord', 'LorawanRecord',
    'SensorRecord', 'RandomValueService', 'generate_record', 'encode_record',
]
