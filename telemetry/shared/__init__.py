"""
Shared helpers used by every sensor domain.
"""

from .random_source import RandomValueService
from .nmea import (
    nmea_checksum,
    format_latitude,
    format_longitude,
    format_nmea_time,
    format_nmea_date,
    format_iso_timestamp,
    pad_right,
)

__all__ = [
    'RandomValueService', 'nmea_checksum', 'format_latitude', 'format_longitude',
    'format_nmea_time', 'format_nmea_date', 'format_iso_timestamp', 'pad_right',
]
