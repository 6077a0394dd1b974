"""
GPS NMEA 0183 Encoder

Renders a fix as GGA, RMC and VTG sentences, each with its own checksum:

    $GPGGA,123519.000,4807.0380,N,01131.0000,E,1,8,0.9,545.4,M,46.9,M,,*XX
    $GPRMC,123519.000,A,4807.0380,N,01131.0000,E,22.4,84.4,230394,3.1,W*XX
    $GPVTG,84.4,T,81.3,M,22.4,N,41.5,K*XX
"""

from typing import List

from ..schema import GpsRecord
from ..shared.nmea import (
    nmea_checksum,
    format_latitude,
    format_longitude,
    format_nmea_time,
    format_nmea_date,
)

KNOTS_TO_KMH = 1.852


def _sentence(body: str) -> str:
    return f"${body}*{nmea_checksum(body)}"


def encode_gga(record: GpsRecord) -> str:
    """GGA - fix data"""
    body = (
        f"GPGGA,{format_nmea_time(record.timestamp)},"
        f"{format_latitude(record.latitude)},"
        f"{format_longitude(record.longitude)},"
        f"{record.fix_quality},"
        f"{record.satellites},"
        f"{record.hdop:.1f},"
        f"{record.altitude:.1f},M,"
        f"{record.geoid_height:.1f},M,"
        ","  # DGPS age, station id
    )
    return _sentence(body)


def encode_rmc(record: GpsRecord) -> str:
    """RMC - recommended minimum navigation data"""
    status = "A" if record.fix_quality > 0 else "V"
    variation = record.magnetic_variation
    body = (
        f"GPRMC,{format_nmea_time(record.timestamp)},{status},"
        f"{format_latitude(record.latitude)},"
        f"{format_longitude(record.longitude)},"
        f"{record.speed:.1f},"
        f"{record.course:.1f},"
        f"{format_nmea_date(record.timestamp)},"
        f"{abs(variation):.1f},{'E' if variation >= 0 else 'W'}"
    )
    return _sentence(body)


def magnetic_course(record: GpsRecord) -> float:
    course = record.course + record.magnetic_variation
    if course < 0:
        course += 360
    if course >= 360:
        course -= 360
    return course


def encode_vtg(record: GpsRecord) -> str:
    """VTG - track made good and ground speed"""
    body = (
        f"GPVTG,{record.course:.1f},T,"
        f"{magnetic_course(record):.1f},M,"
        f"{record.speed:.1f},N,"
        f"{record.speed * KNOTS_TO_KMH:.1f},K"
    )
    return _sentence(body)


def gps_sentences(record: GpsRecord) -> List[str]:
    return [encode_gga(record), encode_rmc(record), encode_vtg(record)]


def encode_gps(record: GpsRecord) -> str:
    """GGA, RMC and VTG joined by newlines"""
    return "\n".join(gps_sentences(record))
