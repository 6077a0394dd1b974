"""
NMEA 0183 Helpers

Checksum calculation and the coordinate/time field formats shared by the
GPS and AIS encoders.

Checksum is the XOR of every character between the sentinel ($ or !) and
the '*'. Callers pass that body only:

    $GPVTG,54.7,T,34.4,M,5.5,N,10.2,K*XX
     |<--------------- body -------->|
"""

from datetime import datetime, timezone


def nmea_checksum(body: str) -> str:
    """XOR checksum of body as two uppercase hex digits"""
    checksum = 0
    for char in body:
        checksum ^= ord(char)
    return f"{checksum:02X}"


def _degrees_minutes(value: float):
    degrees = int(abs(value))
    minutes = round((abs(value) - degrees) * 60, 4)
    # 59.99995 and up rounds to 60.0000, carry it into the degrees
    if minutes >= 60:
        degrees += 1
        minutes -= 60
    return degrees, minutes


def format_latitude(latitude: float) -> str:
    """Latitude as ddmm.mmmm,N|S"""
    degrees, minutes = _degrees_minutes(latitude)
    hemisphere = "N" if latitude >= 0 else "S"
    return f"{degrees:02d}{minutes:07.4f},{hemisphere}"


def format_longitude(longitude: float) -> str:
    """Longitude as dddmm.mmmm,E|W"""
    degrees, minutes = _degrees_minutes(longitude)
    hemisphere = "E" if longitude >= 0 else "W"
    return f"{degrees:03d}{minutes:07.4f},{hemisphere}"


def _utc(timestamp_ms: int) -> datetime:
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)


def format_nmea_time(timestamp_ms: int) -> str:
    """UTC time of day as hhmmss.sss"""
    dt = _utc(timestamp_ms)
    return f"{dt:%H%M%S}.{timestamp_ms % 1000:03d}"


def format_nmea_date(timestamp_ms: int) -> str:
    """UTC date as ddmmyy"""
    return f"{_utc(timestamp_ms):%d%m%y}"


def format_iso_timestamp(timestamp_ms: int) -> str:
    """ISO 8601 UTC timestamp, e.g. 2024-03-01T12:00:00.250Z"""
    return _utc(timestamp_ms).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def pad_right(text: str, width: int) -> str:
    """Pad with spaces to width, or truncate if longer"""
    return (text or "")[:width].ljust(width)
