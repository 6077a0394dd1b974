"""
LoRaWAN Payload Codec

Builds and decodes the application payloads of eight simulated end-device
families, and renders a full uplink as network-server style JSON.

Payload layouts (network byte order):

    TEMPERATURE_HUMIDITY  [temp i8][temp frac u8][humidity u8]
    SOIL_MOISTURE         [moisture u8][temp i8][temp frac u8]
    AIR_QUALITY           [pm2.5 u16][pm10 u16][co2 level u8]
    WATER_LEVEL           [level u16][temp u8]
    PARKING_SENSOR        [occupied u8][battery u8]
    DOOR_WINDOW_SENSOR    [open u8][battery u8][count u8]
    WASTE_BIN             [fill u8][temp u8, offset 20][battery u8]
    ASSET_TRACKER         [lat u16][lon u16][battery u8][status u8]

Decoding is a pure function of the bytes. A short payload yields only
the fields whose bytes are present.
"""

import json
import logging
import struct
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union

from ..schema import LorawanRecord, SensorType
from ..shared.nmea import format_iso_timestamp
from ..shared.random_source import RandomValueService

logger = logging.getLogger(__name__)

ASSET_STATUS = {0: "stationary", 1: "moving", 2: "alert", 3: "error"}

MESSAGE_TYPE_NAMES = {
    0: "JoinRequest",
    1: "JoinAccept",
    2: "UnconfirmedDataUp",
    3: "UnconfirmedDataDown",
    4: "ConfirmedDataUp",
    5: "ConfirmedDataDown",
}


def _i8(raw: bytes) -> int:
    return struct.unpack(">b", raw)[0]


def _u16(raw: bytes) -> int:
    return struct.unpack(">H", raw)[0]


def _fixed_point(raw: bytes) -> float:
    """Signed integer byte plus a 1/256 fractional byte"""
    return _i8(raw[:1]) + raw[1] / 256.0


@dataclass(frozen=True)
class PayloadField:
    name: str
    offset: int
    size: int
    decode: Callable[[bytes], Any]


FIELDS: Dict[SensorType, List[PayloadField]] = {
    SensorType.TEMPERATURE_HUMIDITY: [
        PayloadField("temperature", 0, 2, _fixed_point),
        PayloadField("humidity", 2, 1, lambda b: b[0]),
    ],
    SensorType.SOIL_MOISTURE: [
        PayloadField("moisture", 0, 1, lambda b: b[0]),
        PayloadField("temperature", 1, 2, _fixed_point),
    ],
    SensorType.AIR_QUALITY: [
        PayloadField("pm25", 0, 2, _u16),
        PayloadField("pm10", 2, 2, _u16),
        PayloadField("co2", 4, 1, lambda b: 400 + b[0] * 16),  # level 0-100 -> 400-2000 ppm
    ],
    SensorType.WATER_LEVEL: [
        PayloadField("waterLevel", 0, 2, _u16),
        PayloadField("temperature", 2, 1, lambda b: b[0]),
    ],
    SensorType.PARKING_SENSOR: [
        PayloadField("occupied", 0, 1, lambda b: b[0] == 1),
        PayloadField("battery", 1, 1, lambda b: b[0]),
    ],
    SensorType.DOOR_WINDOW_SENSOR: [
        PayloadField("open", 0, 1, lambda b: b[0] == 1),
        PayloadField("battery", 1, 1, lambda b: b[0]),
        PayloadField("count", 2, 1, lambda b: b[0]),
    ],
    SensorType.WASTE_BIN: [
        PayloadField("fillLevel", 0, 1, lambda b: b[0]),
        # Byte is read unsigned even though negative temperatures are sent as i8
        PayloadField("temperature", 1, 1, lambda b: b[0] - 20),
        PayloadField("battery", 2, 1, lambda b: b[0]),
    ],
    SensorType.ASSET_TRACKER: [
        PayloadField("latitude", 0, 2, lambda b: round(_u16(b) / 65535.0 * 180.0 - 90.0, 6)),
        PayloadField("longitude", 2, 2, lambda b: round(_u16(b) / 65535.0 * 360.0 - 180.0, 6)),
        PayloadField("battery", 4, 1, lambda b: b[0]),
        PayloadField("status", 5, 1, lambda b: ASSET_STATUS.get(b[0], "")),
    ],
}

UNITS = {
    SensorType.TEMPERATURE_HUMIDITY: "°C",
    SensorType.SOIL_MOISTURE: "°C",
    SensorType.AIR_QUALITY: "μg/m³",
    SensorType.WATER_LEVEL: "cm",
}


def _coerce_sensor_type(sensor_type: Union[SensorType, str]) -> Optional[SensorType]:
    if isinstance(sensor_type, SensorType):
        return sensor_type
    try:
        return SensorType(sensor_type)
    except ValueError:
        return None


def decode_lorawan_payload(payload: bytes, sensor_type: Union[SensorType, str]) -> Dict[str, Any]:
    """
    Decode an application payload into named values.

    Unknown sensor types fall back to the payload as a hex string under
    'rawData'. The 'sensorType' tag is always present.
    """
    payload = bytes(payload)
    known = _coerce_sensor_type(sensor_type)
    decoded: Dict[str, Any] = {}

    if known is None:
        logger.debug(f"No layout for sensor type {sensor_type!r}, emitting raw bytes")
        decoded["rawData"] = payload.hex().upper()
        decoded["sensorType"] = getattr(sensor_type, "value", str(sensor_type))
        return decoded

    for field in FIELDS[known]:
        end = field.offset + field.size
        if end <= len(payload):
            decoded[field.name] = field.decode(payload[field.offset:end])

    if known in UNITS:
        decoded["unit"] = UNITS[known]
    decoded["sensorType"] = known.value
    return decoded


def _i8_byte(value: int) -> int:
    return value & 0xFF


def _fraction_byte(rng: RandomValueService) -> int:
    return int(rng.ranged_int(100) / 100.0 * 256)


def build_payload(sensor_type: SensorType, rng: RandomValueService) -> bytes:
    """Draw a random payload laid out for sensor_type"""
    if sensor_type == SensorType.TEMPERATURE_HUMIDITY:
        return bytes([
            _i8_byte(rng.ranged_int(100) - 20),  # -20 to 79 C
            _fraction_byte(rng),
            rng.ranged_int(101),  # 0-100 %RH
        ])
    if sensor_type == SensorType.SOIL_MOISTURE:
        return bytes([
            rng.ranged_int(101),  # 0-100 % moisture
            _i8_byte(rng.ranged_int(60) - 10),  # -10 to 49 C
            _fraction_byte(rng),
        ])
    if sensor_type == SensorType.AIR_QUALITY:
        return struct.pack(
            ">HHB",
            rng.ranged_int(65536),  # PM2.5
            rng.ranged_int(65536),  # PM10
            rng.ranged_int(101),  # CO2 level
        )
    if sensor_type == SensorType.WATER_LEVEL:
        return struct.pack(">HB", rng.ranged_int(65536), rng.ranged_int(50))
    if sensor_type == SensorType.PARKING_SENSOR:
        return bytes([rng.ranged_int(2), rng.ranged_int(101)])
    if sensor_type == SensorType.DOOR_WINDOW_SENSOR:
        return bytes([rng.ranged_int(2), rng.ranged_int(101), rng.ranged_int(256)])
    if sensor_type == SensorType.WASTE_BIN:
        return bytes([
            rng.ranged_int(101),
            _i8_byte(rng.ranged_int(80) - 20),  # -20 to 59 C
            rng.ranged_int(101),
        ])
    if sensor_type == SensorType.ASSET_TRACKER:
        return struct.pack(
            ">HHBB",
            rng.ranged_int(65536),
            rng.ranged_int(65536),
            rng.ranged_int(101),
            rng.ranged_int(4),
        )
    return bytes(rng.ranged_int(256) for _ in range(3))


def message_type_name(message_type: int) -> str:
    return MESSAGE_TYPE_NAMES.get(message_type, "Unknown")


def encode_lorawan_raw(record: LorawanRecord, rng: RandomValueService) -> str:
    """
    Render an uplink as compact JSON.

    The gateway id is drawn fresh for every call and is unrelated to the
    device identifiers.
    """
    message = {
        "time": format_iso_timestamp(record.timestamp),
        "device": record.dev_eui,
        "devAddr": record.dev_addr,
        "appEui": record.app_eui,
        "gatewayId": rng.hex_string(16),
        "fPort": record.f_port,
        "messageType": message_type_name(record.message_type),
        "counter": record.counter,
        "rssi": float(record.rssi),
        "snr": round(record.snr, 1),
        "spreadingFactor": record.spreading_factor,
        "bandwidth": record.bandwidth,
        "codingRate": f"4/{4 + record.coding_rate}",
        "frequency": record.frequency,
        "frequencyValue": round(record.frequency_value, 1),
        "payload": record.payload.hex().upper(),
        "decodedPayload": dict(record.decoded_payload),
    }
    return json.dumps(message, ensure_ascii=False, separators=(",", ":"))
