"""
Sensor Record Schema

One immutable record model per sensor domain. All four share the base
position fields and are told apart by the `data_type` discriminator, so
`SensorRecord` validates straight into the right variant:

    TypeAdapter(SensorRecord).validate_python({"dataType": "GPS", ...})

Attributes are snake_case; JSON output uses camelCase aliases.
"""

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel
from types import MappingProxyType
from typing import Annotated, Any, Dict, Literal, Union
from enum import Enum


class DataType(str, Enum):
    ADSB = "ADSB"
    AIS = "AIS"
    GPS = "GPS"
    LORAWAN = "LORAWAN"


class SensorType(str, Enum):
    """LoRaWAN end-device families, each with its own payload layout"""
    TEMPERATURE_HUMIDITY = "TEMPERATURE_HUMIDITY"
    SOIL_MOISTURE = "SOIL_MOISTURE"
    AIR_QUALITY = "AIR_QUALITY"
    WATER_LEVEL = "WATER_LEVEL"
    PARKING_SENSOR = "PARKING_SENSOR"
    DOOR_WINDOW_SENSOR = "DOOR_WINDOW_SENSOR"
    WASTE_BIN = "WASTE_BIN"
    ASSET_TRACKER = "ASSET_TRACKER"


class BaseRecord(BaseModel):
    """Fields common to every sensor sample"""

    timestamp: int  # ms since epoch
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict:
        """JSON-ready dict with camelCase keys"""
        return self.model_dump(mode="json", by_alias=True)


class AdsbRecord(BaseRecord):
    """ADSB aircraft state"""

    data_type: Literal[DataType.ADSB] = DataType.ADSB

    icao: str = Field(pattern=r"^[0-9A-F]{6}$")  # 24-bit address
    altitude: float = Field(ge=0, le=45000)  # feet
    ground_speed: float = Field(ge=0, le=600)  # knots
    track: float = Field(ge=0, le=359.9)  # degrees
    vertical_rate: float = Field(ge=-3000, le=3000)  # ft/min
    squawk: str = Field(pattern=r"^[0-7]{4}$")
    alert: bool
    emergency: bool
    spi: bool
    on_ground: bool


class AisRecord(BaseRecord):
    """AIS vessel report (position, static and voyage fields together)"""

    data_type: Literal[DataType.AIS] = DataType.AIS

    mmsi: int = Field(ge=200000000, le=799999999)
    vessel_name: str
    call_sign: str
    imo: int = Field(ge=1000000, le=9999999)
    speed_over_ground: float = Field(ge=0, le=30)  # knots
    course_over_ground: float = Field(ge=0, lt=360)
    heading: float = Field(ge=0, lt=360)
    navigational_status: int = Field(ge=0, le=14)
    ship_type: int = Field(ge=1, le=99)
    draught: float = Field(ge=0, le=20)  # meters
    destination: str
    message_type: int
    position_accuracy: bool
    raim_flag: int = Field(ge=0, le=1)
    time_stamp: int = Field(ge=0, le=59)  # UTC second of the report
    maneuver_indicator: int = Field(ge=0, le=2)
    eta: str = Field(pattern=r"^\d{2}-\d{2} \d{2}:\d{2}$")  # MM-DD HH:MM
    dimension_to_bow: float
    dimension_to_stern: float
    dimension_to_port: float
    dimension_to_starboard: float
    rate_of_turn: float = Field(ge=-720, le=720)  # deg/min


class GpsRecord(BaseRecord):
    """GPS fix"""

    data_type: Literal[DataType.GPS] = DataType.GPS

    altitude: float = Field(ge=-100, le=10000)  # meters
    speed: float = Field(ge=0, le=100)  # knots
    course: float = Field(ge=0, le=359.9)
    satellites: int = Field(ge=1, le=12)
    fix_quality: int = Field(ge=0, le=2)  # 0=invalid, 1=GPS, 2=DGPS
    hdop: float = Field(ge=1, le=10)
    geoid_height: float = Field(ge=-30, le=30)
    magnetic_variation: float = Field(ge=-20, le=20)


class LorawanRecord(BaseRecord):
    """LoRaWAN uplink with radio metadata and application payload"""

    data_type: Literal[DataType.LORAWAN] = DataType.LORAWAN

    dev_eui: str = Field(pattern=r"^[0-9a-fA-F]{16}$")
    dev_addr: str = Field(pattern=r"^[0-9a-fA-F]{8}$")
    app_eui: str = Field(pattern=r"^[0-9a-fA-F]{16}$")
    f_port: int = Field(ge=1, le=223)
    confirmed: bool
    message_type: int = Field(ge=0, le=5)
    counter: int = Field(ge=0, le=65535)
    rssi: float = Field(ge=-120, le=-41)  # dBm
    snr: float = Field(ge=-20, le=10)  # dB
    spreading_factor: int = Field(ge=7, le=12)
    bandwidth: int  # kHz
    coding_rate: int = Field(ge=1, le=4)  # 4/(4+n)
    frequency: str  # band plan tag
    frequency_value: float  # MHz
    sensor_type: SensorType
    payload: bytes
    decoded_payload: Dict[str, Any]  # stored as a read-only view

    @field_validator("payload", mode="before")
    @classmethod
    def parse_payload(cls, value: Any) -> Any:
        """Accept the hex form written by to_dict()"""
        if isinstance(value, str):
            return bytes.fromhex(value)
        return value

    @field_validator("decoded_payload")
    @classmethod
    def freeze_decoded_payload(cls, value: Dict[str, Any]):
        return MappingProxyType(dict(value))

    @field_serializer("payload")
    def serialize_payload(self, payload: bytes) -> str:
        return payload.hex().upper()

    @field_serializer("decoded_payload")
    def serialize_decoded_payload(self, decoded_payload) -> Dict[str, Any]:
        return dict(decoded_payload)


SensorRecord = Annotated[
    Union[AdsbRecord, AisRecord, GpsRecord, LorawanRecord],
    Field(discriminator="data_type"),
]
