import pytest
from pydantic import TypeAdapter, ValidationError

from telemetry.generators import AdsbGenerator, AisGenerator, GpsGenerator, LorawanGenerator
from telemetry.schema import AdsbRecord, AisRecord, DataType, GpsRecord, LorawanRecord, SensorRecord
from telemetry.encoders import decode_lorawan_payload

adapter = TypeAdapter(SensorRecord)


@pytest.mark.parametrize("generator_cls,record_cls", [
    (AdsbGenerator, AdsbRecord),
    (AisGenerator, AisRecord),
    (GpsGenerator, GpsRecord),
    (LorawanGenerator, LorawanRecord),
])
def test_union_validates_into_matching_variant(generator_cls, record_cls, rng):
    record = generator_cls(rng).generate()
    parsed = adapter.validate_python(record.to_dict())

    assert isinstance(parsed, record_cls)
    assert parsed == record


def test_records_are_immutable(rng):
    record = GpsGenerator(rng).generate()
    with pytest.raises(ValidationError):
        record.latitude = 0.0


def test_to_dict_uses_camel_case(rng):
    data = AdsbGenerator(rng).generate().to_dict()

    assert data["dataType"] == "ADSB"
    assert {"groundSpeed", "verticalRate", "onGround"} <= set(data)
    assert "ground_speed" not in data


def test_lorawan_payload_serialises_as_hex(rng):
    record = LorawanGenerator(rng).generate()
    data = record.to_dict()

    assert data["dataType"] == "LORAWAN"
    assert data["payload"] == record.payload.hex().upper()
    assert data["sensorType"] == record.sensor_type.value
    assert data["decodedPayload"] == record.decoded_payload


def test_out_of_range_values_are_rejected():
    with pytest.raises(ValidationError):
        GpsRecord(
            timestamp=0, latitude=91.0, longitude=0.0, altitude=0, speed=0, course=0,
            satellites=4, fix_quality=1, hdop=1.0, geoid_height=0, magnetic_variation=0,
        )


def test_unknown_data_type_is_rejected():
    with pytest.raises(ValidationError):
        adapter.validate_python({"dataType": "SONAR", "timestamp": 0, "latitude": 0, "longitude": 0})


def test_data_type_defaults_per_variant(rng):
    assert AisGenerator(rng).generate().data_type is DataType.AIS


def test_lorawan_record_reads_back_its_own_dict(rng):
    generator = LorawanGenerator(rng)
    for _ in range(200):
        record = generator.generate()
        parsed = adapter.validate_python(record.to_dict())

        assert parsed.payload == record.payload
        assert parsed.decoded_payload == decode_lorawan_payload(parsed.payload, parsed.sensor_type)


def test_lorawan_decoded_payload_is_read_only(rng):
    record = LorawanGenerator(rng).generate()
    sensor_type = record.sensor_type.value

    with pytest.raises(TypeError):
        record.decoded_payload["sensorType"] = "GAS_METER"

    assert record.decoded_payload["sensorType"] == sensor_type
    assert record.decoded_payload == decode_lorawan_payload(record.payload, record.sensor_type)


@pytest.mark.parametrize("record_cls", [AdsbRecord, AisRecord, GpsRecord, LorawanRecord])
def test_records_share_model_config(record_cls):
    config = record_cls.model_config

    assert config["frozen"] is True
    assert config["populate_by_name"] is True
    assert record_cls.model_fields["data_type"].alias == "dataType"
