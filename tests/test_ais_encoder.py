import pytest

from telemetry.encoders import ais_sentences, encode_ais, encode_record
from telemetry.encoders.ais_encoder import build_sentence, encode_position_report
from telemetry.generators import AisGenerator
from telemetry.parsers import NMEAParser
from telemetry.schema import AisRecord

from conftest import xor_checksum

parser = NMEAParser()


def make_record(**overrides):
    fields = dict(
        timestamp=1700000000123,
        latitude=51.5,
        longitude=-0.12,
        mmsi=234567890,
        vessel_name="MV EXPLORER",
        call_sign="AB1234",
        imo=9123456,
        speed_over_ground=12.3,
        course_over_ground=45.0,
        heading=44.0,
        navigational_status=0,
        ship_type=70,
        draught=8.5,
        destination="ROTTERDAM",
        message_type=1,
        position_accuracy=True,
        raim_flag=0,
        time_stamp=30,
        maneuver_indicator=0,
        eta="05-14 12:30",
        dimension_to_bow=150.0,
        dimension_to_stern=40.0,
        dimension_to_port=12.0,
        dimension_to_starboard=13.0,
        rate_of_turn=0.0,
    )
    fields.update(overrides)
    return AisRecord(**fields)


def payload_of(sentence: str) -> str:
    return sentence.split(",")[5]


def test_class_b_position_report_layout():
    sentence = encode_ais(make_record(message_type=18))
    payload = "1823456789051.5000-0.120012.345.04430"
    body = f"AIVDM,1,1,,A,{payload}"

    assert sentence.startswith("!AIVDM,1,1,,A,18234567890")
    assert sentence == f"!{body},0*{xor_checksum(body)}"
    assert parser.validate_ais_checksum(sentence)


@pytest.mark.parametrize("message_type", [1, 2, 3])
def test_class_a_position_report_layout(message_type):
    sentence = encode_ais(make_record(message_type=message_type, navigational_status=5))

    assert payload_of(sentence) == f"{message_type}2345678900551.5000-0.120012.345.030"
    assert parser.validate_ais_checksum(sentence)


def test_static_voyage_data_is_two_part():
    sentences = ais_sentences(make_record(message_type=5))

    assert len(sentences) == 2
    assert sentences[0].startswith("!AIVDM,2,1,,A,")
    assert sentences[1].startswith("!AIVDM,2,2,,A,")
    assert all(parser.validate_ais_checksum(s) for s in sentences)

    assert payload_of(sentences[0]) == "52345678909123456AB1234 70MV EXPLORER         "
    assert payload_of(sentences[1]) == "8.505-14 12:30150.040.012.013.0ROTTERDAM           "


def test_static_data_report_is_two_single_sentences():
    sentences = ais_sentences(make_record(message_type=24))

    assert len(sentences) == 2
    assert all(s.startswith("!AIVDM,1,1,,A,24234567890") for s in sentences)
    assert payload_of(sentences[0]) == "242345678900MV EXPLORER         "
    assert payload_of(sentences[1]) == "242345678901AB1234 70150.040.012.013.0"
    assert all(parser.validate_ais_checksum(s) for s in sentences)


def test_encode_ais_joins_parts_with_newline():
    text = encode_ais(make_record(message_type=5))
    assert text.split("\n") == ais_sentences(make_record(message_type=5))


@pytest.mark.parametrize("message_type", [4, 9, 21, 27])
def test_other_types_fall_back_to_position_report(message_type):
    record = make_record(message_type=message_type)
    assert ais_sentences(record) == [encode_position_report(record)]
    assert payload_of(encode_ais(record)).startswith(f"{message_type}234567890")


def test_text_fields_are_padded_and_truncated():
    record = make_record(
        message_type=5,
        call_sign="ABCDEFGHIJ",
        vessel_name="MV A VERY LONG VESSEL NAME INDEED",
        destination="SINGAPORE",
    )
    part1, part2 = (payload_of(s) for s in ais_sentences(record))

    assert "ABCDEFG70" in part1
    assert part1.endswith("MV A VERY LONG VESSE")
    assert part2.endswith("SINGAPORE           ")


def test_checksum_detects_tampering():
    sentence = build_sentence("1234567890")
    assert parser.validate_ais_checksum(sentence)

    tampered = sentence.replace("12345", "12346")
    assert not parser.validate_ais_checksum(tampered)


def test_generated_records_produce_valid_sentences(rng):
    generator = AisGenerator(rng)
    for _ in range(1000):
        record = generator.generate()
        text = encode_record(record, rng)
        sentences = text.split("\n")

        expected = 2 if record.message_type in (5, 24) else 1
        assert len(sentences) == expected
        assert all(parser.validate_ais_checksum(s) for s in sentences)
