import pytest

from telemetry.encoders import encode_gps, encode_record, gps_sentences
from telemetry.encoders.gps_encoder import encode_gga, encode_rmc, encode_vtg, magnetic_course
from telemetry.generators import GpsGenerator
from telemetry.parsers import NMEAParser
from telemetry.schema import GpsRecord

from conftest import xor_checksum

parser = NMEAParser()


def make_record(**overrides):
    fields = dict(
        timestamp=1700000000123,  # 2023-11-14 22:13:20.123 UTC
        latitude=48.1173,
        longitude=11.5166667,
        altitude=545.4,
        speed=22.4,
        course=84.4,
        satellites=8,
        fix_quality=1,
        hdop=1.2,
        geoid_height=46.9,
        magnetic_variation=-3.1,
    )
    fields.update(overrides)
    return GpsRecord(**fields)


def with_checksum(body: str) -> str:
    return f"${body}*{xor_checksum(body)}"


def test_gga_sentence():
    expected = with_checksum("GPGGA,221320.123,4807.0380,N,01131.0000,E,1,8,1.2,545.4,M,46.9,M,,")
    assert encode_gga(make_record()) == expected


def test_rmc_sentence():
    expected = with_checksum("GPRMC,221320.123,A,4807.0380,N,01131.0000,E,22.4,84.4,141123,3.1,W")
    assert encode_rmc(make_record()) == expected


def test_vtg_sentence():
    expected = with_checksum("GPVTG,84.4,T,81.3,M,22.4,N,41.5,K")
    assert encode_vtg(make_record()) == expected


def test_encode_gps_is_three_lines():
    record = make_record()
    lines = encode_gps(record).split("\n")

    assert lines == gps_sentences(record)
    assert [line[:6] for line in lines] == ["$GPGGA", "$GPRMC", "$GPVTG"]
    assert all(parser.validate_checksum(line) for line in lines)


@pytest.mark.parametrize("fix_quality,status", [(0, "V"), (1, "A"), (2, "A")])
def test_rmc_status_follows_fix_quality(fix_quality, status):
    fields = encode_rmc(make_record(fix_quality=fix_quality)).split(",")
    assert fields[2] == status


def test_rmc_easterly_variation():
    fields = encode_rmc(make_record(magnetic_variation=4.3)).split(",")
    assert fields[10] == "4.3"
    assert fields[11].startswith("E*")


@pytest.mark.parametrize("course,variation,expected", [
    (5.0, -10.0, 355.0),
    (355.0, 10.0, 5.0),
    (180.0, 0.0, 180.0),
])
def test_magnetic_course_wraps(course, variation, expected):
    record = make_record(course=course, magnetic_variation=variation)
    assert magnetic_course(record) == pytest.approx(expected)


def test_southern_western_hemispheres():
    fields = encode_gga(make_record(latitude=-33.8688, longitude=-151.2093)).split(",")
    assert fields[3] == "S"
    assert fields[5] == "W"


def test_generated_fixes_parse_back(rng):
    generator = GpsGenerator(rng)
    for _ in range(500):
        record = generator.generate()
        gga, rmc, vtg = (parser.parse_sentence(s) for s in encode_record(record, rng).split("\n"))

        assert gga["latitude"] == pytest.approx(record.latitude, abs=1e-5)
        assert gga["longitude"] == pytest.approx(record.longitude, abs=1e-5)
        assert gga["fix_quality"] == record.fix_quality
        assert gga["satellites"] == record.satellites
        assert gga["altitude"] == pytest.approx(record.altitude, abs=0.051)
        assert rmc["valid"] == (record.fix_quality > 0)
        assert rmc["speed_knots"] == pytest.approx(record.speed, abs=0.051)
        assert rmc["magnetic_variation"] == pytest.approx(record.magnetic_variation, abs=0.051)
        assert vtg["course_true"] == pytest.approx(record.course, abs=0.051)
        assert vtg["speed_kmh"] == pytest.approx(record.speed * 1.852, abs=0.051)
        assert 0 <= vtg["course_magnetic"] < 360.05


def test_parser_rejects_bad_checksum():
    sentence = encode_gga(make_record())
    broken = sentence[:-2] + ("00" if sentence[-2:] != "00" else "11")

    assert parser.parse_sentence(sentence) is not None
    assert parser.parse_sentence(broken) is None
