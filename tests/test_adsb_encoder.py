import re

from telemetry.encoders import encode_adsb, encode_record
from telemetry.generators import AdsbGenerator
from telemetry.schema import AdsbRecord


def make_record(**overrides):
    fields = dict(
        timestamp=1700000000123,
        latitude=52.3,
        longitude=4.76,
        icao="4840D6",
        altitude=35000,
        ground_speed=450,
        track=270.0,
        vertical_rate=-500,
        squawk="7000",
        alert=False,
        emergency=False,
        spi=False,
        on_ground=False,
    )
    fields.update(overrides)
    return AdsbRecord(**fields)


def test_frame_is_df17_with_icao(rng):
    frame = encode_adsb(make_record(), rng)

    assert len(frame) == 22
    assert frame.startswith("8D4840D6")
    assert re.fullmatch(r"[0-9A-F]{22}", frame)


def test_filler_is_redrawn_each_call(rng):
    record = make_record()
    frames = {encode_adsb(record, rng) for _ in range(50)}

    assert len(frames) > 1
    assert all(frame[:8] == "8D4840D6" for frame in frames)


def test_generated_records_encode_to_valid_frames(rng):
    generator = AdsbGenerator(rng)
    for _ in range(500):
        record = generator.generate()
        frame = encode_record(record, rng)
        assert re.fullmatch(r"8D[0-9A-F]{20}", frame)
        assert frame[2:8] == record.icao
