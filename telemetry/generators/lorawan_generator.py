"""
LoRaWAN Uplink Generator

Random uplinks from one of eight end-device families. The payload is
drawn for the chosen family and decoded straight away, so
decoded_payload always matches what decode_lorawan_payload gives for
the same bytes.
"""

import logging
import time

from ..encoders.lorawan_codec import build_payload, decode_lorawan_payload
from ..schema import LorawanRecord, SensorType
from ..shared.random_source import RandomValueService

logger = logging.getLogger(__name__)


class LorawanGenerator:
    """Generate LorawanRecord samples"""

    SENSOR_TYPES = tuple(SensorType)

    BANDWIDTHS_KHZ = (125, 250, 500)

    FREQUENCY_BANDS = ("EU868", "US915", "AU915", "AS923", "KR920", "IN865")

    # Common uplink channels (MHz)
    FREQUENCIES_MHZ = (
        # EU868
        868.1, 868.3, 868.5, 867.1, 867.3, 867.5, 867.7, 867.9,
        # US915
        902.3, 902.5, 902.7, 902.9, 903.1, 903.3, 903.5, 903.7,
        # AS923
        923.2, 923.4, 923.6, 923.8, 924.0, 924.2, 924.4, 924.6,
    )

    def __init__(self, rng: RandomValueService):
        self.rng = rng
        self.message_count = 0

    def generate(self) -> LorawanRecord:
        rng = self.rng
        sensor_type = rng.pick(self.SENSOR_TYPES)
        payload = build_payload(sensor_type, rng)

        record = LorawanRecord(
            timestamp=int(time.time() * 1000),
            latitude=rng.latitude(),
            longitude=rng.longitude(),
            dev_eui=rng.hex_string(16),
            dev_addr=rng.hex_string(8),
            app_eui=rng.hex_string(16),
            f_port=1 + rng.ranged_int(223),
            confirmed=rng.boolean(),
            message_type=rng.ranged_int(6),
            counter=rng.ranged_int(65536),
            rssi=float(-120 + rng.ranged_int(80)),
            snr=rng.ranged_double(-20, 10),
            spreading_factor=7 + rng.ranged_int(6),
            bandwidth=rng.pick(self.BANDWIDTHS_KHZ),
            coding_rate=1 + rng.ranged_int(4),
            frequency=rng.pick(self.FREQUENCY_BANDS),
            frequency_value=rng.pick(self.FREQUENCIES_MHZ),
            sensor_type=sensor_type,
            payload=payload,
            decoded_payload=decode_lorawan_payload(payload, sensor_type),
        )
        self.message_count += 1
        logger.debug(f"Generated LoRaWAN record DevEUI={record.dev_eui} sensor={sensor_type.value}")
        return record

    def get_stats(self) -> dict:
        return {"records_generated": self.message_count}
