"""
GPS Fix Generator
"""

import logging
import time

from ..schema import GpsRecord
from ..shared.random_source import RandomValueService

logger = logging.getLogger(__name__)


class GpsGenerator:
    """Generate GpsRecord samples"""

    FIX_QUALITIES = (0, 1, 2)  # invalid, GPS, DGPS

    def __init__(self, rng: RandomValueService):
        self.rng = rng
        self.message_count = 0

    def generate(self) -> GpsRecord:
        rng = self.rng
        record = GpsRecord(
            timestamp=int(time.time() * 1000),
            latitude=rng.latitude(),
            longitude=rng.longitude(),
            altitude=rng.ranged_double(-100, 10000),  # meters
            speed=rng.ranged_double(0, 100),  # knots
            course=rng.ranged_double(0, 359.9),
            satellites=rng.ranged_int(12) + 1,
            fix_quality=rng.pick(self.FIX_QUALITIES),
            hdop=rng.ranged_double(1.0, 10.0),
            geoid_height=rng.ranged_double(-30.0, 30.0),
            magnetic_variation=rng.ranged_double(-20.0, 20.0),
        )
        self.message_count += 1
        logger.debug(f"Generated GPS record fix={record.fix_quality} sats={record.satellites}")
        return record

    def get_stats(self) -> dict:
        return {"records_generated": self.message_count}
