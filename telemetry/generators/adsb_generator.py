"""
ADSB Aircraft Record Generator

Random aircraft states anywhere on the globe.
"""

import logging
import time

from ..schema import AdsbRecord
from ..shared.random_source import RandomValueService

logger = logging.getLogger(__name__)


class AdsbGenerator:
    """Generate AdsbRecord samples"""

    MAX_ALTITUDE_FT = 45000
    MAX_GROUND_SPEED_KN = 600
    MAX_TRACK_DEG = 359.9
    MAX_VERTICAL_RATE_FPM = 3000

    def __init__(self, rng: RandomValueService):
        self.rng = rng
        self.message_count = 0

    def _random_icao(self) -> str:
        """24-bit address as 6 uppercase hex digits"""
        return self.rng.hex_string(6, upper=True)

    def _random_squawk(self) -> str:
        """4-digit octal transponder code"""
        return ''.join(str(self.rng.ranged_int(8)) for _ in range(4))

    def generate(self) -> AdsbRecord:
        rng = self.rng
        record = AdsbRecord(
            timestamp=int(time.time() * 1000),
            latitude=rng.latitude(),
            longitude=rng.longitude(),
            icao=self._random_icao(),
            altitude=rng.ranged_double(0, self.MAX_ALTITUDE_FT),
            ground_speed=rng.ranged_double(0, self.MAX_GROUND_SPEED_KN),
            track=rng.ranged_double(0, self.MAX_TRACK_DEG),
            vertical_rate=rng.ranged_double(-self.MAX_VERTICAL_RATE_FPM, self.MAX_VERTICAL_RATE_FPM),
            squawk=self._random_squawk(),
            alert=rng.boolean(),
            emergency=rng.boolean(),
            spi=rng.boolean(),
            on_ground=rng.boolean(),
        )
        self.message_count += 1
        logger.debug(f"Generated ADSB record ICAO={record.icao}")
        return record

    def get_stats(self) -> dict:
        return {"records_generated": self.message_count}
