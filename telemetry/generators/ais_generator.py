"""
AIS Vessel Record Generator

Random vessel reports with plausible identities: MMSI with a 200-799 MID,
7-digit IMO, prefixed vessel names and two-letter call signs.

Message types are drawn from the set the encoder knows how to render
(1, 2, 3, 5, 18, 24). A caller may also ask for a specific type; any
type in 1-27 is accepted and types without a dedicated encoding are
rendered as position reports.
"""

import logging
import time
from typing import Optional

from ..schema import AisRecord
from ..shared.random_source import RandomValueService

logger = logging.getLogger(__name__)

MIN_MESSAGE_TYPE = 1
MAX_MESSAGE_TYPE = 27


def select_ais_message_type(message_type: int) -> int:
    """Validate a requested AIS message type"""
    if not MIN_MESSAGE_TYPE <= message_type <= MAX_MESSAGE_TYPE:
        raise ValueError(
            f"AIS message type must be between {MIN_MESSAGE_TYPE} and {MAX_MESSAGE_TYPE}"
        )
    return message_type


class AisGenerator:
    """Generate AisRecord samples"""

    MESSAGE_TYPES = (1, 2, 3, 5, 18, 24)

    NAME_PREFIXES = ("MV", "SS", "MY", "SY", "MSC", "USNS", "HMS", "RMS")

    VESSEL_NAMES = (
        "EXPLORER", "VOYAGER", "DISCOVERY", "PIONEER", "ENDEAVOR", "NAVIGATOR",
        "MARINER", "ADVENTURER", "PATHFINDER", "SURVEYOR", "INVESTIGATOR", "RESEARCHER",
    )

    DESTINATIONS = (
        "NEW YORK", "ROTTERDAM", "SINGAPORE", "SHANGHAI", "HONG KONG",
        "TOKYO", "BUSAN", "LOS ANGELES", "HAMBURG", "ANTWERP", "DUBAI",
        "SANTOS", "VALENCIA", "ALGECIRAS", "PORT SAID", "COLOMBO",
    )

    CALLSIGN_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

    def __init__(self, rng: RandomValueService):
        self.rng = rng
        self.message_count = 0

    def _random_mmsi(self) -> int:
        """MID (200-799) followed by a 6-digit national id"""
        return 200000000 + self.rng.ranged_int(600000000)

    def _random_imo(self) -> int:
        return 1000000 + self.rng.ranged_int(9000000)

    def _random_vessel_name(self) -> str:
        return f"{self.rng.pick(self.NAME_PREFIXES)} {self.rng.pick(self.VESSEL_NAMES)}"

    def _random_call_sign(self) -> str:
        """Two letters followed by 2-4 digits"""
        letters = self.rng.pick(self.CALLSIGN_LETTERS) + self.rng.pick(self.CALLSIGN_LETTERS)
        num_digits = 2 + self.rng.ranged_int(3)
        return letters + ''.join(str(self.rng.ranged_int(10)) for _ in range(num_digits))

    def _random_eta(self) -> str:
        """MM-DD HH:MM, days capped at 28"""
        month = 1 + self.rng.ranged_int(12)
        day = 1 + self.rng.ranged_int(28)
        hour = self.rng.ranged_int(24)
        minute = self.rng.ranged_int(60)
        return f"{month:02d}-{day:02d} {hour:02d}:{minute:02d}"

    def generate(self, message_type: Optional[int] = None) -> AisRecord:
        """
        Generate one vessel report.

        message_type overrides the random draw; it must be in 1-27.
        """
        rng = self.rng
        if message_type is None:
            message_type = rng.pick(self.MESSAGE_TYPES)
        else:
            message_type = select_ais_message_type(message_type)

        record = AisRecord(
            timestamp=int(time.time() * 1000),
            latitude=rng.latitude(),
            longitude=rng.longitude(),
            mmsi=self._random_mmsi(),
            vessel_name=self._random_vessel_name(),
            call_sign=self._random_call_sign(),
            imo=self._random_imo(),
            speed_over_ground=rng.ranged_double(0, 30),
            course_over_ground=rng.ranged_double(0, 360),
            heading=rng.ranged_double(0, 360),
            navigational_status=rng.ranged_int(15),
            ship_type=rng.ranged_int(99) + 1,
            draught=rng.ranged_double(0, 20),
            destination=rng.pick(self.DESTINATIONS),
            message_type=message_type,
            position_accuracy=rng.boolean(),
            raim_flag=rng.ranged_int(2),
            time_stamp=rng.ranged_int(60),
            maneuver_indicator=rng.ranged_int(3),
            eta=self._random_eta(),
            dimension_to_bow=rng.ranged_double(5, 300),
            dimension_to_stern=rng.ranged_double(5, 100),
            dimension_to_port=rng.ranged_double(5, 50),
            dimension_to_starboard=rng.ranged_double(5, 50),
            rate_of_turn=rng.ranged_double(-720, 720),
        )
        self.message_count += 1
        logger.debug(f"Generated AIS record MMSI={record.mmsi} type={record.message_type}")
        return record

    def get_stats(self) -> dict:
        return {"records_generated": self.message_count}
