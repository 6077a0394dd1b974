"""
NMEA 0183 Sentence Parser

Reads back what the encoders emit:
- Checksum validation for $GP sentences (XOR of everything between $ and *)
- Checksum validation for the simplified !AIVDM sentences (XOR of
  everything between ! and the trailing ',0*')
- Field parsing for GGA, RMC and VTG

Format: $GPGGA,123519.000,4807.0380,N,01131.0000,E,1,8,0.9,545.4,M,46.9,M,,*XX
         |     |          |           |            | | |   |       |      | +-- Checksum
         |     |          |           |            | | |   |       |      +---- DGPS fields
         |     |          |           |            | | |   |       +----------- Geoid height
         |     |          |           |            | | |   +------------------- Altitude
         |     |          |           |            | | +----------------------- HDOP
         |     |          |           |            | +------------------------- Satellites
         |     |          |           |            +--------------------------- Fix quality
         |     |          |           +---------------------------------------- Longitude
         |     |          +---------------------------------------------------- Latitude
         |     +--------------------------------------------------------------- UTC time
         +--------------------------------------------------------------------- Talker + type

Reference: https://gpsd.gitlab.io/gpsd/NMEA.html
"""

import logging
from typing import Dict, List, Optional

from ..shared.nmea import nmea_checksum

logger = logging.getLogger(__name__)


class NMEAParser:
    """
    NMEA 0183 parser for simulator output.

    Supports GGA, RMC and VTG; AIVDM sentences are checksum-verified only,
    since their decimal payloads have no field separators.
    """

    # Fix quality codes
    FIX_QUALITY = {
        0: "Invalid",
        1: "GPS fix",
        2: "DGPS fix",
    }

    def validate_checksum(self, sentence: str) -> bool:
        """
        Validate NMEA checksum.
        Checksum is XOR of all characters between $ (or !) and *
        """
        if '*' not in sentence:
            return False

        try:
            star = sentence.index('*')
            if sentence.startswith('!') or sentence.startswith('$'):
                data = sentence[1:star]
            else:
                data = sentence[:star]

            expected_checksum = sentence[star + 1:star + 3]
            return nmea_checksum(data) == expected_checksum.upper()
        except (ValueError, IndexError):
            return False

    def validate_ais_checksum(self, sentence: str) -> bool:
        """
        Validate a simulator AIVDM sentence.
        Checksum is XOR of all characters between ! and the trailing ,0*
        """
        sentence = sentence.strip()
        if not sentence.startswith('!') or ',0*' not in sentence:
            return False

        marker = sentence.rindex(',0*')
        data = sentence[1:marker]
        expected_checksum = sentence[marker + 3:marker + 5]
        return nmea_checksum(data) == expected_checksum.upper()

    def split_sentences(self, text: str) -> List[str]:
        """Split encoder output into individual sentences"""
        return [line.strip() for line in text.splitlines() if line.strip()]

    def parse_coordinate(self, value: str, hemisphere: str) -> Optional[float]:
        """
        Convert ddmm.mmmm / dddmm.mmmm plus hemisphere to decimal degrees.
        """
        if not value or '.' not in value:
            return None

        # Degrees are everything before the last two integer digits
        point = value.index('.')
        degrees = int(value[:point - 2] or 0)
        minutes = float(value[point - 2:])
        decimal = degrees + minutes / 60.0

        if hemisphere in ('S', 'W'):
            decimal = -decimal
        return decimal

    def parse_sentence(self, sentence: str) -> Optional[Dict]:
        """
        Parse a single GGA, RMC or VTG sentence.
        Returns parsed data or None if invalid/unsupported.
        """
        sentence = sentence.strip()

        if not sentence.startswith('$') or not self.validate_checksum(sentence):
            return None

        body = sentence[1:sentence.index('*')]
        fields = body.split(',')
        sentence_type = fields[0][2:]

        try:
            if sentence_type == "GGA":
                return self._parse_gga(fields, sentence)
            elif sentence_type == "RMC":
                return self._parse_rmc(fields, sentence)
            elif sentence_type == "VTG":
                return self._parse_vtg(fields, sentence)
            return {"sentence_type": sentence_type, "raw": sentence}
        except (ValueError, IndexError) as e:
            logger.debug(f"Could not parse {sentence_type} sentence: {e}")
            return None

    def _parse_gga(self, fields: List[str], raw: str) -> Dict:
        fix_quality = int(fields[6])
        return {
            "sentence_type": "GGA",
            "time": fields[1],
            "latitude": self.parse_coordinate(fields[2], fields[3]),
            "longitude": self.parse_coordinate(fields[4], fields[5]),
            "fix_quality": fix_quality,
            "fix_quality_text": self.FIX_QUALITY.get(fix_quality, "Unknown"),
            "satellites": int(fields[7]),
            "hdop": float(fields[8]),
            "altitude": float(fields[9]),
            "geoid_height": float(fields[11]),
            "raw_sentence": raw,
        }

    def _parse_rmc(self, fields: List[str], raw: str) -> Dict:
        variation = float(fields[10])
        if fields[11] == 'W':
            variation = -variation
        return {
            "sentence_type": "RMC",
            "time": fields[1],
            "valid": fields[2] == 'A',
            "latitude": self.parse_coordinate(fields[3], fields[4]),
            "longitude": self.parse_coordinate(fields[5], fields[6]),
            "speed_knots": float(fields[7]),
            "course": float(fields[8]),
            "date": fields[9],
            "magnetic_variation": variation,
            "raw_sentence": raw,
        }

    def _parse_vtg(self, fields: List[str], raw: str) -> Dict:
        return {
            "sentence_type": "VTG",
            "course_true": float(fields[1]),
            "course_magnetic": float(fields[3]),
            "speed_knots": float(fields[5]),
            "speed_kmh": float(fields[7]),
            "raw_sentence": raw,
        }
