"""
Sensor Record Generators
Random-but-constrained samples for each sensor domain
"""

from typing import Union

from ..schema import DataType
from ..shared.random_source import RandomValueService
from .adsb_generator import AdsbGenerator
from .ais_generator import AisGenerator, select_ais_message_type
from .gps_generator import GpsGenerator
from .lorawan_generator import LorawanGenerator

GENERATORS = {
    DataType.ADSB: AdsbGenerator,
    DataType.AIS: AisGenerator,
    DataType.GPS: GpsGenerator,
    DataType.LORAWAN: LorawanGenerator,
}


def generate_record(data_type: Union[DataType, str], rng: RandomValueService):
    """Generate one record of the given data type"""
    return GENERATORS[DataType(data_type)](rng).generate()


__all__ = [
    'AdsbGenerator', 'AisGenerator', 'GpsGenerator', 'LorawanGenerator',
    'GENERATORS', 'generate_record', 'select_ais_message_type',
]
