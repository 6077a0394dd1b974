import sys
from functools import reduce
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from telemetry.shared.random_source import RandomValueService


def xor_checksum(text: str) -> str:
    """Independent XOR checksum used to cross-check the encoders."""
    return f"{reduce(lambda acc, ch: acc ^ ord(ch), text, 0):02X}"


@pytest.fixture
def rng():
    return RandomValueService(seed=1234)
