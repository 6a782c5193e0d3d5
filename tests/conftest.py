import pytest

from helpers import build_csv


@pytest.fixture
def sample_csv() -> str:
    return build_csv(
        [
            ("DKI Jakarta", 2500000, 1000000, 1500000),
            ("Jawa Barat", 1600000, 800000, 800000),
            ("D.I. Yogyakarta", 1500000, 600000, 900000),
            ("Indonesia", 1400000, 700000, 700000),
        ]
    )
