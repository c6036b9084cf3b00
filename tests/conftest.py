import pytest

from numlingo.config import NumberLinguisticsConfig
from numlingo.engine import NumberLinguisticsEngine


@pytest.fixture
def engine():
    return NumberLinguisticsEngine()


@pytest.fixture
def az_engine():
    return NumberLinguisticsEngine(NumberLinguisticsConfig(default_language="az"))


@pytest.fixture
def demo_amount():
    return 87364883.56
