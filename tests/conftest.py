import sys

import pytest
from loguru import logger

from fraction import Fraction


@pytest.fixture
def half():
    yield Fraction(1, 2)


@pytest.fixture
def third():
    yield Fraction(1, 3)


@pytest.fixture
def reset_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)
