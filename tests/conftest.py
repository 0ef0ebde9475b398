import random

import pytest


@pytest.fixture(scope="function")
def rng() -> random.Random:
    return random.Random(1234)
