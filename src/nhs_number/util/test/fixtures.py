"""
pytest plugin providing NHS numbers from the testable range. Enable with
`pytest -p nhs_number.util.test.fixtures` or `pytest_plugins`.
"""
import random
import typing as t

import pytest

from nhs_number.service.number import NHSNumber
from nhs_number.service.testable import testable_random_sample
from nhs_number.util.config import NHSNumberSettings


class SampleSettings(NHSNumberSettings):
    sample_seed: t.Optional[int] = None


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--nhs-number-seed",
        action="store",
        type=int,
        default=None,
        help="Seed for the testable NHS number fixtures [env: APP_SAMPLE_SEED]",
    )


@pytest.fixture(scope="session")
def nhs_number_seed(pytestconfig: pytest.Config) -> t.Optional[int]:
    seed = pytestconfig.getoption("nhs_number_seed", default=None)
    if seed is None:
        return SampleSettings().sample_seed
    return t.cast(int, seed)


@pytest.fixture
def nhs_number_rng(nhs_number_seed: t.Optional[int]) -> random.Random:
    # Reseeded for every test so results do not depend on test order
    return random.Random(nhs_number_seed)


@pytest.fixture
def testable_nhs_number(nhs_number_rng: random.Random) -> NHSNumber:
    return testable_random_sample(nhs_number_rng)
