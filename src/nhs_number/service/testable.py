"""
NHS numbers for testing.

Numbers from 999 000 0000 to 999 999 9999 are valid but are guaranteed never
to be issued to a patient.
"""
import random
import typing as t

from nhs_number.service.number import NHSNumber

TESTABLE_PREFIX = (9, 9, 9)

TESTABLE_MIN = NHSNumber(digits=(9, 9, 9, 0, 0, 0, 0, 0, 0, 0))
TESTABLE_MAX = NHSNumber(digits=(9, 9, 9, 9, 9, 9, 9, 9, 9, 9))


def is_testable(number: NHSNumber) -> bool:
    return TESTABLE_MIN <= number <= TESTABLE_MAX


def testable_random_sample(rng: t.Optional[random.Random] = None) -> NHSNumber:
    """
    Generate a random NHS number in the testable range. The check digit is
    random too so the result may not validate.

    :param rng: Random generator to draw from; the shared module-level one if not given.
    """
    randint = rng.randint if rng is not None else random.randint
    suffix = tuple(randint(0, 9) for _ in range(10 - len(TESTABLE_PREFIX)))
    return NHSNumber(digits=TESTABLE_PREFIX + suffix)


# Not a test, despite the name
testable_random_sample.__test__ = False  # type: ignore[attr-defined]
