"""
nhs-number command line tool.

    nhs-number --number "943 476 5919"
    nhs-number --sample 5 --seed 1
"""
import random
import sys
import typing as t

from pydantic import Field

from nhs_number.service.number import NHSNumber
from nhs_number.service.parse_error import ParseError
from nhs_number.service.testable import testable_random_sample
from nhs_number.util.argparse import PydanticArguments
from nhs_number.util.cmd import run


class NHSNumberArgs(PydanticArguments):
    """
    Check NHS numbers and generate testable ones.
    """

    number: t.Optional[str] = Field(default=None, description="NHS number to check, with or without spaces")
    sample: int = Field(default=0, ge=0, description="How many testable random NHS numbers to print")
    seed: t.Optional[int] = Field(default=None, description="Seed for the random NHS numbers")

    def cli_cmd(self) -> None:
        if self.number is not None:
            check_number(self.number)

        rng = random.Random(self.seed)
        for _ in range(self.sample):
            print(testable_random_sample(rng))


def check_number(value: str) -> None:
    """
    Print the canonical form and whether the check digit is valid, exiting
    with status 1 when it is not.
    """
    try:
        number = NHSNumber.from_str(value)
    except ParseError as e:
        print(f"Not an NHS number: {e}", file=sys.stderr)
        raise SystemExit(1)

    if not number.validate_check_digit():
        print(f"{number} has an invalid check digit, expected {number.calculate_check_digit()}", file=sys.stderr)
        raise SystemExit(1)

    print(f"{number} is valid")


def main() -> None:
    sys.exit(run(NHSNumberArgs.run))
