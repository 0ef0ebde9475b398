"""
The NHS Number value type.

An NHS number is the ten digit identifier shared by the public health
services of England, Wales and the Isle of Man, written as `943 476 5919`.
The last digit is a check digit, see `nhs_number.service.checksum`.
"""
import random
import typing as t

from pydantic import BaseModel, ConfigDict, Field, model_validator

from nhs_number.service import checksum
from nhs_number.service.formatter import format_digits
from nhs_number.service.parser import parse_digits

Digit = t.Annotated[int, Field(ge=0, le=9, strict=True)]
Digits: t.TypeAlias = tuple[Digit, Digit, Digit, Digit, Digit, Digit, Digit, Digit, Digit, Digit]


class NHSNumber(BaseModel):
    """
    An immutable NHS number. Compares and sorts by its digits.

        NHSNumber(digits=(9, 4, 3, 4, 7, 6, 5, 9, 1, 9))
        NHSNumber.from_str("943 476 5919")

    When used as a field of another model it also accepts either textual form
    or a plain list of digits.
    """

    model_config = ConfigDict(frozen=True)

    digits: Digits

    @model_validator(mode="before")
    @classmethod
    def _from_str_or_sequence(cls, data: t.Any) -> t.Any:
        if isinstance(data, str):
            return {"digits": parse_digits(data)}
        if isinstance(data, (list, tuple)):
            return {"digits": data}
        return data

    @classmethod
    def from_str(cls, value: str) -> "NHSNumber":
        """
        Parse `DDDDDDDDDD` or `DDD DDD DDDD`, raising ParseError otherwise.
        """
        return cls(digits=parse_digits(value))

    @classmethod
    def testable_random_sample(cls, rng: t.Optional[random.Random] = None) -> "NHSNumber":
        """
        A random NHS number from the range which will never be issued.
        """
        from nhs_number.service.testable import testable_random_sample

        return testable_random_sample(rng)

    def check_digit(self) -> int:
        return checksum.check_digit(self.digits)

    def calculate_check_digit(self) -> int:
        return checksum.calculate_check_digit(self.digits)

    def calculate_raw_checksum(self) -> int:
        return checksum.calculate_raw_checksum(self.digits)

    def has_representable_check_digit(self) -> bool:
        return checksum.has_representable_check_digit(self.digits)

    def validate_check_digit(self) -> bool:
        return checksum.validate_check_digit(self.digits)

    def format(self) -> str:
        return format_digits(self.digits)

    def __str__(self) -> str:
        return format_digits(self.digits)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NHSNumber):
            return NotImplemented
        return self.digits < other.digits

    def __le__(self, other: object) -> bool:
        if not isinstance(other, NHSNumber):
            return NotImplemented
        return self.digits <= other.digits

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, NHSNumber):
            return NotImplemented
        return self.digits > other.digits

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, NHSNumber):
            return NotImplemented
        return self.digits >= other.digits


def parse(value: str) -> NHSNumber:
    """
    Parse an NHS number, see `NHSNumber.from_str`.
    """
    return NHSNumber.from_str(value)
