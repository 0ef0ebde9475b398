"""
NHS number check digit.

Each of the first nine digits is multiplied by 11 minus its (one-based)
position, so the weights run from 10 down to 2. The raw checksum is 11 minus
the remainder of the sum divided by 11, giving 1 to 11:

* 11 is written as a check digit of 0;
* 10 means that no valid NHS number has these first nine digits.

`calculate_check_digit` turns a raw checksum of 10 into 0 as well, without
any error. `has_representable_check_digit` tells the two cases apart.
"""
import typing as t

CHECK_DIGIT_INDEX = 9
UNREPRESENTABLE_CHECKSUM = 10


def check_digit(digits: t.Sequence[int]) -> int:
    """
    The check digit as stored, ie the last digit. It is not recalculated.
    """
    return digits[CHECK_DIGIT_INDEX]


def calculate_raw_checksum(digits: t.Sequence[int]) -> int:
    """
    Raw checksum of the first nine digits in the range 1-11, before it is turned into a digit.
    """
    total = sum(digit * (10 - i) for i, digit in enumerate(digits[:CHECK_DIGIT_INDEX]))
    return 11 - total % 11


def calculate_check_digit(digits: t.Sequence[int]) -> int:
    """
    Calculate what the check digit should be from the first nine digits.

    >>> calculate_check_digit([9, 4, 3, 4, 7, 6, 5, 9, 1, 0])
    9
    >>> calculate_check_digit([0, 0, 0, 0, 0, 0, 0, 1, 4, 0])
    0
    """
    raw = calculate_raw_checksum(digits)
    if raw == 11:
        return 0
    return raw % 10


def has_representable_check_digit(digits: t.Sequence[int]) -> bool:
    """
    False when the raw checksum is 10. `calculate_check_digit` then returns 0,
    although the published algorithm says no valid number has these digits.
    """
    return calculate_raw_checksum(digits) != UNREPRESENTABLE_CHECKSUM


def validate_check_digit(digits: t.Sequence[int]) -> bool:
    """
    Whether the stored check digit matches the calculated one.
    """
    return check_digit(digits) == calculate_check_digit(digits)
