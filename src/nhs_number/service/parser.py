"""
Parse NHS numbers from text.

Two forms are accepted, the ten digits on their own (`9434765919`) or the
canonical grouped form (`943 476 5919`). Separators are only accepted at
their fixed positions; anything else is rejected rather than cleaned up.
"""
import logging
import typing as t

from nhs_number.service.parse_error import ParseError
from nhs_number.util.logging import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)

SEPARATOR = " "
UNGROUPED_LENGTH = 10
GROUPED_LENGTH = 12
# Indices of the separators within `DDD DDD DDDD`
SEPARATOR_POSITIONS = (3, 7)

# str.isdigit() also accepts eg superscripts and Arabic-Indic digits
ASCII_DIGITS = frozenset("0123456789")


def _reject(reason: str, position: t.Optional[int] = None) -> ParseError:
    # Never log the value itself, it is personal data
    logger.debug(f"Rejected NHS number: {reason} (position {position})")
    return ParseError(reason, position)


def parse_digits(value: str) -> tuple[int, ...]:
    """
    Return the ten digits of an NHS number written as `DDDDDDDDDD` or
    `DDD DDD DDDD`, raising ParseError for anything else.
    """
    if len(value) == UNGROUPED_LENGTH:
        separators: tuple[int, ...] = ()
    elif len(value) == GROUPED_LENGTH:
        separators = SEPARATOR_POSITIONS
    else:
        raise _reject(f"Expected {UNGROUPED_LENGTH} or {GROUPED_LENGTH} characters, got {len(value)}")

    digits = []
    for position, char in enumerate(value):
        if position in separators:
            if char != SEPARATOR:
                raise _reject("Expected a space", position)
        elif char in ASCII_DIGITS:
            digits.append(int(char))
        else:
            raise _reject("Expected a digit", position)

    return tuple(digits)
