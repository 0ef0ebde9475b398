import typing as t


def format_digits(digits: t.Sequence[int]) -> str:
    """
    Canonical form of an NHS number: 3 digits, space, 3 digits, space, 4
    digits, eg `943 476 5919`.
    """
    text = "".join(str(digit) for digit in digits)
    return f"{text[:3]} {text[3:6]} {text[6:]}"
