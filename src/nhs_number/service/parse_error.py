import typing as t


class ParseError(ValueError):
    """
    Raised when a string is not an NHS number in one of the accepted forms.

    `position` is the index of the offending character in the input, or None
    when the input has the wrong length.
    """

    def __init__(self, reason: str = "Invalid NHS number", position: t.Optional[int] = None) -> None:
        super().__init__(reason if position is None else f"{reason} at position {position}")
        self.reason = reason
        self.position = position
