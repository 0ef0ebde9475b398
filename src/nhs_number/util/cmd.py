"Tools for running nhs-number command-line processes"

import typing as t

from nhs_number.util.beartype import maybe_setup_beartype
from nhs_number.util.logging import setup_logging
from nhs_number.util.sentry import init as setup_sentry

Res = t.TypeVar("Res", bound=None | int)


def setup(ignore_exceptions: t.Sequence[t.Type[Exception]] = ()) -> None:
    maybe_setup_beartype()
    setup_sentry(ignore_exceptions)
    setup_logging()


def run(main: t.Callable[[], Res], ignore_exceptions: t.Sequence[t.Type[Exception]] = ()) -> Res:
    """
    Set up standard logging etc and run the specified function returning its result if any.
    """
    setup(ignore_exceptions)
    return main()
