import os
import typing as t

from nhs_number.util.config import NHSNumberSettings


class BearSettings(NHSNumberSettings):
    use_beartype: bool = False


def maybe_setup_beartype(packages: t.Sequence[str] = ("nhs_number",)) -> None:
    """
    Optionally use beartype to pick up typing violations in modules imported
    from now on. Enabled under pytest or when APP_USE_BEARTYPE is set.
    """
    if os.environ.get("PYTEST_VERSION") is not None or BearSettings().use_beartype:
        from beartype.claw import beartype_packages

        beartype_packages(packages)
