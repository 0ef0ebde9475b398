import logging
from typing import Literal

from nhs_number.util.config import NHSNumberSettings

# Basic setup/config for python logging

# Parent of every logger in this package
LOGGER_NAME = "nhs-number"


class LoggingSettings(NHSNumberSettings):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


log_settings = LoggingSettings()


def setup_logging() -> None:
    """
    Initial logging setup.

    Sets default format and level to that specified by `APP_LOG_LEVEL`, or `WARNING` if not set. Records from this
    package below that level are not created at all.
    """
    level = logging.getLevelName(log_settings.log_level)
    default_handler = logging.StreamHandler()
    default_handler.setLevel(level)
    default_handler.setFormatter(logging.Formatter("%(asctime)s %(name)-12s %(levelname)-8s %(message)s"))

    # The root logger receives everything so that other handlers can pick up
    # records from other libraries below the console level.
    logging.basicConfig(
        level=logging.NOTSET,
        handlers=[default_handler],
    )
    logging.getLogger(LOGGER_NAME).setLevel(level)
