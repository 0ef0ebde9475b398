import typing as t

import sentry_sdk

from nhs_number.util.config import NHSNumberSettings


class SentrySettings(NHSNumberSettings):
    environment: t.Optional[str] = "dev"
    commit_tag: str = "dev"
    sentry_dsn: t.Optional[str] = None


sentry_settings = SentrySettings()


def init(ignore_exceptions: t.Sequence[t.Type[Exception]] = ()) -> None:
    """
    Initialize sentry; should be done as soon as possible in the program.

    :param ignore_exceptions: Exception types which are never reported, eg
        errors caused by bad user input.
    """
    if not sentry_settings.sentry_dsn:
        return

    def sentry_before_send(event: t.Any, hint: t.Any) -> t.Any:
        if "exc_info" in hint:
            exc_type, exc_value, tb = hint["exc_info"]
            if any(isinstance(exc_value, ex) for ex in ignore_exceptions):
                return None

        return event

    sentry_sdk.init(
        dsn=sentry_settings.sentry_dsn,
        environment=sentry_settings.environment,
        release=sentry_settings.commit_tag,
        traces_sample_rate=0,
        # NHS numbers are personal data
        send_default_pii=False,
        before_send=sentry_before_send,
    )
