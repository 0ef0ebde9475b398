from pydantic import BaseModel  # noqa: F401 For reexporting
from pydantic_settings import BaseSettings, SettingsConfigDict


class NHSNumberSettings(BaseSettings):
    model_config = SettingsConfigDict(
        # Pick up the named variables from the environment with the APP_
        # prefix stripped
        env_prefix="APP_",
        # Nested models can have individual fields set via a nested delimiter,
        # eg APP_FOO__BAR
        # https://docs.pydantic.dev/latest/usage/settings/#parsing-environment-variable-values
        env_nested_delimiter="__",
        case_sensitive=False,
        # Settings are read once and never mutated, which also makes them hashable
        frozen=True,
    )
