import argparse

from pydantic import ValidationError
from pydantic_settings import CliApp, CliSettingsSource

from nhs_number.util.config import NHSNumberSettings


class PydanticArguments(NHSNumberSettings, cli_parse_args=True, cli_kebab_case=True):
    """
    Command line arguments declared as pydantic fields. Values can also come
    from APP_ prefixed environment variables. Subclasses implement `cli_cmd`.
    """

    @classmethod
    def run(cls) -> int:
        css: CliSettingsSource[argparse.ArgumentParser] = CliSettingsSource(cls)
        try:
            CliApp.run(cls, cli_settings_source=css)
        except ValidationError as e:
            msg = ""
            for err in e.errors():
                msg += f"\nargument {err['loc'][0]}: {err['msg']}"
            css.root_parser.error(msg)
        return 0
