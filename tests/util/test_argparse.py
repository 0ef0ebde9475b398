from argparse import ArgumentParser
from unittest import mock

from nhs_number.util.argparse import PydanticArguments


def test_pydantic_arguments_run() -> None:
    """
    Test that PydanticArguments.run() correctly parses arguments.
    """

    run_args: "MyArgs | None" = None

    class MyArgs(PydanticArguments):
        foo: str

        def cli_cmd(self) -> None:
            nonlocal run_args
            run_args = self

    with mock.patch("sys.argv", ["test", "--foo", "bar"]):
        assert MyArgs.run() == 0
        assert run_args
        assert run_args.foo == "bar"


def test_pydantic_arguments_from_environment() -> None:
    """
    Test that arguments not given on the command line are taken from APP_ environment variables.
    """

    run_args: "MyArgs | None" = None

    class MyArgs(PydanticArguments):
        foo: str

        def cli_cmd(self) -> None:
            nonlocal run_args
            run_args = self

    with mock.patch("sys.argv", ["test"]), mock.patch.dict("os.environ", {"APP_FOO": "baz"}):
        assert MyArgs.run() == 0
        assert run_args
        assert run_args.foo == "baz"


def test_pydantic_arguments_run_with_validation_error() -> None:
    """
    Test that PydanticArguments.run() handles validation errors.
    """

    class MyArgs(PydanticArguments):
        foo: int

    with mock.patch("sys.argv", ["test", "--foo", "bar"]), mock.patch.object(ArgumentParser, "exit", autospec=True) as exit_override:
        MyArgs.run()
        exit_override.assert_called_once_with(
            mock.ANY, 2, "test: error: \nargument foo: Input should be a valid integer, unable to parse string as an integer\n"
        )
