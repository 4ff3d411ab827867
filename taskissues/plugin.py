import argparse
import logging
import os
import sys
from typing import Dict, Optional

from blessings import Terminal
from packaging.version import Version

from . import __version__


logger = logging.getLogger(__name__)


class PluginError(Exception):
    pass


class PluginValidationError(PluginError):
    pass


class CommandResult(str):
    _return_code: Optional[int] = None
    terminal: Optional[Terminal] = None
    cursor: int = 0

    def __new__(
        cls, string=None, return_code=None, cursor=0, no_format=False, **kwargs
    ):
        if string is None:
            string = ""
        if not isinstance(string, str):
            string = str(string)
        if string and not string.endswith("\n"):
            string = string + "\n"

        terminal = Terminal()
        if not no_format:
            kwargs["t"] = terminal
            try:
                string = string.format(**kwargs)
            except (KeyError, IndexError):
                logger.warning(
                    "An error was encountered while attempting to format "
                    "string; returning the original string unformatted. "
                    "The caller may want to use the 'no_format' option if "
                    "the outgoing string includes curly braces.",
                )

        self = str.__new__(cls, string)
        self._return_code = return_code
        self.terminal = terminal
        self.cursor = cursor

        return self

    def _echo(self, message: str) -> None:
        print(message, end="")

    def echo(self):
        self._echo(self[self.cursor :])
        self.cursor = len(self)

        return self

    def add_line(self, the_line: str, no_format: bool = False, **kwargs):
        if not the_line.endswith("\n"):
            the_line = the_line + "\n"

        if not no_format:
            kwargs["t"] = self.terminal
            try:
                the_line = the_line.format(**kwargs)
            except (KeyError, IndexError):
                logger.warning(
                    "An error was encountered while attempting to format "
                    "string; returning the original string unformatted. "
                    "The caller may want to use the 'no_format' option if "
                    "the outgoing string includes curly braces.",
                )

        new_result = CommandResult(the_line, no_format=True)
        return self + new_result

    def __add__(self, other):
        joined_strings = super(CommandResult, self).__add__(other)

        return_code = None
        if self._return_code is not None:
            return_code = self._return_code
        if isinstance(other, CommandResult) and other._return_code is not None:
            return_code = other._return_code

        return CommandResult(
            joined_strings, return_code=return_code, cursor=self.cursor, no_format=True
        )

    @property
    def return_code(self) -> int:
        return self._return_code or 0

    @return_code.setter
    def return_code(self, value):
        self._return_code = int(value) if value is not None else None


class CommandPlugin(object):
    MIN_VERSION: Optional[str] = None
    MAX_VERSION: Optional[str] = None

    def __init__(self, **kwargs):
        for k, v in kwargs.items():
            setattr(self, k, v)

    def validate(self, **kwargs) -> bool:
        if not self.MIN_VERSION or not self.MAX_VERSION:
            raise PluginValidationError(
                "Minimum and maximum version numbers not specified."
            )

        min_version = Version(self.MIN_VERSION)
        max_version = Version(self.MAX_VERSION)
        curr_version = Version(__version__)
        if not min_version <= curr_version < max_version:
            raise PluginValidationError(
                "Command '%s' is not compatible with version %s of taskissues; "
                "minimum version: %s; maximum version %s."
                % (
                    getattr(self, "entrypoint_name", self.__class__.__name__),
                    __version__,
                    self.MIN_VERSION,
                    self.MAX_VERSION,
                ),
            )

        return True

    def truncate_field_value(self, original_value, length=30):
        if original_value is None:
            original_value = ""
        elif not isinstance(original_value, str):
            original_value = str(original_value)
        value = original_value.strip()
        for newline in ("\n", "\r"):
            if newline in value:
                value = value[0 : value.find(newline)]

        value = value[0:length]

        if value != original_value:
            value = value[0 : length - 1] + "…"

        return value

    def get_description(self):
        if self.__doc__ is None:
            return None
        return self.__doc__.strip()

    def add_arguments(self, parser):
        pass

    def parse_arguments(self, parser, extra_args):
        return parser.parse_args(extra_args)

    @classmethod
    def get_command_result(cls, result, original=None):
        if not isinstance(result, CommandResult):
            result = CommandResult(result, no_format=True)

        if original is not None:
            result = original + result

        return result

    @classmethod
    def execute_command(cls, extra_args, path, command_name, config=None, **ckwargs):
        from . import utils

        cmd = cls(entrypoint_name=command_name)

        parser = argparse.ArgumentParser(
            prog=os.path.basename(sys.argv[0]) + " " + command_name,
            description=cmd.get_description(),
        )
        cmd.add_arguments(parser)
        args = cmd.parse_arguments(parser, extra_args)

        if config is None:
            config = utils.get_config()

        kwargs: Dict = {
            "args": args,
            "config": config,
            "path": path,
            "parser": parser,
        }

        cmd.validate(**kwargs)
        return cls.get_command_result(cmd.handle(**kwargs))

    def handle(self, *args, **kwargs) -> None:
        self.cmd(*args, **kwargs)

    def cmd(self, *args, **kwargs) -> None:
        # By default, no return value; just execute and move along
        self.main(*args, **kwargs)

    def main(self, *args, **kwargs) -> None:
        raise NotImplementedError()


class DirectOutputCommandPlugin(CommandPlugin):
    def cmd(self, *args, **kwargs):
        return self.main(*args, **kwargs)
