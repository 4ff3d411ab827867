import configparser

from taskissues import utils
from taskissues.plugin import CommandResult, DirectOutputCommandPlugin


class Command(DirectOutputCommandPlugin):
    """ Get, set, or list global configuration values """

    MIN_VERSION = "1.0.0"
    MAX_VERSION = "2.0.0"

    def main(self, args, config, parser, **kwargs):
        return_value = None
        if args.list:
            if len(args.params) != 0:
                parser.error("--list requires no parameters.")
            return_value = self.list(config)
        elif args.get:
            if len(args.params) != 1:
                parser.error(
                    "--get requires exactly one parameter, the configuration "
                    "value to display."
                )
            section, key = self.get_section_and_key(parser, args.params[0])
            return_value = self.get(config, section, key)
        elif args.set:
            if len(args.params) != 2:
                parser.error(
                    "--set requires exactly two parameters, the configuration "
                    "key, and the configuration value."
                )
            section, key = self.get_section_and_key(parser, args.params[0])
            value = args.params[1]
            return_value = self.set_global(section, key, value)

        return return_value

    def get_section_and_key(self, parser, string):
        if "." not in string:
            parser.error(
                "Configuration keys must be of the form 'section.key'; "
                "e.g. 'main.issue_url'."
            )
        return string.rsplit(".", 1)

    def set_global(self, section, key, value):
        return utils.set_global_config_value(section, key, value)

    def get(self, config, section, key):
        try:
            value = config.get(section, key)
            return CommandResult(value, no_format=True)
        except configparser.Error:
            return CommandResult(
                "{section}.{key} is not set", return_code=1, section=section, key=key
            )

    def list(self, config):
        lines = CommandResult()

        for section in config.sections():
            parameters = config.items(section)
            for key, value in parameters:
                lines = lines.add_line(
                    u"{section}.{key}={value}", section=section, key=key, value=value
                )

        return lines

    def add_arguments(self, parser):
        parser.add_argument("--list", action="store_true")
        parser.add_argument("--get", action="store_true")
        parser.add_argument("--set", action="store_true")
        parser.add_argument("params", nargs="*")

    def parse_arguments(self, parser, args):
        args = super(Command, self).parse_arguments(parser, args)

        if not args.list and not args.get and not args.set:
            args.list = True

        return args
