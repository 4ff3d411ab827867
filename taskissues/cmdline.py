import argparse
import logging
import logging.config
import os
import sys
import time
import traceback

from blessings import Terminal

from . import utils
from .exceptions import (
    InvalidSelection,
    TaskIssuesError,
    TaskListError,
    UriOpenerFault,
)
from .plugin import PluginValidationError


logger = logging.getLogger(__name__)


LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "pretty": {"format": "[%(levelname)s] %(message)s"},
    },
    "handlers": {
        "console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "pretty",
            "stream": "ext://sys.stdout",
        }
    },
    "root": {"handlers": ["console"], "level": "INFO"},
}


def main(argv=None):
    term = Terminal()

    commands = utils.get_installed_commands()

    parser = argparse.ArgumentParser(
        description="Open the GitHub issues referenced by your TODO items",
        add_help=False,
    )
    parser.add_argument("command", type=str, choices=commands.keys())
    parser.add_argument(
        "--log-level", default="INFO", dest="log_level",
    )
    parser.add_argument("--folder", default=os.getcwd())
    parser.add_argument(
        "--traceback", action="store_true", default=False,
    )
    args, extra = parser.parse_known_args(argv)

    logging.config.dictConfig(LOGGING)
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.getLevelName(args.log_level.upper()))

    command_name = args.command
    cmd_class = commands[command_name]

    started = time.time()
    logger.debug("Command %s(%s) started", command_name, extra)
    try:
        value = cmd_class.execute_command(
            extra, path=args.folder, command_name=command_name
        )
        logger.debug(
            "Command %s(%s) finished in %s seconds",
            command_name,
            extra,
            (time.time() - started),
        )
        if value:
            value.echo()
        sys.exit(value.return_code)
    except UriOpenerFault as e:
        print(
            "{t.red}An unexpected error occurred while opening "
            "{t.bold}{uri}{t.normal}{t.red} with the {provider} "
            "provider: {t.normal}{t.red}{t.bold}{error}{t.normal}".format(
                t=term, uri=e.uri, provider=e.provider, error=str(e.__cause__ or e)
            )
        )
        if args.traceback:
            traceback.print_exc()
        sys.exit(50)
    except InvalidSelection as e:
        print(
            "{t.red}Unable to select a task: "
            "{t.normal}{t.red}{t.bold}{error}{t.normal}".format(t=term, error=str(e))
        )
        if args.traceback:
            traceback.print_exc()
        sys.exit(60)
    except TaskListError as e:
        print(
            "{t.red}Unable to gather tasks: "
            "{t.normal}{t.red}{t.bold}{error}{t.normal}".format(t=term, error=str(e))
        )
        if args.traceback:
            traceback.print_exc()
        sys.exit(61)
    except PluginValidationError as e:
        print(
            "{t.red}The command '{cmd}' cannot be used: "
            "{t.normal}{t.red}{t.bold}{error}{t.normal}".format(
                t=term, cmd=command_name, error=str(e)
            )
        )
        if args.traceback:
            traceback.print_exc()
        sys.exit(70)
    except TaskIssuesError as e:
        print(
            "{t.red}taskissues encountered an error processing your "
            "request: {t.normal}{t.red}{t.bold}{error}{t.normal}".format(
                t=term, error=str(e)
            )
        )
        if args.traceback:
            traceback.print_exc()
        sys.exit(90)
