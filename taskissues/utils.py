import configparser
import logging
import os
from importlib import metadata

from . import constants
from .openers import BrowserServiceProvider, ShellLaunchProvider, UriOpener
from .plugin import CommandPlugin


logger = logging.getLogger(__name__)


def convert_to_boolean(string):
    if string.upper().strip() in ["Y", "YES", "ON", "ENABLED", "ENABLE", "TRUE"]:
        return True
    elif string.upper().strip() in ["N", "NO", "OFF", "DISABLED", "DISABLE", "FALSE"]:
        return False
    return None


def get_installed_commands():
    possible_commands = {}
    for entry_point in metadata.entry_points(group="taskissues_commands"):
        try:
            loaded_class = entry_point.load()
        except ImportError:
            logger.warning(
                "Attempted to load entrypoint %s, but " "an ImportError occurred.",
                entry_point,
            )
            continue
        if not issubclass(loaded_class, CommandPlugin):
            logger.warning(
                "Loaded entrypoint %s, but loaded class is "
                "not a subclass of `taskissues.plugin.CommandPlugin`.",
                entry_point,
            )
            continue
        possible_commands[entry_point.name] = loaded_class

    return possible_commands


def get_config_path(filename):
    if os.path.isabs(filename):
        return filename
    return os.path.expanduser("~/%s" % filename)


def get_config(additional_configs=None, include_global=True):
    filenames = []
    if include_global:
        filenames.append(get_config_path(constants.GLOBAL_CONFIG))
    if additional_configs:
        filenames.extend(additional_configs)

    parser = configparser.RawConfigParser()
    parser.read(filenames)
    return parser


def set_global_config_value(section, key, value):
    config = get_config()
    if not config.has_section(section):
        config.add_section(section)
    config.set(section, key, value)
    with open(get_config_path(constants.GLOBAL_CONFIG), "w") as out:
        config.write(out)


def get_issue_base_url(config=None):
    if config is None:
        config = get_config()

    if config.has_option(constants.CONFIG_MAIN, "issue_url"):
        value = config.get(constants.CONFIG_MAIN, "issue_url").strip()
        if value:
            return value

    return constants.DEFAULT_ISSUE_URL


def get_task_tokens(config=None):
    if config is None:
        config = get_config()

    if config.has_option(constants.CONFIG_MAIN, "tokens"):
        tokens = [
            token.strip()
            for token in config.get(constants.CONFIG_MAIN, "tokens").split(",")
            if token.strip()
        ]
        if tokens:
            return tokens

    return constants.DEFAULT_TASK_TOKENS


def get_open_in_browser(config=None):
    if config is None:
        config = get_config()

    if config.has_option(constants.CONFIG_MAIN, "use_browser"):
        value = convert_to_boolean(config.get(constants.CONFIG_MAIN, "use_browser"))
        if value is not None:
            return value
        logger.warning(
            "Unable to interpret '%s' as a boolean for 'main.use_browser'; "
            "ignoring it.",
            config.get(constants.CONFIG_MAIN, "use_browser"),
        )

    return True


def get_browser_name(config=None):
    if config is None:
        config = get_config()

    if config.has_option(constants.CONFIG_MAIN, "browser"):
        return config.get(constants.CONFIG_MAIN, "browser").strip() or None

    return None


def get_opener(config=None):
    if config is None:
        config = get_config()

    providers = []
    if get_open_in_browser(config):
        providers.append(BrowserServiceProvider(browser=get_browser_name(config)))
    providers.append(ShellLaunchProvider())

    return UriOpener(providers)
