import configparser

from taskissues import constants

from ..base import BaseTestCase


class BaseCommandTestCase(BaseTestCase):
    COMMAND = None
    COMMAND_NAME = None

    def setUp(self):
        super(BaseCommandTestCase, self).setUp()
        self.config = configparser.RawConfigParser()
        self.config.add_section(constants.CONFIG_MAIN)

    def run_command(self, *args):
        return self.COMMAND.execute_command(
            list(args),
            path=self.root_folder,
            command_name=self.COMMAND_NAME,
            config=self.config,
        )
