from taskissues.plugin import CommandPlugin
from taskissues import __version__


class Command(CommandPlugin):
    """ Print the current version number to the console """

    MIN_VERSION = "1.0.0"
    MAX_VERSION = "2.0.0"

    def handle(self, args, *vargs, **kwargs):
        print(f"taskissues version {__version__}")
