import collections
import enum
import logging
import os
import shutil
import subprocess
import sys
import webbrowser
from typing import Iterable, List, Optional
from urllib import parse

from . import constants
from .exceptions import UriOpenerFault


logger = logging.getLogger(__name__)


# Windows' ERROR_NO_ASSOCIATION
WINERROR_NO_ASSOCIATION = 1155


class OpenStatus(enum.Enum):
    SUCCESS = "success"
    # The provider is not present on this system
    UNAVAILABLE = "unavailable"
    # The provider ran, but reported that it could not open the uri
    FAILED = "failed"
    # The launcher executable could not be found
    NOT_FOUND = "not_found"
    # No application is registered for the uri's protocol
    NO_HANDLER = "no_handler"
    # Something unexpected went wrong; never swallowed
    FAULT = "fault"
    # Refused before any provider was consulted
    INVALID_URI = "invalid_uri"
    UNSUPPORTED_SCHEME = "unsupported_scheme"


class OpenOutcome(
    collections.namedtuple("OpenOutcome", ["status", "provider", "error"])
):
    def __new__(cls, status, provider=None, error=None):
        return super(OpenOutcome, cls).__new__(cls, status, provider, error)

    @property
    def succeeded(self) -> bool:
        return self.status is OpenStatus.SUCCESS

    def describe(self) -> str:
        descriptions = {
            OpenStatus.SUCCESS: "opened",
            OpenStatus.UNAVAILABLE: "no browser is available",
            OpenStatus.FAILED: "the browser refused the link",
            OpenStatus.NOT_FOUND: "the launcher could not be found",
            OpenStatus.NO_HANDLER: "no application is registered for links",
            OpenStatus.FAULT: "an unexpected error occurred",
            OpenStatus.INVALID_URI: "the link is not an absolute URI",
            OpenStatus.UNSUPPORTED_SCHEME: "the link is not an http(s) URI",
        }
        return descriptions[self.status]


class UriProvider(object):
    """ A mechanism capable of opening a URI.

    Providers never raise for expected failures; they report them through
    the returned :class:`OpenOutcome` instead.  Providers flagged
    ``WEB_ONLY`` are only consulted for http and https URIs.
    """

    name = None
    WEB_ONLY = False

    def open(self, uri: str) -> OpenOutcome:
        raise NotImplementedError()

    def outcome(self, status, error=None) -> OpenOutcome:
        return OpenOutcome(status, provider=self.name, error=error)

    def __repr__(self):
        return "<%s>" % self.__class__.__name__


class BrowserServiceProvider(UriProvider):
    """ Opens URIs through the registered web browser controller """

    name = "browser"

    def __init__(self, browser=None, new=None, autoraise=None):
        self.browser = browser
        self.new = constants.BROWSER_NEW_WINDOW if new is None else new
        self.autoraise = constants.BROWSER_AUTORAISE if autoraise is None else autoraise

    def get_controller(self):
        try:
            return webbrowser.get(self.browser)
        except webbrowser.Error:
            return None

    def open(self, uri):
        controller = self.get_controller()
        if controller is None:
            logger.debug("No web browser controller is registered; skipping.")
            return self.outcome(OpenStatus.UNAVAILABLE)

        try:
            opened = controller.open(uri, new=self.new, autoraise=self.autoraise)
        except Exception as e:
            logger.debug("Browser controller %s failed: %s", controller, e)
            return self.outcome(OpenStatus.FAILED)

        if not opened:
            return self.outcome(OpenStatus.FAILED)
        return self.outcome(OpenStatus.SUCCESS)


class ShellLaunchProvider(UriProvider):
    """ Hands URIs to the operating system's default handler """

    name = "shell"
    WEB_ONLY = True

    def __init__(self, platform=None):
        self.platform = platform or sys.platform

    def get_launcher(self) -> Optional[str]:
        if self.platform == "darwin":
            return shutil.which("open")
        return shutil.which("xdg-open")

    def launch(self, uri):
        if self.platform.startswith("win"):
            os.startfile(uri)
            return True

        launcher = self.get_launcher()
        if launcher is None:
            return False

        # Not waited on; the handler outlives us.
        subprocess.Popen(
            [launcher, uri],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
        return True

    def open(self, uri):
        try:
            launched = self.launch(uri)
        except FileNotFoundError as e:
            logger.debug("Launcher for %s was not found: %s", uri, e)
            return self.outcome(OpenStatus.NOT_FOUND)
        except OSError as e:
            if getattr(e, "winerror", None) == WINERROR_NO_ASSOCIATION:
                logger.debug("No application is associated with %s", uri)
                return self.outcome(OpenStatus.NO_HANDLER)
            return self.outcome(OpenStatus.FAULT, error=e)
        except Exception as e:
            return self.outcome(OpenStatus.FAULT, error=e)

        if not launched:
            logger.debug("No default URI handler is installed.")
            return self.outcome(OpenStatus.NO_HANDLER)
        return self.outcome(OpenStatus.SUCCESS)


def is_absolute_uri(uri: str) -> bool:
    parts = parse.urlsplit(uri)
    if parts.scheme in constants.WEB_SCHEMES:
        return bool(parts.netloc)
    return bool(parts.scheme) and bool(parts.netloc or parts.path)


class UriOpener(object):
    """ Opens URIs through an ordered list of providers.

    The first provider to succeed wins.  Expected failures fall through to
    the next provider; a provider reporting an unexpected fault stops the
    chain with :class:`UriOpenerFault`.
    """

    def __init__(self, providers: Iterable[UriProvider]):
        self.providers: List[UriProvider] = list(providers)

    def attempt(self, uri: str) -> OpenOutcome:
        if not is_absolute_uri(uri):
            logger.debug("Refusing to open non-absolute uri %r", uri)
            return OpenOutcome(OpenStatus.INVALID_URI)

        scheme = parse.urlsplit(uri).scheme.lower()
        outcome = OpenOutcome(OpenStatus.UNAVAILABLE)
        for provider in self.providers:
            if provider.WEB_ONLY and scheme not in constants.WEB_SCHEMES:
                logger.debug(
                    "Refusing to hand %s uri to %s provider", scheme, provider.name
                )
                return OpenOutcome(OpenStatus.UNSUPPORTED_SCHEME, provider.name)

            logger.debug("Opening %s with %s provider", uri, provider.name)
            outcome = provider.open(uri)
            if outcome.status is OpenStatus.FAULT:
                raise UriOpenerFault(
                    "Provider '%s' failed while opening %s: %s"
                    % (provider.name, uri, outcome.error),
                    uri=uri,
                    provider=provider.name,
                ) from outcome.error
            if outcome.succeeded:
                return outcome

        return outcome

    def open(self, uri: str) -> bool:
        return self.attempt(uri).succeeded


def default_opener() -> UriOpener:
    return UriOpener([BrowserServiceProvider(), ShellLaunchProvider()])
