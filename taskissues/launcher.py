import collections
import logging

from . import constants
from .openers import default_opener
from .references import extract_issue_reference, resolve_issue_url


logger = logging.getLogger(__name__)


class LaunchResult(
    collections.namedtuple("LaunchResult", ["reference", "url", "outcome"])
):
    @property
    def found(self):
        return self.reference is not None

    @property
    def opened(self):
        return self.outcome is not None and self.outcome.succeeded


class IssueLauncher(object):
    """ Opens the issue referenced by a task description.

    ``base_url`` is fixed for the lifetime of the launcher; ``opener`` is
    any object providing ``attempt(uri)`` (see :class:`UriOpener`).
    """

    def __init__(self, base_url=None, opener=None):
        self._base_url = base_url or constants.DEFAULT_ISSUE_URL
        self.opener = opener if opener is not None else default_opener()

    @property
    def base_url(self):
        return self._base_url

    def get_issue_url(self, description):
        reference = extract_issue_reference(description)
        if reference is None:
            return None, None
        return reference, resolve_issue_url(self.base_url, reference)

    def launch(self, description, dry_run=False):
        reference, url = self.get_issue_url(description)
        if reference is None:
            return LaunchResult(None, None, None)

        if dry_run:
            return LaunchResult(reference, url, None)

        outcome = self.opener.attempt(url)
        if outcome.succeeded:
            logger.debug("Opened issue #%s with %s", reference, outcome.provider)
        else:
            logger.debug(
                "Unable to open issue #%s at %s: %s",
                reference,
                url,
                outcome.status.value,
            )
        return LaunchResult(reference, url, outcome)
