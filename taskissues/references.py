import logging
import re
from typing import List, Optional


logger = logging.getLogger(__name__)


# A '#' followed by digits, preceded by a non-word character (or the start
# of the text) and not immediately followed by ';' -- which keeps HTML
# entities like '&#39;' from being read as issue references.
ISSUE_REFERENCE_PATTERN = re.compile(r"(?:^|\W)#([0-9]+)\b(?!;)", re.IGNORECASE,)


def find_issue_references(text: str) -> List[int]:
    """Return every issue reference found in ``text``, in document order."""
    return [int(match.group(1), 10) for match in ISSUE_REFERENCE_PATTERN.finditer(text)]


def extract_issue_reference(text: str) -> Optional[int]:
    """Return the first issue reference found in ``text``.

    Returns ``None`` when the text carries no reference; that is an
    expected outcome and not an error.
    """
    match = ISSUE_REFERENCE_PATTERN.search(text)
    if match is None:
        logger.debug("No issue reference found in %r", text)
        return None

    return int(match.group(1), 10)


def resolve_issue_url(base: str, reference: int) -> str:
    return base + str(reference)
