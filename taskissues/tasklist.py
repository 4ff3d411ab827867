import collections
import io
import logging
import os
import re

from . import constants
from .exceptions import InvalidSelection, TaskListError


logger = logging.getLogger(__name__)


TaskItem = collections.namedtuple(
    "TaskItem", ["description", "filename", "line", "category"],
    defaults=(None, None, None),
)


COMMENT_MARKERS = [r"#", r"//", r"/\*", r"\*", r"--", r";", r"<!--"]


def get_task_matcher(tokens):
    return re.compile(
        r"(?:{markers})\s*(?P<description>(?P<category>{tokens})(?=[:\s]|$).*?)"
        r"\s*(?:\*/|-->)?\s*$".format(
            markers="|".join(COMMENT_MARKERS),
            tokens="|".join(re.escape(token) for token in tokens),
        )
    )


class TaskList(object):
    def __init__(self, items=None):
        self.items = list(items or [])

    def __repr__(self):
        return "<TaskList (%s items)>" % len(self.items)

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @classmethod
    def from_descriptions(cls, descriptions):
        return cls(TaskItem(description) for description in descriptions)

    @classmethod
    def from_paths(cls, paths, tokens=None):
        if tokens is None:
            tokens = constants.DEFAULT_TASK_TOKENS
        matcher = get_task_matcher(tokens)

        items = []
        for path in paths:
            path = os.path.expanduser(path)
            if not os.path.exists(path):
                raise TaskListError("%s does not exist" % path)
            for filename in cls.iter_files(path):
                items.extend(cls.scan_file(filename, matcher))

        return cls(items)

    @classmethod
    def iter_files(cls, path):
        if os.path.isfile(path):
            yield path
            return

        for root, dirs, files in os.walk(path):
            dirs[:] = sorted(d for d in dirs if not d.startswith("."))
            for filename in sorted(files):
                if filename.startswith("."):
                    continue
                yield os.path.join(root, filename)

    @classmethod
    def scan_file(cls, filename, matcher):
        try:
            with io.open(
                filename, "r", encoding=constants.TASK_FILE_ENCODING
            ) as _in:
                lines = _in.readlines()
        except UnicodeDecodeError:
            logger.debug("Skipping %s; not a text file.", filename)
            return []
        except (IOError, OSError) as e:
            logger.debug("Skipping %s; unable to read: %s", filename, e)
            return []

        items = []
        for line_number, line in enumerate(lines, start=1):
            match = matcher.search(line)
            if not match:
                continue
            items.append(
                TaskItem(
                    match.group("description"),
                    filename=filename,
                    line=line_number,
                    category=match.group("category"),
                )
            )
        return items

    def select(self, index=None, filename=None, line=None):
        """Return the task item the user selected.

        Items can be selected either by their position in the list, or by
        the file and line they were found on.  When no selection is given,
        the first item is returned.
        """
        if index is not None:
            try:
                return self.items[index]
            except IndexError:
                raise InvalidSelection(
                    "No task at index %s; %s tasks were found."
                    % (index, len(self.items))
                )

        if filename is not None:
            wanted = os.path.realpath(os.path.expanduser(filename))
            for item in self.items:
                if item.filename is None:
                    continue
                if os.path.realpath(item.filename) != wanted:
                    continue
                if line is None or item.line == line:
                    return item
            raise InvalidSelection(
                "No task found in %s%s"
                % (filename, " on line %s" % line if line is not None else "")
            )

        if not self.items:
            return None

        logger.warning(
            "No task was selected; using the first of %s tasks.", len(self.items)
        )
        return self.items[0]
