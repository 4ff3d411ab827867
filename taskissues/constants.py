# Issue links
DEFAULT_ISSUE_URL = "https://github.com/Vizioz/task-issues/issues/"
WEB_SCHEMES = ["http", "https"]

# Task list
DEFAULT_TASK_TOKENS = ["TODO", "HACK", "UNDONE", "FIXME"]
TASK_FILE_ENCODING = "utf-8"

# Notices
NOTICE_TITLE = "Task Issues"
NO_ISSUE_MESSAGE = "No GITHub issue was found in the task definition"

# Generic settings
GLOBAL_CONFIG = ".taskissues_config"

# Config sections
CONFIG_MAIN = "main"

# Browser service options; open in a new window and raise it
BROWSER_NEW_WINDOW = 2
BROWSER_AUTORAISE = True


from environmental_override import override  # noqa

override(locals(), "TASKISSUES_")
