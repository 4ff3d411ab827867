import json
import os

from prettytable import PrettyTable

from taskissues import utils
from taskissues.plugin import CommandResult, DirectOutputCommandPlugin
from taskissues.references import find_issue_references, resolve_issue_url
from taskissues.tasklist import TaskList


class Command(DirectOutputCommandPlugin):
    """List tasks found in the given paths along with their issue links"""

    MIN_VERSION = "1.0.0"
    MAX_VERSION = "2.0.0"

    def main(self, args, config, path, **kwargs):
        tasks = TaskList.from_paths(
            args.paths or [path], tokens=utils.get_task_tokens(config)
        )
        base_url = utils.get_issue_base_url(config)

        rows = []
        for idx, task in enumerate(tasks):
            references = find_issue_references(task.description)
            if args.linked_only and not references:
                continue
            rows.append(
                {
                    "index": idx,
                    "filename": task.filename,
                    "line": task.line,
                    "category": task.category,
                    "description": task.description,
                    "references": references,
                    "url": (
                        resolve_issue_url(base_url, references[0])
                        if references
                        else None
                    ),
                }
            )

        if args.json:
            return CommandResult(json.dumps(rows, indent=4), no_format=True)

        if not rows:
            return CommandResult("No tasks were found", return_code=1)

        table = PrettyTable(["#", "Location", "Task", "Issue"])
        table.align = "l"
        for row in rows:
            table.add_row(
                [
                    row["index"],
                    "%s:%s" % (os.path.relpath(row["filename"], path), row["line"]),
                    self.truncate_field_value(row["description"], length=60),
                    row["url"] or "",
                ]
            )

        return CommandResult(table.get_string(), no_format=True)

    def add_arguments(self, parser):
        parser.add_argument(
            "--path",
            dest="paths",
            action="append",
            default=[],
            help=("File or directory to gather tasks from; defaults to the cwd."),
        )
        parser.add_argument(
            "--linked-only",
            dest="linked_only",
            action="store_true",
            default=False,
            help=("Only list tasks referencing an issue."),
        )
        parser.add_argument("--json", default=False, action="store_true")
