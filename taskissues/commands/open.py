import os

from taskissues import constants, utils
from taskissues.launcher import IssueLauncher
from taskissues.plugin import CommandPlugin, CommandResult
from taskissues.tasklist import TaskList


class Command(CommandPlugin):
    """ Open the GitHub issue referenced by the selected task in your web browser """

    MIN_VERSION = "1.0.0"
    MAX_VERSION = "2.0.0"

    def handle(self, args, config, path, parser, **kwargs):
        if args.line is not None and args.file is None:
            parser.error("--line requires --file.")
        if args.index is not None and args.file is not None:
            parser.error("--index and --file are mutually exclusive.")

        if args.text:
            description = " ".join(args.text)
        else:
            tasks = TaskList.from_paths(
                args.paths or [path], tokens=utils.get_task_tokens(config)
            )
            filename = args.file
            if filename is not None:
                filename = os.path.join(path, os.path.expanduser(filename))
            task = tasks.select(index=args.index, filename=filename, line=args.line)
            description = task.description if task is not None else ""

        launcher = IssueLauncher(
            utils.get_issue_base_url(config), utils.get_opener(config)
        )
        return self.cmd(launcher, description, print_only=args.print_only)

    def add_arguments(self, parser):
        parser.add_argument(
            "text",
            nargs="*",
            help=(
                "Task description to search for an issue reference; when "
                "omitted, the task list is gathered from --path."
            ),
        )
        parser.add_argument(
            "--path",
            dest="paths",
            action="append",
            default=[],
            help=("File or directory to gather tasks from; defaults to the cwd."),
        )
        parser.add_argument(
            "--index", type=int, default=None, help=("Select the task at this index.")
        )
        parser.add_argument(
            "--file", default=None, help=("Select a task found in this file.")
        )
        parser.add_argument(
            "--line", type=int, default=None, help=("Select the task on this line.")
        )
        parser.add_argument(
            "--print-only",
            dest="print_only",
            action="store_true",
            default=False,
            help=("Print the issue URL instead of opening it."),
        )

    def main(self, launcher, description, print_only=False):
        return launcher.launch(description, dry_run=print_only)

    def cmd(self, launcher, description, print_only=False):
        result = self.main(launcher, description, print_only=print_only)

        if not result.found:
            return CommandResult(
                "{t.bold}{title}:{t.normal} {message}",
                return_code=1,
                title=constants.NOTICE_TITLE,
                message=constants.NO_ISSUE_MESSAGE,
            )

        if print_only:
            return CommandResult(result.url, no_format=True)

        if not result.opened:
            return CommandResult(
                "{t.yellow}Unable to open issue #{reference} ({reason}); "
                "visit {url} manually.{t.normal}",
                return_code=2,
                reference=result.reference,
                reason=result.outcome.describe(),
                url=result.url,
            )

        return None
