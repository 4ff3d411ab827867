import os
import textwrap

from taskissues.exceptions import InvalidSelection, TaskListError
from taskissues.tasklist import TaskItem, TaskList

from .base import BaseTestCase


class TestTaskList(BaseTestCase):
    def setUp(self):
        super(TestTaskList, self).setUp()
        self.python_file = self.write_file(
            "src/app.py",
            textwrap.dedent(
                """\
                import os

                # TODO: #3 - Pull the issue info in through the API
                def main():
                    pass  # HACK remove once #12; is settled
                """
            ),
        )
        self.csharp_file = self.write_file(
            "src/Command.cs",
            textwrap.dedent(
                """\
                // TODO: #1 - Get the repository URL from the git config
                /* UNDONE: handle multiple remotes */
                var todos = 1;
                """
            ),
        )

    def test_from_paths(self):
        tasks = TaskList.from_paths([self.root_folder])

        self.assertEqual(
            [(t.filename, t.line, t.category, t.description) for t in tasks],
            [
                (
                    self.csharp_file,
                    1,
                    "TODO",
                    "TODO: #1 - Get the repository URL from the git config",
                ),
                (self.csharp_file, 2, "UNDONE", "UNDONE: handle multiple remotes"),
                (
                    self.python_file,
                    3,
                    "TODO",
                    "TODO: #3 - Pull the issue info in through the API",
                ),
                (self.python_file, 5, "HACK", "HACK remove once #12; is settled"),
            ],
        )

    def test_token_must_be_followed_by_colon_or_whitespace(self):
        notes = self.write_file(
            "notes/notes.py",
            "# TODO-later: #4\n# TODO. #5\n# TODOS #6\n# TODO #7\n# FIXME",
        )

        tasks = TaskList.from_paths([notes])

        self.assertEqual(
            [(t.line, t.description) for t in tasks], [(4, "TODO #7"), (5, "FIXME")]
        )

    def test_from_single_file(self):
        tasks = TaskList.from_paths([self.python_file])

        self.assertEqual(len(tasks), 2)

    def test_custom_tokens(self):
        tasks = TaskList.from_paths([self.root_folder], tokens=["UNDONE"])

        self.assertEqual([t.category for t in tasks], ["UNDONE"])

    def test_hidden_directories_are_skipped(self):
        self.write_file(".git/hooks/pre-commit.sample", "# TODO: #99 ignored\n")

        tasks = TaskList.from_paths([self.root_folder])

        self.assertFalse([t for t in tasks if os.sep + ".git" + os.sep in t.filename])
        self.assertEqual(len(tasks), 4)

    def test_binary_files_are_skipped(self):
        self.write_file("src/blob.bin", b"\xff\xfe# TODO: #5\x00", mode="wb")

        tasks = TaskList.from_paths([self.root_folder])

        self.assertEqual(len(tasks), 4)

    def test_missing_path(self):
        with self.assertRaises(TaskListError):
            TaskList.from_paths([os.path.join(self.root_folder, "missing")])

    def test_select_by_index(self):
        tasks = TaskList.from_paths([self.root_folder])

        self.assertEqual(tasks.select(index=2).line, 3)

    def test_select_by_invalid_index(self):
        tasks = TaskList.from_paths([self.root_folder])

        with self.assertRaises(InvalidSelection):
            tasks.select(index=10)

    def test_select_by_file_and_line(self):
        tasks = TaskList.from_paths([self.root_folder])

        selected = tasks.select(filename=self.python_file, line=5)

        self.assertEqual(selected.category, "HACK")

    def test_select_by_file(self):
        tasks = TaskList.from_paths([self.root_folder])

        selected = tasks.select(filename=self.python_file)

        self.assertEqual(selected.line, 3)

    def test_select_by_file_without_task(self):
        tasks = TaskList.from_paths([self.root_folder])

        with self.assertRaises(InvalidSelection):
            tasks.select(filename=self.python_file, line=1)

    def test_select_without_criteria_uses_first_item(self):
        tasks = TaskList.from_descriptions(["first #1", "second #2"])

        with self.assertLogs("taskissues.tasklist", level="WARNING"):
            selected = tasks.select()

        self.assertEqual(selected, TaskItem("first #1"))

    def test_select_from_empty_list(self):
        self.assertIsNone(TaskList().select())
