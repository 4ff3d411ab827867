import mock

from taskissues.launcher import IssueLauncher
from taskissues.openers import OpenOutcome, OpenStatus, UriOpener

from .base import BaseTestCase


class TestIssueLauncher(BaseTestCase):
    def setUp(self):
        super(TestIssueLauncher, self).setUp()
        self.opener = mock.Mock()
        self.opener.attempt.return_value = OpenOutcome(
            OpenStatus.SUCCESS, provider="fake"
        )

    def test_end_to_end(self):
        launcher = IssueLauncher(opener=self.opener)

        result = launcher.launch("Fix login bug #123")

        self.assertEqual(result.reference, 123)
        self.assertEqual(result.url, "https://github.com/Vizioz/task-issues/issues/123")
        self.opener.attempt.assert_called_once_with(
            "https://github.com/Vizioz/task-issues/issues/123"
        )
        self.assertTrue(result.opened)

    def test_custom_base_url(self):
        launcher = IssueLauncher("https://github.com/org/repo/issues/", self.opener)

        result = launcher.launch("see #42")

        self.assertEqual(result.url, "https://github.com/org/repo/issues/42")

    def test_no_reference(self):
        launcher = IssueLauncher(opener=self.opener)

        result = launcher.launch("Fix login bug")

        self.assertFalse(result.found)
        self.assertFalse(result.opened)
        self.assertFalse(self.opener.attempt.called)

    def test_dry_run(self):
        launcher = IssueLauncher(opener=self.opener)

        result = launcher.launch("Fix login bug #123", dry_run=True)

        self.assertTrue(result.found)
        self.assertIsNone(result.outcome)
        self.assertFalse(self.opener.attempt.called)

    def test_failed_open_is_reported(self):
        shell = self.get_provider("shell", OpenStatus.NO_HANDLER, web_only=True)
        launcher = IssueLauncher(opener=UriOpener([shell]))

        result = launcher.launch("Fix login bug #123")

        self.assertTrue(result.found)
        self.assertFalse(result.opened)
        self.assertEqual(result.outcome.status, OpenStatus.NO_HANDLER)
