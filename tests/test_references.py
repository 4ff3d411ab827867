from taskissues.references import (
    extract_issue_reference,
    find_issue_references,
    resolve_issue_url,
)


class TestExtractIssueReference(object):
    def test_should_return_none_for_empty_text(self):
        assert extract_issue_reference("") is None

    def test_should_return_none_when_no_marker_is_present(self):
        assert extract_issue_reference("Refactor the login form") is None

    def test_should_return_none_for_a_bare_hash(self):
        assert extract_issue_reference("see # for details") is None

    def test_should_return_number_following_marker(self):
        assert extract_issue_reference("foo #42 bar") == 42

    def test_should_ignore_reference_followed_by_semicolon(self):
        assert extract_issue_reference("see #7;") is None

    def test_should_ignore_html_entities(self):
        assert extract_issue_reference("it&#39;s broken") is None

    def test_should_return_first_reference_only(self):
        assert extract_issue_reference("#1 and #2") == 1

    def test_should_skip_semicolon_reference_and_use_next_one(self):
        assert extract_issue_reference("see #7; then #8") == 8

    def test_should_require_non_word_character_before_marker(self):
        assert extract_issue_reference("abc#12") is None

    def test_should_require_word_boundary_after_digits(self):
        assert extract_issue_reference("color #12ab00") is None

    def test_should_allow_leading_zeros(self):
        assert extract_issue_reference("TODO: (#007) later") == 7

    def test_should_match_at_end_of_text(self):
        assert extract_issue_reference("Fix login bug #123") == 123

    def test_should_match_across_lines(self):
        assert extract_issue_reference("first line\nsecond #5 line") == 5


class TestFindIssueReferences(object):
    def test_should_return_all_references_in_order(self):
        assert find_issue_references("#3, #1 and #2") == [3, 1, 2]

    def test_should_return_empty_list_without_references(self):
        assert find_issue_references("nothing to see") == []


class TestResolveIssueUrl(object):
    def test_should_concatenate_base_and_reference(self):
        assert (
            resolve_issue_url("https://github.com/org/repo/issues/", 42)
            == "https://github.com/org/repo/issues/42"
        )

    def test_should_not_validate_base(self):
        assert resolve_issue_url("issues/", 9) == "issues/9"
