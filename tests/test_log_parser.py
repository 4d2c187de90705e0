"""Tests for the separator-delimited commit log parser."""

from gitgrove.git.log_parser import (
    FIELD_SEPARATOR,
    RECORD_SEPARATOR,
    parse_commit_log,
    parse_commit_record,
)
from gitgrove.git.models import CommitInfo

US = FIELD_SEPARATOR
RS = RECORD_SEPARATOR


class TestParseCommitLog:
    def test_empty_input(self):
        assert parse_commit_log("") == []
        assert parse_commit_log("\n\n") == []
        assert parse_commit_log(RS + "\n" + RS) == []

    def test_two_records_in_order(self, sample_log):
        commits = parse_commit_log(sample_log)
        assert [c.short_hash for c in commits] == ["aaaaaaa", "bbbbbbb"]

        first = commits[0]
        assert first == CommitInfo(
            hash="a" * 40,
            short_hash="aaaaaaa",
            author_name="Ada Lovelace",
            author_email="ada@example.com",
            timestamp=1700000000,
            summary="Add engine",
            message="Add engine\n\nWith notes.",
        )
        assert commits[1].message == "Initial commit"

    def test_trailing_short_record_dropped(self, sample_log):
        commits = parse_commit_log(sample_log + US.join(["c" * 40, "ccccccc", "Nobody"]) + RS)
        assert len(commits) == 2
        assert [c.author_name for c in commits] == ["Ada Lovelace", "Grace Hopper"]

    def test_short_record_in_middle_dropped(self):
        text = (
            US.join(["h1", "s1", "A", "a@x", "1", "one"]) + RS
            + "garbage" + RS
            + US.join(["h2", "s2", "B", "b@x", "2", "two"]) + RS
        )
        assert [c.hash for c in parse_commit_log(text)] == ["h1", "h2"]

    def test_missing_body_is_empty(self):
        (c,) = parse_commit_log(US.join(["h", "s", "A", "a@x", "5", "summary"]) + RS)
        assert c.message == ""
        assert c.summary == "summary"

    def test_empty_body_field(self):
        (c,) = parse_commit_log(US.join(["h", "s", "A", "a@x", "5", "summary", ""]) + RS)
        assert c.message == ""

    def test_empty_fields_are_kept(self):
        (c,) = parse_commit_log(US.join(["h", "s", "", "", "5", ""]) + RS)
        assert c.author_name == ""
        assert c.author_email == ""
        assert c.summary == ""

    def test_bad_timestamp_defaults_to_zero(self):
        (c,) = parse_commit_log(US.join(["h", "s", "A", "a@x", "yesterday", "x"]) + RS)
        assert c.timestamp == 0

    def test_body_whitespace_trimmed(self):
        (c,) = parse_commit_log(
            US.join(["h", "s", "A", "a@x", "5", "x", "\n  Body text\n\n"]) + RS
        )
        assert c.message == "Body text"

    def test_body_containing_separator_truncated(self):
        (c,) = parse_commit_log(
            US.join(["h", "s", "A", "a@x", "5", "x", "first", "second"]) + RS
        )
        assert c.message == "first"

    def test_single_record_without_terminator(self):
        commits = parse_commit_log(US.join(["h", "s", "A", "a@x", "5", "x", "body\n"]) + "\n")
        assert len(commits) == 1
        assert commits[0].message == "body"


class TestParseCommitRecord:
    def test_too_few_fields(self):
        assert parse_commit_record(US.join(["a", "b", "c"])) is None

    def test_minimum_fields(self):
        c = parse_commit_record(US.join(["h", "s", "A", "a@x", "42", "x"]))
        assert c is not None
        assert c.timestamp == 42
