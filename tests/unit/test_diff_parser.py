"""Unit tests for the unified-diff parser and serializer."""

import pytest

from patchcanvas.diff.models import DiffLine, Hunk, LineKind
from patchcanvas.diff.parser import (
    LineClass,
    calculate_stats,
    classify_line,
    generate_hunk_id,
    parse_diff,
    parse_hunk_header,
    serialize_hunks,
)


class TestParseDiffEdgeCases:
    """Inputs that produce no hunks or minimal hunks."""

    def test_empty_diff(self):
        assert parse_diff("", "test.ts") == []

    def test_text_without_hunk_headers(self):
        diff = "Some random text\nNo hunk headers here"
        assert parse_diff(diff, "test.ts") == []

    def test_single_line_hunk(self):
        hunks = parse_diff("@@ -1,1 +1,1 @@\n-old line\n+new line", "test.ts")

        assert len(hunks) == 1
        hunk = hunks[0]
        assert (hunk.old_start, hunk.old_lines, hunk.new_start, hunk.new_lines) == (
            1,
            1,
            1,
            1,
        )
        assert hunk.header == "@@ -1,1 +1,1 @@"
        assert hunk.id == "test.ts-hunk-0"
        assert len(hunk.lines) == 2

        deleted, added = hunk.lines
        assert deleted == DiffLine(
            kind=LineKind.DELETE,
            content="old line",
            old_line_number=1,
            new_line_number=None,
        )
        assert added.kind == LineKind.ADD
        assert added.content == "new line"
        assert added.old_line_number is None
        # Numbered by position in the hunk: second line, so new_start + 1
        assert added.new_line_number == 2

    def test_omitted_counts_default_to_one(self):
        hunks = parse_diff("@@ -5 +5 @@ foo\n context", "test.ts")

        assert len(hunks) == 1
        hunk = hunks[0]
        assert hunk.old_start == 5
        assert hunk.old_lines == 1
        assert hunk.new_start == 5
        assert hunk.new_lines == 1
        assert hunk.section == "foo"
        assert hunk.header == "@@ -5 +5 @@ foo"
        assert hunk.lines == (
            DiffLine(
                kind=LineKind.CONTEXT,
                content="context",
                old_line_number=5,
                new_line_number=5,
            ),
        )

    def test_header_without_section_text(self):
        hunks = parse_diff("@@ -5 +5 @@\n+x", "test.ts")

        assert len(hunks) == 1
        assert hunks[0].section == ""

    def test_trailing_hunk_is_flushed(self):
        diff = "@@ -1,2 +1,2 @@\n a\n-b\n+c"
        hunks = parse_diff(diff, "file.py")

        assert len(hunks) == 1
        assert [line.content for line in hunks[0].lines] == ["a", "b", "c"]


class TestParseDiffStructure:
    """Hunk splitting, ids and line classification inside a patch."""

    def test_multiple_hunks_in_source_order(self):
        diff = (
            "@@ -1,2 +1,2 @@ first\n"
            " a\n"
            "-b\n"
            "@@ -10,1 +10,2 @@ second\n"
            " c\n"
            "+d\n"
        )
        hunks = parse_diff(diff, "src/app.py")

        assert [hunk.id for hunk in hunks] == [
            "src/app.py-hunk-0",
            "src/app.py-hunk-1",
        ]
        assert [hunk.section for hunk in hunks] == ["first", "second"]
        assert [len(hunk.lines) for hunk in hunks] == [2, 2]

    def test_git_preamble_is_ignored(self):
        diff = (
            "diff --git a/file.txt b/file.txt\n"
            "index 83db48f..bf269f4 100644\n"
            "--- a/file.txt\n"
            "+++ b/file.txt\n"
            "@@ -1 +1 @@\n"
            "-a\n"
            "+b"
        )
        hunks = parse_diff(diff, "file.txt")

        assert len(hunks) == 1
        assert [line.kind for line in hunks[0].lines] == [
            LineKind.DELETE,
            LineKind.ADD,
        ]

    def test_no_newline_marker_is_ignored(self):
        diff = "@@ -1 +1 @@\n-a\n\\ No newline at end of file\n+b"
        hunks = parse_diff(diff, "file.txt")

        assert [line.content for line in hunks[0].lines] == ["a", "b"]

    def test_empty_lines_are_skipped(self):
        diff = "@@ -1,3 +1,3 @@\n a\n\n b"
        hunks = parse_diff(diff, "file.txt")

        lines = hunks[0].lines
        assert [line.content for line in lines] == ["a", "b"]
        assert lines[1].old_line_number == 2
        assert lines[1].new_line_number == 2

    def test_marker_only_lines_have_empty_content(self):
        diff = "@@ -1,3 +1,3 @@\n \n+\n-"
        hunks = parse_diff(diff, "file.txt")

        assert [(line.kind, line.content) for line in hunks[0].lines] == [
            (LineKind.CONTEXT, ""),
            (LineKind.ADD, ""),
            (LineKind.DELETE, ""),
        ]

    def test_content_whitespace_is_preserved(self):
        diff = "@@ -1 +1 @@\n+    indented  \t"
        hunks = parse_diff(diff, "file.txt")

        assert hunks[0].lines[0].content == "    indented  \t"

    def test_lines_before_any_header_are_ignored(self):
        diff = "+orphan\n-orphan\n@@ -1 +1 @@\n context"
        hunks = parse_diff(diff, "file.txt")

        assert len(hunks) == 1
        assert len(hunks[0].lines) == 1


class TestMalformedHeaders:
    """Headers that do not match the expected shape open no hunk."""

    def test_malformed_header_only(self):
        assert parse_diff("@@ bogus @@\n+added", "file.txt") == []

    def test_malformed_header_body_is_dropped(self):
        diff = "@@ bogus @@\n+dropped\n@@ -1 +1 @@\n+kept"
        hunks = parse_diff(diff, "file.txt")

        assert len(hunks) == 1
        assert hunks[0].id == "file.txt-hunk-0"
        assert [line.content for line in hunks[0].lines] == ["kept"]

    def test_malformed_header_closes_open_hunk(self):
        diff = "@@ -1,2 +1,2 @@\n a\n@@ nope\n+b\n-c"
        hunks = parse_diff(diff, "file.txt")

        assert len(hunks) == 1
        assert [line.content for line in hunks[0].lines] == ["a"]

    def test_combined_diff_header_is_not_recognised(self):
        diff = "@@@ -1,2 -1,2 +1,3 @@@\n  a\n+ b"
        assert parse_diff(diff, "file.txt") == []


class TestLineNumbering:
    """Line numbers follow the position of the line within its hunk."""

    def test_context_lines_advance_both_sides(self):
        diff = "@@ -3,3 +7,3 @@\n a\n b\n c"
        lines = parse_diff(diff, "file.txt")[0].lines

        assert [(line.old_line_number, line.new_line_number) for line in lines] == [
            (3, 7),
            (4, 8),
            (5, 9),
        ]

    def test_position_index_is_shared_across_kinds(self):
        diff = "@@ -10,2 +20,2 @@\n-x\n+y\n z"
        lines = parse_diff(diff, "file.txt")[0].lines

        assert [(line.old_line_number, line.new_line_number) for line in lines] == [
            (10, None),
            (None, 21),
            (12, 22),
        ]

    def test_numbering_restarts_per_hunk(self):
        diff = "@@ -1,2 +1,2 @@\n a\n b\n@@ -40 +41 @@\n c"
        hunks = parse_diff(diff, "file.txt")

        assert hunks[1].lines[0].old_line_number == 40
        assert hunks[1].lines[0].new_line_number == 41


class TestHunkHeader:
    @pytest.mark.parametrize(
        "line, expected",
        [
            ("@@ -1,13 +1,15 @@", (1, 13, 1, 15, "")),
            ("@@ -0,0 +1,2 @@", (0, 0, 1, 2, "")),
            ("@@ -5 +5 @@ foo", (5, 1, 5, 1, "foo")),
            ("@@ -7,2 +9 @@ def main():", (7, 2, 9, 1, "def main():")),
        ],
    )
    def test_parse_hunk_header(self, line, expected):
        header = parse_hunk_header(line)

        assert header is not None
        assert (
            header.old_start,
            header.old_lines,
            header.new_start,
            header.new_lines,
            header.section,
        ) == expected

    @pytest.mark.parametrize(
        "line", ["@@", "@@ -a,b +c,d @@", "@@ -1,2 @@", "not a header"]
    )
    def test_parse_hunk_header_rejects_malformed(self, line):
        assert parse_hunk_header(line) is None


class TestClassifyLine:
    @pytest.mark.parametrize(
        "line, expected",
        [
            ("@@ -1 +1 @@", LineClass.HEADER),
            ("@@ garbage", LineClass.HEADER),
            (" context", LineClass.CONTENT),
            ("+added", LineClass.CONTENT),
            ("-deleted", LineClass.CONTENT),
            ("", LineClass.IGNORABLE),
            ("\\ No newline at end of file", LineClass.IGNORABLE),
            ("diff --git a/x b/x", LineClass.IGNORABLE),
        ],
    )
    def test_classify_line(self, line, expected):
        assert classify_line(line) is expected


class TestGenerateHunkId:
    def test_is_deterministic(self):
        assert generate_hunk_id("src/a.ts", 3) == generate_hunk_id("src/a.ts", 3)

    def test_differs_by_index(self):
        ids = {generate_hunk_id("src/a.ts", index) for index in range(100)}
        assert len(ids) == 100

    def test_differs_by_path(self):
        assert generate_hunk_id("src/a.ts", 0) != generate_hunk_id("src/b.ts", 0)

    def test_format(self):
        assert generate_hunk_id("README.md", 2) == "README.md-hunk-2"


class TestSerializeHunks:
    def test_serialize_synthetic_hunks(self):
        hunks = [
            Hunk(
                id="a-hunk-0",
                old_start=1,
                old_lines=2,
                new_start=1,
                new_lines=2,
                header="@@ -1,2 +1,2 @@ intro",
                lines=(
                    DiffLine(kind=LineKind.CONTEXT, content="keep"),
                    DiffLine(kind=LineKind.DELETE, content="old"),
                    DiffLine(kind=LineKind.ADD, content="new"),
                ),
            ),
            Hunk(
                id="a-hunk-1",
                old_start=9,
                old_lines=1,
                new_start=9,
                new_lines=1,
                header="@@ -9 +9 @@",
            ),
        ]

        assert serialize_hunks(hunks) == (
            "@@ -1,2 +1,2 @@ intro\n keep\n-old\n+new\n@@ -9 +9 @@"
        )

    def test_serialize_empty(self):
        assert serialize_hunks([]) == ""

    def test_header_is_kept_verbatim(self):
        diff = "@@ -1 +1 @@   spaced   section  \n+x"
        assert serialize_hunks(parse_diff(diff, "f")) == diff


class TestCalculateStats:
    def test_counts_by_kind(self):
        diff = "@@ -1,3 +1,4 @@\n a\n-b\n+c\n+d\n@@ -10 +11 @@\n-e"
        stats = calculate_stats(parse_diff(diff, "f"))

        assert stats.additions == 2
        assert stats.deletions == 2
        assert stats.context == 1
        assert stats.total == 5

    def test_empty(self):
        stats = calculate_stats([])
        assert (stats.additions, stats.deletions, stats.context) == (0, 0, 0)
