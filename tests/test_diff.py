import pytest

from linediff.diff import compare, compare_chars, diff, diff_chars, lines, stats


def ops(a, b):
    return [(edit.kind, edit.text) for edit in diff(a, b)]


DOC = "the\nquick\nbrown\nfox\njumps\nover\nthe\nlazy\ndog"


class TestLines:
    def test_text_without_newline_is_a_single_line(self):
        assert [line.text for line in lines("one")] == ["one"]

    def test_trailing_newline_yields_an_empty_last_line(self):
        assert [line.text for line in lines("one\ntwo\n")] == ["one", "two", ""]

    def test_lines_are_numbered_from_one(self):
        assert [line.number for line in lines("a\nb\nc")] == [1, 2, 3]

    def test_carriage_returns_are_kept(self):
        assert [line.text for line in lines("a\r\nb")] == ["a\r", "b"]

    @pytest.mark.parametrize("document", ["", None])
    def test_absent_text_has_no_lines(self, document):
        assert lines(document) == []


class TestEmptyInputs:
    @pytest.mark.parametrize("a, b", [("", ""), (None, None), ("", None), (None, "")])
    def test_both_empty_gives_an_empty_result(self, a, b):
        assert diff(a, b) == []
        assert compare(a, b) == ""

    def test_empty_original_marks_everything_added(self):
        assert ops("", "x\ny") == [("added", "x"), ("added", "y")]

    def test_empty_comparison_marks_everything_removed(self):
        assert ops("x\ny", "") == [("removed", "x"), ("removed", "y")]

    def test_absent_original_marks_everything_added(self):
        assert ops(None, "x") == [("added", "x")]

    def test_empty_side_renders_one_fragment_without_breaks(self):
        assert compare("", "x\ny") == '<span class="diff-added">x\ny</span>'
        assert compare("x\ny", None) == '<span class="diff-removed">x\ny</span>'

    def test_empty_side_fragment_is_escaped(self):
        assert compare("", "<b>") == '<span class="diff-added">&lt;b&gt;</span>'


class TestGeneralPath:
    def test_it_finds_the_removed_middle_line(self):
        assert ops("a\nb\nc", "a\nc") == [
            ("unchanged", "a"),
            ("removed", "b"),
            ("unchanged", "c"),
        ]

    def test_it_resolves_ties_towards_additions(self):
        assert ops("a\nb", "b\na") == [
            ("removed", "a"),
            ("unchanged", "b"),
            ("added", "a"),
        ]

    def test_identical_texts_are_all_unchanged(self):
        edits = diff(DOC, DOC)
        assert all(edit.kind == "unchanged" for edit in edits)
        assert len(edits) == 9

    def test_lines_compare_exactly(self):
        assert ops("Value ", "value") == [("removed", "Value "), ("added", "value")]

    def test_trailing_newline_difference_is_a_line(self):
        assert ops("a", "a\n") == [("unchanged", "a"), ("added", "")]

    def test_it_renders_one_fragment_per_line(self):
        assert compare("a\nb\nc", "a\nc") == (
            '<span class="diff-unchanged">a\n</span>'
            '<span class="diff-removed">b\n</span>'
            '<span class="diff-unchanged">c\n</span>'
        )

    def test_it_renders_ties_in_document_order(self):
        assert compare("a\nb", "b\na") == (
            '<span class="diff-removed">a\n</span>'
            '<span class="diff-unchanged">b\n</span>'
            '<span class="diff-added">a\n</span>'
        )

    def test_it_escapes_each_line(self):
        assert compare("<script>&\"'", "ok") == (
            '<span class="diff-removed">&lt;script&gt;&amp;&quot;&#039;\n</span>'
            '<span class="diff-added">ok\n</span>'
        )


UNIQUE_LCS_PAIRS = [
    ("a\nb\nc", "a\nc"),
    (DOC, "a\nquick\nbrown\nfox\njumps\nover\nthe\nlazy\ncat"),
    ("x\ny\nx\ny\nx", "y\nx\ny"),
    ("one\ntwo\n", "two\nthree\n"),
]

PAIRS = UNIQUE_LCS_PAIRS + [("a\nb", "b\na"), ("p\nq\nr", "r\nq\np")]


class TestProperties:
    @pytest.mark.parametrize("a, b", UNIQUE_LCS_PAIRS)
    def test_unchanged_lines_survive_swapping_inputs(self, a, b):
        forward = [e.text for e in diff(a, b) if e.kind == "unchanged"]
        backward = [e.text for e in diff(b, a) if e.kind == "unchanged"]
        assert sorted(forward) == sorted(backward)

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_unchanged_count_survives_swapping_inputs(self, a, b):
        assert stats(diff(a, b)).unchanged == stats(diff(b, a)).unchanged

    def test_swapping_inputs_swaps_added_and_removed_counts(self):
        forward = stats(diff(DOC, "the\nslow\nfox"))
        backward = stats(diff("the\nslow\nfox", DOC))
        assert (forward.added, forward.removed) == (backward.removed, backward.added)

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_every_line_appears_exactly_once(self, a, b):
        edits = diff(a, b)

        a_side = [e.a_line.text for e in edits if e.a_line is not None]
        b_side = [e.b_line.text for e in edits if e.b_line is not None]

        assert a_side == a.split("\n")
        assert b_side == b.split("\n")

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_edit_count_matches_the_line_counts(self, a, b):
        result = stats(diff(a, b))
        n, m = len(a.split("\n")), len(b.split("\n"))

        assert result.removed + result.unchanged == n
        assert result.added + result.unchanged == m
        assert result.total == n + m - result.unchanged


class TestStats:
    def test_it_counts_each_kind(self):
        result = stats(diff("a\nb\nc", "a\nc\nd"))
        assert (result.added, result.removed, result.unchanged) == (1, 1, 2)

    def test_it_summarises_as_text(self):
        assert str(stats(diff("a", "b"))) == "1 insertion(+), 1 deletion(-)"


class TestCharacterComparison:
    def test_it_matches_the_line_comparison(self):
        assert compare_chars("a\nb", "b\na") == compare("a\nb", "b\na")
        assert diff_chars("a\nb", "b\na") == diff("a\nb", "b\na")
