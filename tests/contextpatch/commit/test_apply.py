from contextpatch.commit import apply_hunks, reindent_line
from contextpatch.models import Hunk, PositionedHunk


# ---------------------------------------------------------------------------
# reindent_line
# ---------------------------------------------------------------------------


def test_reindent_adopts_reference_indent():
    assert reindent_line("    foo", "\tbar", "    ") == "\tfoo"


def test_reindent_keeps_relative_indent():
    assert reindent_line("        foo", "  x", "    ") == "      foo"


def test_reindent_with_empty_base_keeps_own_indent_on_top():
    assert reindent_line("  foo", "    x", "") == "      foo"


def test_reindent_blank_line_is_empty():
    assert reindent_line("   \t", "    x", "") == ""


def test_reindent_shallower_than_base():
    assert reindent_line("\tfoo", "  x", "    ") == "  foo"


# ---------------------------------------------------------------------------
# apply_hunks
# ---------------------------------------------------------------------------


def test_replacement_takes_indent_of_removed_line():
    src = ["def f():", "    return 1", ""]
    ph = PositionedHunk(Hunk(("def f():",), ("return 1",), ("if x:", "    return 2")), 1, 0)
    assert apply_hunks(src, [ph]) == ["def f():", "    if x:", "        return 2", ""]


def test_pure_addition_takes_indent_of_previous_line():
    src = ["    a", "    b"]
    ph = PositionedHunk(Hunk(("a",), (), ("new",)), 1, 0)
    assert apply_hunks(src, [ph]) == ["    a", "    new", "    b"]


def test_insertion_at_top_without_reference():
    src = ["  a"]
    ph = PositionedHunk(Hunk((), ("  a",), ("  b", "  c")), 0, 0)
    # removal present, so the removed line is the reference
    assert apply_hunks(src, [ph]) == ["  b", "  c"]
    ph = PositionedHunk(Hunk(("zzz",), (), ("  top",)), 0, 0)
    # nothing before it: the addition is flushed left
    assert apply_hunks(src, [ph]) == ["top", "  a"]


def test_blank_additions_become_empty_lines():
    src = ["a", "b"]
    ph = PositionedHunk(Hunk(("a",), ("b",), ("x", "   ", "y")), 1, 0)
    assert apply_hunks(src, [ph]) == ["a", "x", "", "y"]


def test_multiple_hunks_copy_untouched_spans():
    src = ["1", "2", "3", "4", "5"]
    first = PositionedHunk(Hunk(("1",), ("2",), ("two",)), 1, 0)
    second = PositionedHunk(Hunk(("3",), ("4",), ()), 3, 1)
    assert apply_hunks(src, [first, second]) == ["1", "two", "3", "5"]


def test_no_hunks_is_identity():
    assert apply_hunks(["a", "b"], []) == ["a", "b"]
