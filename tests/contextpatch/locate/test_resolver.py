from contextpatch.locate import cascade, effective_context, locate_hunk, resolve_position
from contextpatch.models import Hunk


# ---------------------------------------------------------------------------
# One test per cascade tier
# ---------------------------------------------------------------------------


def test_exact_tier():
    src = ["a", "b", "c"]
    assert locate_hunk(src, Hunk(("a",), ("b",), ("B",))) == (1, "exact")


def test_trimmed_tier():
    src = ["  a", "  b", "  c"]
    assert locate_hunk(src, Hunk(("a",), ("b",), ("B",))) == (1, "trimmed")


def test_anchor_tier_skips_drifted_interior():
    src = ["def f():", "    x = 1", "    y = 2", "    return x"]
    hunk = Hunk(("def f():", "    x = 100"), ("    y = 2",), ("    y = 3",))
    assert locate_hunk(src, hunk) == (2, "anchor")


def test_trailing_context_tier_for_pure_additions():
    src = ["l1", "l2", "l3", "l4", "l5"]
    hunk = Hunk(("drifted", "l2", "l3", "l4"), (), ("new",))
    assert locate_hunk(src, hunk) == (4, "trailing-context")


def test_reduced_context_tier():
    src = ["a", "b", "c", "d"]
    hunk = Hunk(("zzz", "b"), ("c",), ("C",))
    assert locate_hunk(src, hunk) == (2, "reduced-context")


def test_removals_only_tier():
    src = ["p", "q", "r", "s"]
    hunk = Hunk(("nope",), ("q", "r"), ("QR",))
    assert locate_hunk(src, hunk) == (1, "removals-only")


def test_first_removal_tier():
    src = ["a", "b", "c", "d"]
    hunk = Hunk(("a",), ("b", "X"), ("B",))
    assert locate_hunk(src, hunk) == (1, "first-removal")


def test_overlap_fix_tier():
    """Context that repeats the removed line is de-duplicated."""
    src = ["head", "x", "y", "tail"]
    hunk = Hunk(("head", "x"), ("x",), ("X",))
    assert locate_hunk(src, hunk) == (1, "overlap-fix")


def test_cascade_order():
    hunk = Hunk(("c1", "c2", "c3"), ("r1", "r2"), ("a",))
    tiers = [a.tier for a in cascade(hunk)]
    assert tiers[:3] == ["exact", "trimmed", "anchor"]
    assert tiers.index("reduced-context") < tiers.index("removals-only") < tiers.index("first-removal")
    assert "trailing-context" not in tiers


# ---------------------------------------------------------------------------
# resolve_position
# ---------------------------------------------------------------------------


def test_unresolvable_returns_none():
    assert resolve_position(["a", "b"], Hunk(("nowhere",), ("b",), ("B",))) is None


def test_unlocatable_hunk_shape_returns_none():
    assert resolve_position(["a", "b"], Hunk((), (), ("x",))) is None


def test_match_running_past_end_is_rejected():
    # first-removal would land at 1 but two removals do not fit in two lines
    assert resolve_position(["a", "b"], Hunk(("a",), ("b", "c"), ())) is None


def test_start_from_and_wrap_around():
    src = ["k", "v", "k", "v"]
    hunk = Hunk((), ("k", "v"), ("kv",))
    assert resolve_position(src, hunk, 1) == 2
    assert resolve_position(src, hunk, 3) is None
    assert resolve_position(src, hunk, 3, wrap_around=True) == 0


def test_wrap_around_prefers_precise_tier_over_later_fuzzy_match():
    src = ["target", "  body", "other", "body"]
    hunk = Hunk(("target",), ("  body",), ("changed",))
    # from line 2 only a trimmed match exists; wrapping finds the exact one first
    assert locate_hunk(src, hunk, 2, wrap_around=True) == (1, "exact")


def test_pure_addition_ignores_trailing_blank_context():
    src = ["a", "b"]
    hunk = Hunk(("a", "", ""), (), ("x",))
    assert effective_context(hunk) == ["a"]
    assert resolve_position(src, hunk) == 1


def test_effective_context_keeps_blanks_when_removing():
    hunk = Hunk(("a", ""), ("b",), ())
    assert effective_context(hunk) == ["a", ""]


def test_resolution_is_deterministic():
    src = ["x", "y", "x", "y", "x"]
    hunk = Hunk(("x",), ("y",), ("Y",))
    assert {resolve_position(src, hunk) for _ in range(5)} == {1}
