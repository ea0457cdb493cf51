# contextpatch/locate/resolver.py
from __future__ import annotations

from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple

from .._logging import resolve_logger
from ..models.hunk import Hunk
from ..utils.text import eq_loose, trim_trailing_blank_lines
from .matchers import Matcher, anchor_match, exact_match, trimmed_match

__all__ = ["Attempt", "effective_context", "cascade", "locate_hunk", "resolve_position"]

# Trailing-context sizes tried for pure additions, largest first.
ADDITION_CONTEXT_SIZES = (10, 8, 6, 5, 4, 3)
# Context sizes kept when the full context has drifted away from the removals.
REDUCED_CONTEXT_SIZES = (2, 1)


class Attempt(NamedTuple):
    tier: str
    matcher: Matcher
    pattern: List[str]
    offset: int  # lines between the match start and the change position


def effective_context(hunk: Hunk) -> List[str]:
    """Context used for matching; pure additions drop trailing blank lines."""
    if hunk.is_pure_addition:
        return trim_trailing_blank_lines(hunk.context_before)
    return list(hunk.context_before)


def cascade(hunk: Hunk) -> Iterator[Attempt]:
    """Yield match attempts for ``hunk`` from most to least precise."""
    ctx = effective_context(hunk)
    rem = list(hunk.removals)
    full = ctx + rem

    yield Attempt("exact", exact_match, full, len(ctx))
    yield Attempt("trimmed", trimmed_match, full, len(ctx))
    if len(full) >= 3:
        yield Attempt("anchor", anchor_match, full, len(ctx))

    if not rem:
        for size in ADDITION_CONTEXT_SIZES:
            if size < len(ctx):
                yield Attempt("trailing-context", trimmed_match, ctx[-size:], size)

    for size in REDUCED_CONTEXT_SIZES:
        if size < len(ctx):
            yield Attempt("reduced-context", trimmed_match, ctx[-size:] + rem, size)

    if len(rem) >= 2:
        yield Attempt("removals-only", trimmed_match, rem, 0)

    if ctx and rem:
        yield Attempt("first-removal", trimmed_match, ctx + rem[:1], len(ctx))
        if len(ctx) >= 2:
            yield Attempt("first-removal", trimmed_match, ctx[-2:] + rem[:1], 2)
        yield Attempt("first-removal", trimmed_match, ctx[-1:] + rem[:1], 1)

    # Producers sometimes repeat the first removed lines as trailing context.
    for overlap in range(min(len(ctx), len(rem)), 0, -1):
        if all(eq_loose(a, b) for a, b in zip(ctx[-overlap:], rem[:overlap])):
            fixed = ctx[:-overlap]
            yield Attempt("overlap-fix", trimmed_match, fixed + rem, len(fixed))


def locate_hunk(
    source_lines: Sequence[str],
    hunk: Hunk,
    start_from: int = 0,
    *,
    wrap_around: bool = False,
    logger=None,
    log: bool = False,
) -> Optional[Tuple[int, str]]:
    """
    Run the cascade and return (position, tier) for the first attempt that lands.

    A match only counts when the hunk's removals fit inside the document.
    With ``wrap_around`` an attempt that finds nothing at or after
    ``start_from`` is retried from the top before the next tier is tried.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__)
    n = len(source_lines)
    for attempt in cascade(hunk):
        idx = attempt.matcher(source_lines, attempt.pattern, start_from)
        if idx is None and wrap_around and start_from > 0:
            idx = attempt.matcher(source_lines, attempt.pattern, 0)
        if idx is None:
            continue
        position = idx + attempt.offset
        if position + len(hunk.removals) > n:
            log.debug(f"  {attempt.tier}: match at {idx} runs past end of document, skipped")
            continue
        log.debug(f"  {attempt.tier}: matched {len(attempt.pattern)} line(s) at {idx}, position={position}")
        return position, attempt.tier
    return None


def resolve_position(
    source_lines: Sequence[str],
    hunk: Hunk,
    start_from: int = 0,
    *,
    wrap_around: bool = False,
    logger=None,
    log: bool = False,
) -> Optional[int]:
    """Most probable line offset of ``hunk`` in ``source_lines``, or None."""
    found = locate_hunk(
        source_lines, hunk, start_from, wrap_around=wrap_around, logger=logger, log=log
    )
    return found[0] if found is not None else None
