from .matchers import anchor_match, closest_window, exact_match, trimmed_match
from .resolver import cascade, effective_context, locate_hunk, resolve_position

__all__ = [
    "exact_match",
    "trimmed_match",
    "anchor_match",
    "closest_window",
    "cascade",
    "effective_context",
    "locate_hunk",
    "resolve_position",
]
