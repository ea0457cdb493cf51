# contextpatch/core.py
from __future__ import annotations

from typing import List, Sequence

from ._logging import debug_enabled, resolve_logger
from .commit import apply_hunks, order_hunks
from .errors import (
    EmptyHunkError,
    NO_BLOCKS_FOUND,
    NoBlocksFoundError,
    PatchFailedError,
    UnlocatablePositionError,
    UnpositionableHunkError,
)
from .extract import parse_blocks, parse_hunks
from .locate import closest_window, effective_context, locate_hunk
from .models import ApplyResult, Hunk, PositionedHunk, ValidationResult
from .utils.text import detect_eol, split_document

__all__ = ["apply_diff", "apply_diff_strict", "check_hunks", "validate_diff"]


def check_hunks(hunks: Sequence[Hunk]) -> None:
    """
    Structural checks that need no document.

    Raises:
        EmptyHunkError: a hunk neither removes nor adds anything.
        UnpositionableHunkError: a hunk has no context and no removals to locate it by.
    """
    for i, h in enumerate(hunks):
        if not h.has_changes:
            raise EmptyHunkError(i)
        if not h.is_locatable:
            raise UnpositionableHunkError(i)


def _position_hunks(source_lines: List[str], hunks: Sequence[Hunk], log) -> List[PositionedHunk]:
    positioned: List[PositionedHunk] = []
    # Searching past the previous hunk lets repeated snippets map to successive
    # occurrences; wrap_around keeps out-of-order listings working.
    cursor = 0
    for i, h in enumerate(hunks):
        log.debug(
            f"Hunk #{i + 1}/{len(hunks)}: {len(h.context_before)} context, "
            f"{len(h.removals)} removal(s), {len(h.additions)} addition(s), from line {cursor}"
        )
        found = locate_hunk(source_lines, h, cursor, wrap_around=True, logger=log)
        if found is None:
            idx, ratio = closest_window(source_lines, effective_context(h) + list(h.removals))
            if idx >= 0:
                log.debug(f"  closest window at line {idx}, ratio={ratio:.3f}")
            raise UnlocatablePositionError(i, h, (idx, ratio) if idx >= 0 else None)
        position, tier = found
        positioned.append(PositionedHunk(hunk=h, position=position, original_index=i, tier=tier))
        cursor = position + len(h.removals)
    return positioned


def apply_diff_strict(original: str, diff: str, *, logger=None, log: bool = False) -> str:
    """
    Apply a line-number-free @@@@ diff to ``original`` and return the new text.

    Every hunk is located by content, the set is checked for overlaps and then
    applied in one pass. The document's own line ending is kept.

    Raises:
        NoBlocksFoundError: the diff holds no usable hunk.
        UnlocatablePositionError: a hunk matches nowhere in the document.
        OverlappingHunksError: two hunks claim intersecting lines.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__)

    hunks = parse_hunks(diff, logger=log)
    if not hunks:
        raise NoBlocksFoundError()

    source_lines = split_document(original)
    log.debug(f"Applying {len(hunks)} hunk(s) to {len(source_lines)} line(s)")

    ordered = order_hunks(_position_hunks(source_lines, hunks, log))
    if debug_enabled(log):
        for ph in ordered:
            log.debug(f"Hunk #{ph.original_index + 1} at [{ph.position}:{ph.end}] via {ph.tier}")

    result_lines = apply_hunks(source_lines, ordered)
    log.debug(f"Patched document has {len(result_lines)} line(s)")
    return detect_eol(original).join(result_lines)


def apply_diff(original: str, diff: str, *, logger=None, log: bool = False) -> ApplyResult:
    """
    Non-raising form of apply_diff_strict.

    All or nothing: on any failure the original text comes back untouched
    with ``error`` describing the failing hunk.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__)
    try:
        return ApplyResult(success=True, result=apply_diff_strict(original, diff, logger=log))
    except PatchFailedError as e:
        log.info(f"Diff not applied: {e}")
        return ApplyResult(success=False, result=original, error=str(e))
    except Exception as e:
        log.exception("Unexpected failure while applying diff")
        return ApplyResult(success=False, result=original, error=f"Unexpected error: {e}")


def validate_diff(diff: str, *, logger=None, log: bool = False) -> ValidationResult:
    """Parse ``diff`` and run the structural checks without touching a document."""
    log = resolve_logger(logger=logger, enabled=log, name=__name__)
    try:
        blocks = parse_blocks(diff, logger=log)
        if not blocks:
            raise NoBlocksFoundError(NO_BLOCKS_FOUND)
        check_hunks([h for block in blocks for h in block])
    except NoBlocksFoundError as e:
        return ValidationResult(valid=False, block_count=0, error=str(e))
    except PatchFailedError as e:
        return ValidationResult(valid=False, block_count=len(blocks), error=str(e))
    except Exception as e:
        log.exception("Unexpected failure while validating diff")
        return ValidationResult(valid=False, block_count=0, error=str(e))
    return ValidationResult(valid=True, block_count=len(blocks))
