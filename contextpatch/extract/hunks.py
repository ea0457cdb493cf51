# contextpatch/extract/hunks.py
from __future__ import annotations

from typing import List, Tuple

from .._logging import resolve_logger
from ..models.hunk import Hunk
from ..utils.text import split_diff_lines

__all__ = ["BLOCK_SEPARATOR", "is_block_separator", "parse_blocks", "parse_hunks"]

# Changing this is a format break, not a runtime option.
BLOCK_SEPARATOR = "@@@@"


def is_block_separator(line: str) -> bool:
    return line.strip() == BLOCK_SEPARATOR


def _parse_block(lines: List[str], block_index: int) -> List[Hunk]:
    """
    Split one @@@@ block into hunks.

    Context seen after a change closes the pending hunk and seeds the next one,
    so an edit to an opening and closing delimiter around untouched lines comes
    out as two hunks. A gap inside what was meant as one run of removals is
    split the same way; callers rely on that boundary, keep it.
    """
    hunks: List[Hunk] = []
    context: List[str] = []
    removals: List[str] = []
    additions: List[str] = []
    in_change = False

    def _emit() -> None:
        if removals or additions:
            hunks.append(
                Hunk(
                    context_before=tuple(context),
                    removals=tuple(removals),
                    additions=tuple(additions),
                    block_index=block_index,
                )
            )

    for line in lines:
        if line.startswith("-"):
            in_change = True
            removals.append(line[1:])
        elif line.startswith("+"):
            in_change = True
            additions.append(line[1:])
        else:
            content = line[1:] if line.startswith(" ") else line
            if in_change:
                _emit()
                context = [content]
                removals = []
                additions = []
                in_change = False
            else:
                context.append(content)

    _emit()
    return hunks


def parse_blocks(diff_text: str, *, logger=None, log: bool = False) -> List[Tuple[Hunk, ...]]:
    """
    Parse diff text into per-block hunk groups.

    Lines before the first separator are ignored and blocks that yield no
    change are dropped. Never raises on malformed text; an empty list means
    nothing usable was found.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__)
    if not diff_text:
        return []

    raw_blocks: List[List[str]] = []
    current: List[str] | None = None
    for line in split_diff_lines(diff_text):
        if is_block_separator(line):
            if current is not None:
                raw_blocks.append(current)
            current = []
        elif current is not None:
            current.append(line)
    if current is not None:
        raw_blocks.append(current)

    blocks: List[Tuple[Hunk, ...]] = []
    for raw in raw_blocks:
        hunks = _parse_block(raw, block_index=len(blocks))
        if hunks:
            blocks.append(tuple(hunks))

    log.debug(f"Parsed {len(blocks)} block(s) from {len(raw_blocks)} separator section(s)")
    return blocks


def parse_hunks(diff_text: str, *, logger=None, log: bool = False) -> List[Hunk]:
    """Parse diff text into the flat, ordered list of hunks it describes."""
    return [h for block in parse_blocks(diff_text, logger=logger, log=log) for h in block]
