from .core import apply_diff, apply_diff_strict, check_hunks, validate_diff
from .extract import BLOCK_SEPARATOR, parse_blocks, parse_hunks
from .locate import resolve_position
from .models import ApplyResult, Hunk, PositionedHunk, ValidationResult
from .errors import (
    NO_BLOCKS_FOUND,
    DiffFormatError,
    EmptyHunkError,
    NoBlocksFoundError,
    OverlappingHunksError,
    PatchFailedError,
    UnlocatablePositionError,
    UnpositionableHunkError,
)

__all__ = [
    "apply_diff",
    "apply_diff_strict",
    "validate_diff",
    "check_hunks",
    "parse_hunks",
    "parse_blocks",
    "resolve_position",
    "BLOCK_SEPARATOR",
    "NO_BLOCKS_FOUND",
    "Hunk",
    "PositionedHunk",
    "ApplyResult",
    "ValidationResult",
    "PatchFailedError",
    "DiffFormatError",
    "NoBlocksFoundError",
    "EmptyHunkError",
    "UnpositionableHunkError",
    "UnlocatablePositionError",
    "OverlappingHunksError",
]
