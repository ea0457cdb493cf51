from .extract import (
    NO_BLOCKS_FOUND,
    DiffFormatError,
    EmptyHunkError,
    NoBlocksFoundError,
    UnpositionableHunkError,
)
from .patch import OverlappingHunksError, PatchFailedError, UnlocatablePositionError

__all__ = [
    "NO_BLOCKS_FOUND",
    "PatchFailedError",
    "DiffFormatError",
    "NoBlocksFoundError",
    "EmptyHunkError",
    "UnpositionableHunkError",
    "UnlocatablePositionError",
    "OverlappingHunksError",
]
