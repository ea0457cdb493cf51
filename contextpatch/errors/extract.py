from .patch import PatchFailedError

NO_BLOCKS_FOUND = "No valid diff blocks found"


class DiffFormatError(PatchFailedError):
    """The diff text is structurally unusable, independent of any document."""


class NoBlocksFoundError(DiffFormatError):
    # applying gets the format hint; validation reports the bare NO_BLOCKS_FOUND
    def __init__(self, message: str = f"{NO_BLOCKS_FOUND} (blocks should be separated by @@@@)") -> None:
        super().__init__(message)


class EmptyHunkError(DiffFormatError):
    def __init__(self, hunk_index: int) -> None:
        self.hunk_index = hunk_index
        super().__init__(f"Hunk {hunk_index + 1} has no changes")


class UnpositionableHunkError(DiffFormatError):
    def __init__(self, hunk_index: int) -> None:
        self.hunk_index = hunk_index
        super().__init__(f"Hunk {hunk_index + 1} has no context or removals for positioning")
