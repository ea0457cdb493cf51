from .hunks import BLOCK_SEPARATOR, is_block_separator, parse_blocks, parse_hunks

__all__ = [
    "BLOCK_SEPARATOR",
    "is_block_separator",
    "parse_blocks",
    "parse_hunks",
]
