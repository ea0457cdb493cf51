# contextpatch/utils/__init__.py
from .text import (
    detect_eol,
    eq_loose,
    leading_ws,
    split_diff_lines,
    split_document,
    trim_trailing_blank_lines,
)

__all__ = [
    "detect_eol",
    "eq_loose",
    "leading_ws",
    "split_diff_lines",
    "split_document",
    "trim_trailing_blank_lines",
]
