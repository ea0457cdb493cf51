import re
from typing import List, Sequence

_LEADING_WS_RE = re.compile(r"^[\t ]*")


def leading_ws(s: str) -> str:
    """Return the exact leading whitespace (tabs/spaces)."""
    m = _LEADING_WS_RE.match(s)
    return m.group(0) if m else ""


def eq_loose(a: str, b: str) -> bool:
    """Whitespace-insensitive equality at both ends of the line."""
    return a == b or a.strip() == b.strip()


def trim_trailing_blank_lines(lines: Sequence[str]) -> List[str]:
    """Drop blank lines at the end (producers often pad context with them)."""
    end = len(lines)
    while end > 0 and lines[end - 1].strip() == "":
        end -= 1
    return list(lines[:end])


def detect_eol(s: str) -> str:
    if "\r\n" in s:
        return "\r\n"
    if "\r" in s:
        return "\r"
    return "\n"


def split_document(content: str) -> List[str]:
    """
    Split a document on its own line ending.

    A trailing newline produces a trailing empty line, so joining the result
    with the same ending restores the document exactly.
    """
    return content.split(detect_eol(content))


def split_diff_lines(text: str) -> List[str]:
    """
    Split diff text on newlines only, dropping a trailing carriage return.

    Other separators str.splitlines honours (form feed, U+2028, ...) can sit
    inside a code line and must stay part of it.
    """
    return [ln[:-1] if ln.endswith("\r") else ln for ln in text.split("\n")]
