from .hunk import Hunk, PositionedHunk
from .result import ApplyResult, ValidationResult

__all__ = ["Hunk", "PositionedHunk", "ApplyResult", "ValidationResult"]
