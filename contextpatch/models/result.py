from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ApplyResult:
    """Outcome of apply_diff. On failure `result` is the untouched original."""

    success: bool
    result: str
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"success": self.success, "result": self.result}
        if self.error is not None:
            out["error"] = self.error
        return out


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validate_diff."""

    valid: bool
    block_count: int
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"valid": self.valid, "blockCount": self.block_count}
        if self.error is not None:
            out["error"] = self.error
        return out
