from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["Result"]


@dataclass(frozen=True)
class Result:
    """Outcome of a lead operation: a value on success, an error message otherwise."""

    ok: bool
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: Any = None) -> "Result":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: Any) -> "Result":
        return cls(ok=False, error=str(error))
