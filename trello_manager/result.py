"""Uniform outcome type returned by every TrelloClient operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from trello_manager.exceptions import FailureKind, TrelloAPIError


@dataclass(frozen=True)
class TrelloResult:
    """Success-with-value or failure-with-reason

    A successful result holds the parsed JSON payload exactly as Trello sent it.
    A failed result holds the ``TrelloAPIError`` describing what went wrong, so
    callers can tell a missing card from a dropped connection without reading logs.

    Example:
        >>> result = client.fetch_card("abc123")
        >>> if result:
        ...     print(result.value["name"])
        ... elif result.kind is FailureKind.HTTP_STATUS:
        ...     print(f"Trello said {result.error.status_code}")
    """

    ok: bool
    value: Any = None
    error: TrelloAPIError | None = None

    @classmethod
    def success(cls, value: Any) -> TrelloResult:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: TrelloAPIError) -> TrelloResult:
        return cls(ok=False, error=error)

    @property
    def kind(self) -> FailureKind | None:
        """Failure category, None on success"""
        return self.error.kind if self.error is not None else None

    @property
    def reason(self) -> str | None:
        """Human-readable failure reason, None on success"""
        return str(self.error) if self.error is not None else None

    def unwrap(self) -> Any:
        """Return the payload, or raise the stored error"""
        if self.ok:
            return self.value
        if self.error is None:
            raise RuntimeError("Failed TrelloResult has no error attached")
        raise self.error

    def unwrap_or(self, default: Any) -> Any:
        return self.value if self.ok else default

    def __bool__(self) -> bool:
        return self.ok
