"""Trello key/token credential pair."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """Immutable Trello API key and token

    Both values are opaque to the client: they are stored and sent exactly as
    given. The token is hidden from ``repr`` so credentials can be logged safely.
    """

    api_key: str
    token: str = field(repr=False)

    def as_params(self) -> dict[str, str]:
        """Query parameters Trello expects on every authenticated request"""
        return {"key": self.api_key, "token": self.token}
