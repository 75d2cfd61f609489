"""Custom exception classes for trello_manager.

Client operations never raise these for network or API failures. They are
wrapped into a failed ``TrelloResult`` instead, so callers can inspect the
error (or re-raise it via ``TrelloResult.unwrap()``).
"""

from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    """Broad category of a failed Trello call"""

    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    DECODE = "decode"


class TrelloAPIError(Exception):
    """Base exception for Trello API errors"""

    kind: FailureKind | None = None

    def __init__(
        self, message: str, status_code: int | None = None, response_text: str | None = None
    ):
        self.status_code = status_code
        self.response_text = response_text
        super().__init__(message)


class TrelloTransportError(TrelloAPIError):
    """Raised when the request never got a response (DNS, connection, TLS, timeout)"""

    kind = FailureKind.TRANSPORT


class TrelloStatusError(TrelloAPIError):
    """Raised when Trello answers with a non-2xx status code"""

    kind = FailureKind.HTTP_STATUS


class TrelloAuthenticationError(TrelloStatusError):
    """Raised when API credentials are invalid or expired (401/403)"""

    pass


class TrelloNotFoundError(TrelloStatusError):
    """Raised when a board, card, or resource is not found (404)"""

    pass


class TrelloRateLimitError(TrelloStatusError):
    """Raised when rate limit is exceeded (429)"""

    pass


class TrelloServerError(TrelloStatusError):
    """Raised when Trello's servers return an error (5xx)"""

    pass


class TrelloDecodeError(TrelloAPIError):
    """Raised when a response body is empty, not UTF-8, or not valid JSON"""

    kind = FailureKind.DECODE


class TrelloConfigurationError(Exception):
    """Raised when Trello credentials cannot be loaded from the environment.

    Attributes:
        missing: Names of the environment variables that were not set

    Resolution:
        Export TRELLO_API_KEY and TRELLO_TOKEN, or put them in a .env file.
        Get credentials at https://trello.com/power-ups/admin
    """

    def __init__(self, message: str, missing: list[str] | None = None):
        self.missing = missing or []
        super().__init__(message)
