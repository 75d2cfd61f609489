"""Trello API client returning a uniform result for every call."""

from __future__ import annotations

import json
import logging
import re
from datetime import date
from typing import Any

import requests

from trello_manager.credentials import Credentials
from trello_manager.exceptions import (
    TrelloAPIError,
    TrelloAuthenticationError,
    TrelloDecodeError,
    TrelloNotFoundError,
    TrelloRateLimitError,
    TrelloServerError,
    TrelloStatusError,
    TrelloTransportError,
)
from trello_manager.request_builder import API_BASE_URL, build_request
from trello_manager.result import TrelloResult

logger = logging.getLogger("trello_manager.client")


class TrelloClient:
    """Thin client over the Trello REST API

    Each method performs exactly one HTTP round-trip: no retries, no rate
    limiting, no pagination. The response body is buffered, decoded as UTF-8
    and parsed as JSON, and the parsed value is returned untouched inside a
    ``TrelloResult``. Network errors, non-2xx statuses and undecodable bodies
    become failed results (and a WARNING log line) instead of exceptions.
    """

    def __init__(
        self,
        api_key: str,
        token: str,
        *,
        base_url: str = API_BASE_URL,
        timeout: float | None = None,
    ):
        self.credentials = Credentials(api_key=api_key, token=token)
        self.base_url = base_url
        # None means wait for the server indefinitely
        self.timeout = timeout

    @property
    def api_key(self) -> str:
        return self.credentials.api_key

    @property
    def token(self) -> str:
        return self.credentials.token

    @staticmethod
    def parse_board_url(url: str) -> str:
        """Extract board ID from Trello URL

        Supports formats:
        - https://trello.com/b/Bm0nnz1R/board-name
        - https://trello.com/b/Bm0nnz1R
        - trello.com/b/Bm0nnz1R/board-name

        Raises:
            ValueError: If URL format is invalid or board ID cannot be extracted
        """
        if not url:
            raise ValueError("URL cannot be empty")

        match = re.search(r"trello\.com/b/([a-zA-Z0-9]+)", url)
        if match:
            return match.group(1)

        raise ValueError(f"Could not extract board ID from URL: {url}")

    @classmethod
    def _board_id(cls, board_id_or_url: str) -> str:
        if "trello.com/" in board_id_or_url:
            return cls.parse_board_url(board_id_or_url)
        return board_id_or_url

    def _redact(self, text: str) -> str:
        """Replace the key and token wherever they appear in text"""
        for secret in (self.credentials.token, self.credentials.api_key):
            if secret:
                text = text.replace(secret, "***")
        return text

    def _send(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        files: dict[str, Any] | None = None,
        label: str | None = None,
    ) -> TrelloResult:
        """Send one authenticated request and turn the outcome into a TrelloResult

        ``label`` names the endpoint in log lines and error messages. It
        defaults to ``path``; endpoints whose path embeds a secret pass a
        redacted one. The full URL is never logged since it carries the token.
        """
        label = label or path
        logger.debug("%s %s", method, label)

        try:
            prepared = build_request(
                self.credentials,
                method,
                path,
                params=params,
                json_body=json_body,
                files=files,
                base_url=self.base_url,
            )
            with requests.Session() as session:
                response = session.send(prepared, timeout=self.timeout)
        except requests.RequestException as e:
            # requests puts the full URL, query string included, into some messages
            detail = self._redact(str(e).replace(path, label))
            return self._failure(
                method,
                label,
                TrelloTransportError(f"Network error for {method} {label}: {detail}"),
            )

        body = response.content or b""
        status_code = response.status_code
        logger.debug("%s %s -> HTTP %s (%d bytes)", method, label, status_code, len(body))

        if not 200 <= status_code < 300:
            response_text = body.decode("utf-8", errors="replace")
            error = self._status_error(label, status_code, self._redact(response_text))
            error.response_text = response_text
            return self._failure(method, label, error)

        if not body:
            return self._failure(
                method,
                label,
                TrelloDecodeError(
                    f"Empty response body for {method} {label}", status_code=status_code
                ),
            )

        try:
            payload = json.loads(body.decode("utf-8"))
        except ValueError as e:
            # Covers both UnicodeDecodeError and json.JSONDecodeError
            return self._failure(
                method,
                label,
                TrelloDecodeError(
                    f"Invalid JSON in response for {method} {label}: {e}",
                    status_code=status_code,
                    response_text=body.decode("utf-8", errors="replace"),
                ),
            )

        return TrelloResult.success(payload)

    @staticmethod
    def _status_error(path: str, status_code: int, response_text: str) -> TrelloStatusError:
        if status_code in (401, 403):
            return TrelloAuthenticationError(
                f"Access denied to resource: {path} (HTTP {status_code})\n"
                "Check your API key and token, and that the token can access this resource.",
                status_code=status_code,
                response_text=response_text,
            )
        if status_code == 404:
            return TrelloNotFoundError(
                f"Resource not found: {path}",
                status_code=status_code,
                response_text=response_text,
            )
        if status_code == 429:
            return TrelloRateLimitError(
                "Rate limit exceeded.\n"
                "Trello's API rate limit: 100 requests per 10 seconds per token.",
                status_code=status_code,
                response_text=response_text,
            )
        if status_code >= 500:
            return TrelloServerError(
                f"Trello server error (HTTP {status_code}) for {path}",
                status_code=status_code,
                response_text=response_text,
            )
        return TrelloStatusError(
            f"HTTP {status_code} error for {path}: {response_text[:200]}",
            status_code=status_code,
            response_text=response_text,
        )

    @staticmethod
    def _failure(method: str, path: str, error: TrelloAPIError) -> TrelloResult:
        logger.warning("Trello %s %s failed: %s", method, path, error)
        return TrelloResult.failure(error)

    def fetch_board(self, board_id: str) -> TrelloResult:
        """Get a board together with its open lists and open cards

        Args:
            board_id: Board ID, or a board URL such as
                https://trello.com/b/Bm0nnz1R/board-name

        Raises:
            ValueError: If a board URL is given that has no board ID in it
        """
        board_id = self._board_id(board_id)
        return self._send("GET", f"boards/{board_id}", params={"lists": "open", "cards": "open"})

    def create_card(
        self,
        list_id: str,
        name: str,
        description: str,
        position: float | str | None,
        due_date: date | str | None,
    ) -> TrelloResult:
        """Create a card in a list

        Args:
            list_id: ID of the list the card goes into
            name: Card title
            description: Card description (markdown)
            position: Numeric position, or "top" / "bottom"
            due_date: Due date as a datetime/date, an ISO 8601 string, or None

        Returns:
            Result holding the created card object
        """
        if isinstance(due_date, date):
            due_date = due_date.isoformat()

        body = {
            "idList": list_id,
            "name": name,
            "desc": description,
            "pos": position,
            "due": due_date,
        }
        return self._send("POST", "cards", json_body=body)

    def add_attachment(self, card_id: str, attachment: Any) -> TrelloResult:
        """Upload a file attachment to a card

        Args:
            card_id: Card to attach to
            attachment: Raw bytes, a binary file object, or a
                ``(filename, content[, content_type])`` tuple

        Returns:
            Result holding the attachment metadata object
        """
        return self._send("POST", f"cards/{card_id}/attachments", files={"file": attachment})

    def set_card_archived(self, card_id: str, archived: bool) -> TrelloResult:
        """Archive (closed=True) or unarchive (closed=False) a card"""
        return self._send("PUT", f"cards/{card_id}", json_body={"closed": bool(archived)})

    def fetch_token_owner(self, token: str) -> TrelloResult:
        """Get the member a token belongs to"""
        return self._send("GET", f"tokens/{token}/member", label="tokens/***/member")

    def fetch_user_boards(self, user_id: str) -> TrelloResult:
        """Get the boards of a member ("me" for the token owner)"""
        return self._send("GET", f"members/{user_id}/boards")

    def fetch_board_lists(self, board_id: str) -> TrelloResult:
        """Get the lists of a board (accepts a board ID or board URL)"""
        board_id = self._board_id(board_id)
        return self._send("GET", f"boards/{board_id}/lists")

    def fetch_card(self, card_id: str) -> TrelloResult:
        return self._send("GET", f"cards/{card_id}")

    def delete_card(self, card_id: str) -> TrelloResult:
        """Permanently delete a card"""
        return self._send("DELETE", f"cards/{card_id}", json_body={})
