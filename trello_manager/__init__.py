"""Thin Trello REST API client: boards, lists, cards, attachments, members."""

from __future__ import annotations

import logging

from trello_manager.config import load_credentials, load_env_file
from trello_manager.credentials import Credentials
from trello_manager.exceptions import (
    FailureKind,
    TrelloAPIError,
    TrelloAuthenticationError,
    TrelloConfigurationError,
    TrelloDecodeError,
    TrelloNotFoundError,
    TrelloRateLimitError,
    TrelloServerError,
    TrelloStatusError,
    TrelloTransportError,
)
from trello_manager.logging_config import LOGGER_NAME, setup_logging
from trello_manager.request_builder import API_BASE_URL, build_request
from trello_manager.result import TrelloResult
from trello_manager.trello_client import TrelloClient

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core classes
    "TrelloClient",
    "TrelloResult",
    "Credentials",
    "build_request",
    "API_BASE_URL",
    "load_credentials",
    "load_env_file",
    "setup_logging",
    # Exceptions
    "FailureKind",
    "TrelloAPIError",
    "TrelloTransportError",
    "TrelloStatusError",
    "TrelloAuthenticationError",
    "TrelloNotFoundError",
    "TrelloRateLimitError",
    "TrelloServerError",
    "TrelloDecodeError",
    "TrelloConfigurationError",
]
