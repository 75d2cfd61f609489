"""Load Trello credentials from the environment (optionally from a .env file)."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from trello_manager.credentials import Credentials
from trello_manager.exceptions import TrelloConfigurationError

logger = logging.getLogger("trello_manager.config")


def load_env_file(env_file: str | Path) -> int:
    """Copy KEY=VALUE lines from a .env file into os.environ

    Variables already present in the environment are left alone. Blank lines
    and lines starting with ``#`` are skipped.

    Returns:
        Number of variables that were set
    """
    path = Path(env_file)
    if not path.exists():
        return 0

    loaded = 0
    with open(path) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, value = line.split("=", 1)
                key = key.strip()
                if key not in os.environ:  # Don't override existing env vars
                    os.environ[key] = value.strip()
                    loaded += 1

    logger.debug("Loaded %d variable(s) from %s", loaded, path)
    return loaded


def load_credentials(env_file: str | Path | None = None) -> Credentials:
    """Read TRELLO_API_KEY and TRELLO_TOKEN

    Args:
        env_file: Path of a .env file to load first. Defaults to the
            TRELLO_ENV_FILE environment variable, then ".env".

    Returns:
        Credentials ready to hand to ``TrelloClient``

    Raises:
        TrelloConfigurationError: If either variable is missing or empty

    Example:
        >>> creds = load_credentials()
        >>> client = TrelloClient(creds.api_key, creds.token)
    """
    load_env_file(env_file or os.getenv("TRELLO_ENV_FILE", ".env"))

    api_key = os.getenv("TRELLO_API_KEY")
    token = os.getenv("TRELLO_TOKEN")

    missing = [
        name for name, value in (("TRELLO_API_KEY", api_key), ("TRELLO_TOKEN", token)) if not value
    ]
    if missing:
        raise TrelloConfigurationError(
            f"Missing required Trello credentials: {', '.join(missing)}\n"
            "Set them in your environment or create a .env file:\n"
            '  export TRELLO_API_KEY="..."\n'
            '  export TRELLO_TOKEN="..."',
            missing=missing,
        )

    return Credentials(api_key=api_key or "", token=token or "")
