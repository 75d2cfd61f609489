"""
Shared pytest fixtures for trello_manager tests
"""
import pytest
import json
from pathlib import Path

from trello_manager import TrelloClient

API_KEY = "test_key"
TOKEN = "test_token"


@pytest.fixture
def fixtures_dir():
    """Return path to test fixtures directory"""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def board_fixture(fixtures_dir):
    """Load board (with open lists and cards) test fixture"""
    with open(fixtures_dir / "board.json") as f:
        return json.load(f)


@pytest.fixture
def card_fixture(fixtures_dir):
    """Load single card test fixture"""
    with open(fixtures_dir / "card.json") as f:
        return json.load(f)


@pytest.fixture
def client():
    """TrelloClient with fake credentials"""
    return TrelloClient(api_key=API_KEY, token=TOKEN)
