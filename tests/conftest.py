"""Global test configuration and fixtures.

Provides shared fixtures for all test levels including environment setup,
sample portfolio data, fake remote services and mocked Telegram objects.
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest

from portfolio_bot.bot.menu import MenuEngine
from portfolio_bot.bot.pagination import PaginationState
from portfolio_bot.bot.request_relay import AwaitingRequests, RequestRelay
from portfolio_bot.bot.response_formatter import ResponseFormatter
from portfolio_bot.models import CommitRecord, Repository
from portfolio_bot.services.cache_store import PortfolioCache

# Test constants
TEST_BOT_TOKEN = os.getenv("TEST_BOT_TOKEN", "test_bot_token_placeholder")
TEST_ADMIN_CHAT_ID = int(os.getenv("TEST_ADMIN_CHAT_ID", "12345"))
TEST_CHAT_ID = 777


@pytest.fixture(autouse=True)
def test_environment(monkeypatch):
    """Setup test environment variables for all tests."""
    monkeypatch.setenv("BOT_TOKEN", TEST_BOT_TOKEN)
    monkeypatch.setenv("ADMIN_CHAT_ID", str(TEST_ADMIN_CHAT_ID))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    yield


@pytest.fixture
def sample_repositories():
    """Repositories in fetch order."""
    return [
        Repository(
            name="zeta",
            id="R_zeta",
            url="https://github.com/pureheroky/zeta",
            language="Go",
            created_at="2024-01-10T10:00:00Z",
            default_branch="main",
        ),
        Repository(
            name="alpha",
            id="R_alpha",
            url="https://github.com/pureheroky/alpha",
            language="Python",
            created_at="2023-05-01T08:30:00Z",
            default_branch="master",
        ),
        Repository(
            name="mid",
            id="R_mid",
            url="https://github.com/pureheroky/mid",
            language="",
            created_at="2024-06-15T12:00:00Z",
            default_branch="dev",
        ),
    ]


@pytest.fixture
def sample_commits():
    """One commit per sample repository."""
    return {
        "zeta": [CommitRecord(author="Zed", message="zeta commit", date="2024-07-01T00:00:00Z")],
        "alpha": [CommitRecord(author="Ann", message="alpha commit", date="2024-07-02T00:00:00Z")],
        "mid": [CommitRecord(author="Max", message="mid commit", date="2024-07-03T00:00:00Z")],
    }


@pytest.fixture
def fake_github_service(sample_repositories, sample_commits):
    """GitHub service double returning the sample data."""
    service = MagicMock()
    service.fetch_repositories = AsyncMock(return_value=sample_repositories)

    async def fetch_commits(name: str) -> list[CommitRecord]:
        return sample_commits[name]

    service.fetch_commits = AsyncMock(side_effect=fetch_commits)
    return service


@pytest.fixture
def fake_skills_service():
    """Skills service double returning a fixed skill list."""
    service = MagicMock()
    service.fetch_skills = AsyncMock(return_value=["Python", "Go", "Docker"])
    return service


@pytest.fixture
def formatter():
    return ResponseFormatter(
        display_name="pureheroky",
        website_url="https://pureheroky.com",
        github_profile_url="https://github.com/pureheroky",
    )


@pytest.fixture
def awaiting_requests():
    return AwaitingRequests()


@pytest.fixture
def menu_engine(fake_github_service, fake_skills_service, formatter, awaiting_requests):
    """Menu engine over fresh shared state and fake services."""
    return MenuEngine(
        cache=PortfolioCache(commit_limit=5),
        pagination=PaginationState(),
        awaiting=awaiting_requests,
        github_service=fake_github_service,
        skills_service=fake_skills_service,
        formatter=formatter,
    )


@pytest.fixture
def request_relay(awaiting_requests):
    return RequestRelay(
        admin_chat_id=TEST_ADMIN_CHAT_ID,
        awaiting=awaiting_requests,
        cleanup_delay_seconds=120,
    )


@pytest.fixture
def mock_context():
    """Mock bot context with an async bot and a job queue."""
    context = MagicMock()
    context.bot = AsyncMock()
    context.bot.send_message = AsyncMock(side_effect=lambda **kwargs: MagicMock(message_id=900))
    context.bot.delete_message = AsyncMock(return_value=True)
    context.job_queue = MagicMock()
    context.args = []
    return context


def make_message_update(
    chat_id: int = TEST_CHAT_ID,
    user_id: int = TEST_CHAT_ID,
    username: str | None = "alice",
    text: str | None = "hello",
    message_id: int = 42,
):
    """Build a mocked update carrying a plain message."""
    update = MagicMock()
    update.effective_chat.id = chat_id
    update.effective_user.id = user_id
    update.effective_user.username = username
    update.effective_message.text = text
    update.effective_message.message_id = message_id
    update.callback_query = None
    return update


def make_callback_update(data: str, chat_id: int = TEST_CHAT_ID, user_id: int = TEST_CHAT_ID):
    """Build a mocked update carrying a callback query."""
    update = MagicMock()
    update.effective_chat.id = chat_id
    update.effective_user.id = user_id
    update.callback_query.data = data
    update.callback_query.from_user.id = user_id
    update.callback_query.answer = AsyncMock()
    update.callback_query.edit_message_text = AsyncMock()
    return update


@pytest.fixture
def message_update():
    """Factory fixture for message updates."""
    return make_message_update


@pytest.fixture
def callback_update():
    """Factory fixture for callback query updates."""
    return make_callback_update
