"""Unit tests for the GitHub client payload handling."""

from unittest.mock import AsyncMock, patch

import pytest

from portfolio_bot.models import CommitRecord, Repository
from portfolio_bot.services.errors import GitHubFetchError
from portfolio_bot.services.github import GitHubService


def _repo_payload(name: str, language: str | None = "Python") -> dict:
    return {
        "name": name,
        "node_id": f"R_{name}",
        "html_url": f"https://github.com/pureheroky/{name}",
        "language": language,
        "created_at": "2024-01-01T00:00:00Z",
        "default_branch": "main",
        "stargazers_count": 3,
    }


def _commit_payload(index: int) -> dict:
    return {
        "sha": f"sha{index}",
        "commit": {
            "message": f"commit {index}",
            "author": {"name": f"author{index}", "date": "2024-01-01T00:00:00Z"},
            "committer": {"name": "GitHub", "date": f"2024-02-0{index + 1}T00:00:00Z"},
        },
    }


@pytest.fixture
def service():
    return GitHubService(username="pureheroky", token="secret", commit_limit=5)


class TestFetchRepositories:
    """Test decoding of the repository listing."""

    @pytest.mark.asyncio
    async def test_maps_payload_fields(self, service):
        payload = [_repo_payload("alpha"), _repo_payload("beta", language=None)]

        with patch.object(service, "_get_json", AsyncMock(return_value=payload)) as mock_get:
            repositories = await service.fetch_repositories()

        mock_get.assert_awaited_once_with("https://api.github.com/users/pureheroky/repos")
        assert repositories[0] == Repository(
            name="alpha",
            id="R_alpha",
            url="https://github.com/pureheroky/alpha",
            language="Python",
            created_at="2024-01-01T00:00:00Z",
            default_branch="main",
        )
        assert repositories[1].language == ""

    @pytest.mark.asyncio
    async def test_skips_malformed_records(self, service):
        payload = [_repo_payload("alpha"), {"node_id": "no name"}, "garbage", _repo_payload("beta")]

        with patch.object(service, "_get_json", AsyncMock(return_value=payload)):
            repositories = await service.fetch_repositories()

        assert [repo.name for repo in repositories] == ["alpha", "beta"]

    @pytest.mark.asyncio
    async def test_non_list_payload(self, service):
        with patch.object(service, "_get_json", AsyncMock(return_value={"message": "Not Found"})):
            with pytest.raises(GitHubFetchError):
                await service.fetch_repositories()

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, service):
        with patch.object(service, "_get_json", AsyncMock(side_effect=GitHubFetchError("503"))):
            with pytest.raises(GitHubFetchError):
                await service.fetch_repositories()


class TestFetchCommits:
    """Test decoding of the commit listing."""

    @pytest.mark.asyncio
    async def test_keeps_first_entries(self, service):
        payload = [_commit_payload(i) for i in range(8)]

        with patch.object(service, "_get_json", AsyncMock(return_value=payload)) as mock_get:
            commits = await service.fetch_commits("alpha")

        mock_get.assert_awaited_once_with("https://api.github.com/repos/pureheroky/alpha/commits")
        assert len(commits) == 5
        assert commits[0] == CommitRecord(
            author="author0", message="commit 0", date="2024-02-01T00:00:00Z"
        )

    @pytest.mark.asyncio
    async def test_skips_malformed_commits(self, service):
        payload = [_commit_payload(0), {"sha": "x", "commit": {"message": "no people"}}]

        with patch.object(service, "_get_json", AsyncMock(return_value=payload)):
            commits = await service.fetch_commits("alpha")

        assert [commit.message for commit in commits] == ["commit 0"]

    @pytest.mark.asyncio
    async def test_non_list_payload(self, service):
        with patch.object(service, "_get_json", AsyncMock(return_value=None)):
            with pytest.raises(GitHubFetchError):
                await service.fetch_commits("alpha")


class TestHeaders:
    """Test request headers."""

    def test_bearer_token(self, service):
        assert service._headers()["Authorization"] == "Bearer secret"

    def test_anonymous(self):
        assert "Authorization" not in GitHubService(username="someone")._headers()
