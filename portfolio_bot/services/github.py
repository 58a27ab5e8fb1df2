"""GitHub API service for the portfolio screens.

Fetches the owner's public repositories and the most recent commits of each
repository. Responses are decoded into typed records one entry at a time:
entries with an unexpected shape are logged and skipped, while transport
errors and malformed envelopes raise ``GitHubFetchError``.
"""

import asyncio
import logging
from typing import Any

import aiohttp
from pydantic import ValidationError

from ..models import CommitRecord, GitHubCommitPayload, GitHubRepoPayload, Repository
from .errors import GitHubFetchError

logger = logging.getLogger(__name__)


class GitHubService:
    """GitHub REST client for repositories and commits."""

    def __init__(
        self,
        username: str,
        token: str | None = None,
        api_url: str = "https://api.github.com",
        timeout: int = 10,
        commit_limit: int = 5,
    ):
        """Initialize GitHub service.

        Args:
            username: Account whose repositories are listed.
            token: Optional API token sent with every request.
            api_url: REST API base URL.
            timeout: Total timeout of a single request in seconds.
            commit_limit: Number of most recent commits kept per repository.
        """
        self.username = username
        self.token = token
        self.base_url = api_url.rstrip("/")
        self.timeout = timeout
        self.commit_limit = commit_limit
        self._session: aiohttp.ClientSession | None = None

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "PortfolioBot/1.0",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _get_session(self) -> aiohttp.ClientSession:
        """Return the shared HTTP session, creating it on first use."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers=self._headers(),
            )
        return self._session

    async def close(self) -> None:
        """Close the shared HTTP session."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
            logger.info("GitHub HTTP session closed")
        self._session = None

    async def _get_json(self, url: str) -> Any:
        session = self._get_session()
        try:
            async with session.get(url) as response:
                if response.status != 200:
                    error_text = await response.text()
                    raise GitHubFetchError(
                        f"GET {url} returned {response.status}: {error_text[:200]}"
                    )
                return await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise GitHubFetchError(f"GET {url} failed: {e}") from e
        except ValueError as e:
            raise GitHubFetchError(f"GET {url} returned invalid JSON: {e}") from e

    async def fetch_repositories(self) -> list[Repository]:
        """Fetch the owner's repositories in API order.

        Returns:
            Repositories whose records could be decoded.

        Raises:
            GitHubFetchError: If the request fails or the payload is not a list.
        """
        url = f"{self.base_url}/users/{self.username}/repos"
        payload = await self._get_json(url)
        if not isinstance(payload, list):
            raise GitHubFetchError(f"Unexpected repositories payload: {type(payload).__name__}")

        repositories: list[Repository] = []
        for entry in payload:
            try:
                repositories.append(GitHubRepoPayload.model_validate(entry).to_repository())
            except ValidationError as e:
                logger.warning(f"Skipping malformed repository record: {e.error_count()} errors")

        logger.info(f"Fetched {len(repositories)} repositories for {self.username}")
        return repositories

    async def fetch_commits(self, repo_name: str) -> list[CommitRecord]:
        """Fetch the most recent commits of a repository.

        Only the first ``commit_limit`` entries of the listing are considered;
        malformed entries among them are skipped.

        Args:
            repo_name: Repository name.

        Returns:
            Up to ``commit_limit`` commit records, newest first.

        Raises:
            GitHubFetchError: If the request fails or the payload is not a list.
        """
        url = f"{self.base_url}/repos/{self.username}/{repo_name}/commits"
        payload = await self._get_json(url)
        if not isinstance(payload, list):
            raise GitHubFetchError(f"Unexpected commits payload for {repo_name}")

        commits: list[CommitRecord] = []
        for entry in payload[: self.commit_limit]:
            try:
                commits.append(GitHubCommitPayload.model_validate(entry).to_record())
            except ValidationError as e:
                logger.warning(
                    f"Skipping malformed commit record in {repo_name}: {e.error_count()} errors"
                )

        return commits
