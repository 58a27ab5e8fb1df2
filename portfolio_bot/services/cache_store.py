"""In-memory cache of portfolio data.

Holds the repository list and the per-repository commit map for the whole
process lifetime. Both are populated with fetch-if-empty semantics: a
non-empty value is served as is and never refreshed, an empty value triggers
a fetch on the next call. There is no TTL and no invalidation.

Population is computed into local structures first and assigned under the
exclusive lock in one step, so readers never observe a half-filled cache.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence

from ..core.locks import ReadWriteLock
from ..models import CommitRecord, Repository

logger = logging.getLogger(__name__)

RepositoriesFetcher = Callable[[], Awaitable[list[Repository]]]
CommitsFetcher = Callable[[str], Awaitable[list[CommitRecord]]]


class PortfolioCache:
    """Process-wide store for repositories and their recent commits."""

    def __init__(self, commit_limit: int = 5, max_concurrent_fetches: int | None = None):
        """Initialize an empty cache.

        Args:
            commit_limit: Number of commits retained per repository.
            max_concurrent_fetches: Bound on parallel commit fetches, None for
                one task per repository.
        """
        self.commit_limit = commit_limit
        self.max_concurrent_fetches = max_concurrent_fetches
        self._lock = ReadWriteLock()
        # Serializes population so concurrent misses trigger a single fetch.
        self._populate_lock = asyncio.Lock()
        self._repositories: list[Repository] = []
        self._commits: dict[str, list[CommitRecord]] = {}

    async def ensure_repositories(self, fetch: RepositoriesFetcher) -> list[Repository]:
        """Return cached repositories, fetching them if the cache is empty.

        Args:
            fetch: Coroutine function returning the repository list.

        Returns:
            Repositories in fetch order.

        Raises:
            RemoteFetchError: Propagated from ``fetch``; the cache stays empty.
        """
        cached = await self.repositories()
        if cached:
            return cached

        async with self._populate_lock:
            cached = await self.repositories()
            if cached:
                return cached

            fetched = list(await fetch())
            async with self._lock.write():
                self._repositories = fetched

            logger.info(f"Repository cache populated with {len(fetched)} entries")
            return list(fetched)

    async def ensure_commits(
        self, repo_names: Sequence[str], fetch_one: CommitsFetcher
    ) -> dict[str, list[CommitRecord]]:
        """Return cached commits, fetching them concurrently if the cache is empty.

        Every repository is fetched in its own task and the call returns only
        after all of them finished. A repository whose fetch fails contributes
        no entry; the failure is logged and the remaining results are kept.

        Args:
            repo_names: Repositories to fetch commits for.
            fetch_one: Coroutine function returning commits of one repository.

        Returns:
            Mapping of repository name to at most ``commit_limit`` commits.
        """
        cached = await self.commits()
        if cached:
            return cached

        async with self._populate_lock:
            cached = await self.commits()
            if cached:
                return cached

            names = list(dict.fromkeys(repo_names))
            semaphore = asyncio.Semaphore(self.max_concurrent_fetches or max(len(names), 1))

            async def fetch_single(name: str) -> list[CommitRecord]:
                async with semaphore:
                    return await fetch_one(name)

            results = await asyncio.gather(
                *[fetch_single(name) for name in names], return_exceptions=True
            )

            fetched: dict[str, list[CommitRecord]] = {}
            for name, result in zip(names, results):
                if isinstance(result, BaseException):
                    if not isinstance(result, Exception):
                        raise result
                    logger.warning(f"Failed to fetch commits for {name}: {result}")
                    continue
                fetched[name] = list(result[: self.commit_limit])

            async with self._lock.write():
                self._commits = fetched

            logger.info(
                f"Commit cache populated for {len(fetched)}/{len(names)} repositories"
            )
            return {name: list(commits) for name, commits in fetched.items()}

    async def repositories(self) -> list[Repository]:
        """Return a copy of the cached repositories."""
        async with self._lock.read():
            return list(self._repositories)

    async def commits(self) -> dict[str, list[CommitRecord]]:
        """Return a copy of the cached commit map."""
        async with self._lock.read():
            return {name: list(commits) for name, commits in self._commits.items()}

    async def commits_for(self, name: str) -> list[CommitRecord]:
        """Return cached commits of one repository, empty if unknown."""
        async with self._lock.read():
            return list(self._commits.get(name, []))
