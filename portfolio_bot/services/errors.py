"""Errors raised by the remote data fetchers."""


class RemoteFetchError(Exception):
    """A remote resource could not be fetched or decoded."""


class GitHubFetchError(RemoteFetchError):
    """GitHub API request failed or returned an unexpected payload."""


class SkillsFetchError(RemoteFetchError):
    """Skills endpoint request failed or returned an unexpected payload."""
