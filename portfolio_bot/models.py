"""Data models for the portfolio bot application.

Defines Pydantic models for the portfolio data shown to users (repositories
and their recent commits) and for the raw payloads returned by the GitHub and
skills APIs. Raw payload models are validated record by record so that a
single malformed entry can be skipped without discarding the whole response.
"""

from pydantic import BaseModel, ConfigDict


class Repository(BaseModel):
    """Repository presented on the Projects screen.

    Attributes:
        name: Repository name, also its identity within the cache.
        id: GitHub node id.
        url: Browser URL of the repository.
        language: Primary language, empty if GitHub reports none.
        created_at: Creation timestamp as returned by GitHub.
        default_branch: Name of the default branch.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    id: str = ""
    url: str = ""
    language: str = ""
    created_at: str = ""
    default_branch: str = ""


class CommitRecord(BaseModel):
    """Single commit shown on the Git screen.

    Attributes:
        author: Commit author name.
        message: Full commit message.
        date: Committer date as returned by GitHub.
    """

    model_config = ConfigDict(frozen=True)

    author: str = ""
    message: str = ""
    date: str = ""


class SkillsResponse(BaseModel):
    """Envelope returned by the skills endpoint.

    Attributes:
        data: Bracketed, quote-delimited list of skill tokens.
        status: Status code reported by the endpoint.
    """

    data: str
    status: int = 0


class GitHubRepoPayload(BaseModel):
    """Subset of the GitHub repository object used by the bot."""

    name: str
    node_id: str = ""
    html_url: str = ""
    language: str | None = None
    created_at: str = ""
    default_branch: str = ""

    def to_repository(self) -> Repository:
        """Convert raw payload to the cached repository record."""
        return Repository(
            name=self.name,
            id=self.node_id,
            url=self.html_url,
            language=self.language or "",
            created_at=self.created_at,
            default_branch=self.default_branch,
        )


class GitHubCommitPerson(BaseModel):
    """Author or committer block of a GitHub commit."""

    name: str = ""
    date: str = ""


class GitHubCommitDetail(BaseModel):
    """Inner ``commit`` object of the GitHub commits listing."""

    message: str = ""
    author: GitHubCommitPerson
    committer: GitHubCommitPerson


class GitHubCommitPayload(BaseModel):
    """Entry of the GitHub commits listing."""

    sha: str = ""
    commit: GitHubCommitDetail

    def to_record(self) -> CommitRecord:
        """Convert raw payload to the cached commit record."""
        return CommitRecord(
            author=self.commit.author.name,
            message=self.commit.message,
            date=self.commit.committer.date,
        )
