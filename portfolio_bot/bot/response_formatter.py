"""Response formatting for menu screens.

Turns cached portfolio data into the HTML bodies of the menu screens. All
values coming from remote sources are HTML-escaped before substitution.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from html import escape

from ..models import CommitRecord, Repository
from .messages import (
    GIT_AUTHOR_LINE,
    GIT_DATE_LINE,
    GIT_FOOTER,
    GIT_MESSAGE_LINE,
    GIT_PAGE_EMPTY,
    GIT_REPO_HEADER,
    GIT_REPO_SEPARATOR,
    PROJECT_CARD,
    SKILL_LINE,
    SKILLS_FOOTER,
    SKILLS_HEADER,
    WELCOME_MESSAGE,
)

logger = logging.getLogger(__name__)


class ResponseFormatter:
    """Formats screen bodies for the portfolio menus."""

    def __init__(
        self,
        display_name: str,
        website_url: str,
        github_profile_url: str,
    ) -> None:
        """Initialize response formatter.

        Args:
            display_name: Owner name shown in the welcome message.
            website_url: Owner website linked from welcome and skills screens.
            github_profile_url: GitHub profile linked from the Git screen.
        """
        self.display_name = display_name
        self.website_url = website_url
        self.github_profile_url = github_profile_url

    def format_welcome(self) -> str:
        return WELCOME_MESSAGE.format(
            display_name=escape(self.display_name),
            website_url=escape(self.website_url),
        )

    def format_skills(self, skills: Iterable[str]) -> str:
        """Format the numbered skill list.

        Args:
            skills: Skill names in display order.

        Returns:
            Skills screen body.
        """
        lines = [
            SKILL_LINE.format(position=position, skill=escape(skill))
            for position, skill in enumerate(skills, start=1)
        ]
        footer = SKILLS_FOOTER.format(website_url=escape(self.website_url))
        return SKILLS_HEADER + "".join(lines) + footer

    def format_project(self, repository: Repository) -> str:
        """Format one repository card for the Projects screen."""
        return PROJECT_CARD.format(
            name=escape(repository.name),
            id=escape(repository.id),
            url=escape(repository.url),
            language=escape(repository.language),
            created_at=escape(repository.created_at),
            default_branch=escape(repository.default_branch),
        )

    def format_git_page(
        self,
        commits: Mapping[str, Sequence[CommitRecord]],
        page_index: int,
        page_size: int = 1,
    ) -> str:
        """Format one page of commit groups.

        Groups are ordered by repository name, independent of fetch order.

        Args:
            commits: Commit records grouped by repository name.
            page_index: Zero-based page number.
            page_size: Repository groups per page.

        Returns:
            Git screen body for the page.
        """
        names = sorted(commits)
        start = page_index * page_size
        if start >= len(names):
            return GIT_PAGE_EMPTY

        message = ""
        for name in names[start : start + page_size]:
            message += GIT_REPO_HEADER.format(name=escape(name))
            for commit in commits[name]:
                message += GIT_AUTHOR_LINE.format(author=escape(commit.author))
                message += GIT_DATE_LINE.format(date=escape(commit.date))
                message += GIT_MESSAGE_LINE.format(message=escape(commit.message))
            message += GIT_REPO_SEPARATOR
        return message

    def format_git_footer(self) -> str:
        return GIT_FOOTER.format(github_profile_url=escape(self.github_profile_url))
