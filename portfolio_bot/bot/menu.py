"""Menu engine for the portfolio screens.

Maps a callback event and the chat's state onto the next screen. The engine
reads the shared cache and pagination cursors, fetches remote data on a cache
miss, and returns the body text together with a keyboard layout descriptor.
It never talks to the messaging transport itself.

Screens: MainMenu (initial, reachable through ``back``), RequestPrompt,
SkillsView, ProjectsView and GitView. Projects are shown in fetch order, one
per page; commit groups are shown sorted by repository name, ``page_size``
groups per page. Moving past either end is a no-op and produces no render.
"""

import logging
import math

from ..models import CommitRecord, Repository
from ..services.cache_store import PortfolioCache
from ..services.errors import RemoteFetchError
from ..services.github import GitHubService
from ..services.skills import SkillsService
from .messages import (
    GIT_LOAD_FAILED,
    LOADING_GIT,
    LOADING_PROJECTS,
    LOADING_SKILLS,
    NO_COMMITS_FOUND,
    NO_PROJECTS_FOUND,
    PROJECTS_LOAD_FAILED,
    REQUEST_PROMPT_MESSAGE,
    SKILLS_LOAD_FAILED,
)
from .pagination import PaginationState
from .request_relay import AwaitingRequests
from .response_formatter import ResponseFormatter
from .types import Direction, KeyboardLayout, MenuEvent, RenderResult, ScreenName

logger = logging.getLogger(__name__)


def _render(screen: ScreenName, text: str, keyboard: KeyboardLayout) -> RenderResult:
    return {"screen": screen, "text": text, "keyboard": keyboard}


class MenuEngine:
    """Computes menu screens from navigation events."""

    def __init__(
        self,
        cache: PortfolioCache,
        pagination: PaginationState,
        awaiting: AwaitingRequests,
        github_service: GitHubService,
        skills_service: SkillsService,
        formatter: ResponseFormatter,
        page_size: int = 1,
    ) -> None:
        self.cache = cache
        self.pagination = pagination
        self.awaiting = awaiting
        self.github_service = github_service
        self.skills_service = skills_service
        self.formatter = formatter
        self.page_size = page_size

        self._handlers = {
            MenuEvent.REQUEST: self._show_request_prompt,
            MenuEvent.SKILLS: self._show_skills,
            MenuEvent.PROJECTS: self._show_projects,
            MenuEvent.GIT: self._show_git,
            MenuEvent.NEXT_PROJECT: self._page_projects,
            MenuEvent.PREVIOUS_PROJECT: self._page_projects,
            MenuEvent.NEXT_GIT: self._page_git,
            MenuEvent.PREVIOUS_GIT: self._page_git,
            MenuEvent.BACK: self._show_main_menu,
        }

    def main_menu(self) -> RenderResult:
        """Initial screen sent in reply to /start."""
        return _render(ScreenName.MAIN_MENU, self.formatter.format_welcome(), KeyboardLayout.MAIN_MENU)

    def loading_screen(self, event: str) -> RenderResult | None:
        """Placeholder shown while a section that needs remote data is loading."""
        if event == MenuEvent.SKILLS:
            return _render(ScreenName.SKILLS_VIEW, LOADING_SKILLS, KeyboardLayout.BACK_ONLY)
        if event == MenuEvent.PROJECTS:
            return _render(ScreenName.PROJECTS_VIEW, LOADING_PROJECTS, KeyboardLayout.PROJECT_PAGER)
        if event == MenuEvent.GIT:
            return _render(ScreenName.GIT_VIEW, LOADING_GIT, KeyboardLayout.GIT_PAGER)
        return None

    async def handle(self, event: str, chat_id: int) -> RenderResult | None:
        """Compute the screen for a navigation event.

        Args:
            event: Callback data of the pressed button.
            chat_id: Chat the event came from.

        Returns:
            Screen to render, or None when nothing changes (unknown event or
            pagination at a boundary).
        """
        try:
            menu_event = MenuEvent(event)
        except ValueError:
            logger.info(f"Unknown callback data: {event}")
            return None

        return await self._handlers[menu_event](menu_event, chat_id)

    async def warm_up(self) -> None:
        """Populate the repository and commit caches ahead of the first request."""
        try:
            repositories = await self._load_repositories()
        except RemoteFetchError as e:
            logger.error(f"Failed to preload repositories: {e}")
            return

        commits = await self._load_commits(repositories)
        logger.info(
            f"Preloaded {len(repositories)} repositories and commits for {len(commits)} of them"
        )

    async def _load_repositories(self) -> list[Repository]:
        return await self.cache.ensure_repositories(self.github_service.fetch_repositories)

    async def _load_commits(self, repositories: list[Repository]) -> dict[str, list[CommitRecord]]:
        return await self.cache.ensure_commits(
            [repository.name for repository in repositories],
            self.github_service.fetch_commits,
        )

    def _failed(self, screen: ScreenName, text: str) -> RenderResult:
        return _render(screen, text, KeyboardLayout.BACK_ONLY)

    async def _show_main_menu(self, event: MenuEvent, chat_id: int) -> RenderResult:
        await self.awaiting.clear(chat_id)
        return self.main_menu()

    async def _show_request_prompt(self, event: MenuEvent, chat_id: int) -> RenderResult:
        await self.awaiting.mark(chat_id)
        return _render(ScreenName.REQUEST_PROMPT, REQUEST_PROMPT_MESSAGE, KeyboardLayout.BACK_ONLY)

    async def _show_skills(self, event: MenuEvent, chat_id: int) -> RenderResult:
        try:
            skills = await self.skills_service.fetch_skills()
        except RemoteFetchError as e:
            logger.error(f"Failed to get skills: {e}")
            return self._failed(ScreenName.SKILLS_VIEW, SKILLS_LOAD_FAILED)

        return _render(
            ScreenName.SKILLS_VIEW, self.formatter.format_skills(skills), KeyboardLayout.BACK_ONLY
        )

    async def _show_projects(self, event: MenuEvent, chat_id: int) -> RenderResult:
        await self.pagination.reset_project_cursor(chat_id)
        try:
            repositories = await self._load_repositories()
        except RemoteFetchError as e:
            logger.error(f"Failed to get projects: {e}")
            return self._failed(ScreenName.PROJECTS_VIEW, PROJECTS_LOAD_FAILED)

        if repositories:
            text = self.formatter.format_project(repositories[0])
        else:
            text = NO_PROJECTS_FOUND
        return _render(ScreenName.PROJECTS_VIEW, text, KeyboardLayout.PROJECT_PAGER)

    async def _page_projects(self, event: MenuEvent, chat_id: int) -> RenderResult | None:
        direction = Direction.NEXT if event is MenuEvent.NEXT_PROJECT else Direction.PREVIOUS
        repositories = await self.cache.repositories()
        result = await self.pagination.advance_project(chat_id, direction, len(repositories))
        if not result.moved:
            return None

        return _render(
            ScreenName.PROJECTS_VIEW,
            self.formatter.format_project(repositories[result.index]),
            KeyboardLayout.PROJECT_PAGER,
        )

    async def _show_git(self, event: MenuEvent, chat_id: int) -> RenderResult:
        await self.pagination.reset_commit_cursor(chat_id)
        try:
            repositories = await self._load_repositories()
        except RemoteFetchError as e:
            logger.error(f"Failed to get repositories for commits: {e}")
            return self._failed(ScreenName.GIT_VIEW, GIT_LOAD_FAILED)

        commits = await self._load_commits(repositories)
        if commits:
            text = self.formatter.format_git_page(commits, 0, self.page_size)
        else:
            logger.error("Error getting commits")
            text = NO_COMMITS_FOUND

        text += self.formatter.format_git_footer()
        return _render(ScreenName.GIT_VIEW, text, KeyboardLayout.GIT_PAGER)

    async def _page_git(self, event: MenuEvent, chat_id: int) -> RenderResult | None:
        direction = Direction.NEXT if event is MenuEvent.NEXT_GIT else Direction.PREVIOUS
        commits = await self.cache.commits()
        total_pages = math.ceil(len(commits) / self.page_size)
        result = await self.pagination.advance_commit_page(chat_id, direction, total_pages)
        if not result.moved:
            return None

        return _render(
            ScreenName.GIT_VIEW,
            self.formatter.format_git_page(commits, result.index, self.page_size),
            KeyboardLayout.GIT_PAGER,
        )
