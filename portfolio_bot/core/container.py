"""Dependency-injection container.

This module defines a dependency-injection (DI) container that wires together
the application's components. Every process-wide object (cache, cursors,
awaiting-request set, services) is a singleton owned by the container and
handed to the components that need it, instead of living in module globals.
"""

from dependency_injector import containers, providers

from portfolio_bot.bot.handlers import BotHandlers
from portfolio_bot.bot.menu import MenuEngine
from portfolio_bot.bot.pagination import PaginationState
from portfolio_bot.bot.request_relay import AwaitingRequests, RequestRelay
from portfolio_bot.bot.response_formatter import ResponseFormatter
from portfolio_bot.config import Config
from portfolio_bot.services.cache_store import PortfolioCache
from portfolio_bot.services.github import GitHubService
from portfolio_bot.services.skills import SkillsService


class Container(containers.DeclarativeContainer):
    """DI container for the application.

    This container holds the wiring for all the application's components.
    """

    config = providers.Configuration()

    # Services
    github_service = providers.Singleton(
        GitHubService,
        username=config.github_username,
        token=config.github_token,
        api_url=config.github_api_url,
        timeout=config.timeout,
        commit_limit=config.commit_limit,
    )
    skills_service = providers.Singleton(
        SkillsService, url=config.skills_url, timeout=config.timeout
    )

    # Shared state
    portfolio_cache = providers.Singleton(
        PortfolioCache,
        commit_limit=config.commit_limit,
        max_concurrent_fetches=config.max_concurrent_fetches,
    )
    pagination_state = providers.Singleton(PaginationState)
    awaiting_requests = providers.Singleton(AwaitingRequests)

    # Bot components
    response_formatter = providers.Singleton(
        ResponseFormatter,
        display_name=config.display_name,
        website_url=config.website_url,
        github_profile_url=config.github_profile_url,
    )
    menu_engine = providers.Singleton(
        MenuEngine,
        cache=portfolio_cache,
        pagination=pagination_state,
        awaiting=awaiting_requests,
        github_service=github_service,
        skills_service=skills_service,
        formatter=response_formatter,
    )
    request_relay = providers.Singleton(
        RequestRelay,
        admin_chat_id=config.admin_chat_id,
        awaiting=awaiting_requests,
        cleanup_delay_seconds=config.cleanup_delay_seconds,
    )
    bot_handlers = providers.Singleton(
        BotHandlers, menu_engine=menu_engine, request_relay=request_relay
    )


def build_container(app_config: Config) -> Container:
    """Create a container loaded with the application configuration."""
    container = Container()
    container.config.from_dict(app_config.as_dict())
    return container
