"""Configuration management for the portfolio bot.

Handles all application configuration including environment variables, the
optional YAML profile file, and default settings. Provides structured
configuration classes for the Telegram side, the remote data sources and the
presentation profile.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings


class ProfileConfig(BaseModel):
    """Owner profile shown in menu texts.

    Attributes:
        display_name: Owner name used in the welcome message.
        website_url: Personal website linked from the welcome and skills screens.
    """
    display_name: str = "pureheroky"
    website_url: str = "https://pureheroky.com"


class BotConfig(BaseSettings):
    """Main Telegram bot configuration.

    Attributes:
        bot_token: Telegram bot API token from environment.
        admin_chat_id: Telegram chat ID that receives job requests.
        github_token: GitHub API token sent with repository and commit requests.
        github_username: Account whose repositories and commits are presented.
        github_api_url: GitHub REST API base URL.
        skills_url: Endpoint returning the skills envelope.
        timeout: HTTP request timeout in seconds.
        commit_limit: Number of most recent commits kept per repository.
        max_concurrent_fetches: Upper bound on parallel commit requests.
        cleanup_delay_seconds: Delay before relayed and admin messages are deleted.
        log_level: Root logging level.
    """
    bot_token: str = Field(default="", validation_alias=AliasChoices("BOT_TOKEN", "TOKEN"))
    admin_chat_id: int | None = Field(
        default=None, validation_alias=AliasChoices("ADMIN_CHAT_ID", "USER_ID")
    )
    github_token: str | None = Field(
        default=None, validation_alias=AliasChoices("GITHUB_TOKEN", "GIT_TOKEN")
    )
    github_username: str = Field(default="pureheroky", validation_alias="GITHUB_USERNAME")
    github_api_url: str = Field(default="https://api.github.com", validation_alias="GITHUB_API_URL")
    skills_url: str | None = Field(default=None, validation_alias="SKILLS_URL")
    timeout: int = Field(default=10, validation_alias="HTTP_TIMEOUT")
    commit_limit: int = Field(default=5, validation_alias="COMMIT_LIMIT")
    max_concurrent_fetches: int = Field(default=10, validation_alias="MAX_CONCURRENT_FETCHES")
    cleanup_delay_seconds: int = Field(default=120, validation_alias="CLEANUP_DELAY_SECONDS")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @property
    def github_profile_url(self) -> str:
        """Public GitHub profile of the configured account."""
        return f"https://github.com/{self.github_username}"


class Config:
    """Application configuration manager.

    Centralizes loading of environment settings and the YAML profile file.
    Provides typed access to configuration sections for different
    application components.
    """

    def __init__(self, config_dir: Path | None = None):
        """Initialize configuration manager.

        Args:
            config_dir: Path to configuration directory, defaults to portfolio_bot/config.
        """
        if config_dir is None:
            config_dir = Path(__file__).parent / "config"

        self.config_dir = Path(config_dir)
        self.bot = BotConfig()
        self.profile = self._load_profile()

    def _load_profile(self) -> ProfileConfig:
        """Load owner profile from YAML configuration.

        Returns:
            ProfileConfig built from the ``profile`` section, defaults otherwise.
        """
        profile_path = self.config_dir / "portfolio.yml"
        if not profile_path.exists():
            return ProfileConfig()

        with open(profile_path) as f:
            data = yaml.safe_load(f) or {}

        profile_data = data.get("profile", {}) or {}
        defaults = ProfileConfig()
        return ProfileConfig(
            display_name=profile_data.get("display_name", defaults.display_name),
            website_url=profile_data.get("website_url", defaults.website_url),
        )

    def as_dict(self) -> dict[str, Any]:
        """Flatten all sections into one mapping for the DI container."""
        values = self.bot.model_dump()
        values.update(self.profile.model_dump())
        values["github_profile_url"] = self.bot.github_profile_url
        return values


# Global configuration instance
config = Config()
