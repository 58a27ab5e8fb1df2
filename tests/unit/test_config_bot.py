"""Tests for environment and YAML configuration loading."""

from portfolio_bot.config import BotConfig, Config, ProfileConfig


def test_bot_config_reads_primary_names(monkeypatch) -> None:
    """BOT_TOKEN and ADMIN_CHAT_ID populate the Telegram settings."""
    monkeypatch.setenv("BOT_TOKEN", "primary-token")
    monkeypatch.setenv("ADMIN_CHAT_ID", "4242")

    bot_config = BotConfig()

    assert bot_config.bot_token == "primary-token"
    assert bot_config.admin_chat_id == 4242


def test_bot_config_accepts_legacy_names(monkeypatch) -> None:
    """TOKEN, USER_ID and GIT_TOKEN remain accepted as fallbacks."""
    monkeypatch.delenv("BOT_TOKEN", raising=False)
    monkeypatch.delenv("ADMIN_CHAT_ID", raising=False)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.setenv("TOKEN", "legacy-token")
    monkeypatch.setenv("USER_ID", "99")
    monkeypatch.setenv("GIT_TOKEN", "gh-legacy")

    bot_config = BotConfig()

    assert bot_config.bot_token == "legacy-token"
    assert bot_config.admin_chat_id == 99
    assert bot_config.github_token == "gh-legacy"


def test_bot_config_defaults(monkeypatch) -> None:
    """Unset optional variables fall back to defaults."""
    for name in (
        "GITHUB_USERNAME",
        "GITHUB_API_URL",
        "SKILLS_URL",
        "HTTP_TIMEOUT",
        "COMMIT_LIMIT",
        "MAX_CONCURRENT_FETCHES",
        "CLEANUP_DELAY_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)

    bot_config = BotConfig()

    assert bot_config.github_username == "pureheroky"
    assert bot_config.github_api_url == "https://api.github.com"
    assert bot_config.skills_url is None
    assert bot_config.timeout == 10
    assert bot_config.commit_limit == 5
    assert bot_config.max_concurrent_fetches == 10
    assert bot_config.cleanup_delay_seconds == 120
    assert bot_config.github_profile_url == "https://github.com/pureheroky"


def test_bot_config_env_override(monkeypatch) -> None:
    monkeypatch.setenv("GITHUB_USERNAME", "octocat")
    monkeypatch.setenv("COMMIT_LIMIT", "3")
    monkeypatch.setenv("CLEANUP_DELAY_SECONDS", "300")

    bot_config = BotConfig()

    assert bot_config.github_profile_url == "https://github.com/octocat"
    assert bot_config.commit_limit == 3
    assert bot_config.cleanup_delay_seconds == 300


def test_profile_loaded_from_yaml(tmp_path) -> None:
    """The profile section of portfolio.yml overrides profile defaults."""
    (tmp_path / "portfolio.yml").write_text(
        "profile:\n  display_name: Jane\n  website_url: https://jane.dev\n"
    )

    app_config = Config(config_dir=tmp_path)

    assert app_config.profile == ProfileConfig(display_name="Jane", website_url="https://jane.dev")


def test_profile_defaults_without_yaml(tmp_path) -> None:
    app_config = Config(config_dir=tmp_path)

    assert app_config.profile == ProfileConfig()


def test_as_dict_merges_sections(tmp_path) -> None:
    """Flattened mapping carries every key the DI container reads."""
    (tmp_path / "portfolio.yml").write_text("profile:\n  display_name: Jane\n")

    values = Config(config_dir=tmp_path).as_dict()

    assert values["display_name"] == "Jane"
    assert values["website_url"] == "https://pureheroky.com"
    assert values["admin_chat_id"] == 12345
    assert values["github_profile_url"].startswith("https://github.com/")


def test_profile_ignores_environment(tmp_path, monkeypatch) -> None:
    """Profile values come from portfolio.yml only."""
    monkeypatch.setenv("DISPLAY_NAME", "from-env")
    monkeypatch.setenv("WEBSITE_URL", "https://env.example")
    (tmp_path / "portfolio.yml").write_text("profile:\n  display_name: Jane\n")

    profile = Config(config_dir=tmp_path).profile

    assert profile.display_name == "Jane"
    assert profile.website_url == "https://pureheroky.com"
