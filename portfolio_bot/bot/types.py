"""Typed structures shared across bot components."""

from __future__ import annotations

from enum import StrEnum
from typing import NamedTuple, TypedDict


class MenuEvent(StrEnum):
    """Callback data carried by inline keyboard buttons."""

    REQUEST = "request"
    SKILLS = "skills"
    GIT = "git"
    PROJECTS = "projects"
    NEXT_GIT = "next_git"
    PREVIOUS_GIT = "previous_git"
    NEXT_PROJECT = "next_project"
    PREVIOUS_PROJECT = "previous_project"
    BACK = "back"


class ScreenName(StrEnum):
    """Screens of the menu state machine."""

    MAIN_MENU = "main_menu"
    REQUEST_PROMPT = "request_prompt"
    SKILLS_VIEW = "skills_view"
    PROJECTS_VIEW = "projects_view"
    GIT_VIEW = "git_view"


class KeyboardLayout(StrEnum):
    """Inline keyboard layouts a screen can be rendered with."""

    MAIN_MENU = "main_menu"
    BACK_ONLY = "back_only"
    PROJECT_PAGER = "project_pager"
    GIT_PAGER = "git_pager"


class Direction(StrEnum):
    """Pagination direction."""

    NEXT = "next"
    PREVIOUS = "previous"


class AdvanceResult(NamedTuple):
    """Outcome of moving a pagination cursor."""

    index: int
    moved: bool


class RenderResult(TypedDict):
    """Screen produced by the menu engine."""

    screen: ScreenName
    text: str
    keyboard: KeyboardLayout


class CleanupJobData(TypedDict):
    """Payload of a delayed message deletion job."""

    chat_id: int
    message_ids: list[int]
