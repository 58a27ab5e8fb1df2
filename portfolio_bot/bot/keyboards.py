"""Inline keyboard builders for the menu screens."""

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from .messages import (
    BUTTON_BACK,
    BUTTON_GIT,
    BUTTON_NEXT,
    BUTTON_PREVIOUS,
    BUTTON_PROJECTS,
    BUTTON_REQUEST,
    BUTTON_SKILLS,
)
from .types import KeyboardLayout, MenuEvent


def _button(text: str, event: MenuEvent) -> InlineKeyboardButton:
    return InlineKeyboardButton(text, callback_data=event.value)


def _back_row() -> list[InlineKeyboardButton]:
    return [_button(BUTTON_BACK, MenuEvent.BACK)]


def main_menu_keyboard() -> InlineKeyboardMarkup:
    """Two-column keyboard with the four menu sections."""
    return InlineKeyboardMarkup(
        [
            [_button(BUTTON_REQUEST, MenuEvent.REQUEST), _button(BUTTON_GIT, MenuEvent.GIT)],
            [
                _button(BUTTON_SKILLS, MenuEvent.SKILLS),
                _button(BUTTON_PROJECTS, MenuEvent.PROJECTS),
            ],
        ]
    )


def back_only_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup([_back_row()])


def project_pager_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        [
            [
                _button(BUTTON_PREVIOUS, MenuEvent.PREVIOUS_PROJECT),
                _button(BUTTON_NEXT, MenuEvent.NEXT_PROJECT),
            ],
            _back_row(),
        ]
    )


def git_pager_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        [
            [
                _button(BUTTON_PREVIOUS, MenuEvent.PREVIOUS_GIT),
                _button(BUTTON_NEXT, MenuEvent.NEXT_GIT),
            ],
            _back_row(),
        ]
    )


_BUILDERS = {
    KeyboardLayout.MAIN_MENU: main_menu_keyboard,
    KeyboardLayout.BACK_ONLY: back_only_keyboard,
    KeyboardLayout.PROJECT_PAGER: project_pager_keyboard,
    KeyboardLayout.GIT_PAGER: git_pager_keyboard,
}


def build_keyboard(layout: KeyboardLayout) -> InlineKeyboardMarkup:
    """Build the inline keyboard for a layout descriptor.

    Args:
        layout: Keyboard layout produced by the menu engine.

    Returns:
        Telegram inline keyboard markup.
    """
    return _BUILDERS[layout]()
