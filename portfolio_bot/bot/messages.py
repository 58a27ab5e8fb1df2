"""Telegram bot message templates and constants.

Contains all user-facing message templates in Telegram HTML markup. Values
substituted into the templates must be HTML-escaped by the caller.
"""

# Main menu
WELCOME_MESSAGE = """
<b><i>{display_name}</i></b> was created to help people contact/learn about me.

It has a couple of different <strong>buttons</strong> that show any information (knowledge stacks, projects, etc.).

Command list:

<code><b>Request:</b>
create a job request</code>

<code><b>Git:</b>
get last commits/accessible repos</code>

<code><b>Skills:</b>
get knowledge stack</code>

<code><b>Projects:</b>
get list of complete/under development projects</code>

Bot will be open source someday (look on my <a href='{website_url}'>website</a> or in the bot description)
"""

# Button captions
BUTTON_REQUEST = "request"
BUTTON_GIT = "git"
BUTTON_SKILLS = "skills"
BUTTON_PROJECTS = "projects"
BUTTON_PREVIOUS = "previous"
BUTTON_NEXT = "next"
BUTTON_BACK = "back"

# Request page
REQUEST_PROMPT_MESSAGE = """
You are on <b>Request</b> page.

If you want to make a job request, please follow the <b>sample</b>:

<b>1. Your name</b>
<b>2. Direction of the task (any web-development/python apps etc.)</b>
<b>3. Task description</b>
<b>4. Ways to contact you</b>

Requests not similar to the sample <span class='tg-spoiler'><b>will be ignored.</b></span>
"""

# Loading messages
LOADING_SKILLS = (
    "You are on <b>Skills</b> page\nAll my knowledge will be shown here\n\n\n"
    "<b><i>Loading skills...</i></b>"
)
LOADING_GIT = (
    "You are on <b>Git</b> page\nThe latest commits will be shown here\n\n\n"
    "<b><i>Loading commits...</i></b>"
)
LOADING_PROJECTS = "You are on <b>Projects</b> page\n<b><i>Loading projects...</i></b>\n"

# Skills page
SKILLS_HEADER = "There is my knowledge stack:\n\n"
SKILL_LINE = "<i>{position}</i>. <b>{skill}</b>\n"
SKILLS_FOOTER = (
    "\n\nMore information about the projects can be found "
    "<a href='{website_url}'><b>here</b></a>"
)

# Projects page
PROJECT_CARD = """
<b><i>Title: <code>{name}</code></i></b>
<b>ID: {id}</b>
<b>URL: <a href='{url}'>link</a></b>
<b>Language: {language}</b>
<b>Creation date: {created_at}</b>
<b>Default branch: {default_branch}</b>
"""
NO_PROJECTS_FOUND = "\n\nNo projects found."

# Git page
GIT_REPO_HEADER = "\n\n<b><i>Title: <code>{name}</code></i></b>\n"
GIT_AUTHOR_LINE = "\nAuthor: <b>{author}</b>\n"
GIT_DATE_LINE = "Date: <b>{date}</b>\n"
GIT_MESSAGE_LINE = "Message: <b>{message}</b>\n"
GIT_REPO_SEPARATOR = "\n\n"
GIT_PAGE_EMPTY = "No more commits on this page."
GIT_FOOTER = (
    "\n<b><i>More information about the projects can be found "
    "<a href='{github_profile_url}'>here</a></i></b>\n\n"
)
NO_COMMITS_FOUND = "\n\nNo git commits found."

# Failure messages
SKILLS_LOAD_FAILED = "Failed to load skills."
PROJECTS_LOAD_FAILED = "Failed to load projects."
GIT_LOAD_FAILED = "Failed to load commits."

# Request relay
REQUEST_TO_ADMIN = "Request from <code>{username}</code> | <code>{user_id}</code>\n\n{text}"
REQUEST_CONFIRMATION = (
    "Thank you for your job request.\n\n"
    "Your and this message will be deleted after <b>{minutes} minutes</b>\n\n"
    "I'll write you after reviewing your request"
)

# Admin decisions
REQUEST_ACCEPTED = (
    "Your request was accepted!\n\n"
    "Developer will soon contact you\n\n"
    "This message will be deleted after <b>{minutes} minutes</b>"
)
REQUEST_DECLINED = (
    "Your request was declined!\n\n"
    "Developer message: \n{reason}\n\n"
    "This message will be deleted after <b>{minutes} minutes</b>"
)
