"""Portfolio Bot Application Package.

A Telegram bot that presents a developer portfolio (skills, projects and
recent commits) through inline-keyboard menus and relays job requests to the
administrator.

The application follows a modular architecture with separate concerns for:
- Bot handlers, menu screens and request relay
- Remote data fetching from GitHub and the skills endpoint
- In-memory caching and per-chat pagination state
- Dependency wiring through a DI container
"""
