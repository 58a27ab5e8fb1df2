"""Skills source client.

The skills endpoint answers with a JSON envelope ``{"data": str, "status": int}``
where ``data`` holds a bracketed list of quoted skill names, for example
``"['Python', 'Go', 'Docker']"``. Tokens are split with a regular expression,
stripped of list punctuation and deduplicated in first-seen order.
"""

import asyncio
import logging
import re
from typing import Final

import aiohttp
from pydantic import ValidationError

from ..models import SkillsResponse
from .errors import SkillsFetchError

logger = logging.getLogger(__name__)

SKILL_TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"'[^']+'|\S+")
SKILL_STRIP_CHARS: Final[str] = "[]'\","


def parse_skills(raw: str) -> list[str]:
    """Split the raw skills string into unique skill names.

    Args:
        raw: Value of the envelope's ``data`` field.

    Returns:
        Skill names without duplicates, in the order they first appear.
    """
    skills: dict[str, None] = {}
    for match in SKILL_TOKEN_PATTERN.findall(raw):
        skill = match.strip(SKILL_STRIP_CHARS).strip()
        if skill:
            skills.setdefault(skill, None)
    return list(skills)


class SkillsService:
    """Fetches the owner's skill list from the skills endpoint."""

    def __init__(self, url: str | None, timeout: int = 10):
        self.url = url
        self.timeout = timeout

    async def fetch_skills(self) -> list[str]:
        """Fetch and parse the skill list.

        Returns:
            Deduplicated skill names.

        Raises:
            SkillsFetchError: If the endpoint is not configured, unreachable,
                or returns an unexpected payload.
        """
        if not self.url:
            raise SkillsFetchError("Skills URL is not configured")

        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(self.url) as response:
                    if response.status != 200:
                        raise SkillsFetchError(f"Skills endpoint returned {response.status}")
                    payload = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise SkillsFetchError(f"Skills request failed: {e}") from e
        except ValueError as e:
            raise SkillsFetchError(f"Skills endpoint returned invalid JSON: {e}") from e

        try:
            envelope = SkillsResponse.model_validate(payload)
        except ValidationError as e:
            raise SkillsFetchError(f"Unexpected skills payload: {e.error_count()} errors") from e

        skills = parse_skills(envelope.data)
        logger.debug(f"Parsed {len(skills)} skills")
        return skills
