"""Load declarative challenge and snippet content from bundled JSON resources."""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any

from .models import Challenge, Snippet

CONTENT_PACKAGE = "luaupractice.content"
CHALLENGES_FILE = "challenges.json"
SNIPPETS_FILE = "snippets.json"
MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 5

logger = logging.getLogger(__name__)


def _difficulty(raw: dict[str, Any], label: str) -> int:
    """Read and range-check a difficulty rating."""
    value = int(raw.get("difficulty", 0))
    if not MIN_DIFFICULTY <= value <= MAX_DIFFICULTY:
        raise ValueError(f"{label} has difficulty {value}; expected {MIN_DIFFICULTY}-{MAX_DIFFICULTY}.")
    return value


def _challenge_from_dict(raw: dict[str, Any]) -> Challenge:
    """Build a challenge from raw JSON content."""
    challenge_id = str(raw.get("id", "")).strip()
    if not challenge_id:
        raise ValueError("Challenge entry has no id.")
    title = str(raw.get("title", "")).strip()
    if not title:
        raise ValueError(f"Challenge '{challenge_id}' has no title.")
    return Challenge(
        id=challenge_id,
        title=title,
        description=str(raw.get("description", "")),
        starter_code=str(raw.get("starter_code", "")),
        solution=str(raw.get("solution", "")),
        hints=tuple(str(hint) for hint in raw.get("hints", [])),
        difficulty=_difficulty(raw, f"Challenge '{challenge_id}'"),
    )


def _snippet_from_dict(raw: dict[str, Any]) -> Snippet:
    """Build a snippet from raw JSON content."""
    title = str(raw.get("title", "")).strip()
    if not title:
        raise ValueError("Snippet entry has no title.")
    return Snippet(
        title=title,
        description=str(raw.get("description", "")),
        code=str(raw.get("code", "")),
        category=str(raw.get("category", "")).strip() or "General",
        difficulty=_difficulty(raw, f"Snippet '{title}'"),
    )


def parse_challenges(raw: dict[str, Any]) -> list[Challenge]:
    """Build the ordered challenge list from a decoded content document."""
    challenges = [_challenge_from_dict(item) for item in raw.get("challenges", [])]
    seen: set[str] = set()
    for challenge in challenges:
        if challenge.id in seen:
            raise ValueError(f"Duplicate challenge id: {challenge.id}")
        seen.add(challenge.id)
    return challenges


def parse_snippets(raw: dict[str, Any]) -> list[Snippet]:
    """Build the ordered snippet list from a decoded content document."""
    return [_snippet_from_dict(item) for item in raw.get("snippets", [])]


def _read_bundled(name: str) -> dict[str, Any]:
    entry = resources.files(CONTENT_PACKAGE).joinpath(name)
    return json.loads(entry.read_text(encoding="utf-8-sig"))


def load_challenges() -> list[Challenge]:
    """Load bundled challenges."""
    challenges = parse_challenges(_read_bundled(CHALLENGES_FILE))
    logger.debug("Loaded %d bundled challenges", len(challenges))
    return challenges


def load_snippets() -> list[Snippet]:
    """Load bundled snippets."""
    snippets = parse_snippets(_read_bundled(SNIPPETS_FILE))
    logger.debug("Loaded %d bundled snippets", len(snippets))
    return snippets


def load_challenges_from_file(path: Path) -> list[Challenge]:
    """Load challenges from a JSON file for tests/tools."""
    return parse_challenges(json.loads(path.read_text(encoding="utf-8-sig")))


def load_snippets_from_file(path: Path) -> list[Snippet]:
    """Load snippets from a JSON file for tests/tools."""
    return parse_snippets(json.loads(path.read_text(encoding="utf-8-sig")))
