"""In-memory challenge and snippet catalogs."""

from __future__ import annotations

from .content_loader import load_challenges, load_snippets
from .models import Challenge, Snippet

TIER_DIFFICULTIES: dict[str, tuple[int, ...]] = {
    "beginner": (1, 2),
    "intermediate": (3, 4),
    "advanced": (5,),
}


def tier_for_difficulty(difficulty: int) -> str | None:
    """Return the tier name that contains a difficulty rating."""
    for tier, difficulties in TIER_DIFFICULTIES.items():
        if difficulty in difficulties:
            return tier
    return None


class ChallengeCatalog:
    """Fixed set of guided challenges."""

    def __init__(self, challenges: list[Challenge] | None = None) -> None:
        """Use the given challenges, or the bundled content when omitted."""
        self._challenges = list(challenges) if challenges is not None else load_challenges()

    def get_challenge(self, challenge_id: str) -> Challenge:
        """Return a challenge by id, or an empty `Challenge()` when unknown."""
        for challenge in self._challenges:
            if challenge.id == challenge_id:
                return challenge
        return Challenge()

    def get_challenges_by_difficulty(self, difficulty: int) -> list[Challenge]:
        """Return challenges rated exactly `difficulty`."""
        return [challenge for challenge in self._challenges if challenge.difficulty == difficulty]

    def get_challenges_by_tier(self, tier: str) -> list[Challenge]:
        """Return challenges in a named tier (beginner, intermediate, advanced)."""
        difficulties = TIER_DIFFICULTIES[tier]
        return [challenge for challenge in self._challenges if challenge.difficulty in difficulties]

    def get_all_challenges(self) -> list[Challenge]:
        """Return every challenge in catalog order."""
        return list(self._challenges)

    def validate_solution(self, challenge_id: str, code: str) -> bool:
        """Check a submitted solution by looking for required calls.

        Only `hello_world` and `create_part` have checks; any other id is
        accepted as-is.
        """
        if challenge_id == "hello_world":
            return "print" in code
        if challenge_id == "create_part":
            return "Instance.new" in code and "workspace" in code
        return True


class SnippetLibrary:
    """Browsable, searchable collection of example code."""

    def __init__(self, snippets: list[Snippet] | None = None) -> None:
        """Use the given snippets, or the bundled content when omitted."""
        self._snippets = list(snippets) if snippets is not None else load_snippets()

    def add_snippet(self, snippet: Snippet) -> None:
        """Append one snippet to the library."""
        self._snippets.append(snippet)

    def get_all_snippets(self) -> list[Snippet]:
        """Return every snippet in library order."""
        return list(self._snippets)

    def get_snippets_by_category(self, category: str) -> list[Snippet]:
        """Return snippets whose category matches exactly."""
        return [snippet for snippet in self._snippets if snippet.category == category]

    def get_categories(self) -> list[str]:
        """Return unique categories in first-seen order."""
        return list(dict.fromkeys(snippet.category for snippet in self._snippets))

    def search_snippets(self, query: str) -> list[Snippet]:
        """Return snippets whose title contains `query`, ignoring case."""
        needle = query.lower()
        return [snippet for snippet in self._snippets if needle in snippet.title.lower()]
