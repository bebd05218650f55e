"""Application service tying catalogs, analysis, and progress together."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .analyzer import CodeAnalyzer
from .catalog import ChallengeCatalog, SnippetLibrary, tier_for_difficulty
from .highlighter import SyntaxHighlighter
from .models import AnalysisResult, Challenge
from .progress import ProgressStore, UserProgress

DEFAULT_PROGRESS_PATH = Path("progress.dat")
PROGRESS_BAR_WIDTH = 50


@dataclass(frozen=True)
class ProgressSummary:
    """Progress figures for the status screen."""

    completed: int
    total: int
    percent: float
    completed_titles: tuple[str, ...]


class PracticeService:
    """Coordinates practice, challenge, snippet, and progress flows."""

    def __init__(self, progress_path: Path | str = DEFAULT_PROGRESS_PATH) -> None:
        """Build catalogs and restore saved progress from `progress_path`."""
        self.progress_path = Path(progress_path)
        self.analyzer = CodeAnalyzer()
        self.highlighter = SyntaxHighlighter()
        self.challenges = ChallengeCatalog()
        self.snippets = SnippetLibrary()
        self.progress = ProgressStore()
        self.progress.load_progress(self.progress_path)

    def analyze(self, code: str) -> AnalysisResult:
        """Run heuristic analysis on code."""
        return self.analyzer.analyze(code)

    def highlight(self, code: str) -> str:
        """Colorize code for terminal display."""
        return self.highlighter.highlight(code)

    def get_challenge(self, challenge_id: str) -> Challenge:
        """Return a challenge by id, or the empty placeholder."""
        return self.challenges.get_challenge(challenge_id)

    def is_completed(self, challenge_id: str) -> bool:
        """Return whether a challenge is already completed."""
        return self.progress.is_completed(challenge_id)

    def submit_solution(self, challenge_id: str, code: str) -> bool:
        """Validate a solution; on success record and save the completion."""
        if not self.challenges.validate_solution(challenge_id, code):
            return False
        challenge = self.challenges.get_challenge(challenge_id)
        self.progress.mark_challenge_complete(challenge_id, tier_for_difficulty(challenge.difficulty))
        self.progress.save_progress(self.progress_path)
        return True

    def get_progress(self) -> UserProgress:
        """Return the current progress snapshot."""
        return self.progress.get_progress()

    def progress_summary(self) -> ProgressSummary:
        """Summarize completions against the challenge catalog."""
        snapshot = self.progress.get_progress()
        total = len(self.challenges.get_all_challenges())
        percent = 0.0 if total == 0 else snapshot.challenges_completed * 100.0 / total
        titles = tuple(
            self.challenges.get_challenge(challenge_id).title or challenge_id
            for challenge_id in snapshot.completed_challenge_ids
        )
        return ProgressSummary(
            completed=snapshot.challenges_completed,
            total=total,
            percent=percent,
            completed_titles=titles,
        )


def progress_bar(percent: float, width: int = PROGRESS_BAR_WIDTH) -> str:
    """Render a fixed-width text bar for a percentage."""
    filled = max(0, min(width, int(percent * width / 100)))
    return "#" * filled + "-" * (width - filled)
