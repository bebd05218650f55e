"""Completed-challenge tracking with flat-file persistence.

File format, one value per line:

    <completed count>
    <challenge id>
    <challenge id>
    ...

Persistence is best effort. A file that cannot be read or written is logged
and otherwise ignored, leaving in-memory state as it was.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserProgress:
    """Read-only snapshot of a learner's progress."""

    challenges_completed: int = 0
    completed_challenge_ids: tuple[str, ...] = ()
    category_progress: dict[str, int] = field(default_factory=dict)


class ProgressStore:
    """Track completed challenges and save/load them as plain text."""

    def __init__(self) -> None:
        """Start with nothing completed."""
        self._challenges_completed = 0
        self._completed_ids: list[str] = []
        self._category_progress: dict[str, int] = {}

    def mark_challenge_complete(self, challenge_id: str, category: str | None = None) -> bool:
        """Record a completion; return False when the id was already recorded."""
        if challenge_id in self._completed_ids:
            return False
        self._completed_ids.append(challenge_id)
        self._challenges_completed += 1
        if category is not None:
            self._category_progress[category] = self._category_progress.get(category, 0) + 1
        return True

    def is_completed(self, challenge_id: str) -> bool:
        """Return whether a challenge id has been recorded."""
        return challenge_id in self._completed_ids

    def get_progress(self) -> UserProgress:
        """Return a snapshot that later updates do not affect."""
        return UserProgress(
            challenges_completed=self._challenges_completed,
            completed_challenge_ids=tuple(self._completed_ids),
            category_progress=dict(self._category_progress),
        )

    def save_progress(self, path: Path | str) -> bool:
        """Write progress to `path`, replacing its contents. Return success."""
        target = Path(path)
        lines = [str(self._challenges_completed), *self._completed_ids]
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save progress to %s: %s", target, exc)
            return False
        logger.debug("Saved %d completed challenges to %s", self._challenges_completed, target)
        return True

    def load_progress(self, path: Path | str) -> bool:
        """Read progress from `path` into this store. Return success.

        The count is taken from the first line as written. Ids from the file
        are appended to those already in memory without de-duplication.
        """
        source = Path(path)
        try:
            text = source.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No progress file at %s", source)
            return False
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read progress from %s: %s", source, exc)
            return False

        lines = text.splitlines()
        if not lines:
            logger.warning("Progress file %s is empty", source)
            return False
        try:
            count = int(lines[0].strip())
        except ValueError:
            logger.warning("Progress file %s has an invalid count line: %r", source, lines[0])
            return False

        self._challenges_completed = count
        self._completed_ids.extend(lines[1:])
        logger.debug("Loaded %d completed challenges from %s", count, source)
        return True
