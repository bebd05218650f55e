"""Value types shared by the catalogs, analyzer, and console."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Challenge:
    """One guided coding exercise.

    The default instance (empty id and title, difficulty 0) stands in for
    "no such challenge" in catalog lookups.
    """

    id: str = ""
    title: str = ""
    description: str = ""
    starter_code: str = ""
    solution: str = ""
    hints: tuple[str, ...] = ()
    difficulty: int = 0


@dataclass(frozen=True)
class Snippet:
    """Example code fragment grouped by category."""

    title: str
    description: str
    code: str
    category: str
    difficulty: int


@dataclass(frozen=True)
class AnalysisResult:
    """Findings of one heuristic analysis pass."""

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()
    complexity: int = 1
