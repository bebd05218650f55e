"""Heuristic checks over raw Luau source text.

Nothing here tokenizes or parses. Every rule is a substring test over the whole
text or over single lines, so keywords hidden in identifiers, strings, or
comments count the same as real ones.
"""

from __future__ import annotations

from .models import AnalysisResult

BLOCK_OPENERS = ("function", "if", "for", "while")
BLOCK_CLOSER = "end"
COMPLEXITY_KEYWORDS = ("if", "for", "while", "function")
LINES_PER_COMPLEXITY_POINT = 10

SYNTAX_ERROR = "Syntax error detected in code"
ASSIGNMENT_IN_CONDITION = "Possible assignment operator (=) used in condition instead of comparison (==)"
PREFER_WAIT_FOR_CHILD = "Consider using WaitForChild instead of FindFirstChild for more reliable code"
INFINITE_LOOP = "Infinite loop detected - ensure proper break conditions"
PREFER_TASK_WAIT = "Consider using task.wait() instead of wait() for better performance"
LOCAL_PLAYER_CLIENT_ONLY = "LocalPlayer should only be accessed from LocalScripts"


class CodeAnalyzer:
    """Produce errors, warnings, suggestions, and a complexity score for code."""

    def analyze(self, code: str) -> AnalysisResult:
        """Run every check over `code` and collect the findings."""
        errors: list[str] = []
        if not self.check_syntax(code):
            errors.append(SYNTAX_ERROR)

        warnings = self.find_common_mistakes(code)
        if "while true do" in code:
            warnings.append(INFINITE_LOOP)

        suggestions: list[str] = []
        if "wait()" in code:
            suggestions.append(PREFER_TASK_WAIT)
        if "game.Players.LocalPlayer" in code:
            suggestions.append(LOCAL_PLAYER_CLIENT_ONLY)

        return AnalysisResult(
            errors=tuple(errors),
            warnings=tuple(warnings),
            suggestions=tuple(suggestions),
            complexity=self.calculate_complexity(code),
        )

    def check_syntax(self, code: str) -> bool:
        """Return whether block openers and `end` lines balance out."""
        balance = 0
        for line in code.split("\n"):
            if any(keyword in line for keyword in BLOCK_OPENERS):
                balance += 1
            if BLOCK_CLOSER in line:
                balance -= 1
        return balance == 0

    def find_common_mistakes(self, code: str) -> list[str]:
        """Return warnings for well-known beginner mistakes."""
        mistakes: list[str] = []
        if "=" in code and "==" not in code and "if" in code:
            mistakes.append(ASSIGNMENT_IN_CONDITION)
        if "FindFirstChild" in code and "WaitForChild" not in code:
            mistakes.append(PREFER_WAIT_FOR_CHILD)
        return mistakes

    def calculate_complexity(self, code: str) -> int:
        """Estimate complexity from length and control keywords per line."""
        complexity = 1 + code.count("\n") // LINES_PER_COMPLEXITY_POINT
        for line in code.split("\n"):
            complexity += sum(1 for keyword in COMPLEXITY_KEYWORDS if keyword in line)
        return complexity
