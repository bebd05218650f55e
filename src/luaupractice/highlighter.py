"""ANSI syntax highlighting for Luau code shown in the terminal."""

from __future__ import annotations

import re

RESET = "\033[0m"
KEYWORD_COLOR = "\033[1;35m"
API_COLOR = "\033[1;36m"
STRING_COLOR = "\033[1;32m"
COMMENT_COLOR = "\033[2;37m"
NUMBER_COLOR = "\033[1;33m"

KEYWORDS = frozenset(
    {
        "and",
        "break",
        "do",
        "else",
        "elseif",
        "end",
        "false",
        "for",
        "function",
        "if",
        "in",
        "local",
        "nil",
        "not",
        "or",
        "repeat",
        "return",
        "then",
        "true",
        "until",
        "while",
        "continue",
        "export",
        "type",
    }
)

ROBLOX_API = frozenset(
    {
        "Instance",
        "Vector3",
        "CFrame",
        "Color3",
        "UDim2",
        "Enum",
        "workspace",
        "game",
        "script",
        "print",
        "warn",
        "wait",
        "Part",
        "Model",
        "Workspace",
        "Players",
        "ReplicatedStorage",
        "ServerScriptService",
        "StarterPlayer",
        "Humanoid",
    }
)

# Alternatives are tried left to right at each position, so a `--` inside a
# string stays part of the string and digits inside a name stay part of the name.
_TOKEN_RE = re.compile(
    r"""
    (?P<comment>--[^\n]*)
    | (?P<string>"[^"]*")
    | (?P<word>[A-Za-z_][A-Za-z0-9_]*)
    | (?P<number>[0-9]+(?:\.[0-9]*)?)
    """,
    re.VERBOSE,
)


def _paint(color: str, text: str) -> str:
    return f"{color}{text}{RESET}"


class SyntaxHighlighter:
    """Colorize keywords, Roblox API names, strings, comments, and numbers."""

    def __init__(self) -> None:
        """Start with the default theme."""
        self.theme = "default"

    def set_theme(self, theme: str) -> None:
        """Remember the requested theme name; only the default palette exists."""
        self.theme = theme

    def highlight(self, code: str) -> str:
        """Return `code` with ANSI color codes around recognised tokens."""
        parts: list[str] = []
        position = 0
        for match in _TOKEN_RE.finditer(code):
            parts.append(code[position : match.start()])
            parts.append(self._render(match))
            position = match.end()
        parts.append(code[position:])
        return "".join(parts)

    def _render(self, match: re.Match[str]) -> str:
        kind = match.lastgroup
        text = match.group()
        if kind == "comment":
            return _paint(COMMENT_COLOR, text)
        if kind == "string":
            return _paint(STRING_COLOR, text)
        if kind == "number":
            return _paint(NUMBER_COLOR, text)
        if text in KEYWORDS:
            return _paint(KEYWORD_COLOR, text)
        if text in ROBLOX_API:
            return _paint(API_COLOR, text)
        return text
