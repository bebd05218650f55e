"""CLI entrypoint for the Luau practice shell."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from pathlib import Path

from .models import AnalysisResult, Challenge
from .service import DEFAULT_PROGRESS_PATH, PracticeService, progress_bar

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]
END_OF_CODE = "END"
PRACTICE_BACK = "BACK"
PRACTICE_ANALYZE = "ANALYZE"
MENU_QUIT_COMMANDS = {"q", "7"}
MENU_BACK_COMMANDS = {"b", "0"}
CODE_FRAME = "=" * 70
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

HELP_TEXT = (
    "Luau basics:",
    "  - Variables: local myVar = 10",
    "  - Functions: local function myFunc() end",
    "  - Conditionals: if condition then ... end",
    "  - Loops: for i = 1, 10 do ... end",
    "  - Tables: local myTable = {1, 2, 3}",
    "",
    "Common Roblox objects:",
    "  - workspace: The 3D game world",
    "  - game.Players: Player management",
    "  - ReplicatedStorage: Shared objects",
    "  - ServerScriptService: Server-side scripts",
    "",
    "Useful functions:",
    "  - print(message): Output to console",
    "  - task.wait(seconds): Pause execution",
    "  - Instance.new(className): Create object",
    "  - :Connect(function): Connect to events",
    "",
    "Resources:",
    "  - Roblox Creator Docs: https://create.roblox.com/docs",
    "  - Luau documentation: https://luau-lang.org",
    "  - DevForum: https://devforum.roblox.com",
)

TIER_MENU = {"1": "beginner", "2": "intermediate", "3": "advanced"}


class QuitApp(Exception):
    """Signal immediate app exit from nested menu flows."""


def _service(progress_path: Path) -> PracticeService:
    """Create app service backed by a progress file."""
    return PracticeService(progress_path=progress_path)


def run(argv: list[str] | None = None) -> int:
    """Run the CLI application."""
    parser = argparse.ArgumentParser(prog="luaupractice", description="Roblox Luau scripting practice")
    parser.add_argument("command", nargs="?", default="play", choices=["play"])
    parser.add_argument(
        "--progress-file",
        type=Path,
        default=DEFAULT_PROGRESS_PATH,
        help=f"where completed challenges are stored (default: {DEFAULT_PROGRESS_PATH})",
    )
    parser.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS, type=str.upper)
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    return play_shell(progress_path=args.progress_file)


def play_shell(
    progress_path: Path = DEFAULT_PROGRESS_PATH,
    input_fn: InputFn = input,
    print_fn: PrintFn = print,
) -> int:
    """Run persistent menu-driven shell."""
    service = _service(progress_path)
    try:
        while True:
            summary = service.progress_summary()
            print_fn("\n=== Luau Practice ===")
            print_fn(f"Progress: {summary.completed} challenges completed")
            print_fn("1) Practice mode (free coding)")
            print_fn("2) Challenge mode")
            print_fn("3) Code snippet library")
            print_fn("4) Code analyzer")
            print_fn("5) View progress")
            print_fn("6) Help")
            print_fn("7) Exit")
            choice = input_fn("Choose: ").strip().lower()

            if choice == "1":
                _practice_flow(service, input_fn, print_fn)
            elif choice == "2":
                _challenge_flow(service, input_fn, print_fn)
            elif choice == "3":
                _snippet_flow(service, input_fn, print_fn)
            elif choice == "4":
                _analyzer_flow(service, input_fn, print_fn)
            elif choice == "5":
                _status_flow(service, print_fn)
            elif choice == "6":
                _help_flow(print_fn)
            elif choice in MENU_QUIT_COMMANDS:
                break
            else:
                print_fn("Invalid choice.")
    except QuitApp:
        pass
    print_fn("Thanks for practicing. Happy scripting!")
    return 0


def _choose_index(choice: str, count: int) -> int | None:
    """Convert a 1-based menu choice to an index, or None when invalid."""
    if not choice.isdigit():
        return None
    index = int(choice) - 1
    if 0 <= index < count:
        return index
    return None


def _read_code(input_fn: InputFn) -> str:
    """Collect code lines until an END line."""
    lines: list[str] = []
    while True:
        line = input_fn("> ")
        if line.strip() == END_OF_CODE:
            return "".join(f"{item}\n" for item in lines)
        lines.append(line)


def _print_code(service: PracticeService, code: str, print_fn: PrintFn) -> None:
    """Print highlighted code between frame rules."""
    print_fn(CODE_FRAME)
    print_fn(service.highlight(code).rstrip("\n"))
    print_fn(CODE_FRAME)


def _print_analysis(result: AnalysisResult, print_fn: PrintFn) -> None:
    """Print a full analysis report."""
    print_fn("\n=== Analysis Results ===")
    print_fn(f"Complexity score: {result.complexity}")
    for label, items in (("Errors", result.errors), ("Warnings", result.warnings), ("Suggestions", result.suggestions)):
        if not items:
            continue
        print_fn(f"\n{label} ({len(items)}):")
        for item in items:
            print_fn(f"  - {item}")
    if not result.errors and not result.warnings:
        print_fn("\nNo issues found!")


def _practice_flow(service: PracticeService, input_fn: InputFn, print_fn: PrintFn) -> None:
    """Free coding with optional quick or full analysis."""
    print_fn("\n=== Practice Mode ===")
    print_fn(f"Enter Luau code. Type {END_OF_CODE} on its own line when finished.")
    print_fn(f"Type {PRACTICE_ANALYZE} for a quick check or {PRACTICE_BACK} to return.")
    lines: list[str] = []
    while True:
        line = input_fn("> ")
        command = line.strip()
        if command == PRACTICE_BACK:
            return
        if command == PRACTICE_ANALYZE:
            if not lines:
                print_fn("Nothing to analyze yet.")
                continue
            result = service.analyze("".join(f"{item}\n" for item in lines))
            quick = f"Quick analysis: complexity {result.complexity}"
            if result.warnings:
                quick += f", {len(result.warnings)} warning(s)"
            print_fn(quick)
            continue
        if command != END_OF_CODE:
            lines.append(line)
            continue

        if not lines:
            return
        code = "".join(f"{item}\n" for item in lines)
        print_fn("\nCode saved!")
        _print_code(service, code, print_fn)
        print_fn("1) Analyze code")
        print_fn("2) Start new code")
        print_fn("b) Back")
        choice = input_fn("Choose: ").strip().lower()
        if choice == "1":
            _print_analysis(service.analyze(code), print_fn)
            return
        if choice == "2":
            lines = []
            print_fn("Starting fresh.")
            continue
        return


def _challenge_flow(service: PracticeService, input_fn: InputFn, print_fn: PrintFn) -> None:
    """Pick a difficulty tier, then a challenge."""
    while True:
        print_fn("\n=== Challenge Mode ===")
        print_fn("1) Beginner (difficulty 1-2)")
        print_fn("2) Intermediate (difficulty 3-4)")
        print_fn("3) Advanced (difficulty 5)")
        print_fn("4) All challenges")
        print_fn("b) Back")
        print_fn("q) Quit")
        choice = input_fn("Choose: ").strip().lower()
        if choice in MENU_BACK_COMMANDS:
            return
        if choice == "q":
            raise QuitApp()
        if choice in TIER_MENU:
            challenges = service.challenges.get_challenges_by_tier(TIER_MENU[choice])
        elif choice == "4":
            challenges = service.challenges.get_all_challenges()
        else:
            print_fn("Invalid choice.")
            continue
        _challenge_list_flow(service, challenges, input_fn, print_fn)


def _challenge_list_flow(
    service: PracticeService, challenges: list[Challenge], input_fn: InputFn, print_fn: PrintFn
) -> None:
    """Show challenges with completion marks and open one."""
    print_fn("\n=== Available Challenges ===")
    for idx, challenge in enumerate(challenges, start=1):
        mark = "[x]" if service.is_completed(challenge.id) else "[ ]"
        print_fn(f"{idx:>2}) {mark} {challenge.title} {'*' * challenge.difficulty}")
        print_fn(f"      {challenge.description}")
    print_fn("b) Back")
    choice = input_fn("Select challenge: ").strip().lower()
    if choice in MENU_BACK_COMMANDS:
        return
    index = _choose_index(choice, len(challenges))
    if index is None:
        print_fn("Invalid choice.")
        return
    _challenge_detail_flow(service, challenges[index], input_fn, print_fn)


def _challenge_detail_flow(service: PracticeService, challenge: Challenge, input_fn: InputFn, print_fn: PrintFn) -> None:
    """Show one challenge and accept a solution, hints, or the answer."""
    print_fn(f"\n=== {challenge.title} ===")
    print_fn(f"Description: {challenge.description}")
    print_fn(f"Difficulty: {challenge.difficulty}")
    print_fn("\nStarter code:")
    _print_code(service, challenge.starter_code, print_fn)
    print_fn("1) Start coding")
    print_fn("2) Show hints")
    print_fn("3) Show solution")
    print_fn("b) Back")
    choice = input_fn("Choose: ").strip().lower()
    if choice == "1":
        print_fn(f"Enter your solution (type {END_OF_CODE} when done):")
        code = _read_code(input_fn)
        if service.submit_solution(challenge.id, code):
            print_fn("Correct! Challenge completed!")
        else:
            print_fn("Not quite right. Try again or check the hints!")
    elif choice == "2":
        print_fn("\nHints:")
        for idx, hint in enumerate(challenge.hints, start=1):
            print_fn(f"  {idx}. {hint}")
    elif choice == "3":
        print_fn("\nSolution:")
        _print_code(service, challenge.solution, print_fn)
    elif choice not in MENU_BACK_COMMANDS:
        print_fn("Invalid choice.")


def _snippet_flow(service: PracticeService, input_fn: InputFn, print_fn: PrintFn) -> None:
    """Browse snippets by category or search titles."""
    while True:
        categories = service.snippets.get_categories()
        search_choice = str(len(categories) + 1)
        print_fn("\n=== Code Snippet Library ===")
        for idx, category in enumerate(categories, start=1):
            print_fn(f"{idx}) {category}")
        print_fn(f"{search_choice}) Search snippets")
        print_fn("b) Back")
        print_fn("q) Quit")
        choice = input_fn("Choose: ").strip().lower()
        if choice in MENU_BACK_COMMANDS:
            return
        if choice == "q":
            raise QuitApp()
        if choice == search_choice:
            query = input_fn("Search term: ").strip()
            results = service.snippets.search_snippets(query)
            if not results:
                print_fn(f"No snippets found matching '{query}'.")
                continue
            print_fn(f"\n=== Search results for '{query}' ===")
            for idx, snippet in enumerate(results, start=1):
                print_fn(f"{idx}) {snippet.title} [{snippet.category}]")
                print_fn(f"   {snippet.description}")
            continue
        index = _choose_index(choice, len(categories))
        if index is None:
            print_fn("Invalid choice.")
            continue

        snippets = service.snippets.get_snippets_by_category(categories[index])
        print_fn(f"\n=== {categories[index]} Snippets ===")
        for idx, snippet in enumerate(snippets, start=1):
            print_fn(f"{idx}) {snippet.title}")
            print_fn(f"   {snippet.description}")
        print_fn("b) Back")
        snippet_choice = input_fn("Select snippet to view: ").strip().lower()
        if snippet_choice in MENU_BACK_COMMANDS:
            continue
        snippet_index = _choose_index(snippet_choice, len(snippets))
        if snippet_index is None:
            print_fn("Invalid choice.")
            continue
        selected = snippets[snippet_index]
        print_fn(f"\n=== {selected.title} ===")
        print_fn(selected.description)
        _print_code(service, selected.code, print_fn)


def _analyzer_flow(service: PracticeService, input_fn: InputFn, print_fn: PrintFn) -> None:
    """Analyze a block of code entered by the user."""
    print_fn("\n=== Code Analyzer ===")
    print_fn(f"Enter Luau code. Type {END_OF_CODE} on its own line when finished.")
    code = _read_code(input_fn)
    if not code:
        print_fn("No code entered.")
        return
    _print_analysis(service.analyze(code), print_fn)


def _status_flow(service: PracticeService, print_fn: PrintFn) -> None:
    """Print completed challenges and overall percentage."""
    summary = service.progress_summary()
    print_fn("\n=== Your Progress ===")
    print_fn(f"Challenges completed: {summary.completed}")
    print_fn(f"Total challenges: {summary.total}")
    print_fn(f"[{progress_bar(summary.percent)}] {summary.percent:.1f}%")
    if summary.completed_titles:
        print_fn("\nCompleted:")
        for title in summary.completed_titles:
            print_fn(f"  - {title}")


def _help_flow(print_fn: PrintFn) -> None:
    """Print the quick reference."""
    print_fn("\n=== Help ===")
    for line in HELP_TEXT:
        print_fn(line)


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
