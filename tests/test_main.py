from pathlib import Path
from typing import Any

import luaupractice.main as main
from luaupractice.service import PracticeService


def _play(monkeypatch: Any, tmp_path: Path, answers: list[str]) -> tuple[int, list[str], PracticeService]:
    service = PracticeService(progress_path=tmp_path / "progress.dat")
    monkeypatch.setattr(main, "_service", lambda _path: service)
    inputs = iter(answers)
    outputs: list[str] = []
    code = main.play_shell(input_fn=lambda _: next(inputs), print_fn=outputs.append)
    return code, outputs, service


def test_run_enters_play_shell(monkeypatch: Any) -> None:
    seen: dict[str, Path] = {}

    def fake_play_shell(progress_path: Path) -> int:
        seen["path"] = progress_path
        return 0

    monkeypatch.setattr(main, "play_shell", fake_play_shell)
    assert main.run([]) == 0
    assert seen["path"] == Path("progress.dat")
    assert main.run(["play", "--progress-file", "custom/state.dat", "--log-level", "debug"]) == 0
    assert seen["path"] == Path("custom/state.dat")


def test_quit_from_main_menu(monkeypatch: Any, tmp_path: Path) -> None:
    code, outputs, _ = _play(monkeypatch, tmp_path, ["7"])
    assert code == 0
    assert any("Thanks for practicing" in line for line in outputs)


def test_invalid_choice_then_quit(monkeypatch: Any, tmp_path: Path) -> None:
    code, outputs, _ = _play(monkeypatch, tmp_path, ["9", "q"])
    assert code == 0
    assert "Invalid choice." in outputs


def test_complete_challenge_saves_progress(monkeypatch: Any, tmp_path: Path) -> None:
    answers = ["2", "1", "1", "1", 'print("Hello, Roblox!")', "END", "b", "q"]
    code, outputs, service = _play(monkeypatch, tmp_path, answers)
    assert code == 0
    assert "Correct! Challenge completed!" in outputs
    assert service.is_completed("hello_world") is True
    assert (tmp_path / "progress.dat").read_text(encoding="utf-8") == "1\nhello_world\n"


def test_wrong_solution_is_not_recorded(monkeypatch: Any, tmp_path: Path) -> None:
    answers = ["2", "1", "1", "1", "local x = 1", "END", "b", "q"]
    _, outputs, service = _play(monkeypatch, tmp_path, answers)
    assert "Not quite right. Try again or check the hints!" in outputs
    assert service.get_progress().challenges_completed == 0


def test_completed_challenge_is_marked_in_list(monkeypatch: Any, tmp_path: Path) -> None:
    (tmp_path / "progress.dat").write_text("1\nhello_world\n", encoding="utf-8")
    _, outputs, _ = _play(monkeypatch, tmp_path, ["2", "4", "b", "b", "q"])
    assert any("[x] Hello Roblox" in line for line in outputs)
    assert any("[ ] Create a Part" in line for line in outputs)


def test_show_hints_and_solution(monkeypatch: Any, tmp_path: Path) -> None:
    answers = ["2", "4", "4", "2", "4", "4", "3", "b", "q"]
    _, outputs, _ = _play(monkeypatch, tmp_path, answers)
    assert "  1. Use for i = start, end do" in outputs
    assert any("print" in line and "\033[" in line for line in outputs)


def test_invalid_challenge_selection(monkeypatch: Any, tmp_path: Path) -> None:
    _, outputs, _ = _play(monkeypatch, tmp_path, ["2", "4", "99", "x", "b", "q"])
    assert outputs.count("Invalid choice.") == 2


def test_quit_from_nested_menu(monkeypatch: Any, tmp_path: Path) -> None:
    code, outputs, _ = _play(monkeypatch, tmp_path, ["2", "q"])
    assert code == 0
    assert any("Thanks for practicing" in line for line in outputs)


def test_snippet_search(monkeypatch: Any, tmp_path: Path) -> None:
    _, outputs, _ = _play(monkeypatch, tmp_path, ["3", "8", "touch", "8", "nothing", "b", "q"])
    assert "1) Touch Event [Events]" in outputs
    assert "No snippets found matching 'nothing'." in outputs


def test_snippet_browse_category(monkeypatch: Any, tmp_path: Path) -> None:
    _, outputs, _ = _play(monkeypatch, tmp_path, ["3", "1", "2", "b", "q"])
    assert "=== Basics Snippets ===" in "\n".join(outputs)
    assert "\n=== Print Function ===" in outputs


def test_analyzer_flow(monkeypatch: Any, tmp_path: Path) -> None:
    _, outputs, _ = _play(monkeypatch, tmp_path, ["4", "if x = 1 then", "end", "END", "q"])
    assert "Complexity score: 2" in outputs
    assert any("Possible assignment operator" in line for line in outputs)


def test_analyzer_flow_without_code(monkeypatch: Any, tmp_path: Path) -> None:
    _, outputs, _ = _play(monkeypatch, tmp_path, ["4", "END", "q"])
    assert "No code entered." in outputs


def test_practice_quick_and_full_analysis(monkeypatch: Any, tmp_path: Path) -> None:
    answers = ["1", "ANALYZE", "local x = 1", "ANALYZE", "END", "1", "q"]
    _, outputs, _ = _play(monkeypatch, tmp_path, answers)
    assert "Nothing to analyze yet." in outputs
    assert "Quick analysis: complexity 1" in outputs
    assert "Code saved!" in "\n".join(outputs)
    assert "\nNo issues found!" in outputs


def test_practice_start_new_code_then_back(monkeypatch: Any, tmp_path: Path) -> None:
    answers = ["1", "while true do", "end", "END", "2", "BACK", "q"]
    _, outputs, _ = _play(monkeypatch, tmp_path, answers)
    assert "Starting fresh." in outputs


def test_status_and_help(monkeypatch: Any, tmp_path: Path) -> None:
    (tmp_path / "progress.dat").write_text("1\nloop_practice\n", encoding="utf-8")
    _, outputs, _ = _play(monkeypatch, tmp_path, ["5", "6", "q"])
    assert "Challenges completed: 1" in outputs
    assert "Total challenges: 10" in outputs
    assert "  - Count to 10" in outputs
    assert any(line.endswith("10.0%") for line in outputs)
    assert "Luau basics:" in outputs


def test_main_entry_exits_with_run_code(monkeypatch: Any) -> None:
    monkeypatch.setattr(main, "run", lambda: 0)
    try:
        main.main_entry()
        raise AssertionError("Expected SystemExit.")
    except SystemExit as exc:
        assert exc.code == 0
