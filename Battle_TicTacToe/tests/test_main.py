"""Entry point wiring: settings loading, CLI overrides and a headless match."""

import re
import subprocess
import sys
from pathlib import Path

import pytest

from Battle_TicTacToe import main as main_mod
from Battle_TicTacToe.ai.search_minimax import MinimaxAI
from Battle_TicTacToe.engine.console import ConsoleHuman
from Battle_TicTacToe.utils.cli import parse_args
from Battle_TicTacToe.utils.logger import log_event


def test_bundled_settings_load():
    settings = main_mod.load_settings("config/settings.yaml")
    assert settings["board_width"] == 3
    assert len(settings["players"]) == 2


def test_missing_settings_file_gives_empty_settings(tmp_path):
    assert main_mod.load_settings(tmp_path / "nope.yaml") == {}


def test_cli_overrides_settings():
    args = parse_args(["--board-width", "4", "--mode", "ai-vs-ai", "--rounds", "3"])
    merged = main_mod.merge_settings({"board_width": 3, "board_height": 3, "rounds": 1}, args)
    assert merged["board_width"] == 4
    assert merged["board_height"] == 3
    assert merged["mode"] == "ai-vs-ai"
    assert merged["rounds"] == 3


def test_build_match_wires_controllers():
    game, controllers = main_mod.build_match({"mode": "human-vs-ai", "ai_model": "minimax", "to_win": 9})
    human, bot = game.players
    assert isinstance(controllers[human], ConsoleHuman)
    assert isinstance(controllers[bot], MinimaxAI)
    assert bot.is_ai and not human.is_ai
    assert game.board.to_win == 3


def test_main_runs_headless_random_match(tmp_path, capsys):
    settings = tmp_path / "settings.yaml"
    settings.write_text(
        "board_width: 4\nboard_height: 4\nto_win: 3\nmode: ai-vs-ai\nai_model: random\n",
        encoding="utf-8",
    )
    scores = main_mod.main(["--settings", str(settings), "--rounds", "2", "--seed", "1", "--quiet"])
    assert set(scores) == {"Player 1", "Player 2"}
    assert sum(scores.values()) <= 2
    assert "Final scores" in capsys.readouterr().out


def test_main_treats_null_settings_as_defaults(tmp_path):
    settings = tmp_path / "settings.yaml"
    settings.write_text(
        "board_width: null\nboard_height: null\nto_win: null\nrounds: null\nmode: ai-vs-ai\nai_model: random\n",
        encoding="utf-8",
    )
    scores = main_mod.main(["--settings", str(settings), "--seed", "2", "--quiet"])
    assert set(scores) == {"Player 1", "Player 2"}


def test_main_reports_bad_settings_through_parser(tmp_path, capsys):
    settings = tmp_path / "settings.yaml"
    settings.write_text("board_width: wide\nmode: ai-vs-ai\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main_mod.main(["--settings", str(settings)])
    assert exc.value.code == 2
    assert "board_width" in capsys.readouterr().err


def test_main_runs_as_a_script(tmp_path):
    settings = tmp_path / "settings.yaml"
    settings.write_text("mode: ai-vs-ai\nai_model: random\n", encoding="utf-8")
    result = subprocess.run(
        [sys.executable, str(Path(main_mod.__file__)), "--settings", str(settings), "--seed", "3", "--quiet"],
        cwd=tmp_path,
        capture_output=True,
        text=True,
        timeout=60,
    )
    assert result.returncode == 0, result.stderr
    assert "Final scores" in result.stdout


def test_log_event_prefixes_timestamp(capsys):
    log_event("Move 1: A (X) (0, 0)")
    out = capsys.readouterr().out
    assert re.fullmatch(r"\[\d\d:\d\d:\d\d\] Move 1: A \(X\) \(0, 0\)\n", out)
