import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pushblock_poker.cli import main, play_moves
from pushblock_poker.config import Settings
from pushblock_poker.coordinate import Point
from pushblock_poker.levels import SAMPLE_LEVEL, sample_board
from pushblock_poker.timeline import Timeline


def test_puzzle_solution_prints_win(capsys, monkeypatch):
    monkeypatch.delenv("PUSHBLOCK_LEVEL", raising=False)
    code = main(["puzzle", "--moves", "DULLRUUDRR"])
    out = capsys.readouterr().out

    assert code == 0
    assert "Win!" in out
    assert "Moves recorded: 10" in out


def test_puzzle_without_moves_prints_sample(capsys, monkeypatch):
    monkeypatch.delenv("PUSHBLOCK_LEVEL", raising=False)
    assert main(["puzzle"]) == 0
    out = capsys.readouterr().out

    assert out.startswith(SAMPLE_LEVEL)
    assert "Win!" not in out


def test_puzzle_reads_level_from_environment(tmp_path, capsys, monkeypatch):
    path = tmp_path / "corridor.txt"
    path.write_text("@0^\n", encoding="utf-8")
    monkeypatch.setenv("PUSHBLOCK_LEVEL", str(path))

    assert main(["puzzle", "--moves", "R"]) == 0
    assert "Win!" in capsys.readouterr().out


def test_puzzle_rejects_unknown_move(capsys, monkeypatch):
    monkeypatch.delenv("PUSHBLOCK_LEVEL", raising=False)
    assert main(["puzzle", "--moves", "UQ"]) == 2
    assert "unknown direction" in capsys.readouterr().err


def test_puzzle_reports_missing_level(tmp_path, capsys):
    assert main(["puzzle", "--level", str(tmp_path / "missing.txt")]) == 2
    assert "error:" in capsys.readouterr().err


def test_play_moves_handles_undo_redo_reset():
    timeline = play_moves(Timeline.from_board(sample_board()), "D U z y x")
    assert timeline.current == sample_board()
    assert timeline.index == 3

    timeline = play_moves(Timeline.from_board(sample_board()), "DZ")
    assert timeline.current.player == Point(4, 4)


def test_poker_prints_kinds_and_winner(capsys):
    assert main(["poker", "Ts Js Qs Ks As", "Ad 2d 3d 4d 5d"]) == 0
    out = capsys.readouterr().out

    assert "Royal Flush" in out
    assert "Straight Flush (Five high)" in out
    assert "Hand 1 is stronger" in out


def test_poker_reports_tie(capsys):
    assert main(["poker", "Ks Kd Qh 7c 2s", "Kh Kc Qs 7d 2h"]) == 0
    assert "Tie" in capsys.readouterr().out


def test_poker_rejects_short_hand(capsys):
    assert main(["poker", "As Ks Qs Js"]) == 2
    assert "5 to 7 cards" in capsys.readouterr().err


def test_settings_from_env():
    settings = Settings.from_env({"PUSHBLOCK_LOG_LEVEL": "debug", "PUSHBLOCK_LEVEL": "levels/one.txt"})
    assert settings.log_level == "DEBUG"
    assert settings.level_path == "levels/one.txt"

    defaults = Settings.from_env({})
    assert defaults == Settings()
