import pytest

from connectfour.interfaces.cli import build_parser, main


@pytest.fixture
def feed_input(monkeypatch):
    def _feed(*answers):
        answers = iter(answers)

        def fake_input(prompt=""):
            try:
                return next(answers)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)
    return _feed


def test_no_command_fails(capsys):
    assert main([]) == 1
    assert "specify a command" in capsys.readouterr().out


def test_replay_reports_winner(capsys):
    assert main(["replay", "--moves", "0,1,0,1,0,1,0"]) == 0
    out = capsys.readouterr().out
    assert "Player 1 wins" in out
    assert "Winning run" in out


def test_replay_in_progress(capsys):
    assert main(["replay", "--moves", "3,3"]) == 0
    assert "Player 1 to move" in capsys.readouterr().out


def test_replay_stops_at_rejected_move(capsys):
    assert main(["replay", "--moves", "0,0,0,0,0,0,0"]) == 1
    assert "Move 7 (column 0) rejected: Column 0 is full" in capsys.readouterr().out


def test_replay_rejects_bad_input(capsys):
    assert main(["replay", "--moves", "0,a"]) == 1
    assert "Error parsing moves" in capsys.readouterr().out


def test_replay_tie(capsys, tie_moves):
    assert main(["replay", "--moves", ",".join(map(str, tie_moves))]) == 0
    assert "tie" in capsys.readouterr().out


def test_position_with_win(capsys):
    cells = [0] * 42
    cells[:4] = [1, 1, 1, 1]
    cells[7:10] = [2, 2, 2]
    assert main(["test", "--position", ",".join(map(str, cells))]) == 0
    out = capsys.readouterr().out
    assert "Win for Player 1 detected" in out
    assert "Player 2" not in out
    assert "Empty spaces: 35" in out


def test_position_without_win(capsys):
    assert main(["test", "--position", ",".join(["0"] * 42)]) == 0
    out = capsys.readouterr().out
    assert "No win detected" in out
    assert "Valid moves: [0, 1, 2, 3, 4, 5, 6]" in out


def test_position_wrong_length(capsys):
    assert main(["test", "--position", "1,2,1"]) == 1
    assert "must have 42 values" in capsys.readouterr().out


@pytest.mark.parametrize("value", [300, 256, 3])
def test_position_with_unknown_cell_value(capsys, value):
    cells = [value] + [0] * 41
    assert main(["test", "--position", ",".join(map(str, cells))]) == 1
    assert "Cells must be 0 (empty), 1 or 2" in capsys.readouterr().out


def test_position_missing(capsys):
    assert main(["test"]) == 1


def test_benchmark(capsys):
    assert main(["benchmark", "--iterations", "5", "--seed", "7"]) == 0
    out = capsys.readouterr().out
    assert "Completed in" in out


def test_play_until_win(feed_input, capsys):
    feed_input("hello", "9", "0", "1", "0", "1", "0", "1", "0")
    assert main(["play"]) == 0
    out = capsys.readouterr().out
    assert "Invalid input" in out
    assert "Column 9 is out of range" in out
    assert "Player 1 wins" in out


def test_play_restart_and_quit(feed_input, capsys):
    feed_input("0", "r", "q")
    assert main(["play"]) == 0
    out = capsys.readouterr().out
    assert "Game restarted." in out
    assert "Quitting game." in out


def test_play_ends_on_eof(feed_input, capsys):
    feed_input("3")
    assert main(["play"]) == 0
    assert "Quitting game." in capsys.readouterr().out


def test_parser_debug_levels():
    args = build_parser().parse_args(["--debug-level", "trace", "benchmark"])
    assert args.debug_level == "trace"
    assert args.iterations == 1000
