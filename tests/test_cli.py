import io

import pytest

from algosolve.cli import main
from algosolve.counting import queens_attack, waiter
from algosolve.greedy import candies, pylons


def run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_candies_matches_library(monkeypatch, capsys):
    ratings = [2, 4, 2, 6, 1, 7, 8, 9, 2, 1]
    text = f"{len(ratings)}\n" + "\n".join(map(str, ratings)) + "\n"
    code, out, _ = run(monkeypatch, capsys, ["candies"], text)
    assert code == 0
    assert out == f"{candies(ratings)}\n"


def test_candies_sample(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["candies"], "3\n1\n2\n2\n")
    assert code == 0
    assert out == "4\n"


def test_waiter_sample_output(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["waiter"], "5 1\n3 4 7 6 5\n")
    assert code == 0
    assert out.split() == ["4", "6", "3", "7", "5"]


def test_waiter_matches_library(monkeypatch, capsys):
    numbers = [2, 3, 4, 5, 6, 7, 9, 10, 15, 21]
    text = f"{len(numbers)} 3\n" + " ".join(map(str, numbers)) + "\n"
    code, out, _ = run(monkeypatch, capsys, ["waiter"], text)
    assert code == 0
    assert [int(v) for v in out.split()] == waiter(numbers, 3)


def test_waiter_outputs_every_plate(monkeypatch, capsys):
    numbers = [11, 22, 33, 44, 55]
    text = "5 4\n" + " ".join(map(str, numbers)) + "\n"
    _, out, _ = run(monkeypatch, capsys, ["waiter"], text)
    assert sorted(int(v) for v in out.split()) == sorted(numbers)


def test_pylons_matches_library(monkeypatch, capsys):
    towns = [0, 1, 1, 1, 1, 0]
    text = "6 2\n" + " ".join(map(str, towns)) + "\n"
    code, out, _ = run(monkeypatch, capsys, ["pylons"], text)
    assert code == 0
    assert out == f"{pylons(2, towns)}\n"


def test_pylons_impossible(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["pylons"], "3 1\n0 0 0\n")
    assert code == 0
    assert out == "-1\n"


def test_queens_attack_empty_board(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["queens-attack"], "4 0\n4 4\n")
    assert code == 0
    assert out == "9\n"


def test_queens_attack_with_obstacles(monkeypatch, capsys):
    obstacles = [[5, 5], [4, 2], [2, 3]]
    text = "5 3\n4 3\n" + "\n".join(f"{r} {c}" for r, c in obstacles) + "\n"
    code, out, _ = run(monkeypatch, capsys, ["queens-attack"], text)
    assert code == 0
    assert out == f"{queens_attack(5, 4, 3, obstacles)}\n"


def test_truncated_input_is_an_error(monkeypatch, capsys):
    code, out, err = run(monkeypatch, capsys, ["candies"], "3\n1 2\n")
    assert code == 1
    assert out == ""
    assert "unexpected end of input" in err


def test_non_integer_token_is_an_error(monkeypatch, capsys):
    code, _, err = run(monkeypatch, capsys, ["waiter"], "2 1\n4 x\n")
    assert code == 1
    assert "'x'" in err


def test_negative_count_is_an_error(monkeypatch, capsys):
    code, _, err = run(monkeypatch, capsys, ["candies"], "-1\n")
    assert code == 1
    assert "negative" in err


def test_unknown_problem_exits_with_usage_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as excinfo:
        main(["nonsense"])
    assert excinfo.value.code == 2