import io

import pytest

from algotasks.walk import main, steps_needed


def test_longest_step():
    assert steps_needed(3000) == 1


def test_shortest_step_is_capped():
    assert steps_needed(1) == 15


def test_exact_division():
    assert steps_needed(250) == 12


@pytest.mark.parametrize("step", [0, 0.5, 3000.5, -7])
def test_out_of_range(step):
    with pytest.raises(ValueError):
        steps_needed(step)


def test_non_increasing_and_capped():
    results = [steps_needed(s) for s in range(1, 3001, 7)]
    assert all(a >= b for a, b in zip(results, results[1:]))
    assert all(1 <= r <= 15 for r in results)


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3000\n1\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "1\n15\n"


def test_main_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n0\n5\n"))
    assert main([]) == -1
    assert capsys.readouterr().out == "error\n"