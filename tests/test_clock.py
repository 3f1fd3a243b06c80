import pytest

from algotasks.clock import FULL_TURN, ClockTime, main, sector_area, solve

EXAMPLE = "1\n4 10 20 55\n8 30 5 10\n20.5\n"


def test_worked_example():
    assert solve(EXAMPLE) == "1. 476.286\n"


def test_hundredths_range():
    assert ClockTime(0, 0, 0, 0).hundredths() == 0
    assert ClockTime(11, 59, 59, 99).hundredths() == FULL_TURN - 1


def test_area_is_antisymmetric():
    a = ClockTime(4, 10, 20, 55)
    b = ClockTime(8, 30, 5, 10)
    assert sector_area(a, b, 20.5) == pytest.approx(-sector_area(b, a, 20.5))


def test_same_time_has_no_area():
    t = ClockTime(3, 58, 58, 44)
    assert sector_area(t, t, 22.5) == 0.0


def test_main_writes_output(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text(EXAMPLE, encoding="utf-8")
    assert main([str(source), str(target)]) == 0
    assert target.read_text(encoding="utf-8") == "1. 476.286\n"


def test_main_missing_input(tmp_path):
    assert main([str(tmp_path / "absent.in"), str(tmp_path / "out.txt")]) == 1