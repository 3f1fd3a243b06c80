import pytest

from algotasks.penalty import Tournament, main, solve


def test_world_cup_format():
    assert Tournament(8, 4, 2, 0).summary() == "8*2/4+0=63+0"


@pytest.mark.parametrize("groups,teams,advancing,direct", [(3, 5, 2, 1), (7, 3, 1, 0), (1, 2, 1, 4), (0, 0, 0, 0)])
def test_bracket_fills_to_power_of_two(groups, teams, advancing, direct):
    t = Tournament(groups, teams, advancing, direct)
    bracket = groups * advancing + direct + t.extra_teams()
    assert bracket >= 1
    assert bracket & (bracket - 1) == 0
    assert t.extra_teams() >= 0
    assert t.total_games() == groups * (teams * (teams - 1) // 2) + bracket - 1


def test_solve_stops_at_sentinel():
    out = solve("8 4 2 0\n-1 -1 -1 -1\n3 5 2 1\n")
    assert out == Tournament(8, 4, 2, 0).summary() + "\n"


def test_main_round_trip(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("8 4 2 0\n-1 -1 -1 -1\n", encoding="utf-8")
    assert main([str(source), str(target)]) == 0
    assert target.read_text(encoding="utf-8") == "8*2/4+0=63+0\n"


def test_main_missing_input(tmp_path):
    assert main([str(tmp_path / "absent.in"), str(tmp_path / "out.txt")]) == 1