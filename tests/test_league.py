import csv
from functools import partial

import pytest

from connect4.ai.computer import ComputerPlayer
from connect4.scripts.league_core import CSV_COLUMNS, export_standings, league_round_robin, standings
from connect4.scripts.league_play import add_result, play_headless, run_pairings_batch
from connect4.scripts.league_roster import build_roster
from connect4.scripts.league_scoring import ppg, strength_score, wilson_lcb
from connect4.scripts.league_types import Agg


class TestScoring:
    def test_wilson_bounds(self):
        assert wilson_lcb(0.5, 0, 1.28) == 0.0
        assert wilson_lcb(0.0, 10, 1.28) == 0.0
        assert 0.0 < wilson_lcb(1.0, 10, 1.28) < 1.0

    def test_more_games_tighter_bound(self):
        assert wilson_lcb(0.75, 100, 1.28) > wilson_lcb(0.75, 4, 1.28)

    def test_ppg(self):
        assert ppg(Agg()) == 0.0
        assert ppg(Agg(games=4, points=3.0)) == 0.75


class TestAddResult:
    def test_draw(self):
        a, b = Agg(), Agg()
        add_result(a, b, None, a_side=0)
        assert (a.draws, b.draws, a.points, b.points) == (1, 1, 0.5, 0.5)

    @pytest.mark.parametrize("a_side", [0, 1])
    def test_a_wins(self, a_side):
        a, b = Agg(), Agg()
        add_result(a, b, a_side, a_side=a_side)
        assert (a.wins, b.losses, a.points, b.points) == (1, 1, 1.0, 0.0)

    def test_b_wins(self):
        a, b = Agg(), Agg()
        add_result(a, b, 1, a_side=0)
        assert (a.losses, b.wins, b.points) == (1, 1, 1.0)


class TestPlay:
    def test_headless_game(self):
        outcome, stats = play_headless(ComputerPlayer(depth=1), ComputerPlayer(depth=2), seed_base=5)
        assert outcome in (0, 1, None)
        assert stats[0]["moves"] > 0
        assert stats[1]["nodes"] > 0

    def test_same_seed_same_game(self):
        first = play_headless(ComputerPlayer(depth=1), ComputerPlayer(depth=1), seed_base=11)
        second = play_headless(ComputerPlayer(depth=1), ComputerPlayer(depth=1), seed_base=11)
        assert first[0] == second[0]
        assert first[1][0]["moves"] == second[1][0]["moves"]

    def test_batch_alternates_first_player(self):
        make = partial(ComputerPlayer, depth=1)
        out = run_pairings_batch(([("A", "B", make, make, 0)], 2))
        assert [row[2] for row in out] == [0, 1]


class TestStandings:
    def test_roster(self):
        roster = build_roster([3, 1, 3])
        assert [t.depth for t in roster] == [1, 3]
        assert roster[0].make().depth == 1

    def test_sorted_by_strength(self):
        teams = build_roster([1, 2])
        agg = {
            teams[0].name: Agg(games=10, points=2.0, wins=2, losses=8),
            teams[1].name: Agg(games=10, points=8.0, wins=8, losses=2),
        }
        rows = standings(teams, agg, 1.28)
        assert rows[0]["name"] == "Computer d2"
        assert rows[0]["strength_wilson_lcb"] == round(strength_score(agg["Computer d2"], 1.28), 6)

    def test_export(self, tmp_path):
        teams = build_roster([1])
        rows = standings(teams, {teams[0].name: Agg(games=2, points=1.0, wins=1, losses=1)}, 1.28)
        path = export_standings(rows, tmp_path / "results")
        assert path.name.startswith("league_results_")
        with open(path, newline="") as f:
            reader = csv.DictReader(f)
            assert reader.fieldnames == CSV_COLUMNS
            assert next(reader)["name"] == "Computer d1"

    def test_round_robin(self, tmp_path, capsys):
        rows = league_round_robin(
            build_roster([1, 2]),
            games_per_pair=2,
            max_workers=1,
            export_dir=tmp_path,
        )
        assert sum(r["games"] for r in rows) == 4
        assert len(list(tmp_path.glob("league_results_*.csv"))) == 1
        assert "Final standings" in capsys.readouterr().out
