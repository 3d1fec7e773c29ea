"""Tests for verify.py — re-importing a written fixture CSV."""

import pytest

from fixturecsp.config import parse_config
from fixturecsp.errors import MalformedRecord
from fixturecsp.models import Competitor
from fixturecsp.output import write_fixtures
from fixturecsp.scheduler import schedule
from fixturecsp.verify import parse_fixture_csv, verify

A = Competitor("A", "X", 1)
B = Competitor("B", "X", 2)
C = Competitor("C", "Y", 3)


class TestParseFixtureCsv:
    def test_round_trip(self, tmp_path):
        fixtures = schedule([A, B, C])
        path = write_fixtures(fixtures, tmp_path / "f.csv", sort_by_home=False)
        assert parse_fixture_csv(path, [A, B, C]) == fixtures

    def test_unknown_name(self, tmp_path):
        path = tmp_path / "f.csv"
        path.write_text("Home Team,Away Team\nA,Z\n")
        with pytest.raises(MalformedRecord, match="unknown competitor 'Z'"):
            parse_fixture_csv(path, [A, B, C])

    def test_ambiguous_name(self, tmp_path):
        a2 = Competitor("A", "W", 2)
        path = tmp_path / "f.csv"
        path.write_text("Home Team,Away Team\nA,C\n")
        with pytest.raises(MalformedRecord, match="ambiguous"):
            parse_fixture_csv(path, [A, a2, C])

    def test_short_row(self, tmp_path):
        path = tmp_path / "f.csv"
        path.write_text("Home Team,Away Team\nA\n")
        with pytest.raises(MalformedRecord, match="line 2"):
            parse_fixture_csv(path, [A, B, C])

    def test_missing_file(self, tmp_path):
        with pytest.raises(MalformedRecord):
            parse_fixture_csv(tmp_path / "nope.csv", [A])

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "f.csv"
        path.write_bytes(b"Home Team,Away Team\n\xffA,C\n")
        with pytest.raises(MalformedRecord, match="not valid UTF-8"):
            parse_fixture_csv(path, [A, B, C])


class TestVerify:
    def _roster(self, tmp_path):
        path = tmp_path / "teams.csv"
        path.write_text("team,country,group\nA,X,1\nB,X,2\nC,Y,3\n")
        return path

    def test_valid(self, tmp_path, capsys):
        roster = self._roster(tmp_path)
        fixtures_path = write_fixtures(schedule([A, B, C]), tmp_path / "f.csv")
        result = verify(fixtures_path, parse_config({}), roster)
        assert result["valid"], result["errors"]
        assert "RESULT: VALID" in capsys.readouterr().out

    def test_same_country_detected(self, tmp_path):
        roster = self._roster(tmp_path)
        path = tmp_path / "f.csv"
        path.write_text("Home Team,Away Team\nA,B\nB,A\n")
        result = verify(path, parse_config({}), roster)
        assert not result["valid"]
        assert any("different_country" in e for e in result["errors"])

    def test_one_leg_detected(self, tmp_path):
        roster = self._roster(tmp_path)
        path = tmp_path / "f.csv"
        path.write_text("Home Team,Away Team\nA,C\n")
        result = verify(path, parse_config({}), roster)
        assert not result["valid"]
        assert any("no return fixture" in e for e in result["errors"])
