"""Tests for output.py — fixture listing and CSV sink."""

import pytest

from fixturecsp.errors import SinkWriteFailure
from fixturecsp.models import Competitor, Fixture
from fixturecsp.output import (
    format_fixture_list, format_fixtures_csv, sorted_fixtures, write_fixtures,
)

A = Competitor("Ajax", "NL", 1)
B = Competitor("Benfica", "PT", 2)
C = Competitor("Celtic", "SC", 3)


def _fixtures():
    # commit order from a pass starting at Celtic
    return [Fixture(C, A), Fixture(A, C), Fixture(B, C), Fixture(C, B)]


class TestSortedFixtures:
    def test_by_home_name(self):
        result = sorted_fixtures(_fixtures())
        assert [f.home.name for f in result] == [
            "Ajax", "Benfica", "Celtic", "Celtic",
        ]

    def test_ties_keep_commit_order(self):
        result = sorted_fixtures(_fixtures())
        assert result[2] == Fixture(C, A)
        assert result[3] == Fixture(C, B)

    def test_does_not_mutate(self):
        fixtures = _fixtures()
        sorted_fixtures(fixtures)
        assert fixtures == _fixtures()


class TestFormatFixtureList:
    def test_lines(self):
        text = format_fixture_list([Fixture(A, B), Fixture(B, A)])
        assert text.splitlines() == [
            "Match: Ajax (Home) vs Benfica (Away)",
            "Match: Benfica (Home) vs Ajax (Away)",
        ]

    def test_empty(self):
        assert format_fixture_list([]) == ""


class TestFormatFixturesCsv:
    def test_sorted(self):
        text = format_fixtures_csv(_fixtures())
        assert text == (
            "Home Team,Away Team\n"
            "Ajax,Celtic\n"
            "Benfica,Celtic\n"
            "Celtic,Ajax\n"
            "Celtic,Benfica\n"
        )

    def test_commit_order(self):
        text = format_fixtures_csv(_fixtures(), sort_by_home=False)
        assert text.splitlines()[1] == "Celtic,Ajax"

    def test_header_only_when_empty(self):
        assert format_fixtures_csv([]) == "Home Team,Away Team\n"

    def test_quotes_names_with_commas(self):
        x = Competitor("Bodo, Glimt", "NO", 1)
        text = format_fixtures_csv([Fixture(x, A)])
        assert '"Bodo, Glimt",Ajax' in text


class TestWriteFixtures:
    def test_writes_file(self, tmp_path):
        path = tmp_path / "out" / "fixtures.csv"
        written = write_fixtures(_fixtures(), path)
        assert written == path
        assert path.read_text() == format_fixtures_csv(_fixtures())

    def test_repeat_export_is_identical(self, tmp_path):
        first = tmp_path / "a.csv"
        second = tmp_path / "b.csv"
        write_fixtures(_fixtures(), first)
        write_fixtures(_fixtures(), second)
        assert first.read_bytes() == second.read_bytes()

    def test_unwritable_destination(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        with pytest.raises(SinkWriteFailure):
            write_fixtures(_fixtures(), blocker / "fixtures.csv")
