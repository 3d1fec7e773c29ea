"""Output formatters for the fixture scheduler."""

import csv
from io import StringIO
from pathlib import Path

from fixturecsp.errors import SinkWriteFailure
from fixturecsp.models import Fixture

CSV_HEADER = ["Home Team", "Away Team"]


def sorted_fixtures(fixtures: list[Fixture]) -> list[Fixture]:
    """Fixtures ordered by home name; ties keep commit order."""
    return sorted(fixtures, key=lambda f: f.home.name)


def format_fixture_list(fixtures: list[Fixture]) -> str:
    """Format fixtures for the console, one per line, in the given order."""
    lines = []
    for f in fixtures:
        lines.append(f"Match: {f.home.name} (Home) vs {f.away.name} (Away)")
    return "\n".join(lines)


def format_fixtures_csv(fixtures: list[Fixture], sort_by_home: bool = True) -> str:
    """Format fixtures as a two-column CSV with a header row."""
    if sort_by_home:
        fixtures = sorted_fixtures(fixtures)

    output = StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for f in fixtures:
        writer.writerow([f.home.name, f.away.name])
    return output.getvalue()


def write_fixtures(fixtures: list[Fixture], path: str | Path,
                   sort_by_home: bool = True) -> Path:
    """Write the fixture CSV, creating the parent directory if needed."""
    path = Path(path)
    csv_text = format_fixtures_csv(fixtures, sort_by_home=sort_by_home)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(csv_text, encoding="utf-8")
    except OSError as e:
        raise SinkWriteFailure(f"Cannot write fixtures to {path}: {e}") from e
    print(f"Written: {path}")
    return path
