"""Standalone verifier for the fixture scheduler.

Re-imports a fixture CSV, resolves names against the roster and checks every
fixture constraint.
Usage: python -m fixturecsp.verify <fixtures.csv> [roster.csv] [config.yaml]
"""

import csv
import sys
from pathlib import Path

from fixturecsp.config import load_config
from fixturecsp.constraints import (
    build_constraints, format_validation_report, validate_fixtures,
)
from fixturecsp.errors import FixtureError, MalformedRecord
from fixturecsp.models import Competitor, Fixture
from fixturecsp.output import CSV_HEADER
from fixturecsp.roster import read_roster
from fixturecsp.stats import compute_stats, format_stats_report


def _resolve(name: str, by_name: dict[str, list[Competitor]],
             line: int) -> Competitor:
    matches = by_name.get(name, [])
    if not matches:
        raise MalformedRecord(f"unknown competitor {name!r}", line)
    if len(matches) > 1:
        raise MalformedRecord(
            f"competitor name {name!r} is ambiguous ({len(matches)} entries)",
            line,
        )
    return matches[0]


def parse_fixture_csv(csv_path: str | Path,
                      competitors: list[Competitor]) -> list[Fixture]:
    """Parse a fixture CSV back into Fixture objects."""
    by_name: dict[str, list[Competitor]] = {}
    for c in competitors:
        if c not in by_name.get(c.name, []):
            by_name.setdefault(c.name, []).append(c)

    fixtures = []
    try:
        with open(csv_path, newline="", encoding="utf-8") as f:
            for line, row in enumerate(csv.reader(f), 1):
                if not row:
                    continue
                if [field.strip() for field in row] == CSV_HEADER:
                    continue
                if len(row) < 2:
                    raise MalformedRecord(
                        f"expected home, away but got {len(row)} field(s)", line
                    )
                home = _resolve(row[0].strip(), by_name, line)
                away = _resolve(row[1].strip(), by_name, line)
                fixtures.append(Fixture(home=home, away=away))
    except UnicodeDecodeError as e:
        raise MalformedRecord(f"fixtures {csv_path} are not valid UTF-8: {e}") from e
    except OSError as e:
        raise MalformedRecord(f"cannot read fixtures {csv_path}: {e}") from e

    return fixtures


def verify(csv_path: str | Path, config: dict,
           roster_path: str | Path | None = None) -> dict:
    """Load roster and fixtures, print reports, return the validation result."""
    roster_path = roster_path or config["roster"]["path"]
    print(f"Reading roster from {roster_path}...")
    competitors = read_roster(roster_path, config["groups"],
                              config["roster"]["header_label"])

    print(f"Parsing fixtures from {csv_path}...")
    fixtures = parse_fixture_csv(csv_path, competitors)
    print(f"Loaded {len(fixtures)} fixtures")

    result = validate_fixtures(fixtures, competitors,
                               build_constraints(config["constraints"]))
    print(format_validation_report(result))

    stats = compute_stats(fixtures, competitors, config["groups"])
    print("\n" + format_stats_report(stats, competitors, config["groups"]))
    return result


def main():
    if len(sys.argv) < 2:
        print("Usage: python -m fixturecsp.verify <fixtures.csv> [roster.csv] [config.yaml]")
        print("  Validates a fixture CSV against a roster and the pairing constraints.")
        sys.exit(1)

    csv_path = sys.argv[1]
    roster_path = sys.argv[2] if len(sys.argv) > 2 else None
    config_path = sys.argv[3] if len(sys.argv) > 3 else None

    if not Path(csv_path).exists():
        print(f"Error: {csv_path} not found")
        sys.exit(1)

    try:
        config = load_config(config_path)
        result = verify(csv_path, config, roster_path)
    except FixtureError as e:
        print(f"Error: {e}")
        sys.exit(1)

    sys.exit(0 if result["valid"] else 1)


if __name__ == "__main__":
    main()
