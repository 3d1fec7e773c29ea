#!/usr/bin/env python3
"""Group fixture scheduler.

Generate mode (default):
    python -m fixturecsp.schedule [roster.csv] [--config FILE] [-o OUT]

    Reads the roster, pairs competitors in one greedy pass (no two
    competitors from the same country meet), prints the fixture list,
    a validation report and group balance statistics, and writes the
    fixtures to a two-column CSV sorted by home competitor.

Verify mode:
    python -m fixturecsp.schedule [roster.csv] --verify <fixtures.csv>

    Re-imports a fixture CSV and checks it against the roster.
    Exit code 0 if valid, 1 if violations found.

Examples:
    python -m fixturecsp.schedule                        # roster from config
    python -m fixturecsp.schedule data/teams.csv -o out.csv
    python -m fixturecsp.schedule --config season.yaml --no-sort
    python -m fixturecsp.schedule --verify output/scheduled_matches.csv
"""

import argparse
import sys
from pathlib import Path

from fixturecsp.config import load_config
from fixturecsp.constraints import (
    build_constraints, format_validation_report, validate_fixtures,
)
from fixturecsp.errors import FixtureError
from fixturecsp.output import format_fixture_list, write_fixtures
from fixturecsp.roster import read_roster
from fixturecsp.scheduler import SchedulingEngine
from fixturecsp.stats import compute_stats, format_stats_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Group fixture scheduler",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Output files (generate mode):
  {output}  Fixture CSV: "Home Team,Away Team" header, one row per fixture

Exit codes:
  0  Fixtures written (or verified valid)
  1  Malformed roster, unwritable output, bad config, or violations found
""",
    )
    parser.add_argument(
        "roster", nargs="?", default=None,
        help="Path to roster CSV (default: roster.path from config)"
    )
    parser.add_argument(
        "--config", "-c", default=None,
        help="Path to config YAML file (default: built-in defaults, "
             "or config.yaml if present)"
    )
    parser.add_argument(
        "--output", "-o", default=None,
        help="Fixture CSV to write (default: output.path from config)"
    )
    parser.add_argument(
        "--no-sort", action="store_true",
        help="Write fixtures in commit order instead of sorted by home name"
    )
    parser.add_argument(
        "--verify", metavar="CSV",
        help="Verify an existing fixture CSV instead of generating"
    )
    return parser


def generate(config: dict, roster_path: str, output_path: str,
             sort_by_home: bool = True) -> dict:
    """Run one scheduling pass end to end and write the fixture CSV."""
    print(f"Reading roster from {roster_path}...")
    competitors = read_roster(roster_path, config["groups"],
                              config["roster"]["header_label"])
    print(f"Loaded {len(competitors)} competitors")

    constraints = build_constraints(config["constraints"])
    print(f"Scheduling (constraints: {', '.join(config['constraints']) or 'none'})...")
    engine = SchedulingEngine(competitors, groups=config["groups"],
                              constraints=constraints)
    fixtures = engine.run()

    if fixtures:
        print(format_fixture_list(fixtures))
    else:
        print("No fixtures could be scheduled.")

    print("\nValidating...")
    result = validate_fixtures(fixtures, engine.competitors, constraints)
    print(format_validation_report(result))

    stats = compute_stats(fixtures, engine.competitors, config["groups"])
    print("\n" + format_stats_report(stats, engine.competitors, config["groups"]))

    print("\nWriting output files...")
    write_fixtures(fixtures, output_path, sort_by_home=sort_by_home)
    return result


def main(argv=None):
    args = build_parser().parse_args(argv)

    config_path = args.config
    if config_path is None and Path("config.yaml").exists():
        config_path = "config.yaml"
    if config_path is not None and not Path(config_path).exists():
        print(f"Error: config file {config_path} not found")
        sys.exit(1)

    try:
        if config_path:
            print(f"Loading config from {config_path}...")
        config = load_config(config_path)
        roster_path = args.roster or config["roster"]["path"]

        if args.verify:
            from fixturecsp.verify import verify
            result = verify(args.verify, config, roster_path)
            sys.exit(0 if result["valid"] else 1)

        output_path = args.output or config["output"]["path"]
        sort_by_home = config["output"]["sort_by_home"] and not args.no_sort
        result = generate(config, roster_path, output_path, sort_by_home)
    except FixtureError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if result["valid"]:
        print("\nFixtures generated successfully!")
    else:
        print(f"\nFixtures have {len(result['errors'])} constraint violations.")
        sys.exit(1)


if __name__ == "__main__":
    main()
