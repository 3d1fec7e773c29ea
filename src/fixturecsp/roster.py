"""Roster reading for the fixture scheduler.

A roster is a CSV with one competitor per row: name, country, group.
A header row is recognised by its first field matching the column label.
"""

import csv
from pathlib import Path

from fixturecsp.errors import MalformedRecord
from fixturecsp.models import DEFAULT_GROUPS, Competitor


def parse_group(s: str, groups, line: int | None = None) -> int:
    """Parse a group number and check it is one of the configured groups."""
    try:
        group = int(s.strip())
    except ValueError:
        raise MalformedRecord(f"group {s!r} is not an integer", line) from None
    if group not in groups:
        raise MalformedRecord(
            f"group {group} is outside the configured groups {list(groups)}",
            line,
        )
    return group


def parse_roster_rows(rows, groups=DEFAULT_GROUPS,
                      header_label: str = "team") -> list[Competitor]:
    """Turn CSV rows into Competitors, in input order.

    Any bad row aborts the whole roster.
    """
    competitors = []
    for line, row in enumerate(rows, 1):
        if not row or all(not field.strip() for field in row):
            continue
        if row[0].strip() == header_label:
            continue
        if len(row) < 3:
            raise MalformedRecord(
                f"expected name, country, group but got {len(row)} field(s)",
                line,
            )

        name = row[0].strip()
        country = row[1].strip()
        if not name:
            raise MalformedRecord("empty name", line)
        if not country:
            raise MalformedRecord(f"empty country for {name}", line)

        group = parse_group(row[2], groups, line)
        competitors.append(Competitor(name=name, country=country, group=group))

    return competitors


def read_roster(path: str | Path, groups=DEFAULT_GROUPS,
                header_label: str = "team") -> list[Competitor]:
    """Read a roster CSV file."""
    path = Path(path)
    try:
        with open(path, newline="", encoding="utf-8") as f:
            return parse_roster_rows(csv.reader(f), groups, header_label)
    except UnicodeDecodeError as e:
        raise MalformedRecord(f"roster {path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise MalformedRecord(f"cannot read roster {path}: {e}") from e
