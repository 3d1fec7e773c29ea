"""Config loading and validation for the fixture scheduler."""

from pathlib import Path

import yaml

from fixturecsp.errors import ConfigError
from fixturecsp.models import DEFAULT_GROUPS

DEFAULT_ROSTER_PATH = "data/teams.csv"
DEFAULT_OUTPUT_PATH = "output/scheduled_matches.csv"
DEFAULT_HEADER_LABEL = "team"
DEFAULT_CONSTRAINTS = ["different_country"]


def parse_groups(value) -> list[int]:
    """Parse the group range.

    Accepts an int N (groups 1..N) or a list of distinct positive ints.
    """
    if isinstance(value, bool):
        raise ConfigError(f"Invalid groups value: {value!r}")
    if isinstance(value, int):
        if value < 1:
            raise ConfigError(f"groups must be at least 1, got {value}")
        return list(range(1, value + 1))
    if not isinstance(value, (list, tuple)) or not value:
        raise ConfigError(f"groups must be an int or a non-empty list, got {value!r}")

    groups = []
    for g in value:
        if isinstance(g, bool) or not isinstance(g, int) or g < 1:
            raise ConfigError(f"Invalid group number: {g!r}")
        if g in groups:
            raise ConfigError(f"Duplicate group number: {g}")
        groups.append(g)
    return groups


def parse_config(raw: dict | None) -> dict:
    """Validate a raw config mapping, filling in defaults.

    Returns dict with:
    - groups: list[int]
    - roster: {path, header_label}
    - constraints: list of constraint names
    - output: {path, sort_by_home}
    """
    raw = raw or {}
    if not isinstance(raw, dict):
        raise ConfigError("Config must be a mapping")

    groups = parse_groups(raw.get("groups", list(DEFAULT_GROUPS)))

    roster_raw = raw.get("roster") or {}
    if not isinstance(roster_raw, dict):
        raise ConfigError(f"roster must be a mapping, got {roster_raw!r}")
    roster = {
        "path": str(roster_raw.get("path", DEFAULT_ROSTER_PATH)),
        "header_label": str(roster_raw.get("header_label", DEFAULT_HEADER_LABEL)),
    }

    constraints = raw.get("constraints", DEFAULT_CONSTRAINTS)
    if isinstance(constraints, str):
        constraints = [constraints]
    if not isinstance(constraints, list):
        raise ConfigError(f"constraints must be a list, got {constraints!r}")
    constraints = [str(c) for c in constraints]

    output_raw = raw.get("output") or {}
    if not isinstance(output_raw, dict):
        raise ConfigError(f"output must be a mapping, got {output_raw!r}")
    sort_by_home = output_raw.get("sort_by_home", True)
    if not isinstance(sort_by_home, bool):
        raise ConfigError(f"output.sort_by_home must be true or false, got {sort_by_home!r}")
    output = {
        "path": str(output_raw.get("path", DEFAULT_OUTPUT_PATH)),
        "sort_by_home": sort_by_home,
    }

    return {
        "groups": groups,
        "roster": roster,
        "constraints": constraints,
        "output": output,
    }


def load_config(path: str | Path | None = None) -> dict:
    """Load and validate a config YAML file.

    With no path, returns the defaults.
    """
    if path is None:
        return parse_config({})

    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config {path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    return parse_config(raw)
