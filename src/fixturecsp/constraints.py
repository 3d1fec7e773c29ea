"""Pairing constraints and fixture validation.

Constraints are objects with a single accepts(a, b) check. A ConstraintSet
combines them by conjunction, evaluated in order, stopping at the first
rejection.
"""

from collections import Counter

from fixturecsp.errors import ConfigError
from fixturecsp.models import Competitor, Fixture


class Constraint:
    """A binary rule a candidate pairing must satisfy."""
    name = "constraint"

    def accepts(self, a: Competitor, b: Competitor) -> bool:
        raise NotImplementedError


class DifferentCountry(Constraint):
    """Competitors from the same country never meet."""
    name = "different_country"

    def accepts(self, a: Competitor, b: Competitor) -> bool:
        return a.country != b.country


class DifferentGroup(Constraint):
    """Only cross-group pairings are allowed."""
    name = "different_group"

    def accepts(self, a: Competitor, b: Competitor) -> bool:
        return a.group != b.group


CONSTRAINT_TYPES: dict[str, type[Constraint]] = {
    DifferentCountry.name: DifferentCountry,
    DifferentGroup.name: DifferentGroup,
}


class ConstraintSet:
    def __init__(self, constraints: list[Constraint] | None = None):
        if constraints is None:
            constraints = [DifferentCountry()]
        self.constraints = list(constraints)

    def __len__(self) -> int:
        return len(self.constraints)

    def append(self, constraint: Constraint):
        self.constraints.append(constraint)

    def first_failure(self, a: Competitor, b: Competitor) -> Constraint | None:
        """Return the first constraint rejecting (a, b), or None."""
        for constraint in self.constraints:
            if not constraint.accepts(a, b):
                return constraint
        return None

    def accepts(self, a: Competitor, b: Competitor) -> bool:
        return self.first_failure(a, b) is None


def build_constraints(names: list[str]) -> ConstraintSet:
    """Build a ConstraintSet from constraint names, keeping their order."""
    constraints = []
    for name in names:
        if name not in CONSTRAINT_TYPES:
            known = ", ".join(sorted(CONSTRAINT_TYPES))
            raise ConfigError(f"Unknown constraint {name!r} (known: {known})")
        constraints.append(CONSTRAINT_TYPES[name]())
    return ConstraintSet(constraints)


def _label(c: Competitor) -> str:
    return f"{c.name} ({c.country}, group {c.group})"


def validate_fixtures(fixtures: list[Fixture], competitors: list[Competitor],
                      constraints: ConstraintSet | None = None) -> dict:
    """Validate a fixture list against the roster and constraints.

    Returns dict with:
    - valid: bool (True if no hard violations)
    - errors: list of hard violations
    - warnings: list of soft issues (e.g. competitors left unpaired)
    """
    if constraints is None:
        constraints = ConstraintSet()

    errors = []
    warnings = []
    known = set(competitors)
    directed = Counter()

    for f in fixtures:
        h = f.home
        a = f.away

        if h not in known:
            errors.append(f"Unknown home competitor: {_label(h)}")
            continue
        if a not in known:
            errors.append(f"Unknown away competitor: {_label(a)}")
            continue

        if h == a:
            errors.append(f"{_label(h)} is scheduled against itself")
            continue

        failed = constraints.first_failure(h, a)
        if failed is not None:
            errors.append(
                f"{_label(h)} vs {_label(a)} violates {failed.name}"
            )

        directed[(h, a)] += 1

    for (h, a), count in directed.items():
        if count > 1:
            errors.append(
                f"{_label(h)} hosts {_label(a)} {count} times"
            )
        if (a, h) not in directed:
            errors.append(
                f"{_label(h)} vs {_label(a)} has no return fixture"
            )

    playing = set()
    for h, a in directed:
        playing.add(h)
        playing.add(a)
    for c in competitors:
        if c not in playing:
            warnings.append(f"{_label(c)} has no fixtures")

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
    }


def format_validation_report(result: dict) -> str:
    """Format validation results as text."""
    lines = []
    lines.append("=" * 60)
    lines.append("FIXTURE VALIDATION REPORT")
    lines.append("=" * 60)

    if result["valid"]:
        lines.append("\nRESULT: VALID (no constraint violations)")
    else:
        lines.append(f"\nRESULT: INVALID ({len(result['errors'])} violations)")

    if result["errors"]:
        lines.append(f"\n--- ERRORS ({len(result['errors'])}) ---")
        for e in result["errors"]:
            lines.append(f"  ERROR: {e}")

    if result["warnings"]:
        lines.append(f"\n--- WARNINGS ({len(result['warnings'])}) ---")
        for w in result["warnings"]:
            lines.append(f"  WARN: {w}")

    return "\n".join(lines)
