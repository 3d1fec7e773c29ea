"""Statistics and balance reporting for the fixture scheduler."""

from collections import defaultdict

from fixturecsp.models import DEFAULT_GROUPS, Competitor, Fixture


def compute_stats(fixtures: list[Fixture], competitors: list[Competitor],
                  groups=DEFAULT_GROUPS) -> dict:
    """Compute per-competitor statistics for a fixture list.

    Returns dict with:
    - total_fixtures, total_pairings
    - home_counts, away_counts: competitor -> count
    - by_group: competitor -> {group: (home, away)}
    - opponents: competitor -> opponents in first-meeting order
    - unpaired: competitors with no fixture, in roster order
    """
    groups = list(groups)
    home_counts = defaultdict(int)
    away_counts = defaultdict(int)
    by_group = {c: {g: [0, 0] for g in groups} for c in competitors}
    opponents = defaultdict(list)

    for f in fixtures:
        h = f.home
        a = f.away
        home_counts[h] += 1
        away_counts[a] += 1
        if h in by_group and a.group in by_group[h]:
            by_group[h][a.group][0] += 1
        if a in by_group and h.group in by_group[a]:
            by_group[a][h.group][1] += 1
        if a not in opponents[h]:
            opponents[h].append(a)
        if h not in opponents[a]:
            opponents[a].append(h)

    unpaired = [c for c in competitors
                if home_counts.get(c, 0) + away_counts.get(c, 0) == 0]

    return {
        "total_fixtures": len(fixtures),
        "total_pairings": len(fixtures) // 2,
        "home_counts": dict(home_counts),
        "away_counts": dict(away_counts),
        "by_group": {c: {g: tuple(v) for g, v in row.items()}
                     for c, row in by_group.items()},
        "opponents": dict(opponents),
        "unpaired": unpaired,
    }


def format_stats_report(stats: dict, competitors: list[Competitor],
                        groups=DEFAULT_GROUPS) -> str:
    """Format statistics as text: totals, per-group H/A table, unpaired list."""
    groups = list(groups)
    lines = []
    lines.append("=" * 60)
    lines.append("FIXTURE STATISTICS")
    lines.append("=" * 60)
    lines.append(f"\nFixtures: {stats['total_fixtures']} "
                 f"({stats['total_pairings']} two-leg pairings)")
    lines.append(f"Competitors: {len(competitors)}, "
                 f"unpaired: {len(stats['unpaired'])}")

    if competitors:
        width = max(len(c.name) for c in competitors)
        width = max(width, len("Competitor"))
        header = f"\n{'Competitor':<{width}}  Grp  Ctry  " + "  ".join(
            f"vsG{g:<3}" for g in groups
        ) + "  Total"
        lines.append(header)
        lines.append("-" * (len(header) - 1))

        for c in competitors:
            row = stats["by_group"].get(c, {})
            cells = []
            for g in groups:
                h, a = row.get(g, (0, 0))
                cells.append(f"{h}H/{a}A")
            home = stats["home_counts"].get(c, 0)
            away = stats["away_counts"].get(c, 0)
            lines.append(
                f"{c.name:<{width}}  {c.group:>3}  {c.country[:4]:<4}  "
                + "  ".join(f"{cell:<6}" for cell in cells)
                + f"  {home}H/{away}A"
            )

    if stats["unpaired"]:
        lines.append(f"\n--- UNPAIRED ({len(stats['unpaired'])}) ---")
        for c in stats["unpaired"]:
            lines.append(f"  {c.name} ({c.country}, group {c.group})")

    return "\n".join(lines)
