"""Level derivation: a coarse tier computed from total points."""

POINTS_PER_LEVEL = 100


def level_for_points(points: int) -> int:
    """
    Return the level for a point total.

    level(points) = floor(points / 100) + 1, so level(0) == 1,
    level(99) == 1, level(100) == 2. Negative totals clamp to level 1.
    """
    if points <= 0:
        return 1
    return points // POINTS_PER_LEVEL + 1
