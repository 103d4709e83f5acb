"""Time-range overlap rule shared by admission and tests."""


def overlaps(start_a: int, end_a: int, start_b: int, end_b: int) -> bool:
    """Return True if ``[start_a, end_a)`` and ``[start_b, end_b)`` intersect.

    Bounds are minutes since midnight. Ranges that only touch at a boundary
    (one ends exactly when the other starts) do not overlap.
    """
    return start_a < end_b and start_b < end_a
