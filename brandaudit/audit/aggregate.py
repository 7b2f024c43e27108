"""Per-category counts and percentages for a batch of classified results."""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from brandaudit.audit.models import CONTROL_TYPES, ClassifiedResult, ControlType


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer with halves going away from zero."""
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def aggregate(
    results: Iterable[ClassifiedResult],
) -> tuple[dict[ControlType, int], dict[ControlType, int]]:
    """
    Count results per control category and convert counts to percentages.

    Every category is present in both mappings. Each percentage is rounded on
    its own, so the values can sum to 99 or 101.
    """
    counts: dict[ControlType, int] = {c: 0 for c in CONTROL_TYPES}
    for result in results:
        counts[result.control_type] += 1

    total = max(sum(counts.values()), 1)
    percentages = {
        c: round_half_up(Decimal(counts[c]) * 100 / Decimal(total)) for c in CONTROL_TYPES
    }
    return counts, percentages
