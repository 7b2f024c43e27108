from brandaudit.audit.aggregate import aggregate
from brandaudit.audit.models import CONTROL_TYPES, ClassifiedResult


def _results(*control_types: str) -> list[ClassifiedResult]:
    return [
        ClassifiedResult(title=f"t{i}", link=f"https://e{i}.com", snippet="", control_type=c)  # type: ignore[arg-type]
        for i, c in enumerate(control_types)
    ]


def test_empty_batch_is_all_zero() -> None:
    counts, percentages = aggregate([])
    assert counts == {c: 0 for c in CONTROL_TYPES}
    assert percentages == {c: 0 for c in CONTROL_TYPES}


def test_one_of_each_category() -> None:
    counts, percentages = aggregate(_results(*CONTROL_TYPES))
    assert counts == {c: 1 for c in CONTROL_TYPES}
    assert percentages == {c: 25 for c in CONTROL_TYPES}


def test_counts_sum_to_result_count() -> None:
    results = _results("FullControl", "FullControl", "NoControl", "MissedOpportunity", "NoControl")
    counts, percentages = aggregate(results)
    assert sum(counts.values()) == len(results)
    assert counts["PartialControl"] == 0
    assert percentages == {
        "FullControl": 40,
        "PartialControl": 0,
        "NoControl": 40,
        "MissedOpportunity": 20,
    }


def test_halves_round_up() -> None:
    results = _results("FullControl", *["MissedOpportunity"] * 7)
    _, percentages = aggregate(results)
    assert percentages["FullControl"] == 13
    assert percentages["MissedOpportunity"] == 88


def test_independent_rounding_may_not_sum_to_100() -> None:
    # Accepted: each category is rounded on its own and never renormalized.
    _, percentages = aggregate(_results("FullControl", "PartialControl", "NoControl"))
    assert percentages["FullControl"] == 33
    assert sum(percentages.values()) == 99


def test_two_thirds() -> None:
    _, percentages = aggregate(_results("NoControl", "NoControl", "PartialControl"))
    assert percentages["NoControl"] == 67
    assert percentages["PartialControl"] == 33
