"""Tests for the financial health score."""

from decimal import Decimal

import pytest

from finhealth.domain.services.health import compute_health_score, grade_for_score


def _points(result) -> dict[str, int]:
    return {band.name: band.points for band in result.bands}


def test_salaried_profile_scores_grade_b() -> None:
    """Low debt, high savings, no passive income, two months of buffer."""
    result = compute_health_score(
        income=Decimal("10000000"),
        expense=Decimal("6000000"),
        passive_income=Decimal("0"),
        passive_expense=Decimal("2000000"),
        total_balance=Decimal("15000000"),
    )

    assert _points(result) == {
        "debt_service": 25,
        "savings_rate": 25,
        "passive_income_ratio": 5,
        "liquidity_buffer": 20,
    }
    assert result.score == 75
    assert result.grade == "B"


def test_no_income_and_no_expense_scores_45() -> None:
    """Both flat shortcuts apply: 30 for no income, 15 for no expense."""
    result = compute_health_score(0, 0, 0, 0, 0)

    assert _points(result) == {"no_income": 30, "liquidity_buffer": 15}
    assert result.score == 45
    assert result.grade == "C"


def test_no_income_path_is_capped_at_55() -> None:
    """Without income the best possible score stays at 55."""
    result = compute_health_score(
        income=Decimal("0"),
        expense=Decimal("100"),
        passive_income=Decimal("0"),
        passive_expense=Decimal("0"),
        total_balance=Decimal("1000000"),
    )

    assert result.score == 55
    assert result.grade == "C"


def test_no_expense_awards_flat_liquidity_points_regardless_of_balance() -> None:
    """Zero expense should give 15 liquidity points even with no balance."""
    result = compute_health_score(
        income=Decimal("1000"),
        expense=Decimal("0"),
        passive_income=Decimal("0"),
        passive_expense=Decimal("0"),
        total_balance=Decimal("-50"),
    )

    assert _points(result)["liquidity_buffer"] == 15


def test_best_profile_reaches_100() -> None:
    """Every band at its maximum gives a perfect score."""
    result = compute_health_score(
        income=Decimal("100"),
        expense=Decimal("50"),
        passive_income=Decimal("60"),
        passive_expense=Decimal("10"),
        total_balance=Decimal("150"),
    )

    assert result.score == 100
    assert result.grade == "A"


@pytest.mark.parametrize(
    ("passive_expense", "expected"),
    [
        (Decimal("29.99"), 25),
        (Decimal("30"), 15),
        (Decimal("49.99"), 15),
        (Decimal("50"), 5),
        (Decimal("120"), 5),
    ],
)
def test_debt_service_band_thresholds(passive_expense, expected) -> None:
    """Debt-service thresholds are strict upper bounds."""
    result = compute_health_score(
        Decimal("100"),
        Decimal("0"),
        Decimal("0"),
        passive_expense,
        Decimal("0"),
    )

    assert _points(result)["debt_service"] == expected


@pytest.mark.parametrize(
    ("expense", "expected"),
    [
        (Decimal("80"), 25),
        (Decimal("80.01"), 15),
        (Decimal("90"), 15),
        (Decimal("99"), 10),
        (Decimal("100"), 0),
        (Decimal("150"), 0),
    ],
)
def test_savings_rate_band_thresholds(expense, expected) -> None:
    """Savings-rate thresholds are inclusive lower bounds."""
    result = compute_health_score(
        Decimal("100"),
        expense,
        Decimal("0"),
        Decimal("0"),
        Decimal("0"),
    )

    assert _points(result)["savings_rate"] == expected


@pytest.mark.parametrize(
    ("passive_income", "expected"),
    [
        (Decimal("50"), 25),
        (Decimal("49"), 15),
        (Decimal("20"), 15),
        (Decimal("1"), 10),
        (Decimal("0"), 5),
    ],
)
def test_passive_income_band_thresholds(passive_income, expected) -> None:
    """Passive-income thresholds are inclusive lower bounds."""
    result = compute_health_score(
        Decimal("100"),
        Decimal("0"),
        passive_income,
        Decimal("0"),
        Decimal("0"),
    )

    assert _points(result)["passive_income_ratio"] == expected


@pytest.mark.parametrize(
    ("total_balance", "expected"),
    [
        (Decimal("300"), 25),
        (Decimal("299"), 20),
        (Decimal("200"), 20),
        (Decimal("100"), 15),
        (Decimal("1"), 10),
        (Decimal("0"), 0),
        (Decimal("-10"), 0),
    ],
)
def test_liquidity_band_thresholds(total_balance, expected) -> None:
    """Liquidity is measured in multiples of the period expense."""
    result = compute_health_score(
        Decimal("0"),
        Decimal("100"),
        Decimal("0"),
        Decimal("0"),
        total_balance,
    )

    assert _points(result)["liquidity_buffer"] == expected


def test_score_stays_in_range_and_matches_bands() -> None:
    """Scores stay within 0-100 and equal the sum of awarded bands."""
    profiles = [
        (0, 0, 0, 0, 0),
        (100, 500, 0, 400, -1000),
        (100, 50, 60, 10, 150),
        (0, 1000, 0, 999, 0),
        ("bad", "1", None, "x", "2"),
    ]
    for profile in profiles:
        result = compute_health_score(*profile)
        assert 0 <= result.score <= 100
        assert result.score == sum(band.points for band in result.bands)
        assert result.grade == grade_for_score(result.score)


def test_worst_income_profile_scores_grade_e() -> None:
    """Heavy debt, overspending and no buffer should grade E."""
    result = compute_health_score(
        Decimal("100"),
        Decimal("500"),
        Decimal("0"),
        Decimal("400"),
        Decimal("-1000"),
    )

    assert result.score == 10
    assert result.grade == "E"


def test_same_inputs_give_identical_scores() -> None:
    """Scoring is a pure function of its inputs."""
    args = (
        Decimal("10000000"),
        Decimal("6000000"),
        Decimal("0"),
        Decimal("2000000"),
        Decimal("15000000"),
    )

    assert compute_health_score(*args) == compute_health_score(*args)
    assert repr(compute_health_score(*args)) == repr(compute_health_score(*args))


@pytest.mark.parametrize(
    ("score", "grade"),
    [
        (100, "A"),
        (80, "A"),
        (79, "B"),
        (60, "B"),
        (59, "C"),
        (40, "C"),
        (39, "D"),
        (20, "D"),
        (19, "E"),
        (0, "E"),
    ],
)
def test_grade_for_score_uses_inclusive_lower_bounds(score, grade) -> None:
    """Grades switch exactly at 80, 60, 40 and 20."""
    assert grade_for_score(score) == grade


def test_grade_is_monotonic_in_score() -> None:
    """A higher score never yields a worse grade."""
    order = "EDCBA"
    ranks = [order.index(grade_for_score(score)) for score in range(101)]

    assert ranks == sorted(ranks)


@pytest.mark.parametrize(
    ("income", "expense", "passive_income", "passive_expense", "total_balance"),
    [
        ("1", "9E+999999", "0", "0", "1"),
        ("1E-999999", "1", "9E+999999", "9E+999999", "1"),
        ("9E+999999", "-9E+999999", "0", "0", "-9E+999999"),
    ],
)
def test_extreme_magnitudes_do_not_raise(
    income,
    expense,
    passive_income,
    passive_expense,
    total_balance,
) -> None:
    """Ratios beyond the Decimal exponent range still land in a band."""
    result = compute_health_score(
        income,
        expense,
        passive_income,
        passive_expense,
        total_balance,
    )

    assert 0 <= result.score <= 100
    assert result.score == sum(band.points for band in result.bands)


def test_huge_expense_leaves_only_positive_balance_points() -> None:
    """Three times a near-maximal expense saturates instead of overflowing."""
    result = compute_health_score("1", "9E+999999", "0", "0", "1")

    assert _points(result) == {
        "debt_service": 25,
        "savings_rate": 0,
        "passive_income_ratio": 5,
        "liquidity_buffer": 10,
    }
    assert result.score == 40
