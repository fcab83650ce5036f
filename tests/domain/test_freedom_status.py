"""Tests for the financial freedom status."""

from decimal import Decimal

import pytest

from finhealth.domain.services.status import classify_freedom_status


def test_passive_income_covering_expense_is_freedom() -> None:
    """Passive income at or above expense means freedom."""
    result = classify_freedom_status(Decimal("1000000"), Decimal("1000000"))

    assert result.status == "FREEDOM"
    assert result.color == "green"


def test_half_coverage_is_almost() -> None:
    """Exactly half of the expense covered is ALMOST."""
    result = classify_freedom_status(Decimal("500000"), Decimal("1000000"))

    assert result.status == "ALMOST"
    assert result.label == "Almost Free"
    assert result.color == "blue"


def test_zero_passive_income_and_zero_expense_is_almost() -> None:
    """With nothing earned and nothing spent the result is ALMOST, not START.

    The freedom rule requires a positive expense, so evaluation falls to the
    half-coverage rule, which holds for 0 >= 0.
    """
    result = classify_freedom_status(Decimal("0"), Decimal("0"))

    assert result.status == "ALMOST"


def test_passive_income_without_expense_is_almost() -> None:
    """Freedom needs a positive expense even when passive income exists."""
    result = classify_freedom_status(Decimal("250"), Decimal("0"))

    assert result.status == "ALMOST"


@pytest.mark.parametrize(
    ("passive_income", "expense", "status"),
    [
        (Decimal("1500"), Decimal("1000"), "FREEDOM"),
        (Decimal("999"), Decimal("1000"), "ALMOST"),
        (Decimal("499"), Decimal("1000"), "PROGRESS"),
        (Decimal("1"), Decimal("1000"), "PROGRESS"),
        (Decimal("0"), Decimal("1000"), "START"),
        ("garbage", Decimal("1000"), "START"),
    ],
)
def test_rules_are_evaluated_in_order(passive_income, expense, status) -> None:
    """The first matching rule decides the status."""
    assert classify_freedom_status(passive_income, expense).status == status


def test_start_status_has_label_and_color() -> None:
    """START carries its own label and color."""
    result = classify_freedom_status(Decimal("0"), Decimal("10"))

    assert result.label == "Start Building Assets"
    assert result.color == "gray"


def test_near_maximal_amounts_classify_without_error() -> None:
    """Amounts at the edge of the Decimal range still get a status."""
    assert classify_freedom_status("9E+999999", "9E+999999").status == "FREEDOM"
    assert classify_freedom_status("1", "9E+999999").status == "PROGRESS"
