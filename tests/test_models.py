from datetime import date

import pytest
from pydantic import ValidationError

from savings_prioritizer.models import SavingsOpportunity, SpendingCategory, Transaction


def test_transaction_accepts_category_name() -> None:
    t = Transaction(amount=-3.85, date=date(2025, 10, 17), description="Tesco", category="GROCERIES_FOOD")

    assert t.category is SpendingCategory.GROCERIES_FOOD


def test_transaction_rejects_unknown_category() -> None:
    with pytest.raises(ValidationError):
        Transaction(amount=-5.0, date=date(2025, 10, 17), description="Bookmaker", category="GAMBLING")


@pytest.mark.parametrize("amount", [float("inf"), float("-inf"), float("nan")])
def test_transaction_rejects_non_finite_amount(amount: float) -> None:
    with pytest.raises(ValidationError):
        Transaction(amount=amount, date=date(2025, 10, 17), description="Broken", category="MISCELLANEOUS")


def test_transaction_is_frozen() -> None:
    t = Transaction(amount=-2.5, date=date(2025, 10, 17), description="Translink", category="TRANSPORT_ESSENTIAL")

    with pytest.raises(ValidationError):
        t.amount = -100.0  # type: ignore[misc]


def test_savings_opportunity_is_frozen() -> None:
    op = SavingsOpportunity(
        category=SpendingCategory.SUBSCRIPTIONS,
        total_spent=37.98,
        transaction_count=1,
        priority_score=1.4,
        rationale="Standard Review.",
    )

    with pytest.raises(ValidationError):
        op.priority_score = 9.9  # type: ignore[misc]


def test_savings_opportunity_rejects_negative_total() -> None:
    with pytest.raises(ValidationError):
        SavingsOpportunity(
            category=SpendingCategory.SUBSCRIPTIONS,
            total_spent=-1.0,
            transaction_count=1,
            priority_score=1.0,
            rationale="Standard Review.",
        )
