from datetime import date

import pytest

from savings_prioritizer.analyzers.aggregator import aggregate_expenses
from savings_prioritizer.models import SpendingCategory, Transaction


def _tx(amount: float, category: SpendingCategory, description: str = "test") -> Transaction:
    return Transaction(amount=amount, date=date(2025, 10, 17), description=description, category=category)


def test_aggregate_counts_and_totals() -> None:
    transactions = [
        _tx(-10.0, SpendingCategory.GROCERIES_FOOD, "Tesco"),
        _tx(-5.5, SpendingCategory.GROCERIES_FOOD, "ASDA"),
        _tx(-30.0, SpendingCategory.SHOPPING_LUXURY, "Amazon"),
    ]

    aggregates = aggregate_expenses(transactions)

    assert aggregates is not None
    assert aggregates.counts == {
        SpendingCategory.GROCERIES_FOOD: 2,
        SpendingCategory.SHOPPING_LUXURY: 1,
    }
    assert aggregates.totals[SpendingCategory.GROCERIES_FOOD] == -15.5
    assert aggregates.totals[SpendingCategory.SHOPPING_LUXURY] == -30.0
    assert aggregates.max_count == 2
    assert aggregates.max_total == 30.0
    assert aggregates.expense_count == 3


def test_aggregate_ignores_income() -> None:
    transactions = [
        _tx(4500.0, SpendingCategory.HOUSING_FIXED, "MONTHLY PAYCHECK"),
        _tx(-1200.0, SpendingCategory.HOUSING_FIXED, "Rent Payment"),
        _tx(0.0, SpendingCategory.MISCELLANEOUS, "Zero"),
    ]

    aggregates = aggregate_expenses(transactions)

    assert aggregates is not None
    assert aggregates.counts == {SpendingCategory.HOUSING_FIXED: 1}
    assert aggregates.totals == {SpendingCategory.HOUSING_FIXED: -1200.0}
    assert aggregates.expense_count == 1


def test_aggregate_no_expenses_returns_none() -> None:
    assert aggregate_expenses([]) is None
    assert aggregate_expenses([_tx(199.06, SpendingCategory.MISCELLANEOUS, "Bank credit")]) is None


def test_aggregate_keeps_first_appearance_order() -> None:
    transactions = [
        _tx(-2.5, SpendingCategory.TRANSPORT_ESSENTIAL),
        _tx(-15.9, SpendingCategory.EATING_OUT_COFFEE),
        _tx(-2.5, SpendingCategory.TRANSPORT_ESSENTIAL),
        _tx(-37.98, SpendingCategory.SUBSCRIPTIONS),
    ]

    aggregates = aggregate_expenses(transactions)

    assert aggregates is not None
    assert aggregates.categories == [
        SpendingCategory.TRANSPORT_ESSENTIAL,
        SpendingCategory.EATING_OUT_COFFEE,
        SpendingCategory.SUBSCRIPTIONS,
    ]


def test_aggregate_small_totals_are_not_floored() -> None:
    # A lone expense under 1 still scales against itself.
    aggregates = aggregate_expenses([_tx(-0.99, SpendingCategory.MISCELLANEOUS, "Apple")])

    assert aggregates is not None
    assert aggregates.max_total == 0.99
    assert aggregates.max_count == 1


def test_aggregate_rejects_overflowing_total() -> None:
    transactions = [
        _tx(-1e308, SpendingCategory.SHOPPING_LUXURY, "Yacht"),
        _tx(-1e308, SpendingCategory.SHOPPING_LUXURY, "Second yacht"),
        _tx(-5.0, SpendingCategory.HOUSING_FIXED, "Rent"),
    ]

    with pytest.raises(ValueError, match="SHOPPING_LUXURY"):
        aggregate_expenses(transactions)
