import math
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from savings_prioritizer.logger import get_logger
from savings_prioritizer.models import SpendingCategory, Transaction

logger = get_logger(__name__)


@dataclass(frozen=True)
class CategoryAggregates:
    """Per-category expense counts and signed totals, plus the scaling denominators."""

    counts: dict[SpendingCategory, int]
    totals: dict[SpendingCategory, float]
    max_count: float
    max_total: float
    expense_count: int

    @property
    def categories(self) -> list[SpendingCategory]:
        return list(self.totals)


def aggregate_expenses(transactions: Iterable[Transaction]) -> CategoryAggregates | None:
    """
    Group expenses (amount < 0) by category.

    Returns None when there is nothing to score. Categories keep the order in
    which they first appear among the expenses. Raises ValueError when a
    category total overflows the float range.
    """
    expenses = [t for t in transactions if t.amount < 0]
    if not expenses:
        logger.debug("[AGGREGATE] No expenses found in input.")
        return None

    counts: dict[SpendingCategory, int] = defaultdict(int)
    totals: dict[SpendingCategory, float] = defaultdict(float)
    for transaction in expenses:
        counts[transaction.category] += 1
        totals[transaction.category] += transaction.amount

    overflowed = [category.value for category, total in totals.items() if not math.isfinite(total)]
    if overflowed:
        raise ValueError(f"Category totals overflow the float range: {', '.join(overflowed)}")

    # Defaults only apply to an empty mapping; any expense makes both maxima positive.
    max_count = max(counts.values(), default=1)
    max_total = max((abs(total) for total in totals.values()), default=1.0)

    logger.debug(
        "[AGGREGATE] %d expenses across %d categories.",
        len(expenses),
        len(totals),
    )

    return CategoryAggregates(
        counts=dict(counts),
        totals=dict(totals),
        max_count=float(max_count),
        max_total=float(max_total),
        expense_count=len(expenses),
    )
