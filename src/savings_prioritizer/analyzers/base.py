from abc import ABC, abstractmethod
from collections.abc import Sequence

from savings_prioritizer.analyzers.aggregator import CategoryAggregates, aggregate_expenses
from savings_prioritizer.models import SavingsOpportunity, SpendingCategory, Transaction


class SpendingAnalyzer(ABC):
    @abstractmethod
    def rank(self, aggregates: CategoryAggregates) -> list[SavingsOpportunity]:
        """Rank aggregated categories, highest savings priority first."""
        pass

    @abstractmethod
    def discretion_for(self, category: SpendingCategory) -> float:
        """How optional spending in this category is."""
        pass

    def run_analysis(self, transactions: Sequence[Transaction]) -> list[SavingsOpportunity]:
        aggregates = aggregate_expenses(transactions)
        if aggregates is None:
            return []
        return self.rank(aggregates)
