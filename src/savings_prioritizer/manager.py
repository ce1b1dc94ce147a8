from collections.abc import Sequence
from time import perf_counter

from savings_prioritizer.analyzers.aggregator import aggregate_expenses
from savings_prioritizer.analyzers.base import SpendingAnalyzer
from savings_prioritizer.analyzers.weighted import WeightedScoringAnalyzer
from savings_prioritizer.core import settings
from savings_prioritizer.logger import get_logger
from savings_prioritizer.models import AnalysisReport, SpendingCategory, Transaction

logger = get_logger(__name__)


class SavingsAdvisor:
    def __init__(self,
                 analyzer: SpendingAnalyzer | None = None,
                 top_n: int | None = None):

        if analyzer is None:
            weights = settings.get_discretion_weights()
            analyzer = WeightedScoringAnalyzer(
                discretion_weights=weights,
                default_discretion=settings.get_default_discretion(),
            )
            logger.info(
                "Scoring analyzer configured with %d discretion weights.",
                len(weights),
            )
        self.analyzer: SpendingAnalyzer = analyzer
        self.top_n = top_n if top_n is not None else settings.get_top_opportunities()

    def analyze(self, transactions: Sequence[Transaction]) -> AnalysisReport:
        """
        Rank the spending categories in ``transactions`` and highlight the top ones.
        """
        started = perf_counter()
        aggregates = aggregate_expenses(transactions)
        if aggregates is None:
            logger.info("No expenses found to analyze (%d transactions).", len(transactions))
            return AnalysisReport(opportunities=[])

        opportunities = self.analyzer.rank(aggregates)
        elapsed_ms = (perf_counter() - started) * 1000
        logger.info(
            "Analyzed %d expenses into %d categories in %.1f ms.",
            aggregates.expense_count,
            len(opportunities),
            elapsed_ms,
        )

        return AnalysisReport(
            opportunities=opportunities,
            expenses_analyzed=aggregates.expense_count,
            max_count=aggregates.max_count,
            max_total=aggregates.max_total,
            top_categories=[op.category for op in opportunities[:self.top_n]],
        )

    def discretion_table(self) -> dict[SpendingCategory, float]:
        """
        Effective discretion weight for every category, defaults filled in.
        """
        return {category: self.analyzer.discretion_for(category) for category in SpendingCategory}
