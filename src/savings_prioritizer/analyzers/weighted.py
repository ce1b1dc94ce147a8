import math
from collections.abc import Mapping
from types import MappingProxyType

from savings_prioritizer.analyzers.aggregator import CategoryAggregates
from savings_prioritizer.analyzers.base import SpendingAnalyzer
from savings_prioritizer.analyzers.rationale import RATIONALE_RULES, RationaleRule, select_rationale
from savings_prioritizer.analyzers.weights import (
    DEFAULT_DISCRETION,
    DEFAULT_DISCRETION_WEIGHTS,
    DEFAULT_SCORING_WEIGHTS,
    ScoringWeights,
)
from savings_prioritizer.logger import get_logger
from savings_prioritizer.models import CategoryScore, SavingsOpportunity, SpendingCategory

logger = get_logger(__name__)


class WeightedScoringAnalyzer(SpendingAnalyzer):
    """
    Scores each spending category by how easy and how worthwhile it is to cut.

    The score is a fixed weighted sum of three features: how often money is
    spent in the category, how much is spent in total (both scaled to 0-1
    against the largest category), and how optional the category is.
    """

    def __init__(
        self,
        discretion_weights: Mapping[SpendingCategory, float] = DEFAULT_DISCRETION_WEIGHTS,
        weights: ScoringWeights = DEFAULT_SCORING_WEIGHTS,
        default_discretion: float = DEFAULT_DISCRETION,
        rules: tuple[RationaleRule, ...] = RATIONALE_RULES,
    ) -> None:
        invalid = [
            category.value for category, value in discretion_weights.items()
            if not math.isfinite(value) or value < 0
        ]
        if invalid:
            raise ValueError(f"Discretion weights must be finite and non-negative: {', '.join(invalid)}")
        if not math.isfinite(default_discretion) or default_discretion < 0:
            raise ValueError(f"Default discretion must be finite and non-negative, got {default_discretion}")

        self.discretion_weights: Mapping[SpendingCategory, float] = MappingProxyType(dict(discretion_weights))
        self.weights = weights
        self.default_discretion = default_discretion
        self.rules = rules

    def discretion_for(self, category: SpendingCategory) -> float:
        return self.discretion_weights.get(category, self.default_discretion)

    def score_categories(self, aggregates: CategoryAggregates) -> list[CategoryScore]:
        scores: list[CategoryScore] = []
        for category in aggregates.categories:
            normalized_frequency = aggregates.counts[category] / aggregates.max_count
            normalized_magnitude = abs(aggregates.totals[category]) / aggregates.max_total
            discretion = self.discretion_for(category)
            priority_score = self.weights.combine(normalized_frequency, normalized_magnitude, discretion)

            logger.debug(
                "[SCORE] %-20s freq=%.4f mag=%.4f disc=%.2f score=%.4f",
                category.value,
                normalized_frequency,
                normalized_magnitude,
                discretion,
                priority_score,
            )
            scores.append(CategoryScore(
                category=category,
                normalized_frequency=normalized_frequency,
                normalized_magnitude=normalized_magnitude,
                discretion=discretion,
                priority_score=priority_score,
            ))
        return scores

    def rank(self, aggregates: CategoryAggregates) -> list[SavingsOpportunity]:
        logger.info(
            "[SCORE] Scoring %d expenses (max frequency=%.0f, max magnitude=%.2f).",
            aggregates.expense_count,
            aggregates.max_count,
            aggregates.max_total,
        )

        opportunities = [
            SavingsOpportunity(
                category=score.category,
                total_spent=abs(aggregates.totals[score.category]),
                transaction_count=aggregates.counts[score.category],
                priority_score=score.priority_score,
                rationale=select_rationale(
                    score.category,
                    score.normalized_frequency,
                    score.discretion,
                    rules=self.rules,
                ),
            )
            for score in self.score_categories(aggregates)
        ]

        # sorted() is stable, so ties keep first-appearance order.
        return sorted(opportunities, key=lambda op: op.priority_score, reverse=True)
