from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from savings_prioritizer.models import SpendingCategory

DEFAULT_DISCRETION = 0.5

# Higher means more optional, so a better place to save.
DEFAULT_DISCRETION_WEIGHTS: Mapping[SpendingCategory, float] = MappingProxyType({
    SpendingCategory.SHOPPING_LUXURY: 1.5,
    SpendingCategory.EATING_OUT_COFFEE: 1.3,
    SpendingCategory.SUBSCRIPTIONS: 1.1,
    SpendingCategory.GROCERIES_FOOD: 0.9,
    SpendingCategory.MISCELLANEOUS: 0.8,
    SpendingCategory.TRANSPORT_ESSENTIAL: 0.7,
    SpendingCategory.UTILITIES_FIXED: 0.5,
    SpendingCategory.DEBT_REPAYMENT: 0.4,
    SpendingCategory.HOUSING_FIXED: 0.3,
})


@dataclass(frozen=True)
class ScoringWeights:
    frequency: float = 0.4
    magnitude: float = 0.3
    discretion: float = 0.5
    baseline: float = 0.1

    def combine(self, normalized_frequency: float, normalized_magnitude: float, discretion: float) -> float:
        return (
            normalized_frequency * self.frequency
            + normalized_magnitude * self.magnitude
            + discretion * self.discretion
            + self.baseline
        )


DEFAULT_SCORING_WEIGHTS = ScoringWeights()


def merge_discretion_weights(
    overrides: Mapping[SpendingCategory, float] | None = None,
    base: Mapping[SpendingCategory, float] = DEFAULT_DISCRETION_WEIGHTS,
) -> Mapping[SpendingCategory, float]:
    """Return a read-only table with ``overrides`` applied over ``base``."""
    merged = dict(base)
    merged.update(overrides or {})
    return MappingProxyType(merged)
