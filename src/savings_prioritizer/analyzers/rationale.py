from collections.abc import Callable
from dataclasses import dataclass

from savings_prioritizer.models import SpendingCategory

HIGH_IMPACT = "High Impact. Frequent, non-essential spending. Excellent target for immediate cuts."
GOOD_POTENTIAL = (
    "Good Potential. High discretionary weight, but fewer occurrences. "
    "Target the largest single expenses."
)
LOW_PRIORITY = (
    "Low Priority. This is a core, essential expense. "
    "Focus on refinancing or changing providers long-term."
)
HIGH_FREQUENCY = "High Frequency. Try reducing impulse buys at the supermarket and optimize bulk purchasing."
STANDARD_REVIEW = "Standard Review. Review this category for smaller, non-recurring leaks."

RationalePredicate = Callable[[SpendingCategory, float, float], bool]


@dataclass(frozen=True)
class RationaleRule:
    name: str
    predicate: RationalePredicate
    message: str

    def matches(self, category: SpendingCategory, normalized_frequency: float, discretion: float) -> bool:
        return self.predicate(category, normalized_frequency, discretion)


# Order matters: the first matching rule wins.
RATIONALE_RULES: tuple[RationaleRule, ...] = (
    RationaleRule(
        name="high_impact",
        predicate=lambda category, freq, disc: disc >= 1.3 and freq > 0.3,
        message=HIGH_IMPACT,
    ),
    RationaleRule(
        name="good_potential",
        predicate=lambda category, freq, disc: disc >= 1.0 and freq < 0.3,
        message=GOOD_POTENTIAL,
    ),
    RationaleRule(
        name="low_priority",
        predicate=lambda category, freq, disc: disc < 0.7,
        message=LOW_PRIORITY,
    ),
    RationaleRule(
        name="high_frequency",
        predicate=lambda category, freq, disc: category == SpendingCategory.GROCERIES_FOOD and freq > 0.5,
        message=HIGH_FREQUENCY,
    ),
)


def select_rationale(
    category: SpendingCategory,
    normalized_frequency: float,
    discretion: float,
    rules: tuple[RationaleRule, ...] = RATIONALE_RULES,
) -> str:
    for rule in rules:
        if rule.matches(category, normalized_frequency, discretion):
            return rule.message
    return STANDARD_REVIEW
