import math

from savings_prioritizer.logger import get_logger
from savings_prioritizer.models import SpendingCategory

logger = get_logger(__name__)


def parse_category(raw_name: str) -> SpendingCategory | None:
    name = raw_name.strip().upper().replace("-", "_").replace(" ", "_")
    try:
        return SpendingCategory(name)
    except ValueError:
        return None


def parse_weight_overrides(raw_overrides: str | None) -> dict[SpendingCategory, float]:
    """
    Parse ``"SUBSCRIPTIONS=1.4, miscellaneous=0.6"`` into a category -> weight map.

    Malformed entries are logged and skipped. A repeated category keeps the
    last value.
    """
    if not raw_overrides:
        return {}

    overrides: dict[SpendingCategory, float] = {}
    for part in raw_overrides.split(","):
        entry = part.strip()
        if not entry:
            continue
        if "=" not in entry:
            logger.warning("[CONFIG] Ignoring weight override without '=': '%s'.", entry)
            continue
        raw_name, raw_value = entry.split("=", 1)
        category = parse_category(raw_name)
        if category is None:
            logger.warning("[CONFIG] Ignoring weight override for unknown category '%s'.", raw_name.strip())
            continue
        try:
            value = float(raw_value)
        except ValueError:
            logger.warning("[CONFIG] Ignoring non-numeric weight for %s: '%s'.", category.value, raw_value.strip())
            continue
        if not math.isfinite(value) or value < 0:
            logger.warning("[CONFIG] Ignoring out-of-range weight for %s: %s.", category.value, value)
            continue
        overrides[category] = value
    return overrides
