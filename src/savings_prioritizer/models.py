import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SpendingCategory(str, Enum):
    HOUSING_FIXED = "HOUSING_FIXED"  # Rent, mortgage
    UTILITIES_FIXED = "UTILITIES_FIXED"  # Bills, internet
    TRANSPORT_ESSENTIAL = "TRANSPORT_ESSENTIAL"  # Fuel, bus/train pass
    GROCERIES_FOOD = "GROCERIES_FOOD"  # Supermarket
    EATING_OUT_COFFEE = "EATING_OUT_COFFEE"  # Restaurants, cafes
    SUBSCRIPTIONS = "SUBSCRIPTIONS"
    SHOPPING_LUXURY = "SHOPPING_LUXURY"
    DEBT_REPAYMENT = "DEBT_REPAYMENT"  # Credit card payments
    MISCELLANEOUS = "MISCELLANEOUS"


class Transaction(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    amount: float # Positive for income, negative for expense
    date: datetime.date
    description: str
    category: SpendingCategory


class SavingsOpportunity(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: SpendingCategory
    total_spent: float = Field(ge=0)
    transaction_count: int = Field(ge=0)
    priority_score: float
    rationale: str


class CategoryScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: SpendingCategory
    normalized_frequency: float
    normalized_magnitude: float
    discretion: float
    priority_score: float


class AnalysisReport(BaseModel):
    opportunities: list[SavingsOpportunity]
    expenses_analyzed: int = 0
    max_count: float = 1.0
    max_total: float = 1.0
    top_categories: list[SpendingCategory] = []
