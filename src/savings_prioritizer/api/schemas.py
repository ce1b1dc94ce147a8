from pydantic import BaseModel

from savings_prioritizer.models import SpendingCategory, Transaction


class AnalyzeRequest(BaseModel):
    transactions: list[Transaction]


class CategoryWeight(BaseModel):
    category: SpendingCategory
    discretion_weight: float
