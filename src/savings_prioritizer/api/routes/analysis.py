import asyncio
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from savings_prioritizer.api.dependencies import get_advisor
from savings_prioritizer.api.schemas import AnalyzeRequest, CategoryWeight
from savings_prioritizer.manager import SavingsAdvisor
from savings_prioritizer.models import AnalysisReport

router = APIRouter(prefix="/api")


@router.post("/analyze", response_model=AnalysisReport)
async def analyze_transactions(
    req: AnalyzeRequest,
    advisor: Annotated[SavingsAdvisor, Depends(get_advisor)],
) -> AnalysisReport:
    try:
        return await asyncio.to_thread(advisor.analyze, req.transactions)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.get("/categories", response_model=list[CategoryWeight])
async def get_categories(
    advisor: Annotated[SavingsAdvisor, Depends(get_advisor)],
) -> list[CategoryWeight]:
    return [
        CategoryWeight(category=category, discretion_weight=weight)
        for category, weight in advisor.discretion_table().items()
    ]
