from fastapi import HTTPException, Request

from savings_prioritizer.manager import SavingsAdvisor


def get_advisor(request: Request) -> SavingsAdvisor:
    advisor = getattr(request.app.state, "advisor", None)
    if not advisor:
        raise HTTPException(status_code=500, detail="Advisor not initialized")
    return advisor
