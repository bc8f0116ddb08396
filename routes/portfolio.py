from __future__ import annotations

from fastapi import APIRouter, HTTPException

from core.errors import PortfolioLoadError
from models.portfolio import PortfolioData
from services.portfolio_service import portfolio_service

router = APIRouter()


@router.get("/portfolio", response_model=PortfolioData)
def get_portfolio() -> PortfolioData:
    try:
        return portfolio_service.load_data()
    except PortfolioLoadError as exc:
        raise HTTPException(status_code=503, detail=exc.message)
