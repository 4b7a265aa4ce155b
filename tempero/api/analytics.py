from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List

from tempero.core.dependencies import get_analytics
from tempero.schemas.analytics import AnalyticsSummaryResponse, ExpenseCategoryTotal
from tempero.schemas.customer import CustomerResponse
from tempero.services.analytics_service import AnalyticsService
from tempero.logger_config import logger

router = APIRouter()


@router.get("/summary", response_model=AnalyticsSummaryResponse)
def get_summary(analytics: AnalyticsService = Depends(get_analytics)):
    """Total sales, received, pending, expenses and net profit."""
    try:
        return AnalyticsSummaryResponse(**analytics.summary())
    except Exception as e:
        logger.exception("Error fetching analytics")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch analytics",
        )


@router.get("/expenses-by-category", response_model=List[ExpenseCategoryTotal])
def get_expenses_by_category(analytics: AnalyticsService = Depends(get_analytics)):
    """Expense totals for each category that has expenses."""
    try:
        return [
            ExpenseCategoryTotal(
                category=row["category"],
                total=row["total"],
                percentage=float(row["percentage"]),
            )
            for row in analytics.expenses_by_category()
        ]
    except Exception as e:
        logger.exception("Error fetching expenses by category")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch expenses by category",
        )


@router.get("/top-debtors", response_model=List[CustomerResponse])
def get_top_debtors(
    limit: int = Query(3, ge=1, le=50),
    analytics: AnalyticsService = Depends(get_analytics),
):
    """Customers that owe the most."""
    try:
        return [CustomerResponse.model_validate(c) for c in analytics.top_debtors(limit=limit)]
    except Exception as e:
        logger.exception("Error fetching top debtors")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch top debtors",
        )
