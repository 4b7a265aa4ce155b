from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional

from tempero.core.dependencies import get_store
from tempero.core.store import MemoryStore
from tempero.models import ExpenseCategory
from tempero.services.expense_service import (
    get_expense_by_id,
    get_all_expenses,
    create_expense,
)
from tempero.schemas.expense import ExpenseCreate, ExpenseResponse
from tempero.logger_config import logger

router = APIRouter()


@router.get("", response_model=List[ExpenseResponse])
def list_expenses(
    category: Optional[ExpenseCategory] = Query(None),
    search: Optional[str] = Query(None, description="Match on description or supplier name"),
    store: MemoryStore = Depends(get_store),
):
    """List expenses newest first, optionally for one category."""
    try:
        expenses = get_all_expenses(store, category=category, search=search)
        return [ExpenseResponse.model_validate(e) for e in expenses]
    except Exception as e:
        logger.exception("Error fetching expenses")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch expenses",
        )


@router.get("/{expense_id}", response_model=ExpenseResponse)
def get_expense(expense_id: str, store: MemoryStore = Depends(get_store)):
    expense = get_expense_by_id(store, expense_id)
    if not expense:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Expense not found",
        )
    return ExpenseResponse.model_validate(expense)


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
def create_single_expense(data: ExpenseCreate, store: MemoryStore = Depends(get_store)):
    """Create a single expense."""
    try:
        expense = create_expense(
            store,
            category=data.category,
            description=data.description,
            amount=data.amount,
            payment_status=data.payment_status,
            supplier_name=data.supplier_name,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.exception("Error creating expense")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create expense",
        )

    return ExpenseResponse.model_validate(expense)
