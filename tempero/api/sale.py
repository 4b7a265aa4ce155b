from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional

from tempero.common.errors import NotFoundError
from tempero.core.dependencies import get_store
from tempero.core.store import MemoryStore
from tempero.services.sale_service import (
    get_sale_by_id,
    get_all_sales,
    create_sale,
    update_sale_payment_status,
)
from tempero.schemas.sale import SaleCreate, SalePaymentUpdate, SaleResponse
from tempero.logger_config import logger

router = APIRouter()


@router.get("", response_model=List[SaleResponse])
def get_sales(
    search: Optional[str] = Query(None, description="Match on customer name or description"),
    store: MemoryStore = Depends(get_store),
):
    """Get all sales, newest first."""
    try:
        sales = get_all_sales(store, search=search)
        return [SaleResponse.model_validate(s) for s in sales]
    except Exception as e:
        logger.exception("Error fetching sales")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch sales"
        )


@router.get("/{sale_id}", response_model=SaleResponse)
def get_sale(sale_id: str, store: MemoryStore = Depends(get_store)):
    """Get sale by ID."""
    sale = get_sale_by_id(store, sale_id)
    if not sale:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Sale not found"
        )
    return SaleResponse.model_validate(sale)


@router.post("", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
def create_sale_route(sale_data: SaleCreate, store: MemoryStore = Depends(get_store)):
    """
    Record a sale. The customer is matched by name (case-insensitive) or
    created; fiado and parcial sales add their pending amount to the
    customer's debt.
    """
    try:
        sale = create_sale(
            store,
            customer_name=sale_data.customer_name,
            description=sale_data.description,
            amount=sale_data.amount,
            payment_status=sale_data.payment_status,
            paid_amount=sale_data.paid_amount,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        logger.exception("Error creating sale")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create sale"
        )

    return SaleResponse.model_validate(sale)


@router.patch("/{sale_id}/payment", response_model=SaleResponse)
def update_sale_payment_route(
    sale_id: str,
    payment_data: SalePaymentUpdate,
    store: MemoryStore = Depends(get_store),
):
    """Amend the payment status of a sale and rebalance the customer's debt."""
    try:
        sale = update_sale_payment_status(
            store,
            sale_id,
            status=payment_data.status,
            paid_amount=payment_data.paid_amount,
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Sale not found"
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        logger.exception("Error updating sale payment")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update sale payment"
        )

    return SaleResponse.model_validate(sale)
