from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional

from tempero.core.dependencies import get_store
from tempero.core.store import MemoryStore
from tempero.services.customer_service import (
    get_customer_by_id,
    get_all_customers,
    create_customer,
)
from tempero.services.sale_service import get_sales_by_customer
from tempero.schemas.customer import CustomerCreate, CustomerResponse
from tempero.schemas.sale import SaleResponse
from tempero.logger_config import logger

router = APIRouter()


@router.get("", response_model=List[CustomerResponse])
def get_customers(
    search: Optional[str] = Query(None),
    with_debt: bool = Query(False, description="Only customers that owe money"),
    store: MemoryStore = Depends(get_store),
):
    """
    Get all customers, highest debt first.
    Optional search on name or phone.
    """
    try:
        customers = get_all_customers(store, search=search, with_debt=with_debt)
        return [CustomerResponse.model_validate(c) for c in customers]
    except Exception as e:
        logger.exception("Error fetching customers")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch customers"
        )


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(customer_id: str, store: MemoryStore = Depends(get_store)):
    """Get customer by ID."""
    customer = get_customer_by_id(store, customer_id)
    if not customer:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Customer not found"
        )
    return CustomerResponse.model_validate(customer)


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def create_customer_route(
    customer_data: CustomerCreate,
    store: MemoryStore = Depends(get_store),
):
    """Create a new customer with no debt."""
    try:
        customer = create_customer(store, name=customer_data.name, phone=customer_data.phone)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        logger.exception("Error creating customer")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create customer"
        )

    return CustomerResponse.model_validate(customer)


@router.get("/{customer_id}/sales", response_model=List[SaleResponse])
def get_customer_sales(customer_id: str, store: MemoryStore = Depends(get_store)):
    """Sales of a customer, newest first. Unknown customers have no sales."""
    try:
        sales = get_sales_by_customer(store, customer_id)
        return [SaleResponse.model_validate(s) for s in sales]
    except Exception as e:
        logger.exception("Error fetching customer sales")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch customer sales"
        )
