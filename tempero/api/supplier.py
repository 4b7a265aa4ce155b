from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional

from tempero.core.dependencies import get_store
from tempero.core.store import MemoryStore
from tempero.services.supplier_service import (
    get_supplier_by_id,
    get_all_suppliers,
    create_supplier,
)
from tempero.schemas.supplier import SupplierCreate, SupplierResponse
from tempero.logger_config import logger

router = APIRouter()


@router.get("", response_model=List[SupplierResponse])
def get_suppliers(
    search: Optional[str] = Query(None),
    store: MemoryStore = Depends(get_store),
):
    """Get all suppliers, newest first, with optional search on name or category."""
    try:
        suppliers = get_all_suppliers(store, search=search)
        return [SupplierResponse.model_validate(s) for s in suppliers]
    except Exception as e:
        logger.exception("Error fetching suppliers")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch suppliers"
        )


@router.get("/{supplier_id}", response_model=SupplierResponse)
def get_supplier(supplier_id: str, store: MemoryStore = Depends(get_store)):
    """Get supplier by ID."""
    supplier = get_supplier_by_id(store, supplier_id)
    if not supplier:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Supplier not found"
        )
    return SupplierResponse.model_validate(supplier)


@router.post("", response_model=SupplierResponse, status_code=status.HTTP_201_CREATED)
def create_supplier_route(
    supplier_data: SupplierCreate,
    store: MemoryStore = Depends(get_store),
):
    """Create a new supplier."""
    try:
        supplier = create_supplier(
            store,
            name=supplier_data.name,
            phone=supplier_data.phone,
            category=supplier_data.category,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        logger.exception("Error creating supplier")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create supplier"
        )

    return SupplierResponse.model_validate(supplier)
