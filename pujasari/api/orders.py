"""
Orders API router

Orders are stored as checkout histories. Only the status of an existing order
can be changed; any status may follow any other.
"""
from typing import Any, List, Optional
from fastapi import APIRouter, Depends, Response, status

from pujasari.core.crud import CrudService
from pujasari.core.database import DocumentStore, Filter, create_collection_refs, get_store
from pujasari.core.schema import (
    Bank, CreatedResponse, DefaultResponse204, DefaultResponse400, DefaultResponse404,
    OrderStatus, PaymentMethod, create_response_schema
)
from pujasari.models.order import Order, OrderCreate, OrderUpdate

COLLECTION_NAME = "checkoutHistories"

EQUALITY_FILTERS = ("bank", "payment_method", "status", "user_id")

router = APIRouter(tags=["Orders"])

def get_order_service(store: DocumentStore = Depends(get_store)) -> CrudService:
    return CrudService(create_collection_refs(store, COLLECTION_NAME), "Order", Order)

@router.get(
    "",
    response_model=List[Order],
    responses=create_response_schema({400: DefaultResponse400}),
)
async def get_orders(
    bank: Optional[Bank] = None,
    payment_method: Optional[PaymentMethod] = None,
    status: Optional[OrderStatus] = None,
    user_id: Optional[str] = None,
    fromDate: Optional[int] = None,
    toDate: Optional[int] = None,
    service: CrudService = Depends(get_order_service)
) -> Any:
    """Mengambil list pesanan"""
    params = {
        "bank": bank,
        "payment_method": payment_method,
        "status": status,
        "user_id": user_id,
    }
    filters = []

    for field in EQUALITY_FILTERS:
        value = params[field]
        if value:
            filters.append(Filter(field, "==", getattr(value, "value", value)))

    # Time window on the order timestamp
    if fromDate:
        filters.append(Filter("time", ">=", fromDate))

    if toDate:
        filters.append(Filter("time", "<=", toDate))

    return await service.list(filters)

@router.get(
    "/{id}",
    response_model=Order,
    responses=create_response_schema({404: DefaultResponse404}),
)
async def get_order(id: str, service: CrudService = Depends(get_order_service)) -> Any:
    """Mengambil pesanan"""
    return await service.get(id)

@router.post(
    "",
    response_model=CreatedResponse,
    responses=create_response_schema({400: DefaultResponse400}),
)
async def create_order(
    order_data: OrderCreate,
    service: CrudService = Depends(get_order_service)
) -> Any:
    """Membuat pesanan baru"""
    doc_id = await service.create(order_data.model_dump(mode="json"))
    return {"id": doc_id}

@router.put(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=create_response_schema({
        204: DefaultResponse204,
        400: DefaultResponse400,
        404: DefaultResponse404,
    }),
)
async def update_order(
    id: str,
    order_data: OrderUpdate,
    service: CrudService = Depends(get_order_service)
) -> Response:
    """Mengupdate data pesanan (hanya status)"""
    await service.update(id, order_data.model_dump(mode="json", exclude_unset=True, exclude_none=True))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=create_response_schema({
        204: DefaultResponse204,
        404: DefaultResponse404,
    }),
)
async def delete_order(id: str, service: CrudService = Depends(get_order_service)) -> Response:
    """Menghapus data pesanan"""
    await service.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
