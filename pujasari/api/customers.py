"""
Customers API router
"""
from typing import Any, List
from fastapi import APIRouter, Depends, Response, status

from pujasari.core.crud import CrudService
from pujasari.core.database import DocumentStore, create_collection_refs, get_store
from pujasari.core.schema import (
    CreatedResponse, DefaultResponse204, DefaultResponse400, DefaultResponse404,
    create_response_schema
)
from pujasari.models.customer import Customer, CustomerCreate, CustomerUpdate

# Customers live in the users collection
COLLECTION_NAME = "users"

router = APIRouter(tags=["Customers"])

def get_customer_service(store: DocumentStore = Depends(get_store)) -> CrudService:
    return CrudService(create_collection_refs(store, COLLECTION_NAME), "Customer", Customer)

@router.get(
    "",
    response_model=List[Customer],
    responses=create_response_schema({400: DefaultResponse400}),
)
async def get_customers(service: CrudService = Depends(get_customer_service)) -> Any:
    """Get customers"""
    return await service.list()

@router.get(
    "/{id}",
    response_model=Customer,
    responses=create_response_schema({404: DefaultResponse404}),
)
async def get_customer(id: str, service: CrudService = Depends(get_customer_service)) -> Any:
    """Mengambil customer berdasarkan id"""
    return await service.get(id)

@router.post(
    "",
    response_model=CreatedResponse,
    responses=create_response_schema({400: DefaultResponse400}),
)
async def create_customer(
    customer_data: CustomerCreate,
    service: CrudService = Depends(get_customer_service)
) -> Any:
    """Membuat data customer; cart checkout selalu dimulai kosong"""
    doc_id = await service.create({
        **customer_data.model_dump(mode="json"),
        "current_checkout_items": [],
    })
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
async def update_customer(
    id: str,
    customer_data: CustomerUpdate,
    service: CrudService = Depends(get_customer_service)
) -> Response:
    """Mengupdate customer berdasarkan Id"""
    await service.update(id, customer_data.model_dump(mode="json", exclude_unset=True, exclude_none=True))
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
async def delete_customer(id: str, service: CrudService = Depends(get_customer_service)) -> Response:
    """Menghapus customer berdasarkan Id"""
    await service.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
