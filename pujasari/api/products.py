"""
Products API router
"""
from typing import Any, List, Optional
from fastapi import APIRouter, Depends, Response, status

from pujasari.core.crud import CrudService
from pujasari.core.database import DocumentStore, Filter, create_collection_refs, get_store
from pujasari.core.schema import (
    CreatedResponse, DefaultResponse204, DefaultResponse400, DefaultResponse404,
    ProductCategory, create_response_schema
)
from pujasari.models.product import Product, ProductCreate, ProductUpdate

COLLECTION_NAME = "products"

router = APIRouter(tags=["Products"])

def get_product_service(store: DocumentStore = Depends(get_store)) -> CrudService:
    return CrudService(create_collection_refs(store, COLLECTION_NAME), "Product", Product)

@router.get(
    "",
    response_model=List[Product],
    responses=create_response_schema({400: DefaultResponse400}),
)
async def get_products(
    category: Optional[ProductCategory] = None,
    hargaMulai: Optional[float] = None,
    hargaHingga: Optional[float] = None,
    promo: Optional[float] = None,
    service: CrudService = Depends(get_product_service)
) -> Any:
    """Mengambil list produk"""
    filters = []

    if category:
        filters.append(Filter("category", "==", category.value))

    if hargaMulai:
        filters.append(Filter("harga", ">=", hargaMulai))

    if hargaHingga:
        filters.append(Filter("harga", "<=", hargaHingga))

    if promo:
        filters.append(Filter("promo", "==", promo))

    return await service.list(filters)

@router.get(
    "/{id}",
    response_model=Product,
    responses=create_response_schema({404: DefaultResponse404}),
)
async def get_product(id: str, service: CrudService = Depends(get_product_service)) -> Any:
    """Mengambil produk berdasarkan id"""
    return await service.get(id)

@router.post(
    "",
    response_model=CreatedResponse,
    responses=create_response_schema({400: DefaultResponse400}),
)
async def create_product(
    product_data: ProductCreate,
    service: CrudService = Depends(get_product_service)
) -> Any:
    """Membuat produk baru"""
    doc_id = await service.create(product_data.model_dump(mode="json"))
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
async def update_product(
    id: str,
    product_data: ProductUpdate,
    service: CrudService = Depends(get_product_service)
) -> Response:
    """Mengupdate produk berdasarkan Id"""
    await service.update(id, product_data.model_dump(mode="json", exclude_unset=True, exclude_none=True))
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
async def delete_product(id: str, service: CrudService = Depends(get_product_service)) -> Response:
    """Menghapus produk berdasarkan Id"""
    await service.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
