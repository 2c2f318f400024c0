"""
Admins API router
"""
from typing import Any, List
from fastapi import APIRouter, Depends, Response, status

from pujasari.core.crud import CrudService
from pujasari.core.database import DocumentStore, create_collection_refs, get_store
from pujasari.core.schema import (
    CreatedResponse, DefaultResponse204, DefaultResponse400, DefaultResponse404,
    create_response_schema
)
from pujasari.models.admin import Admin, AdminCreate, AdminUpdate

COLLECTION_NAME = "admins"

router = APIRouter(tags=["Admin"])

def get_admin_service(store: DocumentStore = Depends(get_store)) -> CrudService:
    return CrudService(create_collection_refs(store, COLLECTION_NAME), "Admin", Admin)

@router.get(
    "",
    response_model=List[Admin],
    responses=create_response_schema({400: DefaultResponse400}),
)
async def get_admins(service: CrudService = Depends(get_admin_service)) -> Any:
    """Mengambil data admin"""
    return await service.list()

@router.get(
    "/{id}",
    response_model=Admin,
    responses=create_response_schema({404: DefaultResponse404}),
)
async def get_admin(id: str, service: CrudService = Depends(get_admin_service)) -> Any:
    """Mengambil admin berdasarkan id"""
    return await service.get(id)

@router.post(
    "",
    response_model=CreatedResponse,
    responses=create_response_schema({400: DefaultResponse400}),
)
async def create_admin(
    admin_data: AdminCreate,
    service: CrudService = Depends(get_admin_service)
) -> Any:
    """Membuat admin baru"""
    doc_id = await service.create(admin_data.model_dump(mode="json"))
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
async def update_admin(
    id: str,
    admin_data: AdminUpdate,
    service: CrudService = Depends(get_admin_service)
) -> Response:
    """Mengupdate admin berdasarkan Id"""
    await service.update(id, admin_data.model_dump(mode="json", exclude_unset=True, exclude_none=True))
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
async def delete_admin(id: str, service: CrudService = Depends(get_admin_service)) -> Response:
    """Menghapus admin berdasarkan Id"""
    await service.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
