"""
Recipes API router
"""
from typing import Any, List
from fastapi import APIRouter, Depends, Response, status

from pujasari.core.crud import CrudService
from pujasari.core.database import DocumentStore, create_collection_refs, get_store
from pujasari.core.schema import (
    CreatedResponse, DefaultResponse204, DefaultResponse400, DefaultResponse404,
    create_response_schema
)
from pujasari.models.recipe import Recipe, RecipeCreate, RecipeUpdate

COLLECTION_NAME = "resep"

router = APIRouter(tags=["Recipes"])

def get_recipe_service(store: DocumentStore = Depends(get_store)) -> CrudService:
    return CrudService(create_collection_refs(store, COLLECTION_NAME), "Recipe", Recipe)

@router.get(
    "",
    response_model=List[Recipe],
    responses=create_response_schema({400: DefaultResponse400}),
)
async def get_recipes(service: CrudService = Depends(get_recipe_service)) -> Any:
    """Mengambil list resep"""
    return await service.list()

@router.get(
    "/{id}",
    response_model=Recipe,
    responses=create_response_schema({404: DefaultResponse404}),
)
async def get_recipe(id: str, service: CrudService = Depends(get_recipe_service)) -> Any:
    """Mengambil resep berdasarkan id"""
    return await service.get(id)

@router.post(
    "",
    response_model=CreatedResponse,
    responses=create_response_schema({400: DefaultResponse400}),
)
async def create_recipe(
    recipe_data: RecipeCreate,
    service: CrudService = Depends(get_recipe_service)
) -> Any:
    """Membuat resep baru"""
    doc_id = await service.create(recipe_data.model_dump(mode="json"))
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
async def update_recipe(
    id: str,
    recipe_data: RecipeUpdate,
    service: CrudService = Depends(get_recipe_service)
) -> Response:
    """Update resep berdasarkan id"""
    await service.update(id, recipe_data.model_dump(mode="json", exclude_unset=True, exclude_none=True))
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
async def delete_recipe(id: str, service: CrudService = Depends(get_recipe_service)) -> Response:
    """Hapus resep berdasarkan id"""
    await service.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
