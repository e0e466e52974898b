import logging

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from slownik.auth.dependencies import require_admin
from slownik.categories.dependencies import get_category_service
from slownik.categories.schemas import (
    AdminCategoryListResponse,
    CategoryCreate,
    CategoryEnvelope,
    CategoryListResponse,
    CategoryUpdate,
)
from slownik.categories.service import CategoryService
from slownik.database import get_db
from slownik.exceptions import AppException, InternalServerException

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["Categories"])
admin_router = APIRouter(
    prefix="/admin/categories",
    tags=["Admin: Categories"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=CategoryListResponse)
async def list_categories(
    service: CategoryService = Depends(get_category_service),
    db: AsyncSession = Depends(get_db)
):
    """Public list of categories sorted by name"""
    return CategoryListResponse(categories=await service.list_categories(db))


@admin_router.get("", response_model=AdminCategoryListResponse)
async def list_categories_admin(
    service: CategoryService = Depends(get_category_service),
    db: AsyncSession = Depends(get_db)
):
    """Categories with the number of linked entries"""
    return AdminCategoryListResponse(categories=await service.list_categories_with_counts(db))


@admin_router.post("", response_model=CategoryEnvelope, status_code=status.HTTP_201_CREATED)
async def create_category(
    data: CategoryCreate,
    service: CategoryService = Depends(get_category_service),
    db: AsyncSession = Depends(get_db)
):
    """
    Create a category

    - **name**: display name (required)
    - **slug**: optional, derived from the name when empty
    - **type**: TRADITIONAL (default) or MODERN
    """
    try:
        return CategoryEnvelope(category=await service.create_category(data, db))
    except AppException:
        raise
    except Exception:
        logger.exception("Create category error")
        raise InternalServerException()


@admin_router.patch("/{category_id}", response_model=CategoryEnvelope)
async def update_category(
    data: CategoryUpdate,
    category_id: int = Path(..., description="Category ID"),
    service: CategoryService = Depends(get_category_service),
    db: AsyncSession = Depends(get_db)
):
    """Rename a category, change its slug or description"""
    try:
        return CategoryEnvelope(category=await service.update_category(category_id, data, db))
    except AppException:
        raise
    except Exception:
        logger.exception("Update category error")
        raise InternalServerException()


@admin_router.delete("/{category_id}")
async def delete_category(
    category_id: int = Path(..., description="Category ID"),
    service: CategoryService = Depends(get_category_service),
    db: AsyncSession = Depends(get_db)
):
    """Delete a category; refused with 409 while entries still use it"""
    try:
        await service.delete_category(category_id, db)
    except AppException:
        raise
    except Exception:
        logger.exception("Delete category error")
        raise InternalServerException()
    return {"success": True}
