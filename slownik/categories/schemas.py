from pydantic import Field
from typing import Optional, List

from slownik.models import CustomModel, RequestModel
from slownik.categories.models import CategoryType


class CategorySummary(CustomModel):
    """Short category reference embedded in entries and submissions"""
    id: int
    name: str
    slug: str


class CategoryResponse(CategorySummary):
    description: Optional[str] = None
    type: CategoryType


class AdminCategoryResponse(CategoryResponse):
    entry_count: int = Field(0, ge=0, description="Number of entries linked to the category")


class CategoryCreate(RequestModel):
    name: str = Field(..., max_length=200, description="Display name")
    slug: Optional[str] = Field(None, max_length=200, description="Explicit slug; derived from the name when empty")
    description: Optional[str] = None
    type: Optional[str] = Field(None, description="TRADITIONAL or MODERN; anything else falls back to TRADITIONAL")


class CategoryUpdate(RequestModel):
    name: str = Field(..., max_length=200)
    slug: str = Field(..., max_length=200)
    description: Optional[str] = None


class CategoryEnvelope(CustomModel):
    category: CategoryResponse


class CategoryListResponse(CustomModel):
    categories: List[CategoryResponse]


class AdminCategoryListResponse(CustomModel):
    categories: List[AdminCategoryResponse]
