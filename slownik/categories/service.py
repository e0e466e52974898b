import logging
from typing import List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from slownik.categories import constants
from slownik.categories.exceptions import (
    CategoryConflictException,
    CategoryInUseException,
    CategoryNotFoundException,
    CategoryValidationException,
)
from slownik.categories.models import Category, CategoryType
from slownik.categories.schemas import (
    AdminCategoryResponse,
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
)
from slownik.entries.models import DictionaryEntry
from slownik.utils.slugs import slugify

logger = logging.getLogger(__name__)


def _clean_description(description: Optional[str]) -> Optional[str]:
    if description is None:
        return None
    return description.strip() or None


def _parse_category_type(value: Optional[str]) -> CategoryType:
    try:
        return CategoryType(value) if value else CategoryType.TRADITIONAL
    except ValueError:
        return CategoryType.TRADITIONAL


class CategoryService:
    """Service for the category registry"""

    async def get_category(self, category_id: int, db: AsyncSession) -> Category:
        category = await db.get(Category, category_id)
        if not category:
            raise CategoryNotFoundException()
        return category

    async def get_by_slug(self, slug: str, db: AsyncSession) -> Optional[Category]:
        result = await db.execute(select(Category).where(Category.slug == slug))
        return result.scalar_one_or_none()

    async def list_categories(self, db: AsyncSession) -> List[CategoryResponse]:
        """All categories sorted by name"""
        result = await db.execute(select(Category).order_by(Category.name.asc()))
        return [CategoryResponse.model_validate(category) for category in result.scalars().all()]

    async def list_categories_with_counts(self, db: AsyncSession) -> List[AdminCategoryResponse]:
        """All categories with the number of entries linked to each"""
        entry_count = func.count(DictionaryEntry.id)
        result = await db.execute(
            select(Category, entry_count)
            .outerjoin(DictionaryEntry, DictionaryEntry.category_id == Category.id)
            .group_by(Category.id)
            .order_by(Category.name.asc())
        )
        return [
            AdminCategoryResponse(
                id=category.id,
                name=category.name,
                slug=category.slug,
                description=category.description,
                type=category.type,
                entry_count=count,
            )
            for category, count in result.all()
        ]

    async def create_category(self, data: CategoryCreate, db: AsyncSession) -> CategoryResponse:
        """
        Create a category; the slug comes from ``data.slug`` or, when empty, the name.

        Raises:
            CategoryValidationException: empty name or no usable slug
            CategoryConflictException: slug or name already taken
        """
        name = (data.name or "").strip()
        if not name:
            raise CategoryValidationException(constants.CATEGORY_NAME_REQUIRED)

        slug = slugify((data.slug or "").strip() or name)
        if not slug:
            raise CategoryValidationException(constants.CATEGORY_SLUG_INVALID)

        if await self.get_by_slug(slug, db):
            raise CategoryConflictException(constants.CATEGORY_SLUG_TAKEN)

        category = Category(
            name=name,
            slug=slug,
            description=_clean_description(data.description),
            type=_parse_category_type(data.type),
        )
        db.add(category)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise CategoryConflictException(constants.CATEGORY_NAME_TAKEN)
        await db.refresh(category)

        logger.info("Category created: %s (%s)", category.name, category.slug)
        return CategoryResponse.model_validate(category)

    async def update_category(self, category_id: int, data: CategoryUpdate, db: AsyncSession) -> CategoryResponse:
        name = (data.name or "").strip()
        slug_input = (data.slug or "").strip()
        if not name:
            raise CategoryValidationException(constants.CATEGORY_NAME_REQUIRED)
        if not slug_input:
            raise CategoryValidationException(constants.CATEGORY_SLUG_REQUIRED)

        slug = slugify(slug_input)
        if not slug:
            raise CategoryValidationException(constants.CATEGORY_SLUG_INVALID)

        category = await self.get_category(category_id, db)

        if name != category.name:
            duplicate = await db.execute(
                select(Category.id).where(Category.name == name, Category.id != category_id)
            )
            if duplicate.scalar_one_or_none() is not None:
                raise CategoryConflictException(constants.CATEGORY_NAME_TAKEN)

        if slug != category.slug:
            duplicate = await db.execute(
                select(Category.id).where(Category.slug == slug, Category.id != category_id)
            )
            if duplicate.scalar_one_or_none() is not None:
                raise CategoryConflictException(constants.CATEGORY_SLUG_TAKEN)

        category.name = name
        category.slug = slug
        category.description = _clean_description(data.description)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise CategoryConflictException(constants.CATEGORY_SLUG_TAKEN)
        await db.refresh(category)
        return CategoryResponse.model_validate(category)

    async def delete_category(self, category_id: int, db: AsyncSession) -> None:
        """Delete a category that no entry references"""
        category = await self.get_category(category_id, db)

        linked = await db.execute(
            select(func.count(DictionaryEntry.id)).where(DictionaryEntry.category_id == category_id)
        )
        if (linked.scalar() or 0) > 0:
            raise CategoryInUseException()

        await db.delete(category)
        try:
            await db.commit()
        except IntegrityError:
            # an entry or submission was linked in the meantime
            await db.rollback()
            raise CategoryInUseException()
        logger.info("Category deleted: %s", category.slug)

    async def get_or_create_by_name(self, name: str, db: AsyncSession) -> Tuple[Category, bool]:
        """
        Reuse the category whose slug matches ``slugify(name)`` or create it.

        Returns ``(category, created)``. A concurrent create of the same slug
        is resolved by re-reading the winner's row.
        """
        name = name.strip()
        slug = slugify(name)
        if not name or not slug:
            raise CategoryValidationException(constants.CATEGORY_SLUG_INVALID)

        existing = await self.get_by_slug(slug, db)
        if existing:
            return existing, False

        category = Category(name=name, slug=slug, type=CategoryType.TRADITIONAL)
        db.add(category)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            existing = await self.get_by_slug(slug, db)
            if existing is None:
                # name collided with a category under a different slug
                result = await db.execute(select(Category).where(Category.name == name))
                existing = result.scalar_one_or_none()
            if existing is None:
                raise
            return existing, False

        await db.refresh(category)
        logger.info("Category created from submission: %s (%s)", category.name, category.slug)
        return category, True
