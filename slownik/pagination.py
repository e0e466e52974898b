from typing import Generic, TypeVar, List

from slownik.models import CustomModel

T = TypeVar('T')

class PaginatedResponse(CustomModel, Generic[T]):
    items: List[T]
    total: int
    page: int
    size: int
    pages: int

def paginate(items: List[T], total: int, page: int, size: int) -> PaginatedResponse[T]:
    """
    Create a paginated response
    """
    pages = (total + size - 1) // size  # Ceiling division

    return PaginatedResponse(
        items=items,
        total=total,
        page=page,
        size=size,
        pages=pages
    )

def get_offset(page: int, size: int) -> int:
    """
    Calculate offset for pagination
    """
    return (page - 1) * size
