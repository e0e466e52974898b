from slownik.categories.service import CategoryService

def get_category_service() -> CategoryService:
    """Get CategoryService instance"""
    return CategoryService()
