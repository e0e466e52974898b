from slownik.categories import constants
from slownik.exceptions import ConflictException, NotFoundException, ValidationException


class CategoryNotFoundException(NotFoundException):
    def __init__(self, detail: str = constants.CATEGORY_NOT_FOUND):
        super().__init__(detail=detail)

class CategoryValidationException(ValidationException):
    pass

class CategoryConflictException(ConflictException):
    pass

class CategoryInUseException(ConflictException):
    def __init__(self, detail: str = constants.CATEGORY_IN_USE):
        super().__init__(detail=detail)
