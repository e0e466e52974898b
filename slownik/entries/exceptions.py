from slownik.entries import constants
from slownik.exceptions import ConflictException, NotFoundException, ValidationException


class EntryNotFoundException(NotFoundException):
    def __init__(self, detail: str = constants.ENTRY_NOT_FOUND):
        super().__init__(detail=detail)

class EntryValidationException(ValidationException):
    def __init__(self, detail: str = constants.ENTRY_REQUIRED_FIELDS):
        super().__init__(detail=detail)

class EntrySlugConflictException(ConflictException):
    def __init__(self, detail: str = constants.ENTRY_SLUG_TAKEN):
        super().__init__(detail=detail)
