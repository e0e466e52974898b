from slownik.exceptions import NotFoundException, ValidationException


class PublicEntryNotFoundException(NotFoundException):
    def __init__(self, detail: str = "Entry not found"):
        super().__init__(detail=detail)

class SearchFilterRequiredException(ValidationException):
    def __init__(self, detail: str = "At least one filter parameter is required"):
        super().__init__(detail=detail)
