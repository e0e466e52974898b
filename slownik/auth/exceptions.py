from slownik.auth import constants
from slownik.exceptions import UnauthorizedException, ValidationException


class LoginValidationException(ValidationException):
    def __init__(self, detail: str = constants.LOGIN_FIELDS_REQUIRED):
        super().__init__(detail=detail)

class AdminSessionRequiredException(UnauthorizedException):
    def __init__(self, detail: str = constants.UNAUTHORIZED):
        super().__init__(detail=detail)
