from slownik.models import CustomModel, RequestModel


class LoginRequest(RequestModel):
    email: str = ""
    password: str = ""


class SuccessResponse(CustomModel):
    success: bool = True


class SessionStatusResponse(CustomModel):
    authenticated: bool
