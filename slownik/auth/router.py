"""
Router for the admin session
"""
import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from slownik.auth import constants
from slownik.auth.dependencies import get_admin_auth_service, get_session_token_from_cookie
from slownik.auth.exceptions import LoginValidationException
from slownik.auth.schemas import LoginRequest, SessionStatusResponse, SuccessResponse
from slownik.auth.service import AdminAuthService
from slownik.config import settings
from slownik.exceptions import InternalServerException

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin: Session"])


def _clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        settings.ADMIN_SESSION_COOKIE_NAME,
        path="/",
        httponly=settings.COOKIE_HTTPONLY,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE
    )


@router.post("/login", response_model=SuccessResponse)
async def login(
    response: Response,
    login_data: LoginRequest,
    service: AdminAuthService = Depends(get_admin_auth_service)
):
    """Log the administrator in and set the session cookie"""
    if not login_data.email.strip() or not login_data.password:
        raise LoginValidationException()

    if not service.validate_credentials(login_data.email, login_data.password):
        logger.warning("Failed admin login attempt for %s", login_data.email.strip().lower())
        failed = JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": constants.LOGIN_INVALID_CREDENTIALS},
        )
        _clear_session_cookie(failed)
        return failed

    token = service.compute_session_token()
    if not token:
        logger.error("Admin credentials are not configured")
        raise InternalServerException()

    response.set_cookie(
        key=settings.ADMIN_SESSION_COOKIE_NAME,
        value=token,
        max_age=service.session_max_age,
        path="/",
        httponly=settings.COOKIE_HTTPONLY,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE
    )
    logger.info("Admin logged in")
    return SuccessResponse()


@router.post("/logout", response_model=SuccessResponse)
async def logout(response: Response):
    _clear_session_cookie(response)
    return SuccessResponse()


@router.get("/session", response_model=SessionStatusResponse)
async def get_session(
    request: Request,
    service: AdminAuthService = Depends(get_admin_auth_service)
):
    """Whether the request carries a valid admin session cookie"""
    token = get_session_token_from_cookie(request)
    return SessionStatusResponse(authenticated=service.is_session_valid(token))
