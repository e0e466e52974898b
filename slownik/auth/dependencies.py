from fastapi import Request

from slownik.auth.exceptions import AdminSessionRequiredException
from slownik.auth.service import AdminAuthService
from slownik.config import settings


def get_admin_auth_service() -> AdminAuthService:
    """Get AdminAuthService instance"""
    return AdminAuthService()

def get_session_token_from_cookie(request: Request):
    return request.cookies.get(settings.ADMIN_SESSION_COOKIE_NAME)

async def require_admin(request: Request) -> None:
    """
    Guard for every admin route: the session cookie must match the token
    derived from the configured credentials
    """
    token = get_session_token_from_cookie(request)
    if not get_admin_auth_service().is_session_valid(token):
        raise AdminSessionRequiredException()
