"""
Single-administrator session handling.

The session cookie holds a SHA-256 digest of the configured credentials, so
changing the password or the secret invalidates every issued cookie.
"""
import hashlib
import hmac
from typing import Optional, Tuple

from slownik.auth.constants import DEFAULT_SESSION_SECRET
from slownik.config import settings


def _admin_credentials() -> Optional[Tuple[str, str]]:
    if not settings.ADMIN_EMAIL or not settings.ADMIN_PASSWORD:
        return None
    return settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD


def _session_secret() -> str:
    return settings.ADMIN_SESSION_SECRET or settings.ADMIN_PASSWORD or DEFAULT_SESSION_SECRET


def _constant_time_equal(left: str, right: str) -> bool:
    return hmac.compare_digest(left.encode("utf-8"), right.encode("utf-8"))


class AdminAuthService:
    """Credential check and session token for the configured administrator"""

    def compute_session_token(self) -> Optional[str]:
        """None when no administrator is configured"""
        credentials = _admin_credentials()
        if credentials is None:
            return None
        email, password = credentials
        payload = f"{email}:{password}:{_session_secret()}"
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()

    def validate_credentials(self, email: str, password: str) -> bool:
        """E-mail is compared trimmed and case-insensitive, password verbatim"""
        credentials = _admin_credentials()
        if credentials is None:
            return False
        stored_email, stored_password = credentials
        email_ok = _constant_time_equal(email.strip().lower(), stored_email.strip().lower())
        password_ok = _constant_time_equal(password, stored_password)
        return email_ok and password_ok

    def is_session_valid(self, token: Optional[str]) -> bool:
        expected = self.compute_session_token()
        if not expected or not token:
            return False
        return _constant_time_equal(token, expected)

    @property
    def session_max_age(self) -> int:
        return settings.ADMIN_SESSION_MAX_AGE_HOURS * 60 * 60
