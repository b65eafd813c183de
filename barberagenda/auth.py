import logging
from datetime import timedelta
from typing import Optional

from fastapi import Depends, Header, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import ADMIN_PASSWORD, ADMIN_TOKEN_TTL_MINUTES
from .errors import AuthError, ConfigError
from .security_utils import (
    TokenExpired,
    constant_time_compare,
    create_jwt_token,
    log_security_event,
    verify_jwt_token,
)

logger = logging.getLogger(__name__)

# auto_error=False so X-Admin-Token can be used when no Bearer header is sent
security = HTTPBearer(auto_error=False)

ADMIN_SUBJECT = "admin"


def issue_admin_token(password: str, ip_address: Optional[str] = None) -> dict:
    """Check the admin password and issue a signed token valid for ADMIN_TOKEN_TTL_MINUTES"""
    if not ADMIN_PASSWORD:
        logger.error("❌ ADMIN_PASSWORD not configured")
        raise ConfigError("Admin password not configured. Set ADMIN_PASSWORD on the server.")

    if not password or not constant_time_compare(password, ADMIN_PASSWORD):
        log_security_event("admin_login_failed", ip_address=ip_address)
        raise AuthError("Invalid password")

    token = create_jwt_token(
        {"sub": ADMIN_SUBJECT, "scope": "admin"},
        expires_delta=timedelta(minutes=ADMIN_TOKEN_TTL_MINUTES),
    )
    log_security_event("admin_login", ip_address=ip_address)
    return {"token": token, "expiresInMinutes": ADMIN_TOKEN_TTL_MINUTES}


def verify_admin_token(token: Optional[str]) -> dict:
    """Decode an admin token; raises AuthError when missing, invalid or expired"""
    if not token:
        raise AuthError("Not authenticated. Provide a Bearer token in the Authorization header.")

    # Basic token format validation before processing
    if len(token.split(".")) != 3:
        logger.warning(f"⚠️ Malformed admin token received, length: {len(token)}")
        raise AuthError("Invalid token format")

    try:
        payload = verify_jwt_token(token)
    except TokenExpired:
        raise AuthError(
            "Token has expired. Please log in again.", headers={"X-Token-Expired": "true"}
        ) from None

    if not payload or payload.get("sub") != ADMIN_SUBJECT:
        raise AuthError()

    return payload


async def require_admin(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    x_admin_token: Optional[str] = Header(default=None),
) -> dict:
    """Dependency for admin-only routes: Bearer token first, X-Admin-Token header as fallback"""
    token = credentials.credentials if credentials else x_admin_token

    try:
        return verify_admin_token(token)
    except AuthError:
        client_ip = request.client.host if request.client else None
        log_security_event(
            "admin_token_rejected", ip_address=client_ip, details={"path": request.url.path}
        )
        raise
