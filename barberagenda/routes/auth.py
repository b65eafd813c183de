import logging

from fastapi import APIRouter, Request
from pydantic import BaseModel

from ..auth import issue_admin_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Authentication"])


class AdminLoginRequest(BaseModel):
    password: str = ""


class AdminLoginResponse(BaseModel):
    token: str
    expiresInMinutes: int


@router.post("/login", response_model=AdminLoginResponse)
async def admin_login(data: AdminLoginRequest, request: Request):
    """Exchange the admin password for a signed, expiring token"""
    client_ip = request.client.host if request.client else None
    return issue_admin_token(data.password, ip_address=client_ip)
