"""Admin password check used by clients to unlock admin actions."""
import logging
import secrets
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from media_requests.config import settings

logger = logging.getLogger(__name__)
router = APIRouter()


class AdminLogin(BaseModel):
    password: str


class AdminLoginResult(BaseModel):
    authenticated: bool


@router.post("/verify", response_model=AdminLoginResult)
def verify_admin(payload: AdminLogin):
    if not payload.password.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Please enter the admin password")
    if not secrets.compare_digest(payload.password.strip().encode(), settings.ADMIN_PASSWORD.encode()):
        logger.warning("Rejected admin password attempt")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect password")
    return AdminLoginResult(authenticated=True)
