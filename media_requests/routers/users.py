"""User API routes."""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from media_requests.database import get_db
from media_requests.models.user import User
from media_requests.schemas.user import UserOut

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[UserOut])
def list_users(db: Session = Depends(get_db)):
    """List all users ordered by name."""
    try:
        return db.query(User).order_by(User.name).all()
    except SQLAlchemyError:
        logger.exception("Failed to fetch users")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch users")


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: str, db: Session = Depends(get_db)):
    """Fetch a single user by ID."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
