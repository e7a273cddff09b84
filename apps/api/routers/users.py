"""
App User API Endpoints

Registers the calling identity as an app user.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db
from core.exceptions import ConflictError, NotFoundError
from core.identity import get_caller_identity
from schemas import AppUserCreate, AppUserResponse
from services.user_registry import UserAlreadyRegistered, get_user, register_user

router = APIRouter(prefix="/v1/users", tags=["users"])


@router.post("", response_model=AppUserResponse, status_code=201)
def create_user(
    user: AppUserCreate,
    caller: str = Depends(get_caller_identity),
    db: Session = Depends(get_db)
):
    """Register the caller. Each identity can register only once."""
    try:
        db_user = register_user(db, uid=caller, u_name=user.u_name)
    except UserAlreadyRegistered as e:
        raise ConflictError(str(e))
    db.refresh(db_user)
    return db_user


@router.get("/me", response_model=AppUserResponse)
def get_me(
    caller: str = Depends(get_caller_identity),
    db: Session = Depends(get_db)
):
    """Get the caller's registration."""
    db_user = get_user(db, caller)
    if db_user is None:
        raise NotFoundError("User", caller)
    return db_user
