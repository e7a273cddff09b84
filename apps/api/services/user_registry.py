"""
App user registration.

Each caller identity may register once. Ids are sequential, assigned
from the number of users already registered.
"""
import logging
from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models import AppUser

logger = logging.getLogger(__name__)


class UserAlreadyRegistered(Exception):
    """The caller identity already has an AppUser."""

    def __init__(self, uid: str):
        self.uid = uid
        super().__init__("The provided uid is already in use by an existing user")


def get_user(db: Session, uid: str) -> Optional[AppUser]:
    return db.query(AppUser).filter(AppUser.uid == uid).first()


def register_user(db: Session, uid: str, u_name: Optional[str]) -> AppUser:
    """
    Register the caller.

    Raises:
        UserAlreadyRegistered: if uid already has a registration
    """
    if get_user(db, uid) is not None:
        logger.info(f"Registration refused, uid already in use: {uid}")
        raise UserAlreadyRegistered(uid)

    next_id = db.query(func.count(AppUser.id)).scalar() or 0
    user = AppUser(id=next_id, uid=uid, u_name=u_name)
    db.add(user)
    try:
        db.flush()
    except IntegrityError as e:
        # A concurrent registration won the unique uid or the sequential id
        db.rollback()
        logger.info(f"Registration refused, lost concurrent insert: {uid}")
        raise UserAlreadyRegistered(uid) from e

    logger.info("Data set successfully", extra={"extra_fields": {"uid": uid, "user_id": next_id}})
    return user
