from fastapi import Depends
from sqlalchemy.orm import Session

from .database import get_db
from .repository import UserStore


def get_user_store(db: Session = Depends(get_db)) -> UserStore:
    return UserStore(db)
