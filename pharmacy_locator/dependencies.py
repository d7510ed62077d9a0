from typing import Optional

from fastapi import Header, HTTPException, status

from pharmacy_locator.constants import CURRENT_DRUGSTORE_HEADER
from pharmacy_locator.db import Session


def get_db():
    db = Session()
    try:
        yield db
    finally:
        db.close()


# Named apart from the drugstore_id path parameter of the profile route
def get_current_drugstore_id(
        current_drugstore_id: Optional[int] = Header(default=None, alias=CURRENT_DRUGSTORE_HEADER)) -> Optional[int]:
    return current_drugstore_id


def require_current_drugstore_id(
        current_drugstore_id: Optional[int] = Header(default=None, alias=CURRENT_DRUGSTORE_HEADER)) -> int:
    if current_drugstore_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Drugstore identity is required."
        )
    return current_drugstore_id
