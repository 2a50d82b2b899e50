from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from dispatch import schemas
from dispatch.api import deps
from dispatch.services import driver_service

router = APIRouter(tags=["auth"])

@router.post("/login", response_model=schemas.LoginResponse)
def login(
    *,
    db: Session = Depends(deps.get_db),
    credentials: schemas.DriverLogin,
):
    """
    Exchange email and password for a 7-day access token.
    """
    token, driver = driver_service.authenticate_driver(db, credentials.email, credentials.password)
    return {"token": token, "user": driver}
