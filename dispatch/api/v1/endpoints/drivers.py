from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from dispatch import schemas
from dispatch.api import deps
from dispatch.services import driver_service

router = APIRouter(prefix="/drivers", tags=["drivers"])
admin_router = APIRouter(tags=["admin"])

@router.post("/register", response_model=schemas.DriverRegistered, status_code=status.HTTP_201_CREATED)
def register_driver(
    *,
    db: Session = Depends(deps.get_db),
    driver_in: schemas.DriverRegister,
):
    """
    Register a new driver.
    """
    driver = driver_service.register_driver(db, driver_in)
    return {"message": "Driver registered successfully", "driver_id": driver.id}

@router.post("/check-exists", response_model=schemas.DriverExists)
def check_driver_exists(
    *,
    db: Session = Depends(deps.get_db),
    query: schemas.DriverExistsQuery,
):
    """
    Report which of email, phone, RC and insurance number are already in use.
    """
    return driver_service.check_driver_exists(db, query)

@router.get("", response_model=List[schemas.DriverContact])
def read_driver_contacts(db: Session = Depends(deps.get_db)):
    """
    Email and name of every driver.
    """
    return driver_service.list_driver_contacts(db)

@router.get("/status/{email}", response_model=schemas.DriverStatus)
def read_driver_status(email: str, db: Session = Depends(deps.get_db)):
    """
    Get a driver's status by email.
    """
    return {"status": driver_service.get_driver_status(db, email)}

@router.get("/{driver_id}", response_model=schemas.Driver)
def read_driver(driver_id: int, db: Session = Depends(deps.get_db)):
    """
    Get driver by ID.
    """
    return driver_service.get_driver(db, driver_id)

@router.put("/{driver_id}", response_model=schemas.Message)
def update_driver(
    *,
    db: Session = Depends(deps.get_db),
    driver_id: int,
    driver_in: schemas.DriverUpdate,
):
    """
    Update any subset of a driver's fields.
    """
    driver_service.update_driver(db, driver_id, driver_in)
    return {"message": "Driver updated successfully"}

@admin_router.get("/all-drivers", response_model=List[schemas.Driver])
def read_all_drivers(db: Session = Depends(deps.get_db)):
    """
    Full records of every driver.
    """
    return driver_service.list_drivers(db)
