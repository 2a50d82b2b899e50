from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from dispatch import schemas
from dispatch.api import deps
from dispatch.services import billing_service

router = APIRouter(prefix="/bills", tags=["bills"])
admin_router = APIRouter(tags=["admin"])

@router.post("", response_model=schemas.BillCreated, status_code=status.HTTP_201_CREATED)
def create_bill(
    *,
    db: Session = Depends(deps.get_db),
    bill_in: schemas.BillCreate,
):
    """
    Save the bill of a completed trip.
    """
    bill = billing_service.create_bill(db, bill_in)
    return {"message": "Bill saved successfully", "bill_id": bill.id, "trip_id": bill.trip_id}

@router.get("/get/{driver_email}", response_model=List[schemas.Bill])
def read_driver_bills(driver_email: str, db: Session = Depends(deps.get_db)):
    """
    All bills of a driver, newest first.
    """
    return billing_service.list_driver_bills(db, driver_email)

@admin_router.get("/all-bills", response_model=List[schemas.Bill])
def read_all_bills(db: Session = Depends(deps.get_db)):
    return billing_service.list_bills(db)
