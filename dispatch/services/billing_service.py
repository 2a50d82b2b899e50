import logging
from datetime import datetime
from typing import List

from sqlalchemy.orm import Session

from dispatch import crud
from dispatch.core.errors import ValidationError, data_access
from dispatch.models.bill import Bill
from dispatch.schemas.bill import BillCreate

logger = logging.getLogger(__name__)

CHARGE_FIELDS = (
    "start_meter", "end_meter", "total_km", "final_km", "km_price", "total_km_price",
    "luggage_charge", "pet_charge", "toll_charge", "hills_charge", "betta_charge",
    "state_charge", "total_entered_charges",
)


def create_bill(db: Session, bill_in: BillCreate) -> Bill:
    """Append a bill. Charges are stored as the client computed them."""
    if not bill_in.driver_email or not bill_in.customer_name or bill_in.final_bill is None:
        raise ValidationError("Required fields are missing")

    bill_data = bill_in.model_dump()
    for field in CHARGE_FIELDS:
        if bill_data[field] is None:
            bill_data[field] = 0
    if bill_data["created_at"] is None:
        bill_data["created_at"] = datetime.utcnow()

    with data_access(db, "Creating bill"):
        bill = crud.bill.create(db, obj_in=bill_data)
    logger.info(f"Bill {bill.id} saved for {bill.driver_email}: {bill.final_bill}")
    return bill


def list_driver_bills(db: Session, driver_email: str) -> List[Bill]:
    if not driver_email:
        raise ValidationError("driverEmail is required")
    with data_access(db, "Fetching bills"):
        return crud.bill.get_multi_by_driver(db, driver_email=driver_email)


def list_bills(db: Session) -> List[Bill]:
    with data_access(db, "Fetching bills"):
        return crud.bill.get_multi_by_pickup_date(db)
