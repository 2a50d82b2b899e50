from typing import List
from sqlalchemy.orm import Session

from dispatch.crud.base import CRUDBase
from dispatch.models.bill import Bill
from dispatch.schemas.bill import BillCreate

class CRUDBill(CRUDBase[Bill, BillCreate, BillCreate]):
    def get_multi_by_driver(self, db: Session, *, driver_email: str) -> List[Bill]:
        return (
            db.query(self.model)
            .filter(Bill.driver_email == driver_email)
            .order_by(Bill.created_at.desc(), Bill.id.desc())
            .all()
        )

    def get_multi_by_pickup_date(self, db: Session) -> List[Bill]:
        return (
            db.query(self.model)
            .order_by(Bill.pickup_date.desc(), Bill.id.desc())
            .all()
        )

# Create a singleton instance
bill = CRUDBill(Bill)
