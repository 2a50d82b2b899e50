from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session

from dispatch.crud.base import CRUDBase
from dispatch.models.driver import Driver
from dispatch.schemas.driver import DriverRegister, DriverUpdate

class CRUDDriver(CRUDBase[Driver, DriverRegister, DriverUpdate]):
    def get_by_email(self, db: Session, *, email: str) -> Optional[Driver]:
        return db.query(Driver).filter(Driver.email == email).first()

    def find_matching(
        self,
        db: Session,
        *,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        rc_number: Optional[str] = None,
        insurance_number: Optional[str] = None,
    ) -> List[Driver]:
        """Drivers matching any one of the given identifying fields."""
        conditions = []
        if email is not None:
            conditions.append(Driver.email == email)
        if phone is not None:
            conditions.append(Driver.phone == phone)
        if rc_number is not None:
            conditions.append(Driver.rc_number == rc_number)
        if insurance_number is not None:
            conditions.append(Driver.insurance_number == insurance_number)
        if not conditions:
            return []
        return db.query(Driver).filter(or_(*conditions)).all()

# Create a singleton instance
driver = CRUDDriver(Driver)
