from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session

from dispatch.crud.base import CRUDBase
from dispatch.models.trip import Trip
from dispatch.schemas.trip import TripCreate, TripComplete

class CRUDTrip(CRUDBase[Trip, TripCreate, TripComplete]):
    def get_by_status(self, db: Session, *, statuses: List[str]) -> List[Trip]:
        return (
            db.query(self.model)
            .filter(Trip.status.in_(statuses))
            .order_by(Trip.id)
            .all()
        )

    def get_by_driver_email(self, db: Session, *, driver_email: str, statuses: List[str]) -> List[Trip]:
        return (
            db.query(self.model)
            .filter(Trip.driver_email == driver_email, Trip.status.in_(statuses))
            .order_by(Trip.id)
            .all()
        )

    def update_values(self, db: Session, *, id: int, values: Dict[str, Any]) -> int:
        """Write `values` to one trip; returns the number of rows matched."""
        matched = (
            db.query(self.model)
            .filter(Trip.id == id)
            .update(values, synchronize_session=False)
        )
        db.commit()
        return matched

    def swap_accepted_drivers(
        self,
        db: Session,
        *,
        id: int,
        expected: Optional[str],
        values: Dict[str, Any],
    ) -> bool:
        """Write `values` only if accepted_drivers still holds `expected`.

        Returns False when another writer changed the set in between.
        """
        if expected is None:
            guard = Trip.accepted_drivers.is_(None)
        else:
            guard = Trip.accepted_drivers == expected
        matched = (
            db.query(self.model)
            .filter(Trip.id == id, guard)
            .update(values, synchronize_session=False)
        )
        db.commit()
        return matched == 1

# Create a singleton instance
trip = CRUDTrip(Trip)
