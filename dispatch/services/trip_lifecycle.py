"""
Trip lifecycle: creation, driver acceptance, start and completion.

A trip moves created -> accept -> WIP -> completed. Drivers express interest
through accept-intent, which adds their email to the trip's accepted_drivers
set without excluding anyone else. An administrator can instead bind one
driver directly through assignment, which sets driver_email. Both paths end
in the same `_transition` call.
"""
import json
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from dispatch import crud
from dispatch.core.config import settings
from dispatch.core.errors import DataAccessError, NotFoundError, ValidationError, data_access
from dispatch.models.trip import Trip, TripStatus
from dispatch.schemas.trip import TripComplete, TripCreate

logger = logging.getLogger(__name__)

# Statuses each state is normally entered from. Transitions outside this map
# are still applied, only logged.
EXPECTED_PREDECESSORS = {
    TripStatus.accept: {TripStatus.created, TripStatus.accept},
    TripStatus.wip: {TripStatus.accept},
    TripStatus.completed: {TripStatus.wip},
}

# Client field name -> column, for the single-field patch
PATCHABLE_FIELDS = {
    "startMeter": "start_meter",
    "endMeter": "end_meter",
    "luggage": "luggage",
    "pet": "pet",
    "toll": "toll",
    "hills": "hills",
}


# ===================== Acceptance set =====================

def parse_accepted_drivers(raw: Optional[str]) -> List[str]:
    """Decode the stored JSON array. Anything unreadable is an empty set."""
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except ValueError:
        logger.warning(f"Unparseable acceptedDrivers value {raw!r}, treating as empty")
        return []
    if not isinstance(value, list):
        logger.warning(f"acceptedDrivers is not a list: {raw!r}, treating as empty")
        return []
    emails: List[str] = []
    for email in value:
        if isinstance(email, str) and email not in emails:
            emails.append(email)
    return emails


def dump_accepted_drivers(emails: List[str]) -> str:
    return json.dumps(emails)


def add_accepted_driver(emails: List[str], driver_email: str) -> List[str]:
    """Append `driver_email` unless present; first-acceptance order is kept."""
    if driver_email in emails:
        return list(emails)
    return emails + [driver_email]


def is_trip_driver(trip: Trip, driver_email: str) -> bool:
    """Exact match on driver_email or membership in accepted_drivers."""
    if trip.driver_email == driver_email:
        return True
    return driver_email in parse_accepted_drivers(trip.accepted_drivers)


# ===================== Transitions =====================

def _transition(
    db: Session,
    trip: Trip,
    target: TripStatus,
    values: Optional[Dict[str, Any]] = None,
    context: str = "Updating trip",
    guard_accepted: bool = False,
) -> bool:
    """
    Move `trip` to `target`, writing `values` in the same statement.

    With `guard_accepted` the write only lands if accepted_drivers still
    holds what `trip` was loaded with.

    Returns:
        False if no row was written (trip gone, or the guard failed)
    """
    trip_id = trip.id
    current = trip.status
    update = dict(values or {})
    update["status"] = target.value

    with data_access(db, context):
        if guard_accepted:
            applied = crud.trip.swap_accepted_drivers(
                db, id=trip_id, expected=trip.accepted_drivers, values=update
            )
        else:
            applied = crud.trip.update_values(db, id=trip_id, values=update) > 0
    if not applied:
        return False

    if current not in {s.value for s in EXPECTED_PREDECESSORS.get(target, set())}:
        logger.warning(f"Trip {trip_id}: {current} -> {target.value} is out of order, applied anyway")
    logger.info(f"Trip {trip_id}: {current} -> {target.value}")
    return True


def _get_trip_or_404(db: Session, trip_id: int, context: str = "Fetching trip") -> Trip:
    with data_access(db, context):
        trip = crud.trip.get(db, id=trip_id)
    if trip is None:
        raise NotFoundError("Trip not found")
    return trip


def create_trip(db: Session, trip_in: TripCreate) -> Trip:
    trip_data = trip_in.model_dump()
    for numeric in ("days", "km_price", "km", "betta", "adult", "child", "luggage"):
        if trip_data[numeric] is None:
            trip_data[numeric] = 0
    if trip_data["created_at"] is None:
        trip_data["created_at"] = datetime.utcnow()
    trip_data["status"] = TripStatus.created.value
    trip_data["accepted_drivers"] = dump_accepted_drivers([])

    with data_access(db, "Inserting trip"):
        trip = crud.trip.create(db, obj_in=trip_data)
    logger.info(f"Created trip {trip.id}")
    return trip


def accept_trip(db: Session, trip_id: int, driver_email: Optional[str]) -> Trip:
    """
    Record a driver's interest in a trip and move it to `accept`.

    Calling this twice for the same driver is a no-op on the set. The set is
    written with a compare-and-swap against the value read, so concurrent
    accepts for one trip cannot drop each other's email.

    Raises:
        ValidationError: no driver email given
        NotFoundError: no such trip
        DataAccessError: the swap kept losing to other writers
    """
    if not driver_email:
        raise ValidationError("driverEmail is required")

    for attempt in range(1, settings.ACCEPT_MAX_RETRIES + 1):
        trip = _get_trip_or_404(db, trip_id, "Fetching acceptedDrivers")
        emails = add_accepted_driver(parse_accepted_drivers(trip.accepted_drivers), driver_email)

        swapped = _transition(
            db,
            trip,
            TripStatus.accept,
            {"accepted_drivers": dump_accepted_drivers(emails)},
            context="Updating acceptedDrivers",
            guard_accepted=True,
        )
        if swapped:
            logger.info(f"Trip {trip_id}: {driver_email} accepted ({len(emails)} interested)")
            return _get_trip_or_404(db, trip_id)

        logger.warning(f"Trip {trip_id}: acceptedDrivers changed concurrently, retry {attempt}")

    raise DataAccessError("Updating acceptedDrivers")


def assign_driver(db: Session, trip_id: Optional[int], driver_email: Optional[str]) -> Trip:
    """
    Bind one driver to a trip. accepted_drivers is left as it is.
    """
    if not trip_id or not driver_email:
        raise ValidationError("tripId and driverEmail are required")

    trip = _get_trip_or_404(db, trip_id)
    assigned = _transition(
        db,
        trip,
        TripStatus.accept,
        {"driver_email": driver_email, "assigned_at": datetime.utcnow()},
        context="Assigning driver",
    )
    if not assigned:
        raise NotFoundError("Trip not found")
    return _get_trip_or_404(db, trip_id)


def start_trip(db: Session, trip_id: int) -> Trip:
    trip = _get_trip_or_404(db, trip_id)
    if not _transition(db, trip, TripStatus.wip, context="Starting trip"):
        raise NotFoundError("Trip not found")
    return _get_trip_or_404(db, trip_id)


def complete_trip(db: Session, trip_id: int, completion: TripComplete) -> Trip:
    """
    Write the final meter readings and charges and mark the trip completed.

    Raises:
        ValidationError: start meter, end meter or final bill is absent
        NotFoundError: no such trip
    """
    if completion.start_meter is None or completion.end_meter is None or completion.final_bill is None:
        raise ValidationError("Required fields are missing")

    values = {
        "start_meter": completion.start_meter,
        "end_meter": completion.end_meter,
        "final_bill": completion.final_bill,
        "completed_at": datetime.utcnow(),
    }
    for extra in ("luggage", "pet", "toll", "hills", "total_km", "final_km"):
        value = getattr(completion, extra)
        values[extra] = value if value is not None else 0

    trip = _get_trip_or_404(db, trip_id)
    if not _transition(db, trip, TripStatus.completed, values, context="Completing trip"):
        raise NotFoundError("Trip not found")
    return _get_trip_or_404(db, trip_id)


def update_trip_field(db: Session, trip_id: Optional[int], field: Optional[str], value: Any) -> Trip:
    """Patch one allow-listed metered field."""
    if not trip_id or not field:
        raise ValidationError("Missing tripId or field")

    if field in PATCHABLE_FIELDS:
        column = PATCHABLE_FIELDS[field]
    elif field in PATCHABLE_FIELDS.values():
        column = field
    else:
        raise ValidationError("Invalid field name")

    with data_access(db, "Updating trip field"):
        matched = crud.trip.update_values(db, id=trip_id, values={column: value})
    if not matched:
        raise NotFoundError("Trip not found")
    return _get_trip_or_404(db, trip_id)


# ===================== Queries =====================

def list_trips(db: Session) -> List[Trip]:
    with data_access(db, "Fetching trips"):
        return crud.trip.get_multi(db)


def get_trip(db: Session, trip_id: int) -> Trip:
    return _get_trip_or_404(db, trip_id)


def _trips_for_driver(db: Session, driver_email: str, status: TripStatus, context: str) -> List[Trip]:
    if not driver_email:
        raise ValidationError("driverEmail is required")
    with data_access(db, context):
        trips = crud.trip.get_by_status(db, statuses=[status.value])
    return [t for t in trips if is_trip_driver(t, driver_email)]


def list_accepted_trips(db: Session, driver_email: str) -> List[Trip]:
    return _trips_for_driver(db, driver_email, TripStatus.accept, "Fetching accepted trips")


def list_wip_trips(db: Session, driver_email: str) -> List[Trip]:
    return _trips_for_driver(db, driver_email, TripStatus.wip, "Fetching WIP trips")


def get_driver_trip_status(db: Session, driver_email: str) -> Dict[str, List[Trip]]:
    """Accepted and in-progress trips whose assigned driver is `driver_email`."""
    if not driver_email:
        raise ValidationError("Email is required")
    with data_access(db, "Fetching trips"):
        trips = crud.trip.get_by_driver_email(
            db,
            driver_email=driver_email,
            statuses=[TripStatus.accept.value, TripStatus.wip.value],
        )
    return {
        "accepted_trips": [t for t in trips if t.status == TripStatus.accept.value],
        "wip_trips": [t for t in trips if t.status == TripStatus.wip.value],
    }
