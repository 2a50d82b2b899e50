from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from dispatch import schemas
from dispatch.api import deps
from dispatch.services import trip_lifecycle

router = APIRouter(prefix="/trips", tags=["trips"])

@router.post("/add-trips", response_model=schemas.TripCreated, status_code=status.HTTP_201_CREATED)
def create_trip(
    *,
    db: Session = Depends(deps.get_db),
    trip_in: schemas.TripCreate,
):
    """
    Store a new trip awaiting drivers.
    """
    trip = trip_lifecycle.create_trip(db, trip_in)
    return {"message": "Trip stored successfully", "trip_id": trip.id}

@router.get("", response_model=List[schemas.Trip])
def read_trips(db: Session = Depends(deps.get_db)):
    return trip_lifecycle.list_trips(db)

@router.get("/status/{email}", response_model=schemas.DriverTrips)
def read_driver_trip_status(email: str, db: Session = Depends(deps.get_db)):
    """
    Accepted and in-progress trips assigned to a driver.
    """
    return trip_lifecycle.get_driver_trip_status(db, email)

@router.get("/accepted/{driver_email}", response_model=List[schemas.Trip])
def read_accepted_trips(driver_email: str, db: Session = Depends(deps.get_db)):
    """
    Trips in `accept` that the driver accepted or was assigned.
    """
    return trip_lifecycle.list_accepted_trips(db, driver_email)

@router.get("/wip/{driver_email}", response_model=List[schemas.Trip])
def read_wip_trips(driver_email: str, db: Session = Depends(deps.get_db)):
    """
    Trips in progress for the driver.
    """
    return trip_lifecycle.list_wip_trips(db, driver_email)

@router.put("/assign-driver", response_model=schemas.Message)
def assign_driver(
    *,
    db: Session = Depends(deps.get_db),
    assignment: schemas.TripAssign,
):
    """
    Bind a single driver to a trip.
    """
    trip_lifecycle.assign_driver(db, assignment.trip_id, assignment.driver_email)
    return {"message": "Driver assigned successfully"}

@router.put("/update-field", response_model=schemas.Message)
def update_trip_field(
    *,
    db: Session = Depends(deps.get_db),
    patch: schemas.TripFieldUpdate,
):
    """
    Update one of startMeter, endMeter, luggage, pet, toll or hills.
    """
    trip_lifecycle.update_trip_field(db, patch.trip_id, patch.field, patch.value)
    return {"message": "Trip updated successfully"}

@router.get("/{trip_id}", response_model=schemas.Trip)
def read_trip(trip_id: int, db: Session = Depends(deps.get_db)):
    return trip_lifecycle.get_trip(db, trip_id)

@router.put("/{trip_id}/accept", response_model=schemas.Message)
def accept_trip(
    *,
    db: Session = Depends(deps.get_db),
    trip_id: int,
    acceptance: schemas.TripAccept,
):
    """
    Add the driver to the trip's accepted drivers.
    """
    trip_lifecycle.accept_trip(db, trip_id, acceptance.driver_email)
    return {"message": "Trip accepted successfully"}

@router.put("/{trip_id}/start", response_model=schemas.Message)
def start_trip(trip_id: int, db: Session = Depends(deps.get_db)):
    trip_lifecycle.start_trip(db, trip_id)
    return {"message": "Trip started successfully"}

@router.put("/{trip_id}/complete", response_model=schemas.TripCompleted)
def complete_trip(
    *,
    db: Session = Depends(deps.get_db),
    trip_id: int,
    completion: schemas.TripComplete,
):
    """
    Record final meter readings and the bill, and close the trip.
    """
    trip = trip_lifecycle.complete_trip(db, trip_id, completion)
    return {
        "message": "Trip marked as completed successfully",
        "trip_id": trip.id,
        "final_bill": trip.final_bill,
    }
