from datetime import datetime
from typing import Optional, List

from dispatch.schemas.base import CamelModel

class TripCreate(CamelModel):
    pickup_location: Optional[str] = None
    drop_location: Optional[str] = None
    trip_type: Optional[str] = None
    car: Optional[str] = None
    pickup_date: Optional[str] = None
    pickup_time: Optional[str] = None
    days: Optional[int] = None
    km_price: Optional[float] = None
    km: Optional[float] = None
    betta: Optional[float] = None
    phone: Optional[str] = None
    state: Optional[str] = None
    customer_name: Optional[str] = None
    customer_remark: Optional[str] = None
    adult: Optional[int] = None
    child: Optional[int] = None
    luggage: Optional[float] = None
    customer_current_location: Optional[str] = None
    created_at: Optional[datetime] = None

class TripCreated(CamelModel):
    message: str
    trip_id: int

class TripAccept(CamelModel):
    driver_email: Optional[str] = None

class TripAssign(CamelModel):
    trip_id: Optional[int] = None
    driver_email: Optional[str] = None

class TripComplete(CamelModel):
    start_meter: Optional[float] = None
    end_meter: Optional[float] = None
    luggage: Optional[float] = None
    pet: Optional[float] = None
    toll: Optional[float] = None
    hills: Optional[float] = None
    total_km: Optional[float] = None
    final_km: Optional[float] = None
    final_bill: Optional[float] = None

class TripCompleted(CamelModel):
    message: str
    trip_id: int
    final_bill: float

class TripFieldUpdate(CamelModel):
    trip_id: Optional[int] = None
    field: Optional[str] = None
    value: Optional[float] = None

class Trip(CamelModel):
    id: int
    created_at: Optional[datetime] = None
    pickup_location: Optional[str] = None
    drop_location: Optional[str] = None
    trip_type: Optional[str] = None
    car: Optional[str] = None
    pickup_date: Optional[str] = None
    pickup_time: Optional[str] = None
    days: Optional[int] = None
    state: Optional[str] = None
    km_price: Optional[float] = None
    km: Optional[float] = None
    betta: Optional[float] = None
    customer_name: Optional[str] = None
    phone: Optional[str] = None
    customer_remark: Optional[str] = None
    customer_current_location: Optional[str] = None
    adult: Optional[int] = None
    child: Optional[int] = None
    luggage: Optional[float] = None

    status: str
    accepted_drivers: Optional[str] = None  # JSON array string
    driver_email: Optional[str] = None
    assigned_at: Optional[datetime] = None

    start_meter: Optional[float] = None
    end_meter: Optional[float] = None
    pet: Optional[float] = None
    toll: Optional[float] = None
    hills: Optional[float] = None
    total_km: Optional[float] = None
    final_km: Optional[float] = None
    final_bill: Optional[float] = None
    completed_at: Optional[datetime] = None

class DriverTrips(CamelModel):
    accepted_trips: List[Trip]
    wip_trips: List[Trip]
