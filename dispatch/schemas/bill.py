from datetime import datetime
from typing import Optional

from dispatch.schemas.base import CamelModel

class BillBase(CamelModel):
    trip_id: Optional[int] = None
    phone: Optional[str] = None
    pickup_location: Optional[str] = None
    drop_location: Optional[str] = None
    pickup_date: Optional[str] = None
    pickup_time: Optional[str] = None
    trip_type: Optional[str] = None

class BillCreate(BillBase):
    # Required: driver_email, customer_name, final_bill
    driver_email: Optional[str] = None
    customer_name: Optional[str] = None
    final_bill: Optional[float] = None

    # Charges default to zero when absent
    start_meter: Optional[float] = None
    end_meter: Optional[float] = None
    total_km: Optional[float] = None
    final_km: Optional[float] = None
    km_price: Optional[float] = None
    total_km_price: Optional[float] = None
    luggage_charge: Optional[float] = None
    pet_charge: Optional[float] = None
    toll_charge: Optional[float] = None
    hills_charge: Optional[float] = None
    betta_charge: Optional[float] = None
    state_charge: Optional[float] = None
    total_entered_charges: Optional[float] = None

    created_at: Optional[datetime] = None

class BillCreated(CamelModel):
    message: str
    bill_id: int
    trip_id: Optional[int] = None

class Bill(BillBase):
    id: int
    driver_email: str
    customer_name: str
    final_bill: float
    start_meter: float
    end_meter: float
    total_km: float
    final_km: float
    km_price: float
    total_km_price: float
    luggage_charge: float
    pet_charge: float
    toll_charge: float
    hills_charge: float
    betta_charge: float
    state_charge: float
    total_entered_charges: float
    created_at: datetime
