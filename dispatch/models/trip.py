from sqlalchemy import Column, String, DateTime, Integer, Float, Text
from dispatch.db.base_class import Base
import enum
from datetime import datetime

class TripStatus(str, enum.Enum):
    created = "created"
    accept = "accept"
    wip = "WIP"
    completed = "completed"

class Trip(Base):
    __tablename__ = "trips"

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Route
    pickup_location = Column(String(255), nullable=True)
    drop_location = Column(String(255), nullable=True)
    trip_type = Column(String(64), nullable=True)
    car = Column(String(64), nullable=True)
    pickup_date = Column(String(32), nullable=True)
    pickup_time = Column(String(32), nullable=True)
    days = Column(Integer, default=0)
    state = Column(String(64), nullable=True)

    # Estimates
    km_price = Column(Float, default=0)
    km = Column(Float, default=0)
    betta = Column(Float, default=0)  # driver allowance

    # Customer
    customer_name = Column(String(120), nullable=True)
    phone = Column(String(32), nullable=True)
    customer_remark = Column(Text, nullable=True)
    customer_current_location = Column(String(255), nullable=True)
    adult = Column(Integer, default=0)
    child = Column(Integer, default=0)
    luggage = Column(Float, default=0)

    # Dispatch
    status = Column(String(16), nullable=False, default=TripStatus.created.value, index=True)
    accepted_drivers = Column(Text, nullable=True)  # JSON array of driver emails
    driver_email = Column(String(255), nullable=True, index=True)
    assigned_at = Column(DateTime, nullable=True)

    # Metered, written at completion
    start_meter = Column(Float, nullable=True)
    end_meter = Column(Float, nullable=True)
    pet = Column(Float, nullable=True)
    toll = Column(Float, nullable=True)
    hills = Column(Float, nullable=True)
    total_km = Column(Float, nullable=True)
    final_km = Column(Float, nullable=True)
    final_bill = Column(Float, nullable=True)
    completed_at = Column(DateTime, nullable=True)

    def __repr__(self):
        return f"<Trip {self.id} [{self.status}]>"
