from sqlalchemy import Column, String, DateTime, Integer, Float
from dispatch.db.base_class import Base
from datetime import datetime

class Bill(Base):
    __tablename__ = "bills"

    id = Column(Integer, primary_key=True, index=True)
    trip_id = Column(Integer, nullable=True)  # soft reference, bills are snapshots
    driver_email = Column(String(255), nullable=False, index=True)
    customer_name = Column(String(120), nullable=False)
    phone = Column(String(32), nullable=True)

    # Trip snapshot
    pickup_location = Column(String(255), nullable=True)
    drop_location = Column(String(255), nullable=True)
    pickup_date = Column(String(32), nullable=True)
    pickup_time = Column(String(32), nullable=True)
    trip_type = Column(String(64), nullable=True)

    # Charges, computed by the client and stored verbatim
    start_meter = Column(Float, default=0)
    end_meter = Column(Float, default=0)
    total_km = Column(Float, default=0)
    final_km = Column(Float, default=0)
    km_price = Column(Float, default=0)
    total_km_price = Column(Float, default=0)
    luggage_charge = Column(Float, default=0)
    pet_charge = Column(Float, default=0)
    toll_charge = Column(Float, default=0)
    hills_charge = Column(Float, default=0)
    betta_charge = Column(Float, default=0)
    state_charge = Column(Float, default=0)
    total_entered_charges = Column(Float, default=0)
    final_bill = Column(Float, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    def __repr__(self):
        return f"<Bill {self.id} {self.driver_email} {self.final_bill}>"
