from sqlalchemy import Column, String, DateTime, Integer
from dispatch.db.base_class import Base
from datetime import datetime

class Driver(Base):
    __tablename__ = "drivers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    phone = Column(String(32), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # salted hash, never plaintext

    # Vehicle / compliance documents
    rc_number = Column(String(64), nullable=True, index=True)
    fc_expiry = Column(String(32), nullable=True)
    insurance_number = Column(String(64), nullable=True, index=True)
    insurance_expiry = Column(String(32), nullable=True)
    driving_license = Column(String(64), nullable=True)
    dl_expiry = Column(String(32), nullable=True)
    aadhar_number = Column(String(32), nullable=True)

    status = Column(String(32), default='available')  # free-form availability flag
    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f"<Driver {self.name} ({self.email})>"
