from pydantic import ConfigDict, EmailStr, Field
from datetime import datetime
from typing import Optional

from dispatch.schemas.base import CamelModel

class DriverRegister(CamelModel):
    # Required, checked by the service so that a missing field is a 400
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = Field(None, max_length=32)
    password: Optional[str] = None

    # Compliance documents
    rc_number: Optional[str] = None
    fc_date: Optional[str] = None
    insurance_number: Optional[str] = None
    insurance_expiry_date: Optional[str] = None
    driving_license: Optional[str] = None
    driving_license_expiry_date: Optional[str] = None
    aadhar_number: Optional[str] = None

class DriverRegistered(CamelModel):
    message: str
    driver_id: int

class DriverExistsQuery(CamelModel):
    email: Optional[str] = None
    phone_number: Optional[str] = None
    rc_number: Optional[str] = None
    insurance_number: Optional[str] = None

class DriverExists(CamelModel):
    email: bool
    phone_number: bool
    rc_number: bool
    insurance_number: bool

class DriverLogin(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None

class DriverUpdate(CamelModel):
    """Partial update; any driver column may be written."""
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=32)
    password: Optional[str] = None
    rc_number: Optional[str] = None
    fc_expiry: Optional[str] = None
    insurance_number: Optional[str] = None
    insurance_expiry: Optional[str] = None
    driving_license: Optional[str] = None
    dl_expiry: Optional[str] = None
    aadhar_number: Optional[str] = None
    status: Optional[str] = None

class DriverContact(CamelModel):
    email: str
    name: str

class DriverStatus(CamelModel):
    status: Optional[str] = None

class Driver(CamelModel):
    id: int
    name: str
    email: str
    phone: str
    rc_number: Optional[str] = None
    fc_expiry: Optional[str] = None
    insurance_number: Optional[str] = None
    insurance_expiry: Optional[str] = None
    driving_license: Optional[str] = None
    dl_expiry: Optional[str] = None
    aadhar_number: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None

class LoginResponse(CamelModel):
    token: str
    user: Driver
