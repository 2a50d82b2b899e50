"""
Driver directory: registration, existence checks, authentication and status.
"""
import logging
from typing import Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from dispatch import crud
from dispatch.core.errors import AuthError, NotFoundError, ValidationError, data_access
from dispatch.core.security import create_access_token, hash_password, verify_password
from dispatch.models.driver import Driver
from dispatch.schemas.driver import DriverExistsQuery, DriverRegister, DriverUpdate

logger = logging.getLogger(__name__)

# Columns a partial update may not clear
NOT_NULL_COLUMNS = ("name", "email", "phone", "password")


def register_driver(db: Session, driver_in: DriverRegister) -> Driver:
    """
    Store a new driver with a hashed password.

    Uniqueness is not pre-checked here; `check_driver_exists` is the
    advisory pre-flight and the table's unique indexes are the backstop.

    Raises:
        ValidationError: name, email, phone number or password is missing
        DataAccessError: the insert failed
    """
    required = (driver_in.name, driver_in.email, driver_in.phone_number, driver_in.password)
    if not all(required):
        raise ValidationError("Required fields are missing")

    driver_data = {
        "name": driver_in.name,
        "email": driver_in.email,
        "phone": driver_in.phone_number,
        "password": hash_password(driver_in.password),
        "rc_number": driver_in.rc_number,
        "fc_expiry": driver_in.fc_date,
        "insurance_number": driver_in.insurance_number,
        "insurance_expiry": driver_in.insurance_expiry_date,
        "driving_license": driver_in.driving_license,
        "dl_expiry": driver_in.driving_license_expiry_date,
        "aadhar_number": driver_in.aadhar_number,
    }
    with data_access(db, "Driver registration"):
        driver = crud.driver.create(db, obj_in=driver_data)
    logger.info(f"Registered driver {driver.id} ({driver.email})")
    return driver


def check_driver_exists(db: Session, query: DriverExistsQuery) -> Dict[str, bool]:
    """
    Report, field by field, whether any stored driver already uses a value.

    The four answers are independent: they need not come from the same driver.
    """
    with data_access(db, "Checking driver existence"):
        rows = crud.driver.find_matching(
            db,
            email=query.email,
            phone=query.phone_number,
            rc_number=query.rc_number,
            insurance_number=query.insurance_number,
        )

    def used(attr: str, value: Optional[str]) -> bool:
        return value is not None and any(getattr(r, attr) == value for r in rows)

    return {
        "email": used("email", query.email),
        "phone_number": used("phone", query.phone_number),
        "rc_number": used("rc_number", query.rc_number),
        "insurance_number": used("insurance_number", query.insurance_number),
    }


def authenticate_driver(db: Session, email: Optional[str], password: Optional[str]) -> Tuple[str, Driver]:
    """
    Check credentials and issue a signed token.

    Returns:
        (token, driver)

    Raises:
        AuthError: no driver with that email, or the password does not match
    """
    if not email or not password:
        raise AuthError("Invalid email or password")

    with data_access(db, "Login"):
        driver = crud.driver.get_by_email(db, email=email)

    if driver is None or not verify_password(password, driver.password):
        logger.info(f"Failed login for {email}")
        raise AuthError("Invalid email or password")

    token = create_access_token(driver.id, driver.email)
    return token, driver


def get_driver(db: Session, driver_id: int) -> Driver:
    with data_access(db, "Fetching driver"):
        driver = crud.driver.get(db, id=driver_id)
    if driver is None:
        raise NotFoundError("Driver not found")
    return driver


def get_driver_status(db: Session, email: str) -> Optional[str]:
    with data_access(db, "Fetching driver status"):
        driver = crud.driver.get_by_email(db, email=email)
    if driver is None:
        raise NotFoundError("Driver not found")
    return driver.status


def update_driver(db: Session, driver_id: int, driver_in: DriverUpdate) -> Driver:
    """
    Write the supplied columns as given. A new password is hashed first.
    """
    update_data = driver_in.model_dump(exclude_unset=True)
    if not update_data:
        raise ValidationError("No fields to update")
    if any(update_data.get(key, "") is None for key in NOT_NULL_COLUMNS):
        raise ValidationError("Required fields cannot be null")
    if update_data.get("password"):
        update_data["password"] = hash_password(update_data["password"])

    driver = get_driver(db, driver_id)
    with data_access(db, "Updating driver"):
        driver = crud.driver.update(db, db_obj=driver, obj_in=update_data)
    logger.info(f"Updated driver {driver_id}: {sorted(update_data)}")
    return driver


def list_drivers(db: Session) -> List[Driver]:
    with data_access(db, "Fetching drivers"):
        return crud.driver.get_multi(db)


def list_driver_contacts(db: Session) -> List[Dict[str, str]]:
    """Email and name of every driver."""
    return [{"email": d.email, "name": d.name} for d in list_drivers(db)]
