from .base import Message
from .driver import (
    Driver, DriverRegister, DriverRegistered, DriverExistsQuery, DriverExists,
    DriverLogin, DriverUpdate, DriverContact, DriverStatus, LoginResponse
)
from .trip import (
    Trip, TripCreate, TripCreated, TripAccept, TripAssign, TripComplete,
    TripCompleted, TripFieldUpdate, DriverTrips
)
from .bill import Bill, BillCreate, BillCreated

__all__ = [
    'Message',
    'Driver', 'DriverRegister', 'DriverRegistered', 'DriverExistsQuery', 'DriverExists',
    'DriverLogin', 'DriverUpdate', 'DriverContact', 'DriverStatus', 'LoginResponse',
    'Trip', 'TripCreate', 'TripCreated', 'TripAccept', 'TripAssign', 'TripComplete',
    'TripCompleted', 'TripFieldUpdate', 'DriverTrips',
    'Bill', 'BillCreate', 'BillCreated',
]
