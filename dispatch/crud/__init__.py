from .base import CRUDBase
from .crud_driver import driver
from .crud_trip import trip
from .crud_bill import bill

__all__ = [
    'CRUDBase',
    'driver',
    'trip',
    'bill',
]
