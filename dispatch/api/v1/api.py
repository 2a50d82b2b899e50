from fastapi import APIRouter

from dispatch.api.v1.endpoints import auth, bills, drivers, trips

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(drivers.router)
api_router.include_router(drivers.admin_router)
api_router.include_router(trips.router)
api_router.include_router(bills.router)
api_router.include_router(bills.admin_router)

# Login lives outside the API prefix
auth_router = APIRouter()
auth_router.include_router(auth.router)
