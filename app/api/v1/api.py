from fastapi import APIRouter

from app.api.v1.endpoints import auth, properties, devices, readings, green_energy, recommendations

api_router = APIRouter()

# Include auth endpoints
api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])

# Include entity endpoints
api_router.include_router(properties.router, prefix="/properties", tags=["properties"])
api_router.include_router(devices.router, prefix="/devices", tags=["devices"])
api_router.include_router(readings.router, prefix="/readings", tags=["readings"])
api_router.include_router(green_energy.router, prefix="/green-energy", tags=["green-energy"])
api_router.include_router(recommendations.router, prefix="/recommendations", tags=["recommendations"])
