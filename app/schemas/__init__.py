from .user import UserCreate, UserLogin, UserResponse, Token, TokenData
from .property import PropertyCreate, PropertyResponse, PropertyDetail
from .device import DeviceCreate, DeviceResponse
from .reading import ReadingCreate, ReadingResponse
from .green_energy import GreenEnergySourceCreate, GreenEnergySourceResponse
from .recommendation import RecommendationCreate, RecommendationResponse

__all__ = [
    # User schemas
    "UserCreate", "UserLogin", "UserResponse", "Token", "TokenData",

    # Property schemas
    "PropertyCreate", "PropertyResponse", "PropertyDetail",

    # Device and reading schemas
    "DeviceCreate", "DeviceResponse",
    "ReadingCreate", "ReadingResponse",

    # Green energy and recommendation schemas
    "GreenEnergySourceCreate", "GreenEnergySourceResponse",
    "RecommendationCreate", "RecommendationResponse",
]
