from .user_service import UserService, get_user_service
from .property_service import PropertyService, get_property_service
from .device_service import DeviceService, get_device_service
from .reading_service import ReadingService, get_reading_service
from .green_energy_service import GreenEnergyService, get_green_energy_service
from .recommendation_service import RecommendationService, get_recommendation_service

__all__ = [
    "UserService", "get_user_service",
    "PropertyService", "get_property_service",
    "DeviceService", "get_device_service",
    "ReadingService", "get_reading_service",
    "GreenEnergyService", "get_green_energy_service",
    "RecommendationService", "get_recommendation_service",
]
