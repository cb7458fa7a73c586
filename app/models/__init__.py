from .user import User
from .property import Property
from .device import Device
from .reading import EnergyReading
from .green_energy import GreenEnergySource
from .recommendation import Recommendation

__all__ = ["User", "Property", "Device", "EnergyReading", "GreenEnergySource", "Recommendation"]
