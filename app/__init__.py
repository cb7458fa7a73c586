"""
Energy Monitor Backend

A FastAPI service that stores properties, devices, energy readings, green energy
sources and recommendations for the energy monitoring dashboard.
"""

__version__ = "1.0.0"
__author__ = "Energy Monitor Team"
__description__ = "REST backend for property energy monitoring"
