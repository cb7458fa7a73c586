#!/usr/bin/env python3
"""
Demo Data Seeding Script for the Energy Monitor Backend

Creates a property with a handful of devices, green energy sources and
recommendations, then logs 24 hours of hourly energy readings per device
through the REST API so the dashboard has real data to show.
"""

import requests
import random
import json
import argparse
from datetime import datetime, timedelta, timezone
from typing import Dict, Any, Optional
import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Configuration
API_URL = "http://localhost:8000/api/v1"

# Device configurations with rough daily usage patterns
DEVICE_CONFIGS = {
    "Kitchen Refrigerator": {
        "type": "refrigerator",
        "power_rating_watts": 150,
        "active_hours": range(0, 24),
        "duty_cycle": 0.4,
    },
    "Living Room AC": {
        "type": "hvac",
        "power_rating_watts": 2000,
        "active_hours": range(10, 23),
        "duty_cycle": 0.6,
    },
    "Office Lights": {
        "type": "lighting",
        "power_rating_watts": 60,
        "active_hours": list(range(7, 9)) + list(range(18, 23)),
        "duty_cycle": 1.0,
    },
    "Server Rack": {
        "type": "electronics",
        "power_rating_watts": 400,
        "active_hours": range(0, 24),
        "duty_cycle": 0.9,
    },
}

GREEN_SOURCES = [
    {"type": "solar", "name": "Rooftop Solar", "capacityKw": 6.5},
    {"type": "wind", "name": "Backyard Turbine", "capacityKw": 2.0},
    {"type": "battery", "name": "Garage Battery", "capacityKw": 13.5},
]

RECOMMENDATIONS = [
    {
        "type": "efficiency",
        "title": "Replace office lights with LED",
        "description": "LED fixtures cut lighting consumption by roughly 15%.",
        "category": "lighting",
        "priority": "low",
        "estimatedTimeMinutes": 60,
    },
    {
        "type": "automation",
        "title": "Install smart sensors in HVAC",
        "description": "Occupancy-aware cooling saves about 8% of HVAC energy.",
        "category": "hvac",
        "priority": "medium",
        "estimatedTimeMinutes": 120,
    },
    {
        "type": "efficiency",
        "title": "Optimize server cooling",
        "description": "Raising the cold-aisle setpoint can save around 12%.",
        "category": "electronics",
        "priority": "medium",
        "estimatedTimeMinutes": 45,
    },
]


class DemoSeeder:
    """Seeds the API with a demo property and its data"""

    def __init__(self, api_url: str = API_URL):
        self.api_url = api_url.rstrip("/")
        self.session = requests.Session()

    def _use_token(self, token_data: Dict[str, Any]) -> None:
        self.session.headers.update({
            "Authorization": f"Bearer {token_data['access_token']}"
        })

    def authenticate(self, email: str, password: str, full_name: str = "Demo User") -> bool:
        """Log in, registering the account first if it does not exist"""
        response = self.session.post(f"{self.api_url}/auth/login", json={"email": email, "password": password})

        if response.status_code == 200:
            self._use_token(response.json())
            logger.info(f"Successfully authenticated as {email}")
            return True

        if response.status_code != 401:
            logger.error(f"Authentication failed: {response.status_code} - {response.text}")
            return False

        logger.info("Login failed, attempting to register new user...")
        response = self.session.post(
            f"{self.api_url}/auth/register",
            json={"email": email, "password": password, "fullName": full_name},
        )
        if response.status_code == 201:
            self._use_token(response.json())
            logger.info(f"Successfully registered and authenticated as {email}")
            return True

        logger.error(f"Registration failed: {response.status_code} - {response.text}")
        return False

    def _post(self, path: str, payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        response = self.session.post(f"{self.api_url}{path}", json=payload)
        if response.status_code in (200, 201):
            return response.json()
        logger.error(f"POST {path} failed: {response.status_code} - {response.text}")
        return None

    @staticmethod
    def hourly_energy_kwh(config: Dict[str, Any], hour: int) -> float:
        """Energy used by a device in one hour"""
        if hour not in config["active_hours"]:
            return 0.0
        watts = config["power_rating_watts"] * config["duty_cycle"]
        watts *= random.uniform(0.8, 1.2)
        return round(watts / 1000, 3)

    def seed(self, start_time: datetime, property_name: str) -> Dict[str, Any]:
        """Create the demo property and everything under it"""
        results = {"devices": 0, "green_sources": 0, "readings": 0, "recommendations": 0, "failed": 0}

        prop = self._post("/properties", {"name": property_name, "type": "house", "isPrimary": True})
        if prop is None:
            raise RuntimeError("Could not create demo property")
        logger.info(f"Created property {prop['id']}")

        for source in GREEN_SOURCES:
            if self._post("/green-energy", {"propertyId": prop["id"], **source}):
                results["green_sources"] += 1
            else:
                results["failed"] += 1

        for name, config in DEVICE_CONFIGS.items():
            device = self._post("/devices", {
                "propertyId": prop["id"],
                "name": name,
                "type": config["type"],
                "powerRatingWatts": config["power_rating_watts"],
            })
            if device is None:
                results["failed"] += 1
                continue
            results["devices"] += 1

            for hour_offset in range(24):
                timestamp = start_time + timedelta(hours=hour_offset)
                energy_kwh = self.hourly_energy_kwh(config, timestamp.hour)
                reading = self._post("/readings", {
                    "deviceId": device["id"],
                    "timestamp": timestamp.isoformat(),
                    "energyKwh": energy_kwh,
                    "powerWatts": round(energy_kwh * 1000, 1),
                    "source": "demo-seed",
                })
                if reading:
                    results["readings"] += 1
                else:
                    results["failed"] += 1

        for recommendation in RECOMMENDATIONS:
            if self._post("/recommendations", {"propertyId": prop["id"], **recommendation}):
                results["recommendations"] += 1
            else:
                results["failed"] += 1

        logger.info("Seeding completed!")
        logger.info(f"Results: {json.dumps(results, indent=2)}")
        return results


def main():
    """Main function"""
    parser = argparse.ArgumentParser(description="Energy Monitor demo data seeder")
    parser.add_argument("--api-url", default=API_URL, help="API base URL")
    parser.add_argument("--email", default="demo@energy-monitor.dev", help="User email for authentication")
    parser.add_argument("--password", default="password123", help="User password")
    parser.add_argument("--property-name", default="Demo Home", help="Name of the property to create")
    parser.add_argument("--start-time", help="Start of the reading window (ISO format, defaults to 24 hours ago)")

    args = parser.parse_args()

    if args.start_time:
        try:
            start_time = datetime.fromisoformat(args.start_time.replace('Z', '+00:00'))
        except ValueError:
            logger.error("Invalid start time format. Use ISO format (e.g., 2024-01-01T00:00:00Z)")
            return
    else:
        start_time = datetime.now(timezone.utc).replace(minute=0, second=0, microsecond=0) - timedelta(hours=24)

    seeder = DemoSeeder(args.api_url)

    if not seeder.authenticate(args.email, args.password):
        logger.error("Authentication failed. Cannot proceed with seeding.")
        return

    try:
        results = seeder.seed(start_time, args.property_name)
        if results["failed"]:
            logger.warning(f"{results['failed']} requests failed while seeding")
    except KeyboardInterrupt:
        logger.info("Seeding interrupted by user")
    except Exception as e:
        logger.error(f"Seeding failed: {e}")


if __name__ == "__main__":
    main()
