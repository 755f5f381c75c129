"""Emission factor tables used by the footprint calculator.

Sources: EPA, IPCC and DEFRA averages for a typical household.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from ..schemas import DietType, HeatingType, TransportMode


@dataclass(frozen=True)
class EmissionFactors:
    # kg CO2e per km
    transport_kg_per_km: Mapping[TransportMode, float] = field(
        default_factory=lambda: {
            TransportMode.car_petrol: 0.192,
            TransportMode.car_electric: 0.053,
            TransportMode.public_transport: 0.041,
            TransportMode.bicycle: 0.0,
            TransportMode.walking: 0.0,
        }
    )
    # kg CO2e per kWh
    heating_kg_per_kwh: Mapping[HeatingType, float] = field(
        default_factory=lambda: {
            HeatingType.natural_gas: 0.198,
            HeatingType.electric: 0.233,
            HeatingType.oil: 0.268,
            HeatingType.renewable: 0.025,
        }
    )
    # tonnes CO2e per year, before food waste
    diet_tonnes_per_year: Mapping[DietType, float] = field(
        default_factory=lambda: {
            DietType.meat_daily: 2.5,
            DietType.meat_weekly: 1.7,
            DietType.vegetarian: 1.4,
            DietType.vegan: 1.1,
        }
    )
    electricity_kg_per_kwh: float = 0.233
    food_waste_kg_per_kg: float = 2.5

    def __post_init__(self):
        # copied into read-only views
        for name in ("transport_kg_per_km", "heating_kg_per_kwh", "diet_tonnes_per_year"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))


DEFAULT_FACTORS = EmissionFactors()
