from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TransportMode(str, Enum):
    car_petrol = "car_petrol"
    car_electric = "car_electric"
    public_transport = "public_transport"
    bicycle = "bicycle"
    walking = "walking"


class HeatingType(str, Enum):
    natural_gas = "natural_gas"
    electric = "electric"
    oil = "oil"
    renewable = "renewable"


class DietType(str, Enum):
    meat_daily = "meat_daily"
    meat_weekly = "meat_weekly"
    vegetarian = "vegetarian"
    vegan = "vegan"


class TransportInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    distanceKm: float = Field(
        default=0.0,
        ge=0,
        allow_inf_nan=False,
        description="Distance travelled per day in kilometers (annualized x365)",
    )
    mode: TransportMode = Field(default=TransportMode.car_petrol)


class EnergyInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    electricityKwh: float = Field(
        default=0.0,
        ge=0,
        allow_inf_nan=False,
        description="Monthly electricity usage in kWh",
    )
    heatingType: HeatingType = Field(default=HeatingType.natural_gas)


class DietInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    dietType: DietType = Field(default=DietType.meat_daily)
    foodWasteKg: float = Field(
        default=0.0,
        ge=0,
        allow_inf_nan=False,
        description="Food waste in kilograms per week",
    )


class ActivityInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    transport: TransportInput = Field(default_factory=TransportInput)
    energy: EnergyInput = Field(default_factory=EnergyInput)
    diet: DietInput = Field(default_factory=DietInput)


class CategoryBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    transport: float = Field(..., description="Share of the total in percent")
    energy: float = Field(..., description="Share of the total in percent")
    diet: float = Field(..., description="Share of the total in percent")


class FootprintResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    totalTonnesPerYear: float = Field(
        ..., description="Estimated annual footprint in tonnes CO₂e"
    )
    breakdownPercent: CategoryBreakdown


class FootprintReport(BaseModel):
    result: FootprintResult
    grade: str = Field(..., description="Impact grade, A (best) to D")
    comparedToAverage: str = Field(
        ..., description="'below' or 'above' the regional average"
    )
