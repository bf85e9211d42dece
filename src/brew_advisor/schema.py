"""Data models for brew-advisor."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, PositiveInt
from pydantic.alias_generators import to_camel

RoastLevel = Literal["medium", "dark"]
MachineType = Literal["espresso", "pour-over", "french-press", "aeropress", "drip", "full-automatic"]


class _WireModel(BaseModel):
    """snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CoffeeBean(_WireModel):
    """A coffee bean from the fixed catalog."""

    model_config = ConfigDict(frozen=True)

    id: str
    brand: str
    origin: str
    roast_level: RoastLevel
    flavor_profile: tuple[str, ...] = ()


class BrewingMachine(_WireModel):
    """A brewing machine from the fixed catalog."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: MachineType
    brand: str
    model: str


class Temperature(_WireModel):
    fahrenheit: int
    celsius: int


class BrewTime(_WireModel):
    minutes: int = Field(ge=0)
    seconds: int = Field(ge=0, le=59)


class WaterRatio(_WireModel):
    coffee: PositiveInt | PositiveFloat
    water: PositiveInt | PositiveFloat
    # at least one non-whitespace character
    description: str = Field(min_length=1, pattern=r"^\s*\S")


class BrewingRecommendation(_WireModel):
    """Brewing parameters for one bean and machine pair."""

    temperature: Temperature
    grind_size: str
    brew_time: BrewTime
    water_ratio: WaterRatio
    explanation: str
    confidence: float | None = None


class RecommendationRequest(_WireModel):
    bean_id: str
    machine_id: str


class RecommendationResponse(_WireModel):
    """Response envelope. `data` is set on success, `error` on failure."""

    success: bool
    data: BrewingRecommendation | None = None
    error: str | None = None
    fallback_used: bool | None = None
