"""Rule-based recommendations used when the AI path is unavailable or fails."""

from __future__ import annotations

from itertools import product
from typing import get_args

from brew_advisor.schema import (
    BrewingRecommendation,
    BrewTime,
    MachineType,
    RoastLevel,
    Temperature,
    WaterRatio,
)

ROAST_LEVELS: tuple[RoastLevel, ...] = get_args(RoastLevel)
MACHINE_TYPES: tuple[MachineType, ...] = get_args(MachineType)

DEFAULT_KEY = "default"


def _entry(
    fahrenheit: int,
    celsius: int,
    grind_size: str,
    minutes: int,
    seconds: int,
    coffee: int | float,
    water: int | float,
    explanation: str,
) -> BrewingRecommendation:
    return BrewingRecommendation(
        temperature=Temperature(fahrenheit=fahrenheit, celsius=celsius),
        grind_size=grind_size,
        brew_time=BrewTime(minutes=minutes, seconds=seconds),
        water_ratio=WaterRatio(coffee=coffee, water=water, description=f"{coffee:g}:{water:g} ratio"),
        explanation=explanation,
    )


# Only four of the twelve roast/machine pairs are tailored; the rest use DEFAULT_RECOMMENDATION.
FALLBACK_TABLE: dict[tuple[RoastLevel, MachineType], BrewingRecommendation] = {
    ("dark", "espresso"): _entry(
        200, 93, "fine", 0, 25, 1, 2,
        "Dark roast with espresso requires slightly lower temperature to avoid "
        "over-extraction and bitter flavors.",
    ),
    ("medium", "espresso"): _entry(
        205, 96, "fine", 0, 30, 1, 2,
        "Medium roast with espresso benefits from higher temperature for optimal extraction.",
    ),
    ("dark", "pour-over"): _entry(
        195, 90, "medium-coarse", 4, 0, 1, 15,
        "Dark roast pour-over needs lower temperature and shorter contact time to "
        "prevent over-extraction.",
    ),
    ("medium", "pour-over"): _entry(
        205, 96, "medium", 4, 30, 1, 16,
        "Medium roast pour-over allows for higher temperature and longer extraction time.",
    ),
}

DEFAULT_RECOMMENDATION = _entry(
    200, 93, "medium", 4, 0, 1, 15,
    "Balanced brewing parameters suitable for most coffee and equipment combinations.",
)


class FallbackPolicy:
    """Deterministic (roast level, machine type) -> recommendation lookup.

    `resolve` is total: any pair missing from the table, including values
    outside the known vocabularies, gets the default entry.
    """

    def __init__(
        self,
        table: dict[tuple[RoastLevel, MachineType], BrewingRecommendation] | None = None,
        default: BrewingRecommendation | None = None,
    ):
        self.table = dict(FALLBACK_TABLE if table is None else table)
        self.default = default or DEFAULT_RECOMMENDATION

    def key_for(self, roast_level: str, machine_type: str) -> str:
        try:
            tabulated = (roast_level, machine_type) in self.table
        except TypeError:
            tabulated = False
        return f"{roast_level}-{machine_type}" if tabulated else DEFAULT_KEY

    def resolve(self, roast_level: str, machine_type: str) -> BrewingRecommendation:
        try:
            entry = self.table.get((roast_level, machine_type), self.default)
        except TypeError:
            # unhashable input
            entry = self.default
        return entry.model_copy(deep=True)

    @staticmethod
    def combinations() -> list[tuple[RoastLevel, MachineType]]:
        return list(product(ROAST_LEVELS, MACHINE_TYPES))


DEFAULT_FALLBACK_POLICY = FallbackPolicy()
