"""brew-advisor: Recommend brewing parameters for a coffee bean and machine."""

from brew_advisor.catalog import DEFAULT_CATALOG, Catalog
from brew_advisor.core import RecommendationOrchestrator, recommend
from brew_advisor.fallback import FallbackPolicy
from brew_advisor.schema import (
    BrewingMachine,
    BrewingRecommendation,
    CoffeeBean,
    RecommendationRequest,
    RecommendationResponse,
)
from brew_advisor.validation import ValidationResult, validate_recommendation

__version__ = "0.1.0"

__all__ = [
    "recommend",
    "validate_recommendation",
    "BrewingMachine",
    "BrewingRecommendation",
    "Catalog",
    "CoffeeBean",
    "DEFAULT_CATALOG",
    "FallbackPolicy",
    "RecommendationOrchestrator",
    "RecommendationRequest",
    "RecommendationResponse",
    "ValidationResult",
    "__version__",
]
