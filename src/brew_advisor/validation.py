"""Strict validation of untrusted recommendation payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from brew_advisor.schema import BrewingRecommendation


@dataclass(frozen=True)
class ValidationResult:
    recommendation: BrewingRecommendation | None = None
    reason: str | None = None

    @property
    def valid(self) -> bool:
        return self.recommendation is not None


def _format_errors(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(item) for item in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg', 'invalid')}")
    return "; ".join(parts)


def validate_recommendation(candidate: Any) -> ValidationResult:
    """Check `candidate` against the BrewingRecommendation schema.

    Validation runs in pydantic strict mode, so nothing is coerced: numeric
    strings, booleans in numeric fields and floats in integer fields are
    rejected rather than repaired.

    Args:
        candidate: Parsed model output (usually a dict from ``json.loads``).

    Returns:
        ValidationResult holding either the recommendation or the reason it
        was rejected.
    """
    if not isinstance(candidate, dict):
        return ValidationResult(reason=f"expected a JSON object, got {type(candidate).__name__}")

    try:
        recommendation = BrewingRecommendation.model_validate(candidate, strict=True)
    except ValidationError as exc:
        return ValidationResult(reason=_format_errors(exc))
    return ValidationResult(recommendation=recommendation)
