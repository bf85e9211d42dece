"""Environment-driven configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_TIMEOUT_SEC = 5.0


def _safe_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _safe_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class AdvisorConfig:
    provider: str = "gemini"  # gemini|none
    api_key: str | None = None
    model: str = DEFAULT_MODEL
    timeout_sec: float = DEFAULT_TIMEOUT_SEC
    temperature: float = 0.3
    max_output_tokens: int = 1000

    @classmethod
    def from_env(cls) -> "AdvisorConfig":
        timeout_sec = _safe_float(os.getenv("BREW_ADVISOR_TIMEOUT_SEC"), DEFAULT_TIMEOUT_SEC)
        return cls(
            provider=(os.getenv("BREW_ADVISOR_PROVIDER", "gemini").strip().lower() or "gemini"),
            api_key=os.getenv("GEMINI_API_KEY") or None,
            model=os.getenv("BREW_ADVISOR_MODEL", DEFAULT_MODEL),
            timeout_sec=timeout_sec if timeout_sec > 0 else DEFAULT_TIMEOUT_SEC,
            temperature=max(0.0, min(2.0, _safe_float(os.getenv("BREW_ADVISOR_TEMPERATURE"), 0.3))),
            max_output_tokens=max(1, _safe_int(os.getenv("BREW_ADVISOR_MAX_OUTPUT_TOKENS"), 1000)),
        )
