"""Providers for brew-advisor."""

from brew_advisor.providers.base import BaseProvider
from brew_advisor.providers.gemini import GeminiProvider

__all__ = ["BaseProvider", "GeminiProvider"]
