"""Custom exceptions for brew-advisor."""


class BrewAdvisorError(Exception):
    """Base exception for brew-advisor."""

    pass


class NotFoundError(BrewAdvisorError):
    """Raised when a bean or machine id is not in the catalog."""

    pass


class GenerationError(BrewAdvisorError):
    """Raised when the AI provider cannot produce a valid recommendation."""

    pass


class AuthenticationError(GenerationError):
    """Raised when API key is invalid or missing."""

    pass


class RateLimitError(GenerationError):
    """Raised when API rate limit is exceeded."""

    pass
