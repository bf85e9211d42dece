"""Base provider interface."""

from abc import ABC, abstractmethod

from brew_advisor.schema import BrewingMachine, BrewingRecommendation, CoffeeBean


class BaseProvider(ABC):
    """Abstract base class for AI recommendation providers."""

    @abstractmethod
    def is_available(self) -> bool:
        """Return True if the provider is configured. Must not touch the network."""
        pass

    @abstractmethod
    def generate(self, bean: CoffeeBean, machine: BrewingMachine) -> BrewingRecommendation:
        """Generate a recommendation for a bean and machine.

        Args:
            bean: Selected coffee bean
            machine: Selected brewing machine

        Returns:
            A validated BrewingRecommendation

        Raises:
            GenerationError: If no valid recommendation could be produced
        """
        pass

    def get_generation_metadata(self) -> dict[str, str]:
        """Return provider-specific generation metadata."""
        return {}
