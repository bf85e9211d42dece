"""Recommendation resolution: AI provider first, rule-based fallback second."""

from __future__ import annotations

import logging
from dataclasses import replace

from brew_advisor.catalog import DEFAULT_CATALOG, Catalog
from brew_advisor.config import AdvisorConfig
from brew_advisor.exceptions import GenerationError, NotFoundError
from brew_advisor.fallback import DEFAULT_FALLBACK_POLICY, FallbackPolicy
from brew_advisor.providers.base import BaseProvider
from brew_advisor.schema import BrewingMachine, BrewingRecommendation, CoffeeBean, RecommendationResponse

logger = logging.getLogger(__name__)

INVALID_SELECTION_MESSAGE = "Invalid bean or machine selection"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def _build_gemini_provider(config: AdvisorConfig) -> BaseProvider:
    from brew_advisor.providers.gemini import GeminiProvider

    return GeminiProvider(
        api_key=config.api_key,
        model=config.model,
        timeout_sec=config.timeout_sec,
        temperature=config.temperature,
        max_output_tokens=config.max_output_tokens,
    )


def _select_provider(config: AdvisorConfig) -> BaseProvider | None:
    provider_name = (config.provider or "gemini").strip().lower()
    if provider_name == "gemini":
        return _build_gemini_provider(config)
    if provider_name in {"none", "fallback", "off"}:
        return None
    raise ValueError(f"Unsupported provider: {provider_name}")


class RecommendationOrchestrator:
    """Resolve a (bean id, machine id) pair into a response envelope."""

    def __init__(
        self,
        provider: BaseProvider | None = None,
        *,
        catalog: Catalog = DEFAULT_CATALOG,
        fallback: FallbackPolicy = DEFAULT_FALLBACK_POLICY,
    ):
        self.provider = provider
        self.catalog = catalog
        self.fallback = fallback

    def recommend(self, bean_id: str, machine_id: str) -> RecommendationResponse:
        """Recommend brewing parameters.

        Unknown ids give an "invalid selection" failure. Otherwise the AI
        provider is tried once when available; if it is unavailable or fails
        for any reason, the fallback table answers and `fallback_used` is set.

        Returns:
            RecommendationResponse. Never raises.
        """
        try:
            try:
                bean = self.catalog.get_bean(bean_id)
                machine = self.catalog.get_machine(machine_id)
            except NotFoundError as exc:
                logger.info("invalid selection: %s", exc)
                return RecommendationResponse(success=False, error=INVALID_SELECTION_MESSAGE)

            recommendation = self._try_provider(bean, machine)
            if recommendation is not None:
                return RecommendationResponse(success=True, data=recommendation, fallback_used=False)

            return RecommendationResponse(
                success=True,
                data=self.fallback.resolve(bean.roast_level, machine.type),
                fallback_used=True,
            )
        except Exception:
            logger.exception("recommendation failed")
            return RecommendationResponse(success=False, error=INTERNAL_ERROR_MESSAGE)

    def _try_provider(self, bean: CoffeeBean, machine: BrewingMachine) -> BrewingRecommendation | None:
        if self.provider is None:
            self._log_fallback(bean, machine, "no provider configured")
            return None
        try:
            if not self.provider.is_available():
                self._log_fallback(bean, machine, "provider unavailable")
                return None
            return self.provider.generate(bean, machine)
        except GenerationError as exc:
            self._log_fallback(bean, machine, str(exc))
        except Exception:
            logger.exception("unexpected provider failure, using fallback")
        return None

    def _log_fallback(self, bean: CoffeeBean, machine: BrewingMachine, reason: str) -> None:
        try:
            logger.warning(
                "ai recommendation skipped (%s), using fallback %s",
                reason,
                self.fallback.key_for(bean.roast_level, machine.type),
            )
        except Exception:
            # Logging should never block the fallback response.
            return


def http_status_for(response: RecommendationResponse) -> int:
    if response.success:
        return 200
    if response.error == INVALID_SELECTION_MESSAGE:
        return 400
    return 500


def build_orchestrator(config: AdvisorConfig | None = None) -> RecommendationOrchestrator:
    """Build an orchestrator with the provider named in `config` (env by default)."""
    config = config or AdvisorConfig.from_env()
    return RecommendationOrchestrator(provider=_select_provider(config))


def recommend(
    bean_id: str,
    machine_id: str,
    *,
    api_key: str | None = None,
    provider: str | None = None,
) -> RecommendationResponse:
    """Recommend brewing parameters for a catalog bean and machine.

    Args:
        bean_id: Catalog bean id.
        machine_id: Catalog machine id.
        api_key: Gemini API key. Falls back to GEMINI_API_KEY env var.
        provider: Provider name (`gemini` or `none`). Defaults to
            `BREW_ADVISOR_PROVIDER` env var, then `gemini`.

    Returns:
        RecommendationResponse envelope.
    """
    config = AdvisorConfig.from_env()
    overrides = {}
    if api_key:
        overrides["api_key"] = api_key
    if provider:
        overrides["provider"] = provider
    if overrides:
        config = replace(config, **overrides)
    return build_orchestrator(config).recommend(bean_id, machine_id)
