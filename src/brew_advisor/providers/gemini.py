"""Gemini provider implementation."""

from __future__ import annotations

import json
import os
import re
from typing import Any

from google import genai
from google.genai import errors, types

from brew_advisor.config import DEFAULT_MODEL, DEFAULT_TIMEOUT_SEC
from brew_advisor.exceptions import AuthenticationError, GenerationError, RateLimitError
from brew_advisor.providers.base import BaseProvider
from brew_advisor.schema import BrewingMachine, BrewingRecommendation, CoffeeBean
from brew_advisor.validation import validate_recommendation

SYSTEM_PROMPT = (
    "You are a professional coffee brewing expert. Generate precise brewing "
    "recommendations for the coffee bean and brewing equipment provided. "
    "Always respond with a single valid JSON object matching the requested structure."
)

RESPONSE_STRUCTURE = """{
  "temperature": {
    "fahrenheit": integer,
    "celsius": integer
  },
  "grindSize": "string (e.g., 'fine', 'medium-fine', 'coarse')",
  "brewTime": {
    "minutes": integer,
    "seconds": integer (0-59)
  },
  "waterRatio": {
    "coffee": number,
    "water": number,
    "description": "string (e.g., '1:16 ratio')"
  },
  "explanation": "string explaining why these parameters suit this combination"
}"""


def _object(properties: dict[str, types.Schema]) -> types.Schema:
    return types.Schema(type=types.Type.OBJECT, properties=properties, required=list(properties))


RESPONSE_SCHEMA = _object(
    {
        "temperature": _object(
            {
                "fahrenheit": types.Schema(type=types.Type.INTEGER),
                "celsius": types.Schema(type=types.Type.INTEGER),
            }
        ),
        "grindSize": types.Schema(type=types.Type.STRING),
        "brewTime": _object(
            {
                "minutes": types.Schema(type=types.Type.INTEGER, minimum=0),
                "seconds": types.Schema(type=types.Type.INTEGER, minimum=0, maximum=59),
            }
        ),
        "waterRatio": _object(
            {
                "coffee": types.Schema(type=types.Type.NUMBER),
                "water": types.Schema(type=types.Type.NUMBER),
                "description": types.Schema(type=types.Type.STRING),
            }
        ),
        "explanation": types.Schema(type=types.Type.STRING),
    }
)

_AUTH_STATUSES = {"UNAUTHENTICATED", "PERMISSION_DENIED"}

_CODE_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


def build_prompt(bean: CoffeeBean, machine: BrewingMachine) -> str:
    """Build the user prompt for a bean and machine. Deterministic."""
    return f"""Generate brewing recommendations for:

Coffee Bean:
- Brand: {bean.brand}
- Origin: {bean.origin}
- Roast Level: {bean.roast_level}
- Flavor Profile: {", ".join(bean.flavor_profile)}

Brewing Equipment:
- Type: {machine.type}
- Brand: {machine.brand}
- Model: {machine.model}

Return JSON only, with exactly this structure:
{RESPONSE_STRUCTURE}

Consider the roast level, brewing method and flavor profile to optimize extraction."""


def parse_json_payload(text: str) -> Any:
    """Parse model output as JSON, tolerating a surrounding markdown code fence."""
    value = text.strip()
    match = _CODE_FENCE.match(value)
    if match:
        value = match.group(1)
    try:
        return json.loads(value)
    except ValueError as e:
        raise GenerationError(f"Model output is not valid JSON: {e}") from e


class GeminiProvider(BaseProvider):
    """Gemini text generation provider."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        *,
        client=None,
        timeout_sec: float = DEFAULT_TIMEOUT_SEC,
        temperature: float = 0.3,
        max_output_tokens: int = 1000,
    ):
        """Initialize Gemini provider.

        No request is made here. Without an API key (and no injected client)
        the provider reports itself unavailable instead of raising.

        Args:
            api_key: Gemini API key. Falls back to GEMINI_API_KEY env var.
            model: Model name to use.
            client: Pre-built client exposing ``models.generate_content``.
            timeout_sec: Upper bound for a single generation request.
            temperature: Sampling temperature.
            max_output_tokens: Output token cap.
        """
        self.api_key = api_key or os.environ.get("GEMINI_API_KEY")
        self.model = model
        self.timeout_sec = timeout_sec
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens

        if client is not None:
            self.client = client
        elif self.api_key:
            self.client = genai.Client(
                api_key=self.api_key,
                http_options=types.HttpOptions(timeout=int(timeout_sec * 1000)),
            )
        else:
            self.client = None

    def is_available(self) -> bool:
        return self.client is not None

    def generate(self, bean: CoffeeBean, machine: BrewingMachine) -> BrewingRecommendation:
        """Generate a recommendation with one Gemini call.

        Raises:
            AuthenticationError: If no API key is configured or it is rejected
            RateLimitError: If API rate limit is exceeded
            GenerationError: On any other request, parsing or validation failure
        """
        if self.client is None:
            raise AuthenticationError(
                "No API key provided. Set GEMINI_API_KEY environment variable "
                "or pass api_key parameter."
            )

        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=[build_prompt(bean, machine)],
                config=types.GenerateContentConfig(
                    system_instruction=SYSTEM_PROMPT,
                    temperature=self.temperature,
                    max_output_tokens=self.max_output_tokens,
                    response_mime_type="application/json",
                    response_schema=RESPONSE_SCHEMA,
                ),
            )
            text = response.text
        except errors.ClientError as e:
            code = getattr(e, "code", None)
            status = (getattr(e, "status", None) or "").upper()
            message = str(e).lower()
            if code == 429 or status == "RESOURCE_EXHAUSTED" or "quota" in message:
                raise RateLimitError(f"API rate limit exceeded: {e}") from e
            if code in (401, 403) or status in _AUTH_STATUSES or "api key" in message:
                raise AuthenticationError(f"Invalid API key: {e}") from e
            raise GenerationError(f"Gemini request failed: {e}") from e
        except Exception as e:
            raise GenerationError(f"Gemini request failed: {e}") from e

        if not text or not text.strip():
            raise GenerationError("Gemini response contained no text content")

        result = validate_recommendation(parse_json_payload(text))
        if not result.valid:
            raise GenerationError(f"Invalid recommendation structure: {result.reason}")
        return result.recommendation

    def get_generation_metadata(self) -> dict[str, str]:
        return {"provider": "gemini", "model": self.model}
