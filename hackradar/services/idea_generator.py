"""
Idea generation service.

Tries an OpenAI chat-completions model first and falls back to the
keyword rules whenever the model is not configured or its reply cannot be
used. Callers never see a provider failure.
"""

import json
import logging
import re
from typing import Any, List, Optional

import requests

from hackradar.config import OPENAI_API_KEY, OPENAI_API_URL, OPENAI_MODEL, REQUEST_TIMEOUT
from hackradar.errors import IdeaProviderError
from hackradar.models.idea import IdeaItem, IdeasResponse
from hackradar.services.rules import RuleIdeaProvider

logger = logging.getLogger(__name__)

# First JSON object or array in a free-text reply
_JSON_BLOCK = re.compile(r"\{[\s\S]*\}|\[[\s\S]*\]")


def extract_json(text: str) -> Any:
    """
    Best-effort JSON extraction from model output.

    Parses the outermost {...} or [...] span, or the whole text if there is
    none. Markdown code fences around the JSON are tolerated.

    Raises:
        ValueError: If nothing parseable was found.
    """
    match = _JSON_BLOCK.search(text)
    candidate = match.group(0) if match else text
    return json.loads(candidate)


def parse_ideas(payload: Any) -> List[IdeaItem]:
    """
    Turn parsed model JSON into IdeaItems.

    Accepts a bare list of ideas or an object with an "ideas" list. Entries
    that are not objects or have no title are dropped.

    Raises:
        IdeaProviderError: If no usable idea remains.
    """
    if isinstance(payload, dict) and isinstance(payload.get("ideas"), list):
        payload = payload["ideas"]
    if not isinstance(payload, list):
        raise IdeaProviderError("reply is not a list of ideas")

    ideas = []
    for entry in payload:
        try:
            ideas.append(IdeaItem.from_dict(entry))
        except ValueError:
            continue

    if not ideas:
        raise IdeaProviderError("reply contained no usable ideas")
    return ideas


class OpenAIIdeaProvider:
    """Idea generation using the OpenAI chat-completions API."""

    name = "openai"

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None,
                 api_url: Optional[str] = None):
        self.api_key = OPENAI_API_KEY if api_key is None else api_key
        self.model = model or OPENAI_MODEL
        self.api_url = api_url or OPENAI_API_URL

    def is_available(self) -> bool:
        """Check if the provider can be used (API key configured)."""
        return bool(self.api_key)

    def _build_prompt(self, query: str) -> str:
        return (
            "You are an expert hackathon mentor. Propose 3 winning project ideas "
            f'tailored to: "{query}". For each idea, return JSON with keys: title, '
            "description, tools (array), stack (array), samplePrompts (array). "
            "Keep it actionable and weekend-scoped."
        )

    def _call_api(self, prompt: str) -> str:
        """Make the chat-completions call and return the reply text."""
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": 0.5,
        }

        try:
            response = requests.post(
                self.api_url,
                headers=headers,
                json=payload,
                timeout=REQUEST_TIMEOUT,
            )
        except requests.RequestException as e:
            raise IdeaProviderError(f"request failed: {e}")

        if response.status_code != 200:
            raise IdeaProviderError(f"API error ({response.status_code})")

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise IdeaProviderError(f"unexpected response shape: {e}")

        if content is None:
            return ""
        if not isinstance(content, str):
            raise IdeaProviderError(f"reply content is {type(content).__name__}, expected text")
        return content

    def generate(self, query: str) -> List[IdeaItem]:
        """
        Ask the model for ideas.

        Raises:
            IdeaProviderError: When unavailable, on API failure, or when the
                reply holds no parseable ideas.
        """
        if not self.is_available():
            raise IdeaProviderError("OPENAI_API_KEY not configured")

        text = self._call_api(self._build_prompt(query))
        try:
            parsed = extract_json(text)
        except ValueError as e:
            raise IdeaProviderError(f"reply is not JSON: {e}")
        return parse_ideas(parsed)


class IdeaGenerator:
    """Chooses a provider for each query, falling back to rules."""

    def __init__(self, model_provider: OpenAIIdeaProvider = None,
                 rule_provider: RuleIdeaProvider = None):
        self.model_provider = model_provider or OpenAIIdeaProvider()
        self.rule_provider = rule_provider or RuleIdeaProvider()

    def generate(self, query: str) -> IdeasResponse:
        """
        Generate ideas for a query.

        Args:
            query: Non-empty user query (validated by the caller).

        Returns:
            IdeasResponse naming the provider that actually produced the ideas.
        """
        if self.model_provider.is_available():
            try:
                ideas = self.model_provider.generate(query)
                return IdeasResponse(ideas=ideas, provider=self.model_provider.name)
            except IdeaProviderError as e:
                logger.warning("[ideas] %s provider failed, using rules: %s", self.model_provider.name, e)

        return IdeasResponse(ideas=self.rule_provider.generate(query), provider=self.rule_provider.name)


# Singleton instance
_generator: Optional[IdeaGenerator] = None


def get_idea_generator() -> IdeaGenerator:
    """Get the singleton idea generator instance."""
    global _generator
    if _generator is None:
        _generator = IdeaGenerator()
    return _generator


def generate_ideas(query: str) -> IdeasResponse:
    """Generate ideas with the shared generator."""
    return get_idea_generator().generate(query)
