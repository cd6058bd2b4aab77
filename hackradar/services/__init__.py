"""
Services module.

Idea generation: OpenAI-backed suggestions with a keyword-rule fallback.
"""

from hackradar.services.rules import IDEA_RULES, RuleIdeaProvider, matching_categories
from hackradar.services.idea_generator import (
    IdeaGenerator,
    OpenAIIdeaProvider,
    extract_json,
    generate_ideas,
    get_idea_generator,
    parse_ideas,
)

__all__ = [
    "IDEA_RULES",
    "RuleIdeaProvider",
    "matching_categories",
    "IdeaGenerator",
    "OpenAIIdeaProvider",
    "extract_json",
    "generate_ideas",
    "get_idea_generator",
    "parse_ideas",
]
