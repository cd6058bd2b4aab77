"""
Rule-based idea provider.

Matches the lowercased query against ordered keyword categories and returns
one fixed idea per matching category. Deterministic: the same query always
yields the same ideas in the same order.

CUSTOMIZATION:

To add a category:
    1. Append an IdeaRule to IDEA_RULES (order decides output order)
    2. The pattern is a regex searched in the lowercased query, so short
       alternatives like "ai" also match inside longer words
"""

import re
from dataclasses import dataclass
from typing import List

from hackradar.models.idea import IdeaItem


# Stack suggested for every idea
BASE_STACK: list[str] = [
    "React 18 + Vite",
    "Flask API",
    "TailwindCSS",
    "Postgres (Neon) + SQLAlchemy",
    "Auth (Supabase)",
]


@dataclass(frozen=True)
class IdeaRule:
    """A keyword category and the idea it contributes."""
    category: str
    pattern: re.Pattern
    title: str
    description: str
    tools: tuple[str, ...]
    sample_prompts: tuple[str, ...]

    def matches(self, query: str) -> bool:
        return bool(self.pattern.search(query))

    def to_idea(self) -> IdeaItem:
        return IdeaItem(
            title=self.title,
            description=self.description,
            tools=list(self.tools),
            stack=list(BASE_STACK),
            sample_prompts=list(self.sample_prompts),
        )


IDEA_RULES: list[IdeaRule] = [
    IdeaRule(
        category="ai-ml",
        pattern=re.compile(r"ai|ml|gpt|llm|openai|rag|vision"),
        title="AI Mentor for Hackathons",
        description="An AI mentor that critiques ideas, suggests datasets/APIs, and outputs a weekend delivery plan.",
        tools=("OpenAI (or local Ollama)", "LangChain", "Pinecone or Supabase Vector", "OpenRouter"),
        sample_prompts=(
            "Draft a weekend plan to build a fintech budgeting app for students.",
            "Suggest APIs and datasets for a sustainability hackathon project.",
        ),
    ),
    IdeaRule(
        category="health",
        pattern=re.compile(r"health|med|wellness|fitness|mental"),
        title="Health Habit Tracker with Wearables",
        description="Aggregates wearable data and suggests micro-habits. Includes symptom checker and provider handoff.",
        tools=("Apple/Google Health Connect", "Pydantic for validations", "Sentry"),
        sample_prompts=("Generate 5 features for a diabetes care hackathon in 36 hours.",),
    ),
    IdeaRule(
        category="fintech",
        pattern=re.compile(r"fintech|finance|bank|payment|crypto|web3|defi"),
        title="Micro-Savings with Round-Ups",
        description="Rounds up purchases into smart vaults, with explainable AI insights.",
        tools=("Plaid", "Stripe", "web3.py (if web3)", "Celery"),
        sample_prompts=("Design a round-up savings MVP for Gen Z with 3 killer features.",),
    ),
    IdeaRule(
        category="education",
        pattern=re.compile(r"education|edtech|learn|student|campus"),
        title="Campus Resource Copilot",
        description="Searches all campus resources (docs, PDFs, events) with RAG and personalized roadmaps.",
        tools=("Supabase", "pgvector", "OpenAI"),
        sample_prompts=("Outline onboarding for freshmen and key RAG sources.",),
    ),
    IdeaRule(
        category="climate",
        pattern=re.compile(r"climate|sustainab|energy|green|carbon"),
        title="Neighborhood Climate Scorecard",
        description="Scrapes municipal data and crowdsources actions with gamified points.",
        tools=("BeautifulSoup/Playwright", "Mapbox", "REST"),
        sample_prompts=("What public datasets help rank city blocks by climate resilience?",),
    ),
    IdeaRule(
        category="accessibility",
        pattern=re.compile(r"accessibility|a11y|inclusive|disab"),
        title="Accessible Web Scanner",
        description="Real-time accessibility checker with actionable fixes and Figma plugin integration.",
        tools=("axe-core", "Playwright", "Figma Plugin"),
        sample_prompts=("Plan an MVP that audits a website and auto-fixes common a11y issues.",),
    ),
]

FALLBACK_RULE = IdeaRule(
    category="general",
    pattern=re.compile(r".*"),
    title="Smart Project Assistant",
    description="Suggests project angles, tools, and weekend roadmap tailored to your theme.",
    tools=("OpenAI (optional)", "Supabase", "SQLAlchemy", "Vercel/Netlify"),
    sample_prompts=("I want to build something for social impact using maps and SMS.",),
)


def matching_categories(query: str) -> List[str]:
    """Return the categories whose pattern matches the query, in rule order."""
    q = query.lower()
    return [rule.category for rule in IDEA_RULES if rule.matches(q)]


class RuleIdeaProvider:
    """Deterministic keyword-driven idea generator. Always available."""

    name = "rules"

    def is_available(self) -> bool:
        return True

    def generate(self, query: str) -> List[IdeaItem]:
        """
        Produce ideas for a query.

        Returns:
            One idea per matching category, or the generic fallback idea.
        """
        q = query.lower()
        ideas = [rule.to_idea() for rule in IDEA_RULES if rule.matches(q)]
        if not ideas:
            ideas.append(FALLBACK_RULE.to_idea())
        return ideas
