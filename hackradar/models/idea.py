"""
Idea suggestion models returned by /api/ideas.
"""

from dataclasses import dataclass, field
from typing import Any


PROVIDERS = ("rules", "openai")


def _string_list(value: Any) -> list[str]:
    """Coerce a loosely typed value into a list of non-empty strings."""
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return []
    return [str(v).strip() for v in value if v is not None and str(v).strip()]


@dataclass
class IdeaItem:
    """A single project idea with suggested tools, stack and prompts."""

    title: str
    description: str
    tools: list[str] = field(default_factory=list)
    stack: list[str] = field(default_factory=list)
    sample_prompts: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError("IdeaItem validation failed: title is required and cannot be empty")

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "tools": list(self.tools),
            "stack": list(self.stack),
            "samplePrompts": list(self.sample_prompts),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "IdeaItem":
        """
        Build an IdeaItem from model output.

        Accepts both camelCase and snake_case prompt keys and tolerates
        missing or mistyped list fields.

        Raises:
            ValueError: If data is not a dict or has no title.
        """
        if not isinstance(data, dict):
            raise ValueError(f"IdeaItem must be built from a dict, got {type(data).__name__}")

        prompts = data.get("samplePrompts")
        if prompts is None:
            prompts = data.get("sample_prompts")

        return cls(
            title=str(data.get("title") or "").strip(),
            description=str(data.get("description") or "").strip(),
            tools=_string_list(data.get("tools")),
            stack=_string_list(data.get("stack")),
            sample_prompts=_string_list(prompts),
        )


@dataclass
class IdeasResponse:
    """Payload of /api/ideas."""

    ideas: list[IdeaItem]
    provider: str

    def __post_init__(self) -> None:
        if self.provider not in PROVIDERS:
            raise ValueError(f"provider must be one of {PROVIDERS}, got {self.provider!r}")

    def to_dict(self) -> dict:
        return {
            "ideas": [i.to_dict() for i in self.ideas],
            "provider": self.provider,
        }
