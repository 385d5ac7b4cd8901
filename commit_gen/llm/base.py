"""LLM Base Classes and Shared Code"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from commit_gen import ExternalToolError


SYSTEM_PROMPT = """You are a senior software engineer who writes precise, informative git commit messages.

Your standards:
- Conventional commit format: type(scope): subject, then bullets
- The changes show WHAT; you explain WHY
- Specific verbs over vague ones (never "update", "change", "modify")
- Output only the commit message"""


@dataclass
class LLMResponse:
    """Structured response from any text-generation provider."""
    content: str
    model: str = ""
    tokens_used: int = 0


class LLMError(ExternalToolError):
    """Raised when text generation fails."""
    pass


class LLMClient(ABC):
    """Abstract base for text-generation clients."""

    @abstractmethod
    def generate(self, prompt: str) -> LLMResponse:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
