"""Claude (Anthropic) LLM Client"""

import os

from commit_gen.llm.base import LLMClient, LLMResponse, LLMError, SYSTEM_PROMPT


class ClaudeClient(LLMClient):
    """Claude API client. Requires ANTHROPIC_API_KEY env var."""

    DEFAULT_MODEL = "claude-sonnet-4-20250514"
    MAX_TOKENS = 1000
    TEMPERATURE = 0.4

    def __init__(self, api_key: str | None = None, model: str | None = None):
        self.api_key = api_key or os.environ.get("ANTHROPIC_API_KEY")
        self.model = model or self.DEFAULT_MODEL

        if not self.api_key:
            raise LLMError(
                "No API key found. Set ANTHROPIC_API_KEY environment variable:\n"
                "  export ANTHROPIC_API_KEY='your-key-here'"
            )

        from anthropic import Anthropic
        self._client = Anthropic(api_key=self.api_key)

    @property
    def name(self) -> str:
        return f"Claude ({self.model})"

    def generate(self, prompt: str) -> LLMResponse:
        from anthropic import APIError, AuthenticationError

        try:
            response = self._client.messages.create(
                model=self.model,
                max_tokens=self.MAX_TOKENS,
                temperature=self.TEMPERATURE,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": prompt}]
            )
        except AuthenticationError:
            raise LLMError("Invalid API key. Check your ANTHROPIC_API_KEY.")
        except APIError as e:
            raise LLMError(f"Claude API error: {e.message}")

        content = ""
        for block in response.content:
            if block.type == "text":
                content = block.text.strip()
                break

        if not content:
            raise LLMError("Claude returned an empty response")

        return LLMResponse(
            content=content,
            model=self.model,
            tokens_used=response.usage.input_tokens + response.usage.output_tokens
        )
