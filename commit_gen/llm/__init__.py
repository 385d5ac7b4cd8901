"""LLM Client Package"""

from commit_gen.llm.base import LLMClient, LLMResponse, LLMError, SYSTEM_PROMPT
from commit_gen.llm.claude import ClaudeClient
from commit_gen.llm.command import CommandClient
from commit_gen.llm.ollama import OllamaClient

PROVIDERS = {
    "claude": ClaudeClient,
    "ollama": OllamaClient,
    "command": CommandClient,
}

AUTO_DETECT_ORDER = [OllamaClient, ClaudeClient, CommandClient]


def _create(client_class, model: str | None, command: str | None) -> LLMClient:
    if client_class is CommandClient:
        return CommandClient(command=command, model=model)
    return client_class(model=model)


def get_client(provider: str = "auto", model: str | None = None, command: str | None = None) -> LLMClient:
    """Get a text-generation client. Provider can be 'claude', 'ollama', 'command', or 'auto'."""
    if provider in PROVIDERS:
        return _create(PROVIDERS[provider], model, command)

    if provider == "auto":
        for client_class in AUTO_DETECT_ORDER:
            try:
                return _create(client_class, model, command)
            except LLMError:
                continue

        raise LLMError(
            "No text generator available.\n\n"
            "Option 1 - Use Ollama (free, local):\n"
            "  1. Install: https://ollama.ai\n"
            "  2. Start: ollama serve\n"
            "  3. Pull: ollama pull llama3.2:3b\n\n"
            "Option 2 - Use Claude API:\n"
            "  export ANTHROPIC_API_KEY='your-key-here'\n\n"
            "Option 3 - Use a local CLI:\n"
            "  commit-gen --provider command --command 'claude -p'\n\n"
            "Or run with --no-ai to print the change report only."
        )

    raise LLMError(f"Unknown provider: {provider}. Use 'claude', 'ollama', 'command', or 'auto'.")


__all__ = [
    "LLMClient",
    "LLMResponse",
    "LLMError",
    "ClaudeClient",
    "OllamaClient",
    "CommandClient",
    "get_client",
    "PROVIDERS",
    "SYSTEM_PROMPT",
]
