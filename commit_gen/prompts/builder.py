"""Prompt Builder - Wrap a change report or diff in the commit-message template."""

from dataclasses import dataclass

from commit_gen import COMMIT_TYPES
from commit_gen.analysis.labels import DEFAULT_LANGUAGE, get_labels


@dataclass
class PromptConfig:
    """User-provided context that shapes the prompt."""
    commit_type: str | None = None
    hint: str | None = None
    language: str = DEFAULT_LANGUAGE


class PromptBuilder:
    """Builds the fixed instruction template around the change body.

    The body (a staged diff or an analysis report) is embedded verbatim.
    """

    def build(self, body: str, config: PromptConfig | None = None) -> str:
        config = config or PromptConfig()
        sections = [
            self._build_role_section(),
            self._build_format_section(config),
            self._build_language_section(config),
            self._build_changes_section(body),
            self._build_hints_section(config),
            self._build_final_instructions(),
        ]
        return "\n\n".join(filter(None, sections))

    def _build_role_section(self) -> str:
        return """You are an expert at writing git commit messages. Your commit messages are documentation for future developers.

Core principles:
- The changes below show WHAT changed. Your job is to explain WHY.
- Identify the PRIMARY purpose of the change and lead with it.
- Every word must earn its place, no filler.

Avoid vague verbs like "Update", "Change", "Modify". Prefer "Add", "Remove", "Replace", "Extract"."""

    def _build_format_section(self, config: PromptConfig) -> str:
        return f"""<format>
Write the commit message in this exact format:

type(scope): subject line (lowercase, imperative mood, max 72 chars)

- bullet points explaining the changes
{self._build_type_instruction(config.commit_type)}
</format>"""

    def _build_type_instruction(self, commit_type: str | None) -> str:
        if commit_type:
            return f"\nIMPORTANT: Use type '{commit_type}' for this commit."
        types_list = "\n".join(f"  - {t}: {desc}" for t, desc in COMMIT_TYPES.items())
        return f"\nChoose the most appropriate type:\n{types_list}"

    def _build_language_section(self, config: PromptConfig) -> str:
        language_name = get_labels(config.language)["language_name"]
        return f"Write the subject and bullets in {language_name}. Keep the type keyword in English."

    def _build_changes_section(self, body: str) -> str:
        return f"<changes>\n{body}\n</changes>"

    def _build_hints_section(self, config: PromptConfig) -> str:
        if not config.hint:
            return ""

        return f"""<context>
The developer provided this context about the changes:
"{config.hint}"

Use this to inform your message, but verify it matches the changes.
</context>"""

    def _build_final_instructions(self) -> str:
        return """<instructions>
Generate exactly ONE commit message.

Rules:
- Start directly with the type(scope): subject line
- No markdown formatting (no ```, no bold)
- No preamble like "Here's a commit message:"
- No explanation after the message
</instructions>"""
