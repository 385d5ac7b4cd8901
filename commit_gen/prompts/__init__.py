"""Prompt Construction Package"""

from commit_gen.prompts.builder import PromptBuilder, PromptConfig

__all__ = ["PromptBuilder", "PromptConfig"]
