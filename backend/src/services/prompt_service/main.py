"""Factories for prompt catalog dependencies."""

from src.config.prompt_catalog import PromptCatalog


class PromptService:
    """Factory wrapper exposing the prompt catalog to request handlers."""

    @staticmethod
    def get_prompt_catalog() -> PromptCatalog:
        """Provide the process-wide prompt catalog."""
        return PromptCatalog()
