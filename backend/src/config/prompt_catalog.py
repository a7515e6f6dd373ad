"""Static prompt catalog keyed by prompt mode."""

from functools import lru_cache
from types import MappingProxyType
from typing import List, Mapping, Tuple, Union

from src.models.prompt import ModeInfo, PromptConfig, PromptMode
from src.services.prompt_service.formatter import apply_format
from src.utility.logger import AppLogger
from src.utility.utils import Helper

logger = AppLogger.get_logger(__name__)

ModeLike = Union[PromptMode, str]


@lru_cache(maxsize=1)
def load_catalog() -> Tuple[Mapping[PromptMode, PromptConfig], Mapping[PromptMode, str]]:
    """
    Read prompt texts and labels from templates.yml once per process.
    Raises KeyError when any PromptMode lacks an entry or a label.
    """
    helper = Helper()
    raw_prompts = helper.load_template(template="prompts")
    raw_labels = helper.load_template(template="labels")

    configs = {}
    labels = {}
    for mode in PromptMode:
        if mode.value not in raw_prompts:
            raise KeyError(f"Prompt mode '{mode.value}' missing in PROMPT_CATALOG")
        if mode.value not in raw_labels:
            raise KeyError(f"Prompt mode '{mode.value}' missing in MODE_LABELS")
        configs[mode] = PromptConfig(**raw_prompts[mode.value])
        labels[mode] = str(raw_labels[mode.value])

    logger.info(f"Loaded prompt catalog with {len(configs)} modes")
    return MappingProxyType(configs), MappingProxyType(labels)


class PromptCatalog:
    """Read-only access to the prompt templates and display labels.

    Every PromptMode resolves to exactly one config and one label.
    Values are shared process-wide and never mutated.
    """

    def __init__(self):
        """Bind to the process-wide catalog, loading it on first use."""
        self.configs, self.labels = load_catalog()

    def get_prompt_config(self, mode: ModeLike) -> PromptConfig:
        """Return the system/user instructions and response strategy for a mode."""
        return self.configs[PromptMode(mode)]

    def get_mode_label(self, mode: ModeLike) -> str:
        """Return the short display name for a mode."""
        return self.labels[PromptMode(mode)]

    def list_modes(self) -> List[ModeInfo]:
        """Return all modes with their labels, in declaration order."""
        return [ModeInfo(mode=mode, label=self.labels[mode]) for mode in PromptMode]

    def format_response(self, mode: ModeLike, response: str) -> str:
        """Clean a raw model reply with the strategy configured for the mode."""
        config = self.get_prompt_config(mode)
        return apply_format(config.response_format, response)
