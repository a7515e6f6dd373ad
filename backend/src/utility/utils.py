"""Shared helper utilities for template handling."""

import os
import yaml
from typing import Any
from src.utility.path_finder import Finder


class Helper:
    """Load named sections from the yaml template file under src/config."""

    TEMPLATE_MAP = {
        "prompts": "PROMPT_CATALOG",
        "labels": "MODE_LABELS",
    }

    def __init__(
        self,
    ):
        """Initialize the helper with access to configured paths."""
        self.path = Finder()

    def load_template(self, filename: str = "templates.yml", template: str = "prompts") -> Any:
        """Load one section of the template file by its logical name."""
        template_key = self.TEMPLATE_MAP.get(template)

        if not template_key:
            raise ValueError(f"Unknown template type: {template}")

        config_dir = self.path.get_directory("config")
        full_path = os.path.join(config_dir, filename)
        with open(full_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if template_key not in data:
            raise KeyError(f"Template '{template_key}' missing in {filename}")

        return data[template_key]
