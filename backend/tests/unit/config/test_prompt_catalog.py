"""Unit tests for the static prompt catalog."""

import pytest
from pydantic import ValidationError

from src.config.prompt_catalog import PromptCatalog, load_catalog
from src.models.prompt import PromptMode, ResponseFormat


class TestPromptCatalog:
    def setup_method(self):
        self.catalog = PromptCatalog()

    def test_every_mode_has_config_and_label(self):
        for mode in PromptMode:
            config = self.catalog.get_prompt_config(mode)
            assert config.system_prompt
            assert config.user_prompt
            assert self.catalog.get_mode_label(mode)

    def test_lookup_by_string_value(self):
        assert self.catalog.get_prompt_config("brief") == self.catalog.get_prompt_config(
            PromptMode.BRIEF
        )
        assert self.catalog.get_mode_label("midjourney") == "Midjourney"

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValueError):
            self.catalog.get_prompt_config("poem")

    def test_lookups_are_stable(self):
        first = self.catalog.get_prompt_config(PromptMode.DETAILED)
        second = PromptCatalog().get_prompt_config(PromptMode.DETAILED)
        assert first is second
        assert self.catalog.get_mode_label("detailed") == PromptCatalog().get_mode_label("detailed")

    def test_catalog_is_read_only(self):
        configs, labels = load_catalog()
        with pytest.raises(TypeError):
            configs[PromptMode.BRIEF] = configs[PromptMode.DETAILED]
        with pytest.raises(TypeError):
            labels[PromptMode.BRIEF] = "changed"

    def test_configs_are_frozen(self):
        config = self.catalog.get_prompt_config(PromptMode.BRIEF)
        with pytest.raises(ValidationError):
            config.user_prompt = "changed"

    def test_response_strategies_per_mode(self):
        assert self.catalog.get_prompt_config("detailed").response_format == ResponseFormat.IDENTITY
        assert self.catalog.get_prompt_config("brief").response_format == ResponseFormat.IDENTITY
        assert (
            self.catalog.get_prompt_config("midjourney").response_format
            == ResponseFormat.STRIP_QUOTES_AND_TRIM
        )

    def test_detailed_prompt_keeps_markdown_structure(self):
        user_prompt = self.catalog.get_prompt_config("detailed").user_prompt
        assert user_prompt.startswith("# ")
        assert "### " in user_prompt

    def test_list_modes_in_declaration_order(self):
        modes = self.catalog.list_modes()
        assert [m.mode for m in modes] == list(PromptMode)
        assert [m.label for m in modes] == [
            "Detailed description",
            "Brief description",
            "Midjourney",
        ]

    def test_format_response_by_mode(self):
        assert self.catalog.format_response("midjourney", '"a cat"') == "a cat"
        assert self.catalog.format_response("midjourney", "no quotes") == "no quotes"
        assert self.catalog.format_response("brief", ' "kept" ') == ' "kept" '
        assert self.catalog.format_response("detailed", "# Title\n") == "# Title\n"


def test_missing_mode_in_templates(monkeypatch):
    from src.utility.utils import Helper

    sections = {
        "prompts": {
            "detailed": {"system_prompt": "s", "user_prompt": "u"},
            "brief": {"system_prompt": "s", "user_prompt": "u"},
        },
        "labels": {"detailed": "D", "brief": "B", "midjourney": "M"},
    }
    monkeypatch.setattr(
        Helper, "load_template", lambda self, filename="templates.yml", template="prompts": sections[template]
    )
    load_catalog.cache_clear()
    try:
        with pytest.raises(KeyError):
            load_catalog()
    finally:
        monkeypatch.undo()
        load_catalog.cache_clear()
