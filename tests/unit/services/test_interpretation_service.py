"""Tests for InterpretationService."""
import logging
from unittest.mock import MagicMock

import pytest

from symbol_quest.services.interpretation_service import (
    InterpretationError,
    InterpretationService,
)
from symbol_quest.services.llm_adapter import LLMError


@pytest.fixture
def llm():
    adapter = MagicMock()
    adapter.is_configured = True
    adapter.complete.return_value = "A warm reading."
    return adapter


class TestBuildPrompt:
    """Tests for InterpretationService.build_prompt()."""

    def test_includes_card_details(self, catalog):
        prompt = InterpretationService.build_prompt(catalog.get(17), "hopeful", "What now?")

        assert "Card: The Star (XVII)" in prompt
        assert "Traditional Meaning: " + catalog.get(17).traditional_meaning in prompt
        assert "Current Mood: hopeful" in prompt
        assert "Question Asked: What now?" in prompt

    def test_omits_empty_context(self, catalog):
        prompt = InterpretationService.build_prompt(catalog.get(0))

        assert "Current Mood" not in prompt
        assert "Question Asked" not in prompt


class TestGenerate:
    """Tests for InterpretationService.generate()."""

    def test_returns_llm_text(self, llm, catalog):
        service = InterpretationService(llm, catalog)

        text = service.generate(17, "hopeful", "What now?")

        assert text == "A warm reading."
        prompt = llm.complete.call_args[0][0]
        assert "The Star" in prompt

    def test_unknown_card(self, llm, catalog):
        service = InterpretationService(llm, catalog)

        with pytest.raises(InterpretationError, match="Invalid card ID"):
            service.generate(99)
        llm.complete.assert_not_called()

    def test_not_configured(self, llm, catalog):
        llm.is_configured = False

        with pytest.raises(InterpretationError, match="not configured"):
            InterpretationService(llm, catalog).generate(17)

    def test_llm_failure_is_logged(self, llm, catalog, caplog):
        llm.complete.side_effect = LLMError("LLM API returned 500: boom")

        with caplog.at_level(logging.ERROR):
            with pytest.raises(InterpretationError, match="Failed to generate"):
                InterpretationService(llm, catalog).generate(17)

        assert "boom" in caplog.text
