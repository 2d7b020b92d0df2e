from __future__ import annotations

from locsync.core.translation.models.unit import TranslatableUnit
from locsync.core.translation.pipeline.prompt_engine import PromptEngine


def _unit(key: str, text: str) -> TranslatableUnit:
    return TranslatableUnit(key=key, source_text=text, missing_locales=("fr", "es"))


def test_build_single_lists_locales_specifiers_and_protected_words() -> None:
    bundle = PromptEngine.build_single("Hello %@, you have %d messages", ["fr", "es"], ["Acme"])

    assert bundle.mode == "single"
    assert '"translations"' in bundle.system_prompt
    assert "5. DO NOT translate these words/names, keep them exactly as-is: Acme" in bundle.system_prompt
    assert "6. Your output must be ONLY a JSON object" in bundle.system_prompt
    assert "fr (French), es (Spanish)" in bundle.user_prompt
    assert 'English text: "Hello %@, you have %d messages"' in bundle.user_prompt
    assert "Format specifiers that MUST be preserved exactly: %@, %d" in bundle.user_prompt
    assert "Protected words that MUST NOT be translated (keep as-is): Acme" in bundle.user_prompt
    assert "ALL 2 requested languages" in bundle.user_prompt


def test_build_single_without_protected_words_numbers_output_rule_five() -> None:
    bundle = PromptEngine.build_single("Plain text", ["de"])

    assert "5. Your output must be ONLY a JSON object" in bundle.system_prompt
    assert "Protected" not in bundle.user_prompt
    assert "Format specifiers" not in bundle.user_prompt


def test_build_batch_indexes_units_with_inline_hints() -> None:
    units = [_unit("a", "Hello %@"), _unit("b", "Goodbye"), _unit("c", "%d left")]

    bundle = PromptEngine.build_batch(units, ["fr", "es"], [])

    assert bundle.mode == "batch"
    assert bundle.item_count == 3
    lines = bundle.user_prompt.splitlines()
    assert '[0] "Hello %@" (preserve: %@)' in lines
    assert '[1] "Goodbye"' in lines
    assert '[2] "%d left" (preserve: %d)' in lines
    assert '"0": { "fr": "...", "es": "..." }' in bundle.user_prompt
    assert "translations for each text ID" in bundle.system_prompt


def test_build_batch_unknown_locale_uses_code_as_name() -> None:
    bundle = PromptEngine.build_batch([_unit("a", "Hi")], ["xx-YY"], ["Acme", " "])

    assert "xx-YY (xx-YY)" in bundle.user_prompt
    assert "Protected words (keep as-is): Acme\n" in bundle.user_prompt
