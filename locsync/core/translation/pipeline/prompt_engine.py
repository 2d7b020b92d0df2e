"""Prompt construction for catalog translation.

This module builds the instruction/response contract sent to providers:
one source text to many locales (``build_single``) or N indexed source texts
to many locales (``build_batch``). Both embed the placeholder and
protected-word constraints.
"""

from typing import List, Optional, Sequence

from locsync.core.llm.config import LANGUAGE_NAMES, language_label
from ..models.prompt import Message, PromptBundle
from ..models.unit import TranslatableUnit
from .placeholders import scan

BASE_RULES = """CRITICAL RULES:
1. Preserve ALL formatting specifiers (%@, %d, %lld, %s, etc.) EXACTLY as they appear
2. Format specifiers MUST remain in the same order in ALL translations
3. DO NOT translate or modify any format specifiers
4. Maintain a natural, user-friendly tone"""


class PromptEngine:
    """Builds PromptBundles for single-text and batch requests."""

    @classmethod
    def build_single(
        cls,
        text: str,
        target_locales: Sequence[str],
        protected_words: Sequence[str] = (),
    ) -> PromptBundle:
        """Build a prompt translating one text into every target locale.

        Expected response: ``{"translations": {"<locale>": "<text>", ...}}``.

        Args:
            text: Source text
            target_locales: Locales the response must cover
            protected_words: Terms to echo verbatim

        Returns:
            PromptBundle with system and user messages
        """
        protected = cls._protected_list(protected_words)
        specifiers = scan(text)
        example = ",\n".join(
            f'    "{locale}": "{LANGUAGE_NAMES.get(locale, locale)} translation here"'
            for locale in list(target_locales)[:2]
        )

        system_prompt = cls._system_prompt(
            "Translate English text to multiple languages.",
            protected,
            "Your output must be ONLY a JSON object with this structure:\n"
            "{\n"
            '  "translations": {\n'
            f"{example}\n"
            "  }\n"
            "}",
        )

        user_prompt = (
            f"Translate this English text to the following languages: "
            f"{cls._language_list(target_locales)}\n\n"
            f'English text: "{text}"\n'
        )
        if specifiers:
            user_prompt += f"\nFormat specifiers that MUST be preserved exactly: {', '.join(specifiers)}"
        if protected:
            user_prompt += f"\nProtected words that MUST NOT be translated (keep as-is): {protected}"
        user_prompt += (
            f"\n\nRespond with ONLY a JSON object containing translations for ALL "
            f"{len(target_locales)} requested languages."
        )

        return PromptBundle(
            messages=[
                Message(role="system", content=system_prompt),
                Message(role="user", content=user_prompt),
            ],
            mode="single",
            target_locales=list(target_locales),
            item_count=1,
        )

    @classmethod
    def build_batch(
        cls,
        units: Sequence[TranslatableUnit],
        target_locales: Sequence[str],
        protected_words: Sequence[str] = (),
    ) -> PromptBundle:
        """Build a prompt translating several texts in one request.

        Each text is referenced by its position in ``units``; per-text
        placeholder hints follow the text on the same line. Expected
        response: ``{"0": {"<locale>": "<text>"}, "1": {...}, ...}``.
        """
        protected = cls._protected_list(protected_words)

        system_prompt = cls._system_prompt(
            "Translate multiple English texts to multiple languages.",
            protected,
            "Your output must be ONLY a JSON object with translations for each text ID.",
        )

        lines: List[str] = []
        for index, unit in enumerate(units):
            specifiers = scan(unit.source_text)
            hint = f" (preserve: {', '.join(specifiers)})" if specifiers else ""
            lines.append(f'[{index}] "{unit.source_text}"{hint}')

        locale_stub = ", ".join(f'"{locale}": "..."' for locale in target_locales)
        shape = ",\n".join(
            f'  "{index}": {{ {locale_stub} }}' for index in range(min(len(units), 2))
        )

        user_prompt = (
            f"Translate these English texts to: {cls._language_list(target_locales)}\n\n"
            + "\n".join(lines)
            + "\n\n"
        )
        if protected:
            user_prompt += f"Protected words (keep as-is): {protected}\n\n"
        user_prompt += f"Respond with ONLY a JSON object:\n{{\n{shape}\n}}"

        return PromptBundle(
            messages=[
                Message(role="system", content=system_prompt),
                Message(role="user", content=user_prompt),
            ],
            mode="batch",
            target_locales=list(target_locales),
            item_count=len(units),
        )

    @staticmethod
    def _system_prompt(task: str, protected: Optional[str], output_rule: str) -> str:
        rules = BASE_RULES
        next_rule = 5
        if protected:
            rules += f"\n{next_rule}. DO NOT translate these words/names, keep them exactly as-is: {protected}"
            next_rule += 1
        rules += f"\n{next_rule}. {output_rule}"
        return f"You are a professional translator for a mobile app. {task}\n\n{rules}"

    @staticmethod
    def _protected_list(protected_words: Sequence[str]) -> Optional[str]:
        words = [w for w in protected_words if w and w.strip()]
        return ", ".join(words) if words else None

    @staticmethod
    def _language_list(target_locales: Sequence[str]) -> str:
        return ", ".join(language_label(locale) for locale in target_locales)
