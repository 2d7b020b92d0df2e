from __future__ import annotations

import asyncio
import json
import re
from typing import Callable, Optional

import pytest

from locsync.core.errors import ProviderError
from locsync.core.llm.adapter import ProviderAdapter
from locsync.core.llm.runtime_config import ProviderConfig

_ITEM_LINE = re.compile(r'^\[(\d+)\] "(.*)"(?: \(preserve: [^)]*\))?$')


def parse_batch_prompt(user_message: str) -> dict[int, str]:
    """Recover index -> source text from a batch user prompt."""
    items = {}
    for line in user_message.splitlines():
        match = _ITEM_LINE.match(line)
        if match:
            items[int(match.group(1))] = match.group(2)
    return items


class FakeAdapter(ProviderAdapter):
    """In-memory provider.

    ``translate`` maps a source text to the locale dict to return for it;
    texts it returns ``None`` for are left out of the response. ``fail_when``
    makes the whole call raise a ProviderError.
    """

    def __init__(
        self,
        translate: Optional[Callable[[str], Optional[dict]]] = None,
        fail_when: Optional[Callable[[dict[int, str]], bool]] = None,
        raw: Optional[str] = None,
        latency: float = 0.0,
    ) -> None:
        self.translate = translate or (lambda text: {})
        self.fail_when = fail_when
        self.raw = raw
        self.latency = latency
        self.calls: list[dict[int, str]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    @property
    def provider_name(self) -> str:
        return "fake"

    async def send(self, system_message, user_message, config, *, json_mode=True) -> str:
        items = parse_batch_prompt(user_message)
        self.calls.append(items)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.latency)
            if self.fail_when is not None and self.fail_when(items):
                raise ProviderError("fake", "rate limited")
            if self.raw is not None:
                return self.raw
            payload = {}
            for index, text in items.items():
                translations = self.translate(text)
                if translations is not None:
                    payload[str(index)] = translations
            return json.dumps(payload, ensure_ascii=False)
        finally:
            self.in_flight -= 1


class ScriptedAdapter(ProviderAdapter):
    """Returns one canned reply (or raises ``error``) for every call."""

    def __init__(self, reply: str = "", error: Optional[Exception] = None) -> None:
        self.reply = reply
        self.error = error
        self.json_modes: list[bool] = []

    @property
    def provider_name(self) -> str:
        return "scripted"

    async def send(self, system_message, user_message, config, *, json_mode=True) -> str:
        self.json_modes.append(json_mode)
        if self.error is not None:
            raise self.error
        return self.reply


def make_document(strings: dict[str, dict[str, str]], source_language: str = "en") -> dict:
    """Build a string catalog from key -> {locale: value}."""
    return {
        "sourceLanguage": source_language,
        "version": "1.0",
        "strings": {
            key: {
                "localizations": {
                    locale: {"stringUnit": {"state": "translated", "value": value}}
                    for locale, value in locales.items()
                }
            }
            for key, locales in strings.items()
        },
    }


def localized_value(document: dict, key: str, locale: str) -> Optional[str]:
    entry = document["strings"][key].get("localizations", {}).get(locale)
    if entry is None:
        return None
    return entry["stringUnit"]["value"]


@pytest.fixture
def provider_config() -> ProviderConfig:
    return ProviderConfig(provider="openai", api_key="sk-test", model="gpt-5-mini")


@pytest.fixture(autouse=True)
def no_wave_delay(monkeypatch) -> None:
    from locsync.config import settings

    monkeypatch.setattr(settings, "wave_delay_seconds", 0.0)
