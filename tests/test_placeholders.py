from __future__ import annotations

import pytest

from locsync.core.translation.pipeline.placeholders import placeholders_match, scan


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Hello %@, you have %d messages", ["%@", "%d"]),
        ("%1$@ sent %2$@ a photo", ["%1$@", "%2$@"]),
        ("Total: %.2f USD", ["%.2f"]),
        ("%lld items", ["%lld"]),
        ("Welcome %s.", ["%s"]),
        ("No tokens here", []),
        ("", []),
    ],
)
def test_scan_extracts_specifiers_in_order(text: str, expected: list[str]) -> None:
    assert scan(text) == expected


def test_scan_is_repeatable() -> None:
    text = "%d of %d done"
    assert scan(text) == scan(text) == ["%d", "%d"]


def test_placeholders_match_requires_same_order() -> None:
    expected = scan("Hello %@, you have %d messages")

    assert placeholders_match(expected, "Bonjour %@, vous avez %d messages")
    assert not placeholders_match(expected, "Vous avez %d messages, %@")
    assert not placeholders_match(expected, "Bonjour %@, vous avez des messages")
    assert not placeholders_match(expected, "Bonjour %@ %@, vous avez %d messages")


def test_placeholders_match_without_tokens_accepts_any_text() -> None:
    assert placeholders_match([], "Bonjour")
    assert not placeholders_match([], "Bonjour %@")
