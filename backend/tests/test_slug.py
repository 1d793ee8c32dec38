"""Unit tests for slug derivation."""

import re

import pytest

from catalog.core.slug import to_slug

SAMPLES = [
    "Pro Widget!!",
    "  Leading and trailing  ",
    "Multiple   internal\t\twhitespace\nruns",
    "already-a-slug",
    "Mixed-Case - With  Hyphens",
    "Ünïcödé Çhars & symbols %$#",
    "123 Numbers 456",
    "!!!",
    "",
    "a - b",
    "trailing-",
]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Pro Widget!!", "pro-widget"),
        ("  Hello   World  ", "hello-world"),
        ("USB-C Cable 2m", "usb-c-cable-2m"),
        ("Café Crème", "caf-crme"),
        ("tab\tand\nnewline", "tab-and-newline"),
        ("!!!", ""),
    ],
)
def test_to_slug_examples(text, expected):
    assert to_slug(text) == expected


@pytest.mark.parametrize("text", SAMPLES)
def test_to_slug_is_idempotent(text):
    """Applying the transform twice yields the same slug as applying it once."""
    once = to_slug(text)
    assert to_slug(once) == once


@pytest.mark.parametrize("text", SAMPLES)
def test_to_slug_only_emits_lowercase_digits_and_hyphens(text):
    assert re.fullmatch(r"[a-z0-9-]*", to_slug(text))
