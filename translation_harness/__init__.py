"""
Browser harness for the Singlish to Sinhala translator page.

Loads sentences from a JSON fixture, types each one into the translator page
and records what the page renders in its Sinhala output card.
"""

from translation_harness.driver import TranslatorPage
from translation_harness.errors import (
    FixtureLoadError,
    HarnessError,
    OutputTimeoutError,
    SetupError,
)
from translation_harness.fixtures import TestCase, load_test_cases
from translation_harness.reporter import (
    TranslationResult,
    annotation_for,
    case_context,
    check_output,
    log_result,
)
from translation_harness.selectors import SelectorProvider, SinglishTranslatorSelectors

__all__ = [
    "TranslatorPage",
    "FixtureLoadError",
    "HarnessError",
    "OutputTimeoutError",
    "SetupError",
    "TestCase",
    "load_test_cases",
    "TranslationResult",
    "annotation_for",
    "case_context",
    "check_output",
    "log_result",
    "SelectorProvider",
    "SinglishTranslatorSelectors",
]
