from pathlib import Path

import pytest

from translation_harness import TranslatorPage, case_context, load_test_cases

DATA_FILE = Path("data") / "singlish_sentences.json"


def pytest_generate_tests(metafunc):
    # Fixture file is read once at collection; a bad file aborts the session here
    if "case" in metafunc.fixturenames:
        cases = load_test_cases(metafunc.config.rootpath / DATA_FILE)
        metafunc.parametrize("case", cases, ids=[case.title for case in cases])


@pytest.fixture
def translator(page, case, record_property):
    """Translator page opened at the base URL with its input box visible."""
    # Recorded before navigating so a setup failure still names the sentence
    record_property(*case_context(case))
    translator = TranslatorPage(page)
    translator.open("/")
    return translator
