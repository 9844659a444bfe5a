"""Runs the suite's conftest in a scratch project to check collection and setup."""

import json
from pathlib import Path

CONFTEST = Path(__file__).resolve().parent / "conftest.py"

TRANSLATION_TEST = """
def test_translate(case):
    pass
"""

UNREACHABLE_SITE_TEST = """
import pytest
from playwright.sync_api import Error as PlaywrightError


class UnreachablePage:
    def goto(self, url):
        raise PlaywrightError("net::ERR_CONNECTION_REFUSED at " + url)


@pytest.fixture
def page():
    return UnreachablePage()


def test_translate(translator, case):
    pass
"""


def write_sentences(pytester, records):
    data_dir = pytester.mkdir("data")
    (data_dir / "singlish_sentences.json").write_text(json.dumps(records), encoding="utf-8")


def test_missing_fixture_file_aborts_before_any_case(pytester):
    pytester.makeconftest(CONFTEST.read_text(encoding="utf-8"))
    pytester.makepyfile(TRANSLATION_TEST)

    result = pytester.runpytest()

    result.assert_outcomes(errors=1)
    result.stdout.fnmatch_lines(["*FixtureLoadError*file not found*", "*Interrupted: 1 error during collection*"])


def test_each_sentence_becomes_a_case(pytester):
    pytester.makeconftest(CONFTEST.read_text(encoding="utf-8"))
    pytester.makepyfile(TRANSLATION_TEST)
    write_sentences(pytester, [
        {"id": 1, "input": "mama gedara yanawa", "type": "basic"},
        {"id": 2, "input": "", "type": "edge"},
    ])

    result = pytester.runpytest("--collect-only", "-q")

    result.stdout.fnmatch_lines([
        '*test_translate?Test Case 1 ?BASIC?: Translate "mama gedara yanawa"?',
        '*test_translate?Test Case 2 ?EDGE?: Translate ""?',
    ])


def test_setup_failure_still_records_the_sentence(pytester):
    pytester.makeconftest(CONFTEST.read_text(encoding="utf-8"))
    pytester.makepyfile(UNREACHABLE_SITE_TEST)
    write_sentences(pytester, [{"id": 1, "input": "mama gedara yanawa", "type": "basic"}])

    reprec = pytester.inline_run()

    reports = reprec.getreports("pytest_runtest_logreport")
    setup = [report for report in reports if report.when == "setup"][0]
    assert setup.failed
    assert "SetupError" in setup.longreprtext
    assert ("Test Case", "Id: 1 | Type: basic | Input: mama gedara yanawa") in setup.user_properties
