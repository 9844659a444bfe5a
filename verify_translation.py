import sys
from pathlib import Path

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from translation_harness import (
    TranslatorPage,
    check_output,
    load_test_cases,
    log_result,
)

DEFAULT_BASE_URL = "http://127.0.0.1:5000"
DATA_PATH = Path(__file__).resolve().parent / "data" / "singlish_sentences.json"


def run_test(translator, case):
    """Run a single fixture sentence against the page. Returns True on pass."""
    print(f"--- Running: {case.title} ---")
    try:
        translator.open("/")
        result = translator.translate(case)
        log_result(case, result)
        check_output(case, result)
        print(f"--- PASSED: Test Case {case.id} ---")
        return True

    except Exception as e:
        print(f"--- FAILED: Test Case {case.id} (input: '{case.input}'): {e} ---")
        screenshot_path = f"failed_test_case_{case.id}.png"
        try:
            translator.page.screenshot(path=screenshot_path)
            print(f"Screenshot saved to {screenshot_path}")
        except PlaywrightError as screenshot_error:
            print(f"Could not save screenshot: {screenshot_error}")
        return False


def main(base_url, data_path=DATA_PATH):
    # Fixture problems abort before the browser starts
    cases = load_test_cases(data_path)
    print(f"Loaded {len(cases)} test cases. Target: {base_url}")

    failed = []
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=True)
        try:
            for case in cases:
                # Fresh context per case so cases share no page state
                context = browser.new_context(base_url=base_url)
                try:
                    if not run_test(TranslatorPage(context.new_page()), case):
                        failed.append(case.id)
                finally:
                    context.close()
        finally:
            browser.close()

    if failed:
        print(f"\n{len(failed)} of {len(cases)} test cases failed: {failed}")
        return 1
    print(f"\nAll {len(cases)} test cases passed.")
    return 0


if __name__ == "__main__":
    # Ensure Sinhala output prints on any console
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_BASE_URL))
