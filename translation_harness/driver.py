"""
Drives the translator page: open it, type a sentence, wait for the Sinhala
output to appear and settle, then read it back.
"""

import time

from playwright.sync_api import Error as PlaywrightError

from translation_harness.errors import OutputTimeoutError, SetupError
from translation_harness.reporter import TranslationResult
from translation_harness.selectors import SinglishTranslatorSelectors

OUTPUT_TIMEOUT_MS = 10000
SETTLE_MS = 1000
POLL_INTERVAL_MS = 100
VISIBLE_TIMEOUT_MS = 5000


class TranslatorPage:
    def __init__(self, page, selectors=None, clock=time.monotonic):
        self.page = page
        self.selectors = selectors or SinglishTranslatorSelectors()
        self._clock = clock

    @property
    def input(self):
        return self.selectors.input_control(self.page)

    @property
    def output(self):
        return self.selectors.output_region(self.page)

    def open(self, url="/"):
        """Navigate to the translator and make sure the input box is showing."""
        try:
            self.page.goto(url)
            self.input.wait_for(state="visible", timeout=VISIBLE_TIMEOUT_MS)
        except PlaywrightError as e:
            raise SetupError(url, self.selectors.describe_input(), str(e).split("\n")[0]) from e

    def fill(self, text):
        self.input.fill(text)

    def read_output(self):
        output = self.output
        if output.count() == 0:
            return ""
        return output.inner_text()

    def _elapsed_ms(self, since):
        return (self._clock() - since) * 1000

    def wait_for_output(self, require_text=True, timeout_ms=OUTPUT_TIMEOUT_MS, settle_ms=SETTLE_MS,
                        poll_ms=POLL_INTERVAL_MS):
        """Wait for the output to become non-empty, then for it to stop changing.

        Returns (text, elapsed_ms). With require_text=False the non-empty wait is
        skipped and only the settle window applies.
        """
        start = self._clock()
        text = self.read_output()

        if require_text:
            while not text.strip():
                if self._elapsed_ms(start) >= timeout_ms:
                    raise OutputTimeoutError(timeout_ms, self.selectors.describe_output())
                self.page.wait_for_timeout(poll_ms)
                text = self.read_output()

        # Output is debounced on the page; wait until it holds still for settle_ms.
        settle_start = self._clock()
        last_change = settle_start
        while True:
            self.page.wait_for_timeout(poll_ms)
            current = self.read_output()
            if current != text:
                text = current
                last_change = self._clock()
            elif self._elapsed_ms(last_change) >= settle_ms:
                break
            if self._elapsed_ms(settle_start) >= settle_ms + timeout_ms:
                print(f"Output still changing after {settle_ms + timeout_ms} ms, using latest text")
                break

        return text, round(self._elapsed_ms(start))

    def translate(self, case):
        """Type one TestCase into the page and capture its TranslationResult."""
        self.fill(case.input)
        output_text, elapsed_ms = self.wait_for_output(require_text=bool(case.input.strip()))
        return TranslationResult(
            test_case_id=case.id,
            input_text=case.input,
            output_text=output_text,
            elapsed_wait_ms=elapsed_ms,
        )
