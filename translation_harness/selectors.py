"""Locators for the translator page's input box and Sinhala output card."""


class SelectorProvider:
    """Maps the page's UI onto the two controls the harness needs."""

    def input_control(self, page):
        raise NotImplementedError

    def output_region(self, page):
        raise NotImplementedError

    def describe_input(self) -> str:
        return "input control"

    def describe_output(self) -> str:
        return "output region"


class SinglishTranslatorSelectors(SelectorProvider):
    # Based on HTML: <div class="card"><div class="panel-title mb-2">Sinhala</div>
    # <div class="w-full h-80 ... whitespace-pre-wrap"></div></div>
    input_placeholder = "Input Your Singlish Text Here."
    card_selector = ".card"
    output_card_title = "Sinhala"
    output_selector = ".whitespace-pre-wrap"

    def input_control(self, page):
        return page.get_by_placeholder(self.input_placeholder)

    def output_region(self, page):
        card = page.locator(self.card_selector).filter(has_text=self.output_card_title)
        return card.locator(self.output_selector)

    def describe_input(self):
        return f"input with placeholder '{self.input_placeholder}'"

    def describe_output(self):
        return f"'{self.output_card_title}' card output ({self.output_selector})"
