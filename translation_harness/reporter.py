from dataclasses import dataclass

ANNOTATION_TYPE = "Translation Result"
SEPARATOR = "-" * 50


@dataclass(frozen=True)
class TranslationResult:
    test_case_id: int
    input_text: str
    output_text: str
    elapsed_wait_ms: int


def log_result(case, result):
    """Print one result block to the console."""
    print(SEPARATOR)
    print(f"Test Case: {case.id}")
    print(f"Type: {case.type}")
    print(f"Input (Singlish): {result.input_text}")
    print(f"Output (Sinhala): {result.output_text}")
    print(f"Wait: {result.elapsed_wait_ms} ms")
    print(SEPARATOR)


def annotation_for(case, result):
    """Return the (name, description) pair attached to the test report."""
    description = f"Type: {case.type} | Input: {result.input_text} | Output: {result.output_text}"
    return ANNOTATION_TYPE, description


def check_output(case, result):
    # Only non-blank input is required to produce output
    if case.input.strip():
        assert result.output_text.strip(), (
            f"Test Case {case.id}: no Sinhala output for input '{case.input}'"
        )


def case_context(case):
    """Return the (name, description) pair recorded before a case runs."""
    return "Test Case", f"Id: {case.id} | Type: {case.type} | Input: {case.input}"
